"""Hierarchical change propagation for explorertree.

A mutation on one node is announced to the node itself, then to each of
its ancestors tagged ``child``/``descendant``, and for structural folder
changes to each of its descendants tagged ``parent``/``ancestor``.
Listeners on any folder can therefore watch a whole subtree without
knowing which node produced the change.
"""

import logging
from typing import Any, Iterator, List, Tuple

from .bus import ChangeEvent, ChangeKind, Relation, STRUCTURAL_KINDS

logger = logging.getLogger(__name__)


def propagates_downward(node: Any, kind: ChangeKind) -> bool:
    """Check if a change on ``node`` should reach its descendants.

    Only structural changes that originate at a folder do; file changes
    and folder selection travel upward only.
    """
    return node.type == "folder" and kind in STRUCTURAL_KINDS


def iter_targets(node: Any, kind: ChangeKind) -> Iterator[Tuple[Any, Relation]]:
    """Yield every (receiver, relation) pair for a change on ``node``.

    Order is the delivery order: the node itself, its ancestors nearest
    first, then its descendants in pre-order.
    """
    yield node, Relation.SELF

    parent = node.parent
    for ancestor in node.ancestors:
        yield ancestor, Relation.CHILD if ancestor is parent else Relation.DESCENDANT

    if propagates_downward(node, kind):
        for descendant in node.descendants:
            if descendant.parent is node:
                yield descendant, Relation.PARENT
            else:
                yield descendant, Relation.ANCESTOR


def collect(node: Any, kind: ChangeKind) -> List[ChangeEvent]:
    """Build the events a change on ``node`` will deliver, without sending them.

    Lets a mutation that touches several nodes fix each receiver list at
    the moment its part of the change is applied, then deliver them all
    once the tree is consistent again.
    """
    kind = ChangeKind(kind)
    return [ChangeEvent(kind=kind, relation=relation, source=node, target=target)
            for target, relation in iter_targets(node, kind)]


def deliver(events: List[ChangeEvent]) -> int:
    """Send events built by ``collect`` in order; returns how many were sent."""
    for event in events:
        logger.debug("emit %s on %r (from %r)", event.name, event.target, event.source)
        event.target.changes.emit(event)
    return len(events)


def propagate(node: Any, kind: ChangeKind) -> int:
    """Emit ``kind`` on ``node`` and its relation-tagged variants.

    The mutation must already be applied; handlers see the new state.
    The receiver list is computed before the first delivery, so a handler
    that reshapes the tree does not change who hears this event.

    Args:
        node: File or Folder whose attribute changed
        kind: What changed

    Returns:
        Number of buses the event was delivered to
    """
    return deliver(collect(node, kind))


def broadcast(root: Any, kind: ChangeKind, source: Any) -> None:
    """Emit a root-level event that does not propagate any further.

    Used for tree-wide singleton changes (opened/focused file) so a UI
    watching the root reacts without enumerating every file.
    """
    if root is None:
        return
    event = ChangeEvent(kind=ChangeKind(kind), relation=Relation.SELF,
                        source=source, target=root)
    logger.debug("broadcast %s on %r (from %r)", event.name, root, source)
    root.changes.emit(event)
