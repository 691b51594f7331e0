"""Per-node change bus for explorertree.

Each node owns a ChangeBus. Listeners register for an event kind, a
relation tag, or both, and are called synchronously whenever a matching
ChangeEvent is emitted on that node.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Tuple

from ..config import get_config


class ChangeKind(str, Enum):
    """What changed on the node that produced an event."""
    NAME = "name"
    PARENT = "parent"
    CHILDREN = "children"
    SELECTED = "selected"
    EXPANDED = "expanded"
    OPENED = "opened"
    FOCUSED = "focused"
    CONTENT = "content"
    OPENED_CHANGE = "opened_change"    # Root broadcast: the opened file changed
    FOCUSED_CHANGE = "focused_change"  # Root broadcast: the focused file changed


class Relation(str, Enum):
    """Where the receiving node sits relative to the node that changed."""
    SELF = "self"
    CHILD = "child"              # A direct child changed
    DESCENDANT = "descendant"    # A deeper descendant changed
    PARENT = "parent"            # The direct parent changed
    ANCESTOR = "ancestor"        # A higher ancestor changed


STRUCTURAL_KINDS = frozenset({
    ChangeKind.CHILDREN,
    ChangeKind.PARENT,
    ChangeKind.NAME,
    ChangeKind.EXPANDED,
})


@dataclass(frozen=True)
class ChangeEvent:
    """A single notification delivered to one node's bus.

    Attributes:
        kind: What changed
        relation: Receiver's position relative to ``source``
        source: Node whose attribute changed
        target: Node whose bus delivered the event
    """
    kind: ChangeKind
    relation: Relation
    source: Any
    target: Any

    @property
    def name(self) -> str:
        """Event name, e.g. ``"name"`` or ``"child:name"``."""
        if self.relation is Relation.SELF:
            return self.kind.value
        return f"{self.relation.value}{get_config().delimiter}{self.kind.value}"


Handler = Callable[[ChangeEvent], Any]


def parse_event_name(event_name: str) -> Tuple[Optional[ChangeKind], Optional[Relation]]:
    """Split an event name into its kind and relation filters.

    ``"name"`` is the node's own change, ``"child:name"`` a relation-tagged
    one. A ``*`` segment matches anything; ``"**"`` matches every event.

    Args:
        event_name: Event name or wildcard pattern

    Returns:
        (kind, relation) where ``None`` means "any"

    Raises:
        ValueError: If a segment names no known kind or relation
    """
    if event_name == "**":
        return None, None

    parts = event_name.split(get_config().delimiter)
    if len(parts) == 1:
        relation_part, kind_part = Relation.SELF.value, parts[0]
    elif len(parts) == 2:
        relation_part, kind_part = parts
    else:
        raise ValueError(f"Malformed event name: {event_name!r}")

    try:
        kind = None if kind_part == "*" else ChangeKind(kind_part)
        relation = None if relation_part == "*" else Relation(relation_part)
    except ValueError:
        raise ValueError(f"Unknown event name: {event_name!r}") from None

    # A bare "*" means every kind on the node itself
    return kind, relation


class _Listener:
    __slots__ = ("handler", "kind", "relation", "once")

    def __init__(self, handler: Handler, kind: Optional[ChangeKind],
                 relation: Optional[Relation], once: bool):
        self.handler = handler
        self.kind = kind
        self.relation = relation
        self.once = once

    def matches(self, event: ChangeEvent) -> bool:
        if self.kind is not None and self.kind is not event.kind:
            return False
        if self.relation is not None and self.relation is not event.relation:
            return False
        return True


class ChangeBus:
    """Observer registry keyed by event kind and relation tag.

    Delivery is synchronous and in subscription order. Exceptions raised
    by a handler propagate to whoever triggered the mutation.
    """

    def __init__(self):
        self._listeners: List[_Listener] = []

    def subscribe(self, handler: Handler,
                  kind: Optional[ChangeKind] = None,
                  relation: Optional[Relation] = None,
                  once: bool = False) -> Callable[[], None]:
        """Register a handler.

        Args:
            handler: Called with each matching ChangeEvent
            kind: Only deliver this kind (None for any)
            relation: Only deliver this relation (None for any)
            once: Drop the handler after its first delivery

        Returns:
            Callable that removes this subscription
        """
        if kind is not None:
            kind = ChangeKind(kind)
        if relation is not None:
            relation = Relation(relation)
        listener = _Listener(handler, kind, relation, once)
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def on(self, event_name: str, handler: Handler) -> Callable[[], None]:
        """Register a handler by event name or wildcard pattern."""
        kind, relation = parse_event_name(event_name)
        return self.subscribe(handler, kind=kind, relation=relation)

    def once(self, event_name: str, handler: Handler) -> Callable[[], None]:
        """Like ``on`` but the handler fires at most once."""
        kind, relation = parse_event_name(event_name)
        return self.subscribe(handler, kind=kind, relation=relation, once=True)

    def off(self, handler: Handler) -> int:
        """Remove every subscription of ``handler``.

        Returns:
            Number of subscriptions removed
        """
        before = len(self._listeners)
        self._listeners = [l for l in self._listeners if l.handler is not handler]
        return before - len(self._listeners)

    def clear(self) -> None:
        self._listeners = []

    def listener_count(self) -> int:
        return len(self._listeners)

    def __len__(self) -> int:
        return len(self._listeners)

    def emit(self, event: ChangeEvent) -> int:
        """Deliver an event to every matching handler.

        Handlers subscribed or removed while the event is being delivered
        do not affect this delivery.

        Returns:
            Number of handlers called
        """
        delivered = 0
        for listener in list(self._listeners):
            if not listener.matches(event):
                continue
            if listener.once and listener in self._listeners:
                self._listeners.remove(listener)
            listener.handler(event)
            delivered += 1
        return delivered

    def __repr__(self) -> str:
        return f"ChangeBus(listeners={len(self._listeners)})"
