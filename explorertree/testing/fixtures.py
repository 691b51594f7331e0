"""Test fixtures for explorertree consumers.

These helpers make it easy to assert which events a mutation produced
and to build small trees without a line of boilerplate per node.
"""

from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union

from ..core import File, Folder, Node
from ..events import ChangeEvent

TreeSpec = Dict[str, Union[None, str, "TreeSpec"]]


class EventRecorder:
    """Records every event delivered to a set of nodes.

    Example:
        recorder = EventRecorder(root, src, main)
        main.name = "app.py"
        assert ("src", "child:name") in recorder.named()

    Events are kept in delivery order as (target, event) pairs.
    """

    def __init__(self, *nodes: Node):
        self.records: List[Tuple[Node, ChangeEvent]] = []
        self._unsubscribers: List[Callable[[], None]] = []
        self.watch(*nodes)

    def watch(self, *nodes: Node) -> 'EventRecorder':
        for node in nodes:
            self._unsubscribers.append(
                node.changes.subscribe(lambda event, node=node: self.records.append((node, event)))
            )
        return self

    def stop(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

    def clear(self) -> None:
        self.records = []

    def names(self, node: Optional[Node] = None) -> List[str]:
        """Event names received, optionally only those delivered to ``node``."""
        return [event.name for target, event in self.records
                if node is None or target is node]

    def named(self) -> List[Tuple[str, str]]:
        """(target name, event name) pairs in delivery order."""
        return [(target.name, event.name) for target, event in self.records]

    def count(self, event_name: str, node: Optional[Node] = None) -> int:
        return self.names(node).count(event_name)

    def __len__(self) -> int:
        return len(self.records)

    def __enter__(self) -> 'EventRecorder':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()
        return None


def build_tree(spec: TreeSpec, root: Optional[Folder] = None) -> Folder:
    """Build a tree from nested dicts.

    Keys are names. A dict value makes a folder holding that subtree; a
    string or None value makes a file with that content.

    Example:
        root = build_tree({"src": {"main.py": "print()"}, "README.md": None})

    Args:
        spec: Nested mapping describing the tree
        root: Folder to build into (defaults to a fresh root)

    Returns:
        The folder the tree was built into
    """
    if root is None:
        root = Folder.create_root()
    for name, value in spec.items():
        if isinstance(value, dict):
            folder = Folder(name)
            folder.parent = root
            build_tree(value, folder)
        else:
            file = File(name)
            file.content = value or ""
            file.parent = root
    return root


def walk(folder: Folder) -> Iterable[Tuple[int, Any]]:
    """Yield (depth, node) for every descendant, pre-order.

    Depth is relative to ``folder``, so its direct children are at 1.
    """
    base = folder.depth
    for node in folder.descendants:
        yield node.depth - base, node
