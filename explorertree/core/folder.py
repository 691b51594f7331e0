"""Folder nodes for explorertree."""

from typing import List, Optional

from ..config import get_config
from ..events import ChangeKind
from .children import Children
from .node import Node, NodeType


class Folder(Node):
    """Node owning an ordered collection of child nodes.

    Children are never added directly: assigning ``child.parent = folder``
    is the only way in, so every membership change goes through the
    same validation and notification path.

    The root of a tree is a parentless folder named with the reserved
    root name (see ``create_root``). Its path is the empty string and
    it cannot be renamed or moved.
    """

    type = NodeType.FOLDER

    def __init__(self, name: Optional[str] = None):
        super().__init__(name)
        self._children = Children()
        self._expanded = False

    @classmethod
    def create_root(cls) -> 'Folder':
        """Create a root folder named with the configured root name."""
        return cls(get_config().root_name)

    @property
    def root(self) -> 'Folder':
        """Topmost folder of this tree; a parentless folder is its own root."""
        root = self
        while root.parent is not None:
            root = root.parent
        return root

    @property
    def path(self) -> str:
        config = get_config()
        if self._name == config.root_name:
            return ""
        prefix = self._parent.path if self._parent is not None else ""
        return f"{prefix}{self._name}{config.separator}"

    # --- children ---

    @property
    def children(self) -> Children:
        return self._children

    @property
    def descendants(self) -> Children:
        """Every node below this folder, pre-order (parent before children).

        Rebuilt on each access; cache the result when reading it repeatedly
        without mutating the tree in between.
        """
        descendants = Children()
        stack = list(reversed(self._children))
        while stack:
            node = stack.pop()
            descendants.append(node)
            if node.type == NodeType.FOLDER:
                stack.extend(reversed(node.children))
        return descendants

    @property
    def lineage(self) -> Children:
        """This folder followed by its descendants."""
        return Children([self, *self.descendants])

    def _subtree(self) -> Children:
        return self.lineage

    @property
    def files(self) -> List[Node]:
        return [c for c in self._children if c.type == NodeType.FILE]

    @property
    def folders(self) -> List['Folder']:
        return [c for c in self._children if c.type == NodeType.FOLDER]

    def find(self, path: str) -> Optional[Node]:
        """Resolve a relative path below this folder.

        Args:
            path: Separator-joined names, e.g. ``"src/app/main.py"``; a
                trailing separator is allowed and an empty path is this
                folder itself

        Returns:
            The matching node, or None if any segment is missing
        """
        separator = get_config().separator
        node: Optional[Node] = self
        for segment in path.strip(separator).split(separator):
            if not segment:
                continue
            if node is None or node.type != NodeType.FOLDER:
                return None
            node = node.children.first(lambda c: c.name == segment)
        return node

    # --- expanded ---

    @property
    def expanded(self) -> bool:
        return self._expanded

    @expanded.setter
    def expanded(self, expanded: bool) -> None:
        expanded = bool(expanded)
        if expanded == self._expanded:
            return
        if expanded:
            for ancestor in self.ancestors:
                ancestor.expanded = True
        self._expanded = expanded
        self._emit(ChangeKind.EXPANDED)

    def expand(self) -> 'Folder':
        self.expanded = True
        return self

    def collapse(self) -> 'Folder':
        self.expanded = False
        return self
