"""File nodes for explorertree."""

import logging
from typing import Optional

from ..events import ChangeKind, broadcast
from .node import Node, NodeType

logger = logging.getLogger(__name__)


class File(Node):
    """Leaf node carrying text content.

    Besides selection, a file can be opened (shown in the editor) and
    focused (receiving input). Within one tree at most one file is opened
    and at most one is focused; opening or focusing a file takes the state
    away from whichever file held it.
    """

    type = NodeType.FILE

    def __init__(self, name: Optional[str] = None):
        super().__init__(name)
        self._content = ""
        self._opened = False
        self._focused = False

    @property
    def root(self):
        """Topmost folder above this file, or None while detached."""
        root = self._parent
        while root is not None and root.parent is not None:
            root = root.parent
        return root

    @property
    def path(self) -> str:
        prefix = self._parent.path if self._parent is not None else ""
        return f"{prefix}{self._name}"

    # --- content ---

    @property
    def content(self) -> str:
        return self._content

    @content.setter
    def content(self, content: str) -> None:
        if self._content == content:
            return
        self._content = content
        self._emit(ChangeKind.CONTENT)

    # --- opened ---

    @property
    def opened(self) -> bool:
        return self._opened

    @opened.setter
    def opened(self, opened: bool) -> None:
        self._set_singleton("opened", bool(opened), ChangeKind.OPENED, ChangeKind.OPENED_CHANGE)

    def open(self) -> 'File':
        self.opened = True
        return self

    def close(self) -> 'File':
        self.opened = False
        return self

    # --- focused ---

    @property
    def focused(self) -> bool:
        return self._focused

    @focused.setter
    def focused(self, focused: bool) -> None:
        self._set_singleton("focused", bool(focused), ChangeKind.FOCUSED, ChangeKind.FOCUSED_CHANGE)

    def focus(self) -> 'File':
        self.focused = True
        return self

    def blur(self) -> 'File':
        self.focused = False
        return self

    def _set_singleton(self, attr: str, value: bool,
                       kind: ChangeKind, root_kind: ChangeKind) -> None:
        """Set ``opened``/``focused``, clearing the previous holder first.

        Clearing never picks a replacement. Every change is announced on
        the file (propagating upward) and once more on the root.
        """
        if getattr(self, "_" + attr) == value:
            return

        root = self.root
        if value and root is not None:
            for node in root.descendants:
                if node is not self and node.type == NodeType.FILE and getattr(node, attr):
                    logger.debug("clearing %s on %r", attr, node)
                    setattr(node, attr, False)

        setattr(self, "_" + attr, value)
        self._emit(kind)
        broadcast(root, root_kind, self)
