"""Node abstraction for explorertree.

Node holds everything Files and Folders share: identity, the change bus,
the parent back-reference, the validated name and the selection state.
Every setter validates first, applies the change, enforces the tree-wide
effects (unique names, single selection, ancestor expansion) and only
then announces the change through the propagation engine.
"""

import itertools
import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Optional

from ..config import get_config
from ..errors import NameConflictError, StructuralViolationError
from ..events import ChangeBus, ChangeKind, collect, deliver, propagate
from .children import Children

if TYPE_CHECKING:
    from .folder import Folder

logger = logging.getLogger(__name__)

_ids = itertools.count(1)


class NodeType(str, Enum):
    """Discriminates the two node variants."""
    FILE = "file"
    FOLDER = "folder"


class Node(ABC):
    """Abstract base class for files and folders in an explorer tree.

    Nodes are created detached. They join a tree when ``parent`` is
    assigned and leave it when ``parent`` is set to None (or when renamed
    to the empty string). The parent's ``children`` collection is the only
    record of membership; ``parent`` is a back-reference to it.
    """

    type: NodeType

    def __init__(self, name: Optional[str] = None):
        """Initialize a detached node.

        Args:
            name: Initial name (defaults to the empty string)
        """
        if name is not None and not isinstance(name, str):
            raise TypeError(f"name must be a str, not {type(name).__name__}")
        if name == get_config().root_name and self.type != NodeType.FOLDER:
            raise StructuralViolationError(f"{name!r} is reserved for the root folder")

        self.id = next(_ids)
        self.changes = ChangeBus()
        self._parent: Optional['Folder'] = None
        self._name = name or ""
        self._selected = False

    def _emit(self, kind: ChangeKind) -> None:
        propagate(self, kind)

    # --- parent ---

    @property
    def parent(self) -> Optional['Folder']:
        return self._parent

    @parent.setter
    def parent(self, parent: Optional['Folder']) -> None:
        self._check_parent(parent)

        ordered = None
        if parent is not None:
            ordered = Children([c for c in parent.children if c is not self])
            ordered.append(self)
            if get_config().auto_sort:
                ordered.sort()

        # Both halves of the move land before any listener runs
        pending = []
        old = self._parent
        if old is not None:
            old.children.remove(self)
            self._parent = None
            logger.debug("detached %r from %r", self, old)
            pending.extend(collect(old, ChangeKind.CHILDREN))

        if parent is not None:
            parent.children[:] = ordered
            self._parent = parent
            logger.debug("attached %r to %r", self, parent)
            pending.extend(collect(parent, ChangeKind.CHILDREN))

        deliver(pending)
        if parent is not None:
            self._reconcile_singletons()

        for ancestor in self.ancestors:
            ancestor.expanded = True
        self._emit(ChangeKind.PARENT)

    def _check_parent(self, parent: Optional['Folder']) -> None:
        if parent is None:
            return
        if getattr(parent, "type", None) != NodeType.FOLDER:
            raise StructuralViolationError(f"{parent!r} is not a folder")
        if self.is_root:
            raise StructuralViolationError("The root folder cannot have a parent")
        if get_config().guard_cycles:
            if parent is self or any(a is self for a in parent.ancestors):
                raise StructuralViolationError(
                    f"Cannot move {self!r} inside itself ({parent!r})"
                )

    def _reconcile_singletons(self) -> None:
        """Keep one selected/opened/focused node after a subtree joins a tree.

        Holders already in the tree win over holders arriving with the
        moved subtree.
        """
        root = self.root
        if root is None:
            return
        moved = {id(node) for node in self._subtree()}
        for attr in ("selected", "opened", "focused"):
            holders = [n for n in root.lineage if getattr(n, attr, False)]
            if len(holders) < 2:
                continue
            keep = next((n for n in holders if id(n) not in moved), holders[0])
            for node in holders:
                if node is not keep:
                    logger.debug("clearing %s on %r after move", attr, node)
                    setattr(node, attr, False)

    def _subtree(self) -> Children:
        return Children([self])

    @property
    def ancestors(self) -> Children:
        """Folders above this node, nearest first."""
        ancestors = Children()
        parent = self._parent
        while parent is not None:
            ancestors.append(parent)
            parent = parent.parent
        return ancestors

    @property
    @abstractmethod
    def root(self) -> Optional['Folder']:
        """Topmost folder of the tree this node belongs to."""
        pass

    @property
    def depth(self) -> int:
        return len(self.ancestors)

    @property
    def is_root(self) -> bool:
        """True for a parentless folder carrying the reserved root name."""
        return (self.type == NodeType.FOLDER
                and self._parent is None
                and self._name == get_config().root_name)

    # --- name ---

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        if not isinstance(name, str):
            raise TypeError(f"name must be a str, not {type(name).__name__}")
        if name == self._name:
            return
        if self.is_root:
            raise StructuralViolationError("The root folder cannot be renamed")
        if name == get_config().root_name:
            raise StructuralViolationError(f"{name!r} is reserved for the root folder")

        parent = self._parent
        if parent is not None:
            if name == "":
                # Collapse: empty-named nodes never stay in a folder
                emptied = parent.children.where(
                    lambda c: c is self or c.name == "",
                    lambda c: c,
                )
                logger.debug("detaching %d empty-named node(s) from %r", len(emptied), parent)
                for node in emptied:
                    node.parent = None
            elif parent.children.first(lambda c: c is not self and c.name == name) is not None:
                raise NameConflictError(name, parent)

        logger.debug("renamed %r to %r", self, name)
        self._name = name
        self._emit(ChangeKind.NAME)

        # The parent already heard "child:name"; only a reorder is a
        # structural change of its own
        parent = self._parent
        if parent is not None and get_config().auto_sort:
            before = list(parent.children)
            parent.children.sort()
            if any(a is not b for a, b in zip(before, parent.children)):
                parent._emit(ChangeKind.CHILDREN)

    # --- path ---

    @property
    @abstractmethod
    def path(self) -> str:
        """Path from the root, derived from the ancestor names."""
        pass

    # --- selected ---

    @property
    def selected(self) -> bool:
        return self._selected

    @selected.setter
    def selected(self, selected: bool) -> None:
        selected = bool(selected)
        if selected == self._selected:
            return
        if selected:
            root = self.root
            if root is not None:
                for node in root.lineage:
                    if node is not self and node.selected:
                        logger.debug("clearing selection of %r", node)
                        node.selected = False
            for ancestor in self.ancestors:
                ancestor.expanded = True
        self._selected = selected
        self._emit(ChangeKind.SELECTED)

    def select(self) -> 'Node':
        self.selected = True
        return self

    def deselect(self) -> 'Node':
        """Clear the selection.

        The root is the default selection, so deselecting the root leaves
        it (or makes it) selected. Any other node simply loses its
        selection and nothing replaces it.
        """
        self.selected = self.is_root
        return self

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._name!r}, id={self.id})"
