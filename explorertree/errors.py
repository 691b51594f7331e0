"""Exceptions raised by explorertree.

Every error is raised synchronously by the mutation that detected it,
before any state has changed, so the tree is left as it was.
"""

from typing import Any, Optional


class ExplorerError(Exception):
    """Base class for all explorertree errors."""
    pass


class NameConflictError(ExplorerError):
    """Raised when a rename would give two siblings the same name."""

    def __init__(self, name: str, parent: Optional[Any] = None):
        self.name = name
        self.parent = parent
        where = f" in {parent.path or parent.name!r}" if parent is not None else ""
        super().__init__(f"A child named {name!r} already exists{where}")


class StructuralViolationError(ExplorerError):
    """Raised when a mutation would corrupt the tree shape.

    Examples are moving a folder below itself, giving the root a parent,
    or renaming the root.
    """
    pass


class ConfigurationError(ExplorerError):
    """Raised when an ExplorerConfig fails validation."""
    pass
