"""Ordered child collection for explorertree folders.

Children is a plain list of nodes with a few tree-flavoured helpers:
removal by identity or predicate, a filter-then-map query, and the
canonical explorer ordering (folders first, then by name).
"""

import locale
from typing import Any, Callable, List, Optional, Tuple, TypeVar

from ..config import get_config

T = TypeVar("T")


def _name_key(name: str) -> Tuple[str, ...]:
    # casefold decides; strxfrm breaks ties and cannot take NUL characters
    folded = name.casefold()
    if get_config().locale_sort:
        return (folded, locale.strxfrm(name.replace("\x00", "")), name)
    return (folded, name)


def canonical_key(node: Any):
    """Sort key placing folders before files, then ordering by name."""
    return (0 if node.type == "folder" else 1, _name_key(node.name))


class Children(list):
    """List of nodes in display order."""

    def remove(self, *targets) -> None:
        """Remove nodes by identity or by predicate.

        Each target is either a node, removed by identity (first match only,
        ignored when absent), or a callable, in which case every element it
        accepts is removed.

        Args:
            *targets: Nodes and/or predicates
        """
        for target in targets:
            if callable(target):
                matches = [item for item in self if target(item)]
                self.remove(*matches)
                continue
            for index, item in enumerate(self):
                if item is target:
                    del self[index]
                    break

    def where(self, predicate: Callable[[Any], bool],
              transform: Callable[[Any], T]) -> List[T]:
        """Return ``transform(x)`` for every element satisfying ``predicate``.

        The predicate is evaluated over a snapshot, so a transform that
        detaches nodes (and so shrinks this collection) still visits every
        original match.
        """
        return [transform(item) for item in list(self) if predicate(item)]

    def first(self, predicate: Callable[[Any], bool]) -> Optional[Any]:
        """Return the first element satisfying ``predicate``, or None."""
        for item in self:
            if predicate(item):
                return item
        return None

    def names(self) -> List[str]:
        return [item.name for item in self]

    def sort(self, *, key=None, reverse: bool = False) -> 'Children':
        """Sort in place and return self.

        Without a key the canonical explorer order is used: every folder
        before every file, then ascending name. The sort is stable.
        """
        super().sort(key=key or canonical_key, reverse=reverse)
        return self

    def __repr__(self) -> str:
        return f"Children({list.__repr__(self)})"
