"""A key:value store over a self balancing search tree."""

from __future__ import annotations

import enum
import warnings
from typing import Any, Callable, Iterator

from onekit.alist import AList
from onekit.tree import ScapegoatTree

__all__ = ["KeyType", "KeyValueStore"]

Comparator = Callable[[Any, Any], int]


class KeyType(enum.Enum):
    """How the keys of a KeyValueStore are compared."""

    INTEGRAL = 1
    """Integer keys, compared numerically."""
    STRING = 2
    """String keys, compared character by character."""
    CUSTOM = 3
    """Keys compared by a comparator the caller supplies."""


def _integral_compare(left: int, right: int) -> int:
    return int(left) - int(right)


def _string_compare(left: str, right: str) -> int:
    return (left > right) - (left < right)


class KeyValueStore:
    """A map from unique keys to values, kept in key order.

    Integral and string keys get their comparator automatically; a
    comparator passed along with them is ignored with a warning. Custom
    keys require a comparator, which returns a negative number, zero or a
    positive number as its first argument sorts before, equal to or after
    its second.
    """

    def __init__(
        self,
        key_type: KeyType | int = KeyType.INTEGRAL,
        comparator: Comparator | None = None,
    ) -> None:
        self.key_type = KeyType(key_type)
        if self.key_type is KeyType.INTEGRAL:
            compare: Comparator = _integral_compare
        elif self.key_type is KeyType.STRING:
            compare = _string_compare
        else:
            if comparator is None:
                raise ValueError("custom keys require a comparator function")
            compare = comparator
        if comparator is not None and self.key_type is not KeyType.CUSTOM:
            warnings.warn(
                f"comparator ignored for {self.key_type.name.lower()} keys",
                stacklevel=2,
            )
        self._tree = ScapegoatTree(compare)

    def insert(self, key: Any, value: Any) -> bool:
        """Add ``key`` with ``value``; False if the key is already present."""
        return self._tree.insert(key, value)

    def get(self, key: Any) -> Any:
        """The value for ``key``, or None if it is absent."""
        return self._tree.get(key)

    def update(self, key: Any, value: Any) -> bool:
        """Replace the value for ``key``; False if the key is absent."""
        return self._tree.update(key, value)

    def delete(self, key: Any) -> bool:
        """Remove ``key``.

        Returns False if the key was already deleted; raises KeyError if it
        was never stored.
        """
        return self._tree.delete(key)

    def exists(self, key: Any) -> bool:
        """True when ``key`` is present."""
        return self._tree.exists(key)

    def keys(self) -> AList:
        """An AList of every key, in key order."""
        return self._tree.keys()

    def values(self) -> AList:
        """An AList of every value, in key order."""
        return self._tree.values()

    def in_order(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in key order."""
        return self._tree.in_order()

    def pre_order(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs, each node before its subtrees."""
        return self._tree.pre_order()

    def post_order(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs, each node after its subtrees."""
        return self._tree.post_order()

    def is_empty(self) -> bool:
        """True when no keys are held."""
        return self._tree.is_empty()

    def __len__(self) -> int:
        return len(self._tree)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.key_type.name}, "
            f"{dict(self._tree.in_order())!r})"
        )