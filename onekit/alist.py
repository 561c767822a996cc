"""Accumulator lists and self-expanding dynamic arrays."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

__all__ = ["AList", "DynArray"]


class AList:
    """A list for accumulating values, with lisp-flavoured operations.

    ``cons`` adds to the end. ``car`` and ``cdr`` split off the head.
    ``slice`` and ``cdr`` always build new lists and leave the original
    unchanged. Indexes are never negative and never wrap around.
    """

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._items: list[Any] = list(items) if items is not None else []

    def cons(self, atom: Any) -> AList:
        """Add ``atom`` to the end of the list and return the list."""
        self._items.append(atom)
        return self

    def car(self) -> Any:
        """The first item, or None if the list is empty."""
        return self._items[0] if self._items else None

    def cdr(self) -> AList:
        """A new list holding every item except the first."""
        return self.slice(1, len(self._items)) if self._items else AList()

    def append(self, other: AList | None) -> AList:
        """Add every item of ``other`` to the end of this list and return it."""
        if other is not None:
            self._items.extend(other)
        return self

    def slice(self, start: int, stop: int) -> AList:
        """A new list holding the items in ``[start, stop)``.

        Raises IndexError if ``start`` is negative or ``stop`` is past the end.
        An empty range gives an empty list.
        """
        if stop > len(self._items) or start < 0:
            raise IndexError(
                f"range out of bounds: holds [0..{len(self._items)}), "
                f"requested [{start}..{stop})"
            )
        if start >= stop:
            return AList()
        return AList(self._items[start:stop])

    def _check_index(self, n: int) -> None:
        if n < 0 or n >= len(self._items):
            raise IndexError(
                f"index out of range: {n} lies outside [0..{len(self._items)})"
            )

    def nth(self, n: int) -> Any:
        """The item at position ``n``, counting from 0."""
        self._check_index(n)
        return self._items[n]

    def setnth(self, n: int, atom: Any) -> AList:
        """Replace the item at position ``n`` and return the list."""
        self._check_index(n)
        self._items[n] = atom
        return self

    def clone(self) -> AList:
        """A shallow copy of the list."""
        return AList(self._items)

    def purge(self) -> int:
        """Remove every item and return how many were removed."""
        removed = len(self._items)
        self._items.clear()
        return removed

    def is_empty(self) -> bool:
        """True when the list holds nothing."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AList):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


class DynArray:
    """An array that grows to hold any non-negative index it is given.

    Slots that were never written read as None.
    """

    def __init__(self) -> None:
        self._slots: list[Any] = []
        self._high = -1

    def put_at(self, index: int, item: Any) -> DynArray:
        """Store ``item`` at ``index``, growing as needed, and return the array."""
        if index < 0:
            raise IndexError(f"index may not be negative: {index}")
        if index >= len(self._slots):
            self._slots.extend([None] * (index + 1 - len(self._slots)))
        self._slots[index] = item
        self._high = max(self._high, index)
        return self

    def get_from(self, index: int) -> Any:
        """The item at ``index``; None for a slot never written.

        Raises IndexError if ``index`` is negative or above the high index.
        """
        if index < 0 or index > self._high:
            raise IndexError(
                f"index out of bounds: {index} not in range [0..{self._high}]"
            )
        return self._slots[index]

    def high_index(self) -> int:
        """The highest index written so far, or -1 if nothing was written."""
        return self._high

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._slots[: self._high + 1]!r})"