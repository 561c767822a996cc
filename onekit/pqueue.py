"""A priority queue ordered by integer priority."""

from __future__ import annotations

import bisect
from typing import Any

__all__ = ["PriorityQueue"]


def _priority_of(entry: tuple[int, Any]) -> int:
    return entry[0]


class PriorityQueue:
    """Items kept in ascending order of priority.

    An item is placed before every item already queued with the same or a
    higher priority, so among equal priorities the lowest end yields the
    newest item and the highest end yields the oldest.
    """

    def __init__(self) -> None:
        self._entries: list[tuple[int, Any]] = []

    def insert(self, priority: int, payload: Any) -> None:
        """Add ``payload`` with the given priority."""
        index = bisect.bisect_left(self._entries, priority, key=_priority_of)
        self._entries.insert(index, (priority, payload))

    def _require_items(self) -> None:
        if not self._entries:
            raise IndexError("priority queue is empty")

    def get_highest(self) -> tuple[int, Any]:
        """Remove and return ``(priority, payload)`` of the highest item."""
        self._require_items()
        return self._entries.pop()

    def get_lowest(self) -> tuple[int, Any]:
        """Remove and return ``(priority, payload)`` of the lowest item."""
        self._require_items()
        return self._entries.pop(0)

    def peek_highest(self) -> tuple[int, Any]:
        """Return ``(priority, payload)`` of the highest item without removing it."""
        self._require_items()
        return self._entries[-1]

    def peek_lowest(self) -> tuple[int, Any]:
        """Return ``(priority, payload)`` of the lowest item without removing it."""
        self._require_items()
        return self._entries[0]

    def max_priority(self) -> int:
        """The highest priority queued, or 0 when empty."""
        return self._entries[-1][0] if self._entries else 0

    def min_priority(self) -> int:
        """The lowest priority queued, or 0 when empty."""
        return self._entries[0][0] if self._entries else 0

    def add_with_max(self, payload: Any) -> None:
        """Add ``payload`` at the current highest priority."""
        self.insert(self.max_priority(), payload)

    def add_with_min(self, payload: Any) -> None:
        """Add ``payload`` at the current lowest priority."""
        self.insert(self.min_priority(), payload)

    def reset(self) -> int:
        """Remove every item and return how many were removed."""
        removed = len(self._entries)
        self._entries.clear()
        return removed

    def __len__(self) -> int:
        return len(self._entries)

    def is_empty(self) -> bool:
        """True when nothing is queued."""
        return not self._entries

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._entries!r})"