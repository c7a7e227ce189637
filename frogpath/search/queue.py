"""UniquePriorityQueue — an ordered, duplicate-free candidate selector.

Entries live in a dense list kept sorted by ascending priority.  A new
entry is slotted in behind every entry of equal priority, so ties come
out in insertion order.  Every operation is a linear scan over at most a
few dozen candidates.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


class QueueError(Exception):
    """Base class for priority-queue contract violations."""


class EmptyQueueError(QueueError):
    """Raised when reading from an empty queue."""


class ItemNotFoundError(QueueError):
    """Raised when updating an item the queue does not hold."""


@dataclass
class _Entry(Generic[T]):
    """One queued item.

    Attributes:
        item: The queued object.
        priority: Rank, lower is better.
        sequence: Insertion counter, breaks ties between equal priorities.
    """

    item: T
    priority: float
    sequence: int


class UniquePriorityQueue(Generic[T]):
    """A min-priority queue that holds each item at most once.

    Items are compared with ``==``.  Among equal priorities the item
    added first is returned first; ``update_priority`` counts as a fresh
    insertion.
    """

    def __init__(self) -> None:
        self._entries: list[_Entry[T]] = []
        self._counter = 0

    def add(self, item: T, priority: float) -> None:
        """Queue ``item`` with ``priority`` unless it is already queued.

        Args:
            item: Object to queue.
            priority: Rank, lower is better.
        """
        if self.contains(item):
            return

        # Walk back past every entry that ranks strictly worse
        index = len(self._entries)
        while index > 0 and self._entries[index - 1].priority > priority:
            index -= 1

        self._entries.insert(index, _Entry(item, priority, self._counter))
        self._counter += 1

    def contains(self, item: T) -> bool:
        """Return True if ``item`` is queued."""
        return self._index_of(item) is not None

    def peek(self) -> T:
        """Return the best-ranked item without removing it.

        Raises:
            EmptyQueueError: If the queue is empty.
        """
        return self._entries[self._min_index()].item

    def remove_min(self) -> T:
        """Remove and return the best-ranked item.

        Raises:
            EmptyQueueError: If the queue is empty.
        """
        return self._entries.pop(self._min_index()).item

    def update_priority(self, item: T, new_priority: float) -> None:
        """Re-rank ``item``, placing it behind existing equal priorities.

        Raises:
            ItemNotFoundError: If ``item`` is not queued.
        """
        index = self._index_of(item)
        if index is None:
            msg = f"{item!r} is not in the queue"
            raise ItemNotFoundError(msg)
        del self._entries[index]
        self.add(item, new_priority)

    def size(self) -> int:
        return len(self._entries)

    def is_empty(self) -> bool:
        return not self._entries

    def _index_of(self, item: T) -> int | None:
        for i, entry in enumerate(self._entries):
            if entry.item == item:
                return i
        return None

    def _min_index(self) -> int:
        """Index of the lowest priority, earliest sequence on ties."""
        if not self._entries:
            msg = "priority queue is empty"
            raise EmptyQueueError(msg)
        best = 0
        for i, entry in enumerate(self._entries):
            current = self._entries[best]
            if (entry.priority, entry.sequence) < (current.priority, current.sequence):
                best = i
        return best

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, item: object) -> bool:
        return self.contains(item)

    def __iter__(self) -> Iterator[tuple[T, float]]:
        """Yield ``(item, priority)`` pairs in retrieval order."""
        for entry in self._entries:
            yield entry.item, entry.priority

    def __str__(self) -> str:
        if not self._entries:
            return "The queue is empty"
        return ", ".join(f"{e.item} [{e.priority}]" for e in self._entries)

    def __repr__(self) -> str:
        return f"UniquePriorityQueue({list(self)!r})"
