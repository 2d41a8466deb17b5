"""Unordered, equality-based collection backing the kitchen."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class Bag(Generic[T]):
    """
    A bag of items compared by ``==``.

    - ``capacity`` caps the number of held items (None for no cap).
    - ``unique`` makes ``add`` refuse an item equal to one already held.

    Failures are reported as False, never raised.
    """

    def __init__(self, capacity: int | None = None, unique: bool = False) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self.unique = unique
        self._items: list[T] = []

    def add(self, item: T) -> bool:
        if self.capacity is not None and len(self._items) >= self.capacity:
            return False
        if self.unique and item in self._items:
            return False
        self._items.append(item)
        return True

    def remove(self, item: T) -> bool:
        for idx, held in enumerate(self._items):
            if held == item:
                # Order carries no meaning, so fill the hole with the last item.
                self._items[idx] = self._items[-1]
                self._items.pop()
                return True
        return False

    def contains(self, item: T) -> bool:
        return item in self._items

    def count(self, item: T) -> int:
        return sum(1 for held in self._items if held == item)

    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def to_list(self) -> list[T]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items
