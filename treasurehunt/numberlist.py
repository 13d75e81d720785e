"""A singly ordered collection of integers with front and back insertion."""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, Iterable, Iterator, Optional

Deleter = Optional[Callable[[int], None]]


class NumberList:
    """An ordered sequence of integers.

    Removal operations accept an optional ``delete`` callback that is handed
    each number as it leaves the list, so callers can release anything the
    number stands for.
    """

    def __init__(self, numbers: Iterable[int] = ()) -> None:
        self._items: Deque[int] = deque(numbers)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NumberList):
            return NotImplemented
        return list(self._items) == list(other._items)

    def __repr__(self) -> str:
        return f"NumberList({list(self._items)!r})"

    def add_front(self, number: int) -> None:
        """Insert ``number`` before the first element."""
        self._items.appendleft(number)

    def add_back(self, number: int) -> None:
        """Append ``number`` after the last element."""
        self._items.append(number)

    def last(self) -> Optional[int]:
        """The last number, or None when the list is empty."""
        return self._items[-1] if self._items else None

    def pop_front(self, delete: Deleter = None) -> int:
        """Remove and return the first number, passing it to ``delete`` first.

        Raises IndexError when the list is empty.
        """
        if not self._items:
            raise IndexError("pop from an empty NumberList")
        number = self._items.popleft()
        if delete is not None:
            delete(number)
        return number

    def clear(self, delete: Deleter = None) -> None:
        """Remove every number, in order, passing each to ``delete``."""
        while self._items:
            self.pop_front(delete)

    def for_each(self, func: Callable[[int], object]) -> None:
        """Call ``func`` on every number in order."""
        for number in self._items:
            func(number)

    def map(
        self, func: Callable[[int], int], delete: Deleter = None
    ) -> "NumberList":
        """Return a new list holding ``func`` applied to every number.

        If ``func`` fails part way, the numbers already produced are handed
        to ``delete`` and the error propagates.
        """
        result = NumberList()
        try:
            for number in self._items:
                result.add_back(func(number))
        except Exception:
            result.clear(delete)
            raise
        return result