"""A last-in, first-out stack of floating point numbers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class Stack:
    """A stack of floats; iteration runs from the top down."""

    __slots__ = ("_items",)

    def __init__(self, values: Iterable[float] = ()) -> None:
        self._items: list[float] = []
        for value in values:
            self.push(value)

    def push(self, value: float) -> None:
        """Put ``value`` on top of the stack."""
        self._items.append(float(value))

    def pop(self) -> float:
        """Remove and return the top value.

        Raises IndexError if the stack is empty.
        """
        if not self._items:
            raise IndexError("stack is empty")
        return self._items.pop()

    def top(self) -> float:
        """Return the top value without removing it.

        Raises IndexError if the stack is empty.
        """
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Whether the stack holds no values."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[float]:
        return reversed(self._items)

    def __str__(self) -> str:
        return "".join(f"{value:g} " for value in self)

    def __repr__(self) -> str:
        return f"Stack({list(reversed(list(self)))!r})"


def swap(first: Stack, second: Stack) -> None:
    """Exchange the contents of two stacks."""
    first._items, second._items = second._items, first._items