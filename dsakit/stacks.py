"""Bounded and linked stacks, plus the stock span problem."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


class StackOverflowError(Exception):
    """A push onto a stack that is already full."""


class StackUnderflowError(IndexError):
    """A pop or top on an empty stack."""


class ArrayStack:
    """A stack with a fixed capacity, backed by a list."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self.size = size
        self._items: list[Any] = []

    def push(self, x: Any) -> None:
        """Put *x* on top; raises StackOverflowError when the stack is full."""
        if self.is_full():
            raise StackOverflowError("Stack Overflow!")
        self._items.append(x)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if self.is_empty():
            raise StackUnderflowError("Stack Underflow!")
        return self._items.pop()

    def peek(self, index: int) -> Any:
        """The element at 1-based *index* counted from the top."""
        if not 1 <= index <= len(self._items):
            raise IndexError(f"Invalid position: {index}")
        return self._items[-index]

    def is_full(self) -> bool:
        return len(self._items) == self.size

    def is_empty(self) -> bool:
        return not self._items

    def top(self) -> Any:
        """The top element without removing it."""
        if self.is_empty():
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def __iter__(self) -> Iterator[Any]:
        """Elements from top to bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)


@dataclass(slots=True)
class _Node:
    data: Any
    next: _Node | None


class LinkedStack:
    """An unbounded stack built from linked nodes."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._length = 0

    def push(self, x: Any) -> None:
        self._head = _Node(x, self._head)
        self._length += 1

    def pop(self) -> Any:
        """Remove and return the top element."""
        if self._head is None:
            raise StackUnderflowError("Stack Underflow!")
        node = self._head
        self._head = node.next
        self._length -= 1
        return node.data

    def peek(self, index: int) -> Any:
        """The element at 1-based *index* counted from the top."""
        if index < 1:
            raise IndexError(f"Invalid position: {index}")
        for position, value in enumerate(self, start=1):
            if position == index:
                return value
        raise IndexError(f"Invalid position: {index}")

    def is_empty(self) -> bool:
        return self._head is None

    def top(self) -> Any:
        """The top element without removing it."""
        if self._head is None:
            raise StackUnderflowError("stack is empty")
        return self._head.data

    def __iter__(self) -> Iterator[Any]:
        """Elements from top to bottom."""
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._length


def stock_span(prices: Iterable[Any]) -> list[int]:
    """For each day, the number of consecutive days up to and including it
    whose price was at most that day's price."""
    spans: list[int] = []
    pending: list[tuple[Any, int]] = []
    for price in prices:
        days = 1
        while pending and pending[-1][0] <= price:
            days += pending.pop()[1]
        pending.append((price, days))
        spans.append(days)
    return spans