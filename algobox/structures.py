"""Stacks and a queue built from two stacks."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

__all__ = [
    "StackOverflowError",
    "StackUnderflowError",
    "BoundedStack",
    "StackQueue",
    "LinkedStack",
]

DEFAULT_CAPACITY = 10


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when taking from an empty stack or queue."""


class BoundedStack:
    """A LIFO stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        if len(self._items) >= self.capacity:
            raise StackOverflowError("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def is_empty(self) -> bool:
        """Return True when the stack holds nothing."""
        return not self._items


class StackQueue:
    """A FIFO queue that keeps its items in a bounded stack."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._store = BoundedStack(capacity)
        self._spare = BoundedStack(capacity)

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back of the queue."""
        self._store.push(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front of the queue."""
        while not self._store.is_empty():
            self._spare.push(self._store.pop())
        front = self._spare.pop()
        while not self._spare.is_empty():
            self._store.push(self._spare.pop())
        return front


@dataclass
class _Node:
    value: Any
    below: _Node | None = None


class LinkedStack:
    """An unbounded LIFO stack of linked nodes.

    Iteration runs from the bottom of the stack to the top.
    """

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._length = 0

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._top = _Node(value, self._top)
        self._length += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise StackUnderflowError("stack underflow")
        node = self._top
        self._top = node.below
        self._length -= 1
        return node.value

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self._top is None:
            raise StackUnderflowError("stack is empty")
        return self._top.value

    def __iter__(self) -> Iterator[Any]:
        values = []
        node = self._top
        while node is not None:
            values.append(node.value)
            node = node.below
        return reversed(values)

    def __len__(self) -> int:
        return self._length