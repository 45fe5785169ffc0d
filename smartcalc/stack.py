"""Generic list-backed stack used by the converter and the evaluator."""

from __future__ import annotations

from typing import Generic, List, TypeVar

T = TypeVar('T')


class EmptyStackError(IndexError):
    """Raised by pop/peek on an empty stack."""
    pass


class Stack(Generic[T]):
    """LIFO stack. Popping or peeking an empty stack raises EmptyStackError."""

    def __init__(self) -> None:
        self._items: List[T] = []

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        if not self._items:
            raise EmptyStackError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> T:
        if not self._items:
            raise EmptyStackError("peek at empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"
