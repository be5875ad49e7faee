"""
Generic LIFO stack shared by the numeric and boolean evaluators.
"""

from typing import Generic, List, Tuple, TypeVar

from .errors import EmptyStackError

T = TypeVar('T')


class Stack(Generic[T]):
    """
    Ordered sequence mutated only at its tail.

    Used as ``Stack[float]`` by the arithmetic evaluator and ``Stack[bool]``
    by the boolean evaluator.
    """

    def __init__(self):
        """Initialize empty stack."""
        self._items: List[T] = []

    def push(self, value: T):
        """Append a value on top of the stack."""
        self._items.append(value)

    def pop(self) -> T:
        """
        Remove and return the top value.

        Raises:
            EmptyStackError: If the stack holds no values
        """
        if not self._items:
            raise EmptyStackError()
        return self._items.pop()

    def peek(self) -> T:
        """
        Return the top value without removing it.

        Raises:
            EmptyStackError: If the stack holds no values
        """
        if not self._items:
            raise EmptyStackError()
        return self._items[-1]

    def clear(self):
        self._items.clear()

    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def snapshot(self) -> Tuple[T, ...]:
        """Immutable copy of the contents, bottom first."""
        return tuple(self._items)

    def __len__(self):
        return len(self._items)

    def __repr__(self):
        return f"Stack({self._items!r})"
