"""Two stacks sharing one fixed-size array."""

from __future__ import annotations


class TwoStacks:
    """Two stacks growing towards each other from the ends of one array."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._items: list[int] = [0] * capacity
        self._top1 = -1
        self._top2 = capacity

    def _has_room(self) -> bool:
        return self._top1 < self._top2 - 1

    def push1(self, value: int) -> None:
        """Push ``value`` onto the first stack."""
        if not self._has_room():
            raise OverflowError("stack overflow")
        self._top1 += 1
        self._items[self._top1] = value

    def push2(self, value: int) -> None:
        """Push ``value`` onto the second stack."""
        if not self._has_room():
            raise OverflowError("stack overflow")
        self._top2 -= 1
        self._items[self._top2] = value

    def pop1(self) -> int:
        """Pop and return the top of the first stack."""
        if self._top1 < 0:
            raise IndexError("stack underflow")
        value = self._items[self._top1]
        self._top1 -= 1
        return value

    def pop2(self) -> int:
        """Pop and return the top of the second stack."""
        if self._top2 >= len(self._items):
            raise IndexError("stack underflow")
        value = self._items[self._top2]
        self._top2 += 1
        return value