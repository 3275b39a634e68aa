"""
Node-linked sequence built on collections.deque.
"""

from collections import deque
from typing import Any, Deque

from .base import BaseSequence


class LinkedSequence(BaseSequence):
    """
    Doubly linked list of fixed-size blocks.

    Both ends are O(1). Positional access walks blocks from the nearer
    end, so reads, inserts and removals toward the middle are O(n).
    """

    name = "deque"
    display_name = "deque"

    def _create(self) -> Deque[Any]:
        return deque()

    def append(self, value: Any) -> None:
        self.container.append(value)

    def insert(self, index: int, value: Any) -> None:
        if index == 0:
            self.container.appendleft(value)
        else:
            self.container.insert(index, value)

    def get(self, index: int) -> Any:
        return self.container[index]

    def remove(self, index: int) -> Any:
        size = len(self.container)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("deque index out of range")

        if index == 0:
            return self.container.popleft()
        if index == size - 1:
            return self.container.pop()

        value = self.container[index]
        del self.container[index]
        return value
