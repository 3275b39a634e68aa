"""
Array-backed sequence built on the built-in list.
"""

from typing import Any, List

from .base import BaseSequence


class ArraySequence(BaseSequence):
    """
    Contiguous, over-allocated array of references.

    Indexed reads and tail operations are O(1); inserting or removing
    anywhere else shifts every element after the position.
    """

    name = "list"
    display_name = "list"

    def _create(self) -> List[Any]:
        return []

    def append(self, value: Any) -> None:
        self.container.append(value)

    def insert(self, index: int, value: Any) -> None:
        self.container.insert(index, value)

    def get(self, index: int) -> Any:
        return self.container[index]

    def remove(self, index: int) -> Any:
        return self.container.pop(index)
