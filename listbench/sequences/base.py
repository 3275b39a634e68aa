"""
Base sequence interface for benchmarked containers.
All sequence variants must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable


class BaseSequence(ABC):
    """
    Abstract base class for benchmarked sequence containers.

    Wraps a concrete container and exposes the minimal capability set the
    benchmark battery needs: append, insert-at, get-at, remove-at and size.
    ``clear`` and ``fill`` are setup helpers and are never timed.

    Example:
        class MySequence(BaseSequence):
            name = "mine"

            def _create(self):
                return MyContainer()
    """

    # Sequence identification
    name: str = "base"
    display_name: str = "Base Sequence"

    def __init__(self):
        """Initialize sequence with a fresh, empty container."""
        self.container = self._create()

    @abstractmethod
    def _create(self) -> Any:
        """
        Create the underlying container.

        Returns:
            A new, empty container instance
        """
        pass

    @abstractmethod
    def append(self, value: Any) -> None:
        """Insert value at the tail."""
        pass

    @abstractmethod
    def insert(self, index: int, value: Any) -> None:
        """Insert value before position index."""
        pass

    @abstractmethod
    def get(self, index: int) -> Any:
        """Return the element at position index."""
        pass

    @abstractmethod
    def remove(self, index: int) -> Any:
        """Remove and return the element at position index."""
        pass

    def size(self) -> int:
        """Number of elements currently held."""
        return len(self.container)

    def __len__(self) -> int:
        return self.size()

    def is_empty(self) -> bool:
        return self.size() == 0

    def clear(self) -> None:
        """Remove all elements."""
        self.container.clear()

    def fill(self, count: int) -> None:
        """
        Replace the contents with the integers 0..count-1.

        Args:
            count: Number of elements to hold afterwards
        """
        self.clear()
        self.extend(range(count))

    def extend(self, values: Iterable[Any]) -> None:
        self.container.extend(values)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} size={self.size()}>"
