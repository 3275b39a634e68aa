"""
Benchmarked sequence containers package.
Each variant implements the BaseSequence interface.
"""

from typing import Dict, List, Type

from .base import BaseSequence
from .array import ArraySequence
from .linked import LinkedSequence

# Registry of available sequence variants
SEQUENCES: Dict[str, Type[BaseSequence]] = {
    "list": ArraySequence,
    "deque": LinkedSequence,
}


def get_sequence(name: str) -> Type[BaseSequence]:
    """
    Get a sequence class by name.

    Args:
        name: Sequence name (e.g., 'list', 'deque')

    Returns:
        Sequence class; call it to get a fresh, empty container

    Raises:
        ValueError: If sequence is not found
    """
    sequence_class = SEQUENCES.get(name.lower())
    if not sequence_class:
        available = ", ".join(SEQUENCES.keys())
        raise ValueError(f"Unknown sequence: {name}. Available: {available}")

    return sequence_class


def list_sequences() -> List[str]:
    """List all available sequence names."""
    return list(SEQUENCES.keys())


__all__ = [
    "BaseSequence",
    "ArraySequence",
    "LinkedSequence",
    "get_sequence",
    "list_sequences",
    "SEQUENCES",
]
