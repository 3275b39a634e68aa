"""
Timing results and win tallies for benchmarks.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Iterable, Iterator


class Winner(Enum):
    """Which variant finished a block first."""
    A = "A"
    B = "B"
    TIE = "tie"


NS_PER_MS = 1_000_000


def ns_to_ms(nanoseconds: int) -> float:
    """Convert integer nanoseconds to floating milliseconds."""
    return nanoseconds / NS_PER_MS


@dataclass(frozen=True)
class OperationResult:
    """
    Timing of one operation block for both sequence variants.

    ``faster`` and ``speed_ratio`` are derived from the two durations when
    the result is created and cannot be changed afterwards.

    Attributes:
        name: Operation identifier (e.g. "append", "remove-front")
        operation_count: Iterations performed in the timed loop
        duration_a: Elapsed nanoseconds for variant A (array-backed)
        duration_b: Elapsed nanoseconds for variant B (linked)
        tolerance_ns: Absolute difference below which the block is a tie
    """
    name: str
    operation_count: int
    duration_a: int
    duration_b: int
    tolerance_ns: int = 0

    faster: Winner = field(init=False)
    speed_ratio: float = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "faster", self._determine_faster())
        object.__setattr__(self, "speed_ratio", self._calculate_speed_ratio())

    def _determine_faster(self) -> Winner:
        difference = abs(self.duration_a - self.duration_b)
        if difference == 0 or difference < self.tolerance_ns:
            return Winner.TIE
        return Winner.A if self.duration_a < self.duration_b else Winner.B

    def _calculate_speed_ratio(self) -> float:
        """How many times faster the quicker variant was (0 if either is 0)."""
        if self.duration_a == 0 or self.duration_b == 0:
            return 0.0
        slow = max(self.duration_a, self.duration_b)
        fast = min(self.duration_a, self.duration_b)
        return slow / fast

    @property
    def duration_a_ms(self) -> float:
        return ns_to_ms(self.duration_a)

    @property
    def duration_b_ms(self) -> float:
        return ns_to_ms(self.duration_b)


@dataclass
class ResultSet:
    """Results of one runner invocation, in battery order."""
    operation_count: int
    variant_a: str = "A"
    variant_b: str = "B"
    results: List[OperationResult] = field(default_factory=list)

    def __iter__(self) -> Iterator[OperationResult]:
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    def __getitem__(self, index: int) -> OperationResult:
        return self.results[index]

    def add(self, result: OperationResult) -> None:
        self.results.append(result)

    @property
    def names(self) -> List[str]:
        return [r.name for r in self.results]


@dataclass
class Tally:
    """Win counts across a set of results."""
    a_wins: int = 0
    b_wins: int = 0
    ties: int = 0

    @property
    def total(self) -> int:
        return self.a_wins + self.b_wins + self.ties

    @property
    def recommendation(self) -> Winner:
        """
        Variant to recommend.

        Winner.TIE means the choice depends on the workload.
        """
        if self.a_wins > self.b_wins:
            return Winner.A
        if self.b_wins > self.a_wins:
            return Winner.B
        return Winner.TIE


def tally(results: Iterable[OperationResult]) -> Tally:
    """
    Count how many results each variant won.

    Args:
        results: Operation results (a ResultSet or any iterable of them)

    Returns:
        Tally of A wins, B wins and ties
    """
    counts = Tally()
    for result in results:
        if result.faster is Winner.A:
            counts.a_wins += 1
        elif result.faster is Winner.B:
            counts.b_wins += 1
        else:
            counts.ties += 1
    return counts
