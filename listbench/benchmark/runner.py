"""
Benchmark runner for timing sequence operations.
"""

import time
import random
import logging
from typing import List, Dict, Optional, Callable, Iterable, Type
from dataclasses import dataclass

from ..sequences.base import BaseSequence
from ..sequences import ArraySequence, LinkedSequence
from ..config import Config
from .metrics import OperationResult, ResultSet

logger = logging.getLogger(__name__)

@dataclass
class BenchmarkConfig:
    """Configuration for a benchmark run."""
    tie_tolerance_ns: int = 0
    seed: Optional[int] = None
    pause_between_runs: float = 0.0


def validate_operation_count(operation_count) -> None:
    """
    Reject anything that is not a positive integer.

    Raises:
        ValueError: If operation_count is not a positive integer
    """
    if isinstance(operation_count, bool) or not isinstance(operation_count, int):
        raise ValueError(
            f"Operation count must be a positive integer, got {operation_count!r}"
        )
    if operation_count <= 0:
        raise ValueError(
            f"Operation count must be a positive integer, got {operation_count}"
        )


# ---------------------------------------------------------------------------
# Timed loops. Each receives a prepared sequence and an iteration count and
# does nothing but the measured work.
# ---------------------------------------------------------------------------

def _append_loop(seq: BaseSequence, iterations: int, rng: random.Random) -> None:
    append = seq.append
    for i in range(iterations):
        append(i)


def _prepend_loop(seq: BaseSequence, iterations: int, rng: random.Random) -> None:
    insert = seq.insert
    for i in range(iterations):
        insert(0, i)


def _insert_middle_loop(seq: BaseSequence, iterations: int, rng: random.Random) -> None:
    for i in range(iterations):
        seq.insert(seq.size() // 2, i)


def _get_random_loop(seq: BaseSequence, iterations: int, rng: random.Random) -> None:
    get = seq.get
    randrange = rng.randrange
    size = seq.size()
    for _ in range(iterations):
        get(randrange(size))


def _get_sequential_loop(seq: BaseSequence, iterations: int, rng: random.Random) -> None:
    get = seq.get
    size = seq.size()
    for i in range(iterations):
        get(i % size)


def _remove_front_loop(seq: BaseSequence, iterations: int, rng: random.Random) -> None:
    for _ in range(iterations):
        if not seq.is_empty():
            seq.remove(0)


def _remove_back_loop(seq: BaseSequence, iterations: int, rng: random.Random) -> None:
    for _ in range(iterations):
        if not seq.is_empty():
            seq.remove(seq.size() - 1)


def _remove_middle_loop(seq: BaseSequence, iterations: int, rng: random.Random) -> None:
    for _ in range(iterations):
        if not seq.is_empty():
            seq.remove(seq.size() // 2)


@dataclass(frozen=True)
class _Block:
    """One battery entry: how many iterations, how big the fixture is."""
    name: str
    iterations: int
    prefill: int
    loop: Callable[[BaseSequence, int, random.Random], None]


def build_battery(operation_count: int) -> List[_Block]:
    """
    Lay out the fixed battery for an operation count.

    Positional inserts and removals are linear per call for at least one
    variant, so they run a tenth (or twentieth) of the iterations.
    """
    n = operation_count
    tenth = n // 10
    twentieth = n // 20
    return [
        _Block("append", n, 0, _append_loop),
        _Block("prepend", tenth, tenth, _prepend_loop),
        _Block("insert-middle", tenth, tenth, _insert_middle_loop),
        _Block("get-random", n, n, _get_random_loop),
        _Block("get-sequential", n, n, _get_sequential_loop),
        _Block("remove-front", tenth, 2 * tenth, _remove_front_loop),
        _Block("remove-back", tenth, 2 * tenth, _remove_back_loop),
        _Block("remove-middle", twentieth, 3 * twentieth, _remove_middle_loop),
    ]


# Battery order; also the order of results in every ResultSet
OPERATIONS = [block.name for block in build_battery(0)]


class BenchmarkRunner:
    """
    Times a fixed battery of operations against two sequence variants.

    Features:
        - Fresh containers for every run
        - Setup kept outside the timed interval
        - Reproducible random reads via an owned generator
        - Progress and result callbacks

    Example:
        runner = BenchmarkRunner(ArraySequence, LinkedSequence)
        results = runner.run(10000)
    """

    def __init__(
        self,
        variant_a: Type[BaseSequence] = ArraySequence,
        variant_b: Type[BaseSequence] = LinkedSequence,
        config: Optional[BenchmarkConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize benchmark runner.

        Args:
            variant_a: Sequence class measured as variant A
            variant_b: Sequence class measured as variant B
            config: Benchmark configuration
            rng: Random generator for random reads (default: seeded from config)
        """
        self.variant_a = variant_a
        self.variant_b = variant_b
        self.config = config or BenchmarkConfig(
            tie_tolerance_ns=Config.TIE_TOLERANCE_NS,
            seed=Config.RANDOM_SEED,
            pause_between_runs=Config.PAUSE_BETWEEN_RUNS,
        )
        self.rng = rng or random.Random(self.config.seed)

        # Callbacks
        self._on_progress: Optional[Callable[[int, int], None]] = None
        self._on_result: Optional[Callable[[OperationResult, BaseSequence, BaseSequence], None]] = None

    def on_progress(self, callback: Callable[[int, int], None]) -> "BenchmarkRunner":
        """
        Set progress callback.

        Args:
            callback: Function(completed, total) called after each block
        """
        self._on_progress = callback
        return self

    def on_result(
        self,
        callback: Callable[[OperationResult, BaseSequence, BaseSequence], None],
    ) -> "BenchmarkRunner":
        """
        Set result callback.

        Args:
            callback: Function(result, seq_a, seq_b) called after each block,
                with both containers in their post-block state
        """
        self._on_result = callback
        return self

    def run(self, operation_count: int) -> ResultSet:
        """
        Run the full battery once.

        Args:
            operation_count: Base iteration count; must be positive

        Returns:
            ResultSet with one OperationResult per battery entry

        Raises:
            ValueError: If operation_count is not a positive integer
        """
        validate_operation_count(operation_count)

        seq_a = self.variant_a()
        seq_b = self.variant_b()

        result_set = ResultSet(
            operation_count=operation_count,
            variant_a=seq_a.display_name,
            variant_b=seq_b.display_name,
        )

        battery = build_battery(operation_count)
        total = len(battery)
        logger.info(
            f"Starting benchmark: {operation_count} operations, "
            f"{seq_a.display_name} vs {seq_b.display_name}"
        )

        for completed, block in enumerate(battery, start=1):
            duration_a = self._time_block(block, seq_a)
            duration_b = self._time_block(block, seq_b)

            result = OperationResult(
                name=block.name,
                operation_count=block.iterations,
                duration_a=duration_a,
                duration_b=duration_b,
                tolerance_ns=self.config.tie_tolerance_ns,
            )
            result_set.add(result)
            logger.debug(
                f"{block.name}: {duration_a}ns vs {duration_b}ns "
                f"({result.faster.value}, x{result.speed_ratio:.2f})"
            )

            if self._on_result:
                self._on_result(result, seq_a, seq_b)

            if self._on_progress:
                self._on_progress(completed, total)

        logger.info(f"Benchmark complete: {operation_count} operations")
        return result_set

    def _time_block(self, block: _Block, seq: BaseSequence) -> int:
        """
        Prepare the fixture, then time only the block's loop.

        Returns:
            Elapsed nanoseconds
        """
        seq.fill(block.prefill)

        start = time.perf_counter_ns()
        block.loop(seq, block.iterations, self.rng)
        return time.perf_counter_ns() - start


class MultiSizeRunner:
    """
    Run the battery for several operation counts in order.

    Example:
        runner = MultiSizeRunner(BenchmarkRunner())
        results = runner.run_sizes([1000, 5000, 10000])
    """

    def __init__(self, runner: Optional[BenchmarkRunner] = None):
        """Initialize multi-size runner."""
        self.runner = runner or BenchmarkRunner()
        self.results: Dict[int, ResultSet] = {}

    def run_sizes(self, sizes: Iterable[int]) -> Dict[int, ResultSet]:
        """
        Run one benchmark per operation count.

        Every count is validated before any of them runs. Each call starts
        from an empty result mapping.

        Args:
            sizes: Operation counts, run in the given order

        Returns:
            Dictionary mapping operation count to its ResultSet

        Raises:
            ValueError: If sizes is empty, repeats a count, or holds a count
                that is not a positive integer
        """
        sizes = list(sizes)
        if not sizes:
            raise ValueError("At least one operation count is required")
        for size in sizes:
            validate_operation_count(size)
        if len(set(sizes)) != len(sizes):
            raise ValueError(f"Operation counts must be unique, got {sizes}")

        pause = self.runner.config.pause_between_runs
        logger.info(f"Running {len(sizes)} sizes: {sizes}")

        results: Dict[int, ResultSet] = {}
        for index, size in enumerate(sizes):
            if index and pause > 0:
                time.sleep(pause)
            results[size] = self.runner.run(size)

        self.results = results
        return results
