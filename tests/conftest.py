import io

import pytest
from rich.console import Console

from listbench.benchmark.metrics import OperationResult, ResultSet
from listbench.benchmark.reporter import Reporter
from listbench.benchmark.runner import BenchmarkConfig, BenchmarkRunner
from listbench.sequences import ArraySequence, LinkedSequence


@pytest.fixture
def buffer():
    """In-memory stream the reporter writes to."""
    return io.StringIO()


@pytest.fixture
def reporter(buffer):
    """Reporter writing plain text to the buffer."""
    return Reporter(Console(file=buffer, width=200))


@pytest.fixture
def runner():
    """Runner with a fixed seed and no tie tolerance."""
    config = BenchmarkConfig(tie_tolerance_ns=0, seed=42, pause_between_runs=0.0)
    return BenchmarkRunner(ArraySequence, LinkedSequence, config=config)


@pytest.fixture
def result_set():
    """Hand-built results: list wins twice, deque once, one tie."""
    results = ResultSet(operation_count=1000, variant_a="list", variant_b="deque")
    results.add(OperationResult("append", 1000, 40_000, 90_000))
    results.add(OperationResult("prepend", 100, 1_500_000, 20_000))
    results.add(OperationResult("get-random", 1000, 30_000, 3_000_000))
    results.add(OperationResult("remove-back", 100, 5_000, 5_000))
    return results
