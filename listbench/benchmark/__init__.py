"""
Benchmark execution and reporting package.
"""

from .runner import BenchmarkRunner, BenchmarkConfig, MultiSizeRunner, OPERATIONS
from .metrics import OperationResult, ResultSet, Tally, Winner, tally
from .reporter import Reporter, Unit

__all__ = [
    "BenchmarkRunner",
    "BenchmarkConfig",
    "MultiSizeRunner",
    "OPERATIONS",
    "OperationResult",
    "ResultSet",
    "Tally",
    "Winner",
    "tally",
    "Reporter",
    "Unit",
]
