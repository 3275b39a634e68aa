"""
Console report generation for benchmark results.
Renders timing tables, a win tally with a recommendation, and a
per-operation analysis.
"""

from enum import Enum
from typing import Dict, Iterable, Optional, Tuple, Union

from rich.console import Console
from rich.table import Table

from .metrics import OperationResult, ResultSet, Tally, Winner, ns_to_ms, tally
from .utils import get_machine_info


class Unit(Enum):
    """Time unit for table durations."""
    NS = "ns"
    MS = "ms"


# Ratios above these count as a clear win and a slight win in the details view
CLEAR_WIN_RATIO = 1.5
SLIGHT_WIN_RATIO = 1.1


def _variant_names(results: Iterable[OperationResult]) -> Tuple[str, str]:
    if isinstance(results, ResultSet):
        return results.variant_a, results.variant_b
    return "A", "B"


def _label(winner: Winner, names: Tuple[str, str]) -> str:
    if winner is Winner.A:
        return names[0]
    if winner is Winner.B:
        return names[1]
    return "tie"


class Reporter:
    """
    Render benchmark results to a console.

    Supports:
        - Timing tables in nanoseconds or milliseconds
        - Win tally and recommendation
        - Detailed per-operation analysis
        - Multi-size reports

    Example:
        reporter = Reporter()
        reporter.render_table(results, "ns")
        reporter.render_summary(results)
    """

    def __init__(self, console: Optional[Console] = None):
        """
        Initialize reporter.

        Args:
            console: Rich console to write to (default: standard output)
        """
        self.console = console or Console()

    def render_environment(self) -> None:
        """Print the machine the numbers were taken on."""
        machine_info = get_machine_info()

        table = Table(title="Test Environment", show_header=False)
        table.add_column("Item", style="cyan")
        table.add_column("Value")
        table.add_row("Host", machine_info["hostname"])
        table.add_row("Platform", machine_info["platform"])
        table.add_row("Machine", machine_info["machine"])
        table.add_row("Python", machine_info["python"])
        table.add_row("Timer", machine_info["timer"])

        self.console.print(table)

    def render_table(
        self,
        results: Iterable[OperationResult],
        unit: Union[Unit, str] = Unit.NS,
    ) -> Table:
        """
        Print one row per operation with both durations in the given unit.

        Args:
            results: ResultSet (or any iterable of OperationResult)
            unit: "ns" for raw integers, "ms" for float milliseconds

        Returns:
            The rendered table

        Raises:
            ValueError: If unit is not ns or ms
        """
        unit = Unit(unit)
        names = _variant_names(results)

        title = "Results (nanoseconds)" if unit is Unit.NS else "Results (milliseconds)"
        if isinstance(results, ResultSet):
            title = f"{title}: {results.operation_count} operations"

        table = Table(title=title)
        table.add_column("Operation", style="cyan")
        table.add_column("Iterations", justify="right")
        table.add_column(f"{names[0]} ({unit.value})", justify="right")
        table.add_column(f"{names[1]} ({unit.value})", justify="right")
        table.add_column("Ratio", justify="right")
        table.add_column("Faster")

        for result in results:
            if unit is Unit.NS:
                duration_a = str(result.duration_a)
                duration_b = str(result.duration_b)
            else:
                duration_a = f"{ns_to_ms(result.duration_a):.3f}"
                duration_b = f"{ns_to_ms(result.duration_b):.3f}"

            table.add_row(
                result.name,
                str(result.operation_count),
                duration_a,
                duration_b,
                f"{result.speed_ratio:.1f}",
                _label(result.faster, names),
            )

        self.console.print(table)
        return table

    def render_summary(self, results: Iterable[OperationResult]) -> Tally:
        """
        Print win counts and a recommendation.

        Args:
            results: ResultSet (or any iterable of OperationResult)

        Returns:
            The computed Tally
        """
        names = _variant_names(results)
        counts = tally(results)

        self.console.print("\n" + "=" * 70)
        self.console.print("[bold]Summary[/bold]")
        self.console.print("=" * 70)
        self.console.print(f"{names[0]} wins: {counts.a_wins}")
        self.console.print(f"{names[1]} wins: {counts.b_wins}")
        self.console.print(f"Ties: {counts.ties}")

        self.console.print("\n[bold]Recommendation:[/bold]")
        self.console.print("-" * 70)
        for line in self._recommendation_lines(counts.recommendation, names):
            self.console.print(line)
        self.console.print("=" * 70)

        return counts

    def _recommendation_lines(self, recommendation: Winner, names: Tuple[str, str]) -> list:
        a_name, b_name = names
        if recommendation is Winner.A:
            return [
                f"★ {a_name} was faster in most operations",
                f"{a_name} suits:",
                "  • Frequent access by index",
                "  • Appending and removing at the tail",
                "  • Memory-sensitive code (no per-node overhead)",
            ]
        if recommendation is Winner.B:
            return [
                f"★ {b_name} was faster in most operations",
                f"{b_name} suits:",
                "  • Frequent work at the head of the sequence",
                "  • FIFO queues and LIFO stacks",
                "  • Workloads dominated by inserts and removals",
            ]
        return [
            f"★ {a_name} and {b_name} performed comparably",
            "The choice depends on the workload:",
            f"  • For indexed access, {a_name}",
            f"  • For inserts and removals at the ends, {b_name}",
        ]

    def render_details(self, results: Iterable[OperationResult]) -> None:
        """
        Print both durations and a verdict for each operation.

        Args:
            results: ResultSet (or any iterable of OperationResult)
        """
        names = _variant_names(results)
        width = max(len(names[0]), len(names[1])) + 1

        for result in results:
            self.console.print(f"\n[bold]{result.name}[/bold] ({result.operation_count} iterations):")
            self.console.print(
                f"  {names[0] + ':':<{width}} {result.duration_a} ns ({result.duration_a_ms:.3f} ms)"
            )
            self.console.print(
                f"  {names[1] + ':':<{width}} {result.duration_b} ns ({result.duration_b_ms:.3f} ms)"
            )
            self.console.print(f"  {self.verdict(result, names)}")

    @staticmethod
    def verdict(result: OperationResult, names: Tuple[str, str] = ("A", "B")) -> str:
        """One-line judgement of how decisive a result is."""
        if result.faster is Winner.TIE or result.speed_ratio <= SLIGHT_WIN_RATIO:
            return "Negligible difference"

        winner = _label(result.faster, names)
        if result.speed_ratio > CLEAR_WIN_RATIO:
            return f"★ {winner} faster by {result.speed_ratio:.1f}x"
        return f"{winner} slightly faster ({result.speed_ratio:.1f}x)"

    def render_conclusions(self, names: Tuple[str, str] = ("list", "deque")) -> None:
        """Print general guidance on choosing between the two families."""
        a_name, b_name = names
        self.console.print("\n" + "=" * 80)
        self.console.print("[bold]Conclusions[/bold]")
        self.console.print("=" * 80)
        self.console.print(
            f"1. {a_name} (array-backed) is usually faster for:\n"
            f"   - Access by index\n"
            f"   - Appending at the tail\n"
            f"   - Removing from the tail\n"
            f"\n"
            f"2. {b_name} (linked) is usually faster for:\n"
            f"   - Inserting at the head\n"
            f"   - Removing from the head\n"
            f"\n"
            f"3. Memory:\n"
            f"   - {a_name} stores one reference per element\n"
            f"   - {b_name} adds per-block link overhead\n"
            f"\n"
            f"4. In practice:\n"
            f"   - Read-heavy code (indexing, search): {a_name}\n"
            f"   - Head-heavy writes (queues): {b_name}\n"
            f"   - Mixed workloads: pick by the dominant operation"
        )

    def render_report(self, result_sets: Dict[int, ResultSet]) -> Dict[int, Tally]:
        """
        Print tables and a summary for every operation count.

        Args:
            result_sets: Operation count mapped to its ResultSet

        Returns:
            Operation count mapped to its Tally
        """
        tallies = {}
        for operation_count, results in result_sets.items():
            self.console.print(f"\n[bold blue]Testing {operation_count} operations[/bold blue]")
            self.render_table(results, Unit.NS)
            self.render_table(results, Unit.MS)
            tallies[operation_count] = self.render_summary(results)
        return tallies
