#!/usr/bin/env python3
"""
List Benchmark - CLI Entry Point

Usage:
    python main.py run --sizes 1000,5000,10000
    python main.py details --size 10000
    python main.py list-sequences
"""

import sys
import logging
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent))

import click
from rich.console import Console
from rich.table import Table
from rich.progress import Progress, SpinnerColumn, TextColumn

from listbench import __version__
from listbench.config import Config, parse_sizes
from listbench.sequences import get_sequence, list_sequences, SEQUENCES
from listbench.benchmark.runner import BenchmarkRunner, BenchmarkConfig, MultiSizeRunner
from listbench.benchmark.reporter import Reporter

logger = logging.getLogger(__name__)

console = Console()


def setup_logging(verbose: bool = False, debug: bool = False):
    """Configure logging level."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    logging.getLogger('listbench').setLevel(level)


def _build_runner(variant_a, variant_b, seed, tolerance) -> BenchmarkRunner:
    """Resolve variant names and build a runner, exiting on bad names."""
    try:
        sequence_a = get_sequence(variant_a)
        sequence_b = get_sequence(variant_b)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    config = BenchmarkConfig(
        tie_tolerance_ns=tolerance,
        seed=seed,
        pause_between_runs=Config.PAUSE_BETWEEN_RUNS,
    )
    return BenchmarkRunner(sequence_a, sequence_b, config=config)


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output (INFO level)')
@click.option('--debug', is_flag=True, help='Enable debug output (DEBUG level, shows per-block timings)')
@click.pass_context
def cli(ctx, verbose, debug):
    """
    List Benchmark Tool

    Times append, insert, read and remove operations on an array-backed
    sequence (list) and a linked one (deque), then reports which is faster.

    Use -v for verbose output, --debug for per-block timing logs.
    """
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose
    ctx.obj['debug'] = debug
    setup_logging(verbose, debug)


@cli.command()
@click.option('--sizes', '-s', default=None, help='Comma-separated operation counts')
@click.option('--variant-a', '-a', default=Config.VARIANT_A, help='Sequence measured as variant A')
@click.option('--variant-b', '-b', default=Config.VARIANT_B, help='Sequence measured as variant B')
@click.option('--seed', default=Config.RANDOM_SEED, type=int, help='Seed for random reads')
@click.option('--tolerance', '-t', default=Config.TIE_TOLERANCE_NS, type=int, help='Tie threshold in nanoseconds')
@click.option('--details/--no-details', default=False, help='Print per-operation analysis')
def run(sizes, variant_a, variant_b, seed, tolerance, details):
    """
    Run the benchmark for one or more operation counts.

    Example:
        python main.py run -s 1000,5000,10000
    """
    try:
        size_list = parse_sizes(sizes) if sizes else list(Config.DEFAULT_SIZES)
    except ValueError:
        raise click.BadParameter(f"expected comma-separated integers, got {sizes!r}")

    if not size_list:
        console.print("[red]Error: No operation counts given. Pass --sizes or set DEFAULT_SIZES.[/red]")
        sys.exit(1)
    logger.info(f"Selected sizes: {size_list}")

    console.print(f"\n[bold blue]List Benchmark[/bold blue]")
    console.print(f"Variants: [cyan]{variant_a}[/cyan] vs [cyan]{variant_b}[/cyan]")
    console.print(f"Sizes: [cyan]{', '.join(str(s) for s in size_list)}[/cyan]")
    console.print("")

    runner = _build_runner(variant_a, variant_b, seed, tolerance)
    multi_runner = MultiSizeRunner(runner)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Running benchmark...", total=None)
        try:
            results = multi_runner.run_sizes(size_list)
        except ValueError as e:
            progress.stop()
            console.print(f"[red]Error: {e}[/red]")
            sys.exit(1)
        progress.update(task, completed=True)

    reporter = Reporter(console)
    reporter.render_environment()
    reporter.render_report(results)

    if details:
        for result_set in results.values():
            reporter.render_details(result_set)


@cli.command()
@click.option('--size', '-n', default=Config.DETAIL_SIZE, type=int, help='Operation count')
@click.option('--seed', default=Config.RANDOM_SEED, type=int, help='Seed for random reads')
def details(size, seed):
    """
    Run once and print a detailed analysis with conclusions.

    Example:
        python main.py details -n 10000
    """
    runner = _build_runner(Config.VARIANT_A, Config.VARIANT_B, seed, Config.TIE_TOLERANCE_NS)

    try:
        result_set = runner.run(size)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    reporter = Reporter(console)
    console.print(f"\n[bold]Detailed analysis for {size} operations[/bold]")
    console.print("-" * 80)
    reporter.render_details(result_set)
    reporter.render_conclusions((result_set.variant_a, result_set.variant_b))


@cli.command('list-sequences')
def list_sequences_cmd():
    """List available sequence variants."""
    console.print("\n[bold]Available Sequences:[/bold]\n")

    table = Table()
    table.add_column("Name", style="cyan")
    table.add_column("Class")
    table.add_column("Description")

    for name, sequence_class in SEQUENCES.items():
        doc = (sequence_class.__doc__ or "").strip().splitlines()
        table.add_row(name, sequence_class.__name__, doc[0] if doc else "")

    console.print(table)
    console.print(f"\nDefaults: A={Config.VARIANT_A}, B={Config.VARIANT_B} ({', '.join(list_sequences())} available)")


if __name__ == "__main__":
    cli()
