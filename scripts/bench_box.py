"""Benchmarks for Box: boxed pipelines vs the equivalent bare Python code."""

import statistics
import timeit
from collections.abc import Callable
from enum import IntEnum, StrEnum, auto
from functools import wraps
from typing import Final, NamedTuple

import typer
from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
)
from rich.table import Table
from rich.text import Text

import boite as bt

app = typer.Typer(help="Box benchmarks: boxed vs bare Python")


class Runs(IntEnum):
    """Cost category for benchmarks, determining iteration counts."""

    CHEAP = 5_000
    NORMAL = 2_500
    EXPENSIVE = 500


class Implementation(StrEnum):
    """Implementation type for benchmarks."""

    BOXED = auto()
    BARE = auto()


class BenchmarkResult(NamedTuple):
    """Result of a single benchmark comparison."""

    category: str
    name: str
    boxed_median: float
    bare_median: float
    overhead: float


class BenchmarkMetadata(NamedTuple):
    """Metadata for a benchmark function."""

    category: str
    name: str
    cost: Runs
    implementation: Implementation


TEST_VALUE: Final[int] = 42
# Every third entry is None, every fifth one does not parse
RAW_DATA: Final = [
    None if x % 3 == 0 else ("x" if x % 5 == 0 else str(x)) for x in range(100)
]
type BenchFn = Callable[[], object]

CONSOLE: Final = Console()
RESULTS: list[BenchmarkResult] = []
BENCHMARK_REGISTRY: dict[BenchFn, BenchmarkMetadata] = {}


def bench(
    category: str,
    name: str,
    implementation: Implementation,
    cost: Runs = Runs.CHEAP,
) -> Callable[[BenchFn], BenchFn]:
    """Decorator to register a benchmark function with its metadata.

    Args:
        category (str): The category of the benchmark (e.g., "Construction").
        name (str): The name of the benchmark (e.g., "Present(value)").
        implementation (Implementation): Whether the function uses `Box` or bare Python.
        cost (Runs): The cost category, defaults to CHEAP.

    Returns:
        Callable: The decorated function.
    """

    def decorator(func: BenchFn) -> BenchFn:
        BENCHMARK_REGISTRY[func] = BenchmarkMetadata(
            category=category, name=name, cost=cost, implementation=implementation
        )

        @wraps(func)
        def wrapper() -> object:
            return func()

        return wrapper

    return decorator


def _parse(raw: str | None) -> int | None:
    return None if raw is None else int(raw)


@bench("Construction", "from_optional", Implementation.BOXED)
def bench_boxed_from_optional() -> object:
    return bt.Box.from_optional(TEST_VALUE)


@bench("Construction", "from_optional", Implementation.BARE)
def bench_bare_from_optional() -> object:
    return TEST_VALUE if TEST_VALUE is not None else None


@bench("Construction", "wrap(raise)", Implementation.BOXED)
def bench_boxed_wrap_raise() -> object:
    return bt.Box.wrap(int, "x")


@bench("Construction", "wrap(raise)", Implementation.BARE)
def bench_bare_wrap_raise() -> object:
    try:
        return int("x")
    except ValueError as exc:
        return exc


@bench("Transformation", "map chain", Implementation.BOXED)
def bench_boxed_map_chain() -> object:
    return bt.Present(TEST_VALUE).map(lambda x: x + 1).map(lambda x: x * 2).get_or(0)


@bench("Transformation", "map chain", Implementation.BARE)
def bench_bare_map_chain() -> object:
    value: int | None = TEST_VALUE
    if value is not None:
        value = (value + 1) * 2
    return value if value is not None else 0


@bench("Pipeline", "parse and sum", Implementation.BOXED, Runs.EXPENSIVE)
def bench_boxed_parse_and_sum() -> object:
    return sum(bt.flatten(bt.Box.wrap(_parse, raw) for raw in RAW_DATA))


@bench("Pipeline", "parse and sum", Implementation.BARE, Runs.EXPENSIVE)
def bench_bare_parse_and_sum() -> object:
    total = 0
    for raw in RAW_DATA:
        if raw is None:
            continue
        try:
            total += int(raw)
        except ValueError:
            continue
    return total


def bench_one(boxed_fn: BenchFn, bare_fn: BenchFn) -> None:
    """Run a single benchmark multiple times and store median results.

    Args:
        boxed_fn (Callable): The `Box` implementation benchmark function.
        bare_fn (Callable): The bare Python implementation benchmark function.
    """
    meta = BENCHMARK_REGISTRY[boxed_fn]
    n_calls = meta.cost.value // 10
    boxed_times = [
        timeit.timeit(boxed_fn, number=n_calls) for _ in range(meta.cost.value // 10)
    ]
    bare_times = [
        timeit.timeit(bare_fn, number=n_calls) for _ in range(meta.cost.value // 10)
    ]
    boxed_median = statistics.median(boxed_times)
    bare_median = statistics.median(bare_times)
    RESULTS.append(
        BenchmarkResult(
            category=meta.category,
            name=meta.name,
            boxed_median=boxed_median,
            bare_median=bare_median,
            overhead=boxed_median / bare_median,
        )
    )


def _run_all_benchmarks() -> None:
    """Run all registered benchmarks by pairing boxed and bare implementations."""
    benchmark_pairs: dict[tuple[str, str], dict[Implementation, BenchFn]] = {}
    for func, meta in BENCHMARK_REGISTRY.items():
        benchmark_pairs.setdefault((meta.category, meta.name), {})[
            meta.implementation
        ] = func

    benchmarks: list[tuple[BenchFn, BenchFn]] = []
    for (category, name), impls in benchmark_pairs.items():
        if Implementation.BOXED not in impls or Implementation.BARE not in impls:
            CONSOLE.print(
                f"[yellow]Warning: Skipping {category}/{name} - missing implementation[/yellow]"
            )
            continue
        benchmarks.append((impls[Implementation.BOXED], impls[Implementation.BARE]))

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeRemainingColumn(),
        console=CONSOLE,
    ) as progress:
        task = progress.add_task("[cyan]Running benchmarks...", total=len(benchmarks))
        for boxed_fn, bare_fn in benchmarks:
            meta = BENCHMARK_REGISTRY[boxed_fn]
            progress.update(task, description=f"[cyan]{meta.category}: {meta.name}")
            bench_one(boxed_fn, bare_fn)
            progress.advance(task)


def _display_results() -> None:
    """Display benchmark results in a formatted table."""
    if not RESULTS:
        CONSOLE.print("[yellow]No benchmark ran.[/yellow]")
        return
    table = Table(title="Box Benchmark Results (boxed vs bare)")
    table.add_column("Category", style="cyan")
    table.add_column("Operation", style="white")
    table.add_column("Boxed (s, median)", justify="right", style="green")
    table.add_column("Bare (s, median)", justify="right", style="yellow")
    table.add_column("Overhead", justify="right")

    for result in RESULTS:
        overhead_style = "green bold" if result.overhead < 2 else "red bold"
        table.add_row(
            result.category,
            result.name,
            f"{result.boxed_median:.4f}",
            f"{result.bare_median:.4f}",
            Text(f"{result.overhead:.2f}x", style=overhead_style),
        )

    CONSOLE.print(table)
    CONSOLE.print()
    median_overhead = statistics.median([r.overhead for r in RESULTS])
    CONSOLE.print(
        Text("Median overhead: ", style="bold")
        + Text(f"{median_overhead:.2f}x", style="cyan bold")
    )


@app.command()
def run(
    category: str | None = typer.Option(None, help="Only run this category."),
) -> None:
    """Run the benchmarks and display results."""
    if category is not None:
        for func in [f for f, m in BENCHMARK_REGISTRY.items() if m.category != category]:
            del BENCHMARK_REGISTRY[func]
    CONSOLE.print(Text("Running Box benchmarks...", style="bold blue"))
    CONSOLE.print()
    _run_all_benchmarks()
    _display_results()


if __name__ == "__main__":
    app()
