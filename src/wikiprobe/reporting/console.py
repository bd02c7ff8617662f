"""Console progress and summary output for harness runs."""
from __future__ import annotations

import threading
import time
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table

from wikiprobe.models.result import SuiteStatistics


class ConsoleReporter:
    """Renders scenario progress and keeps pass/fail totals.

    Scenarios may report from several threads; the counters and each printed
    line are guarded by one lock.
    """

    def __init__(self, console: Console | None = None, output_path: str = "./Reports") -> None:
        self.console = console or Console()
        self.output_path = output_path
        self._lock = threading.Lock()
        self._total = 0
        self._passed = 0
        self._failed = 0
        self._results: dict[str, tuple[bool, float]] = {}
        self._started_at = datetime.now()
        self._started_perf = time.perf_counter()

    def initialize_suite(self, title: str = "Wikipedia Automation Test Suite") -> None:
        """Reset counters and print the suite banner."""
        with self._lock:
            self._total = 0
            self._passed = 0
            self._failed = 0
            self._results.clear()
            self._started_at = datetime.now()
            self._started_perf = time.perf_counter()
            self.console.print(Rule(f"[bold cyan]{escape(title)}[/]"))
            self.console.print()

    def _line(self, style: str, message: str, suffix: str = "", branch: str = "├─") -> None:
        with self._lock:
            self.console.print(f"[{style}]    {branch} {escape(message)}{suffix}[/]")

    def info(self, message: str) -> None:
        self._line("grey50", message)

    def success(self, message: str) -> None:
        self._line("green", message, " ✓")

    def error(self, message: str) -> None:
        self._line("red", message, " ✗")

    def warning(self, message: str) -> None:
        self._line("yellow", message, " ⚠")

    def detail(self, message: str) -> None:
        self._line("grey50", message, branch="└─")

    def test_start(self, name: str) -> None:
        with self._lock:
            self._total += 1
            self.console.print()
            self.console.print(f"[bold blue]\\[▶] Running:[/] [white]{escape(name)}[/]")

    def test_end(self, name: str, passed: bool, duration: float = 0.0) -> None:
        with self._lock:
            self._results[name] = (passed, duration)
            if passed:
                self._passed += 1
                self.console.print("[bold green]\\[✓] PASSED[/]")
            else:
                self._failed += 1
                self.console.print("[bold red]\\[✗] FAILED[/]")

    @contextmanager
    def progress(self, message: str) -> Iterator[None]:
        """Show a spinner while the block runs."""
        with self.console.status(escape(message), spinner="dots", spinner_style="cyan"):
            yield

    def get_statistics(self) -> SuiteStatistics:
        with self._lock:
            return SuiteStatistics(
                total=self._total,
                passed=self._passed,
                failed=self._failed,
                duration=time.perf_counter() - self._started_perf,
            )

    def display_breakdown(self) -> None:
        """Print a per-scenario status table."""
        with self._lock:
            if not self._results:
                return
            table = Table(box=box.ROUNDED, border_style="grey50")
            table.add_column("[bold]Test Name[/]", justify="left")
            table.add_column("[bold]Status[/]", justify="center")
            table.add_column("[bold]Duration[/]", justify="right")
            for name, (passed, duration) in self._results.items():
                status = "[green]✓ PASSED[/]" if passed else "[red]✗ FAILED[/]"
                table.add_row(escape(name), status, f"[grey50]{duration:.2f}s[/]")

            self.console.print()
            self.console.print(Panel(
                table,
                title="[bold yellow]Test Results Breakdown[/]",
                box=box.ROUNDED,
                border_style="yellow",
                padding=(0, 1),
            ))

    def display_summary(self) -> SuiteStatistics:
        """Print the totals panel and return the statistics shown."""
        stats = self.get_statistics()
        ended_at = datetime.now()

        with self._lock:
            table = Table(box=box.ROUNDED, show_header=False)
            table.add_column("Metric")
            table.add_column("Value", justify="right")
            table.add_row("[blue]Total Tests[/]", f"[bold]{stats.total}[/]")
            table.add_row("[green]Passed[/]", f"[bold green]{stats.passed}[/]")
            table.add_row("[red]Failed[/]", f"[bold red]{stats.failed}[/]")
            table.add_row("[cyan]Success Rate[/]", f"[bold cyan]{stats.success_rate:.1f}%[/]")
            table.add_row("[yellow]Duration[/]", f"[bold]{stats.duration:.2f}s[/]")
            table.add_row("[grey50]Start Time[/]", f"[grey50]{self._started_at:%H:%M:%S}[/]")
            table.add_row("[grey50]End Time[/]", f"[grey50]{ended_at:%H:%M:%S}[/]")

            self.console.print()
            self.console.print(Panel(
                table,
                title="[bold cyan]Test Execution Summary[/]",
                box=box.DOUBLE,
                border_style="cyan",
                padding=(1, 2),
            ))
            self.console.print()
            if stats.failed == 0:
                self.console.print("[bold green]✓ All tests passed successfully![/]")
            else:
                self.console.print(
                    f"[bold red]✗ {stats.failed} test(s) failed. Check the logs for details.[/]"
                )
            self.console.print()
            self.console.print(f"[grey50]Reports generated in:[/] [cyan]{escape(self.output_path)}[/]")

        return stats
