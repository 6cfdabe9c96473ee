"""Rich console output for example runs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from lazylet.reports.registry import register_builtin
from lazylet.types import Status

if TYPE_CHECKING:
    from lazylet.testing.example import ExampleBody
    from lazylet.testing.runner import ExampleResult, RunResult


_STYLES = {
    Status.PASSED: ("green", "PASS"),
    Status.FAILED: ("red", "FAIL"),
    Status.ERROR: ("bold red", "ERROR"),
}


@register_builtin
class ConsoleReporter:
    """Prints one line per example and a summary."""

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        self.console = console or Console()
        self.verbosity = verbosity

    async def on_collection_complete(self, examples: list[ExampleBody]) -> None:
        if self.verbosity > 0:
            self.console.print(f"collected {len(examples)} example(s)")

    async def on_example_complete(self, result: ExampleResult) -> None:
        style, label = _STYLES.get(result.status, ("yellow", result.status.value.upper()))
        if self.verbosity < 0 and result.status is Status.PASSED:
            return
        line = f"[{style}]{label}[/{style}] {result.full_description}"
        if self.verbosity > 1:
            line += f" [dim]({result.duration_ms:.1f} ms)[/dim]"
        self.console.print(line, highlight=False)
        if result.error is not None:
            self.console.print(f"    {type(result.error).__name__}: {result.error}", style=style, markup=False)
        if self.verbosity > 1 and result.computed:
            self.console.print(f"    computed: {', '.join(result.computed)}", style="dim", markup=False)

    async def on_run_complete(self, run_result: RunResult) -> None:
        style = "green" if run_result.ok else "red"
        self.console.print(
            f"[{style}]{run_result.passed} passed, {run_result.failed} failed, "
            f"{run_result.errors} errors[/{style}]"
        )
