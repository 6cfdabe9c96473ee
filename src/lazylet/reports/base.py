"""Base reporter protocol for example run output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from lazylet.testing.example import ExampleBody
    from lazylet.testing.runner import ExampleResult, RunResult


class Reporter(Protocol):
    """Protocol defining the interface for run reporters.

    All methods are async so I/O-bound reporters fit in. Sync reporters can
    implement them without awaiting anything.
    """

    async def on_collection_complete(self, examples: list[ExampleBody]) -> None:
        """Called once the examples to run are known."""
        ...

    async def on_example_complete(self, result: ExampleResult) -> None:
        """Called after each example completes."""
        ...

    async def on_run_complete(self, run_result: RunResult) -> None:
        """Called after all examples complete."""
        ...
