from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from lazylet.testing.example import Example
    from lazylet.testing.runner import Runner


EXAMPLE_CONTEXT: ContextVar[Example | None] = ContextVar("example_context", default=None)
RUN_CONTEXT: ContextVar[RunContext | None] = ContextVar("run_context", default=None)


@dataclass(frozen=True, slots=True)
class RunContext:
    """Context shared by every example of a single run.

    Attributes
    ----------
    runner
        Runner executing the examples.
    """

    runner: Runner


def current_example() -> Example | None:
    """Return the example instance running in the current task, if any."""
    return EXAMPLE_CONTEXT.get()


@contextmanager
def example_context_scope(example: Example) -> Iterator[None]:
    token = EXAMPLE_CONTEXT.set(example)
    try:
        yield
    finally:
        EXAMPLE_CONTEXT.reset(token)


@contextmanager
def run_context_scope(ctx: RunContext) -> Iterator[None]:
    token = RUN_CONTEXT.set(ctx)
    try:
        yield
    finally:
        RUN_CONTEXT.reset(token)
