"""Minimal example runner with a worker pool.

Each example gets a fresh :class:`~lazylet.testing.example.Example`, so no two
runs ever share cached values. Hooks and bodies may be sync or async.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from lazylet.context import RUN_CONTEXT, RunContext, example_context_scope, run_context_scope
from lazylet.definitions.registry import takes_example
from lazylet.errors import LazyLetError
from lazylet.testing.example import Example, ExampleBody
from lazylet.testing.group import Group, hooks_for
from lazylet.types import Status

if TYPE_CHECKING:
    from lazylet.config import LazyLetConfig
    from lazylet.reports.base import Reporter


logger = logging.getLogger(__name__)


@dataclass
class ExampleResult:
    """Outcome of running one example."""

    full_description: str
    status: Status = Status.IDLE
    duration_ms: float = 0
    error: BaseException | None = None
    computed: list[str] = field(default_factory=list)


@dataclass
class RunResult:
    """Aggregated outcome of a run."""

    results: list[ExampleResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return self._count(Status.PASSED)

    @property
    def failed(self) -> int:
        return self._count(Status.FAILED)

    @property
    def errors(self) -> int:
        return self._count(Status.ERROR)

    @property
    def ok(self) -> bool:
        return self.failed == 0 and self.errors == 0

    def _count(self, status: Status) -> int:
        return sum(1 for result in self.results if result.status is status)


@dataclass
class _Job:
    group: Group
    body: ExampleBody
    result: ExampleResult | None = None


async def _call(fn: Any, example: Example) -> Any:
    value = fn(example) if takes_example(fn) else fn()
    if inspect.isawaitable(value):
        value = await value
    return value


def collect(groups: Iterable[Group]) -> list[tuple[Group, ExampleBody]]:
    """Every (group, example) pair under ``groups``, in declaration order."""
    return [(group, body) for root in groups for group in root.walk() for body in group.examples]


async def run_example(group: Group, body: ExampleBody) -> ExampleResult:
    """Run one example on a fresh instance and discard its cache afterwards."""
    example = Example(group, body.description)
    result = ExampleResult(full_description=example.full_description, status=Status.IN_PROGRESS)
    start = time.perf_counter()

    with example_context_scope(example):
        try:
            for hook in hooks_for(group):
                await _call(hook, example)
            if body.fn is not None:
                await _call(body.fn, example)
            result.status = Status.PASSED
        except AssertionError as e:
            result.status = Status.FAILED
            result.error = e
        except LazyLetError as e:
            logger.warning("%s: %s", example.full_description, e)
            result.status = Status.ERROR
            result.error = e
        except Exception as e:
            result.status = Status.ERROR
            result.error = e
        finally:
            result.computed = example.cache.names()
            result.duration_ms = (time.perf_counter() - start) * 1000
            example.discard()

    return result


class Runner:
    """Executes examples using a worker pool pattern."""

    DEFAULT_MAX_CONCURRENCY = 10

    def __init__(
        self,
        *,
        concurrency: int = 1,
        reporters: list[Reporter] | None = None,
    ) -> None:
        self.concurrency = concurrency if concurrency > 0 else self.DEFAULT_MAX_CONCURRENCY
        self.reporters = list(reporters or [])

    @classmethod
    def from_config(cls, config: LazyLetConfig) -> Runner:
        from lazylet.reports.registry import resolve_reporters

        return cls(
            concurrency=config.concurrency,
            reporters=resolve_reporters(config.reporters, verbosity=config.verbosity),
        )

    async def run(self, groups: Iterable[Group]) -> RunResult:
        """Run every example under ``groups`` and return the collected results."""
        pairs = collect(groups)
        for reporter in self.reporters:
            await reporter.on_collection_complete([body for _, body in pairs])

        jobs = [_Job(group, body) for group, body in pairs]
        queue: asyncio.Queue[_Job | None] = asyncio.Queue()

        with run_context_scope(RunContext(runner=self)):
            workers = [asyncio.create_task(self._worker(queue)) for _ in range(self.concurrency)]
            for job in jobs:
                await queue.put(job)
            for _ in workers:
                await queue.put(None)
            await asyncio.gather(*workers)

        run_result = RunResult(results=[job.result for job in jobs if job.result is not None])
        for reporter in self.reporters:
            await reporter.on_run_complete(run_result)
        return run_result

    async def _worker(self, queue: asyncio.Queue[_Job | None]) -> None:
        """Worker that processes queued examples."""
        run_context = RUN_CONTEXT.get()
        assert run_context is not None

        while True:
            job = await queue.get()
            if job is None:
                break

            job.result = await run_example(job.group, job.body)
            for reporter in run_context.runner.reporters:
                await reporter.on_example_complete(job.result)


def run(groups: Iterable[Group], **kwargs: Any) -> RunResult:
    """Run ``groups`` synchronously with a new :class:`Runner`."""
    return asyncio.run(Runner(**kwargs).run(groups))


__all__ = ["ExampleResult", "RunResult", "Runner", "collect", "run", "run_example"]
