"""Shared fixtures for unit tests."""

import pytest

from lazylet import Group


class NullReporter:
    """Silent reporter that records what it was told."""

    def __init__(self) -> None:
        self.collected = 0
        self.completed: list = []
        self.run_result = None

    async def on_collection_complete(self, examples) -> None:
        self.collected = len(examples)

    async def on_example_complete(self, result) -> None:
        self.completed.append(result)

    async def on_run_complete(self, run_result) -> None:
        self.run_result = run_result


@pytest.fixture
def null_reporter() -> NullReporter:
    """Provide a silent reporter for tests."""
    return NullReporter()


@pytest.fixture
def root() -> Group:
    """A root group with no described object."""
    return Group("root")
