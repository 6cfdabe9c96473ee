"""Groups, example instances and a minimal runner for lazily computed values."""

from .example import Example, ExampleBody
from .group import DescribedSubject, Group, hooks_for, register_before_each
from .runner import ExampleResult, Runner, RunResult, collect, run, run_example


__all__ = [
    "DescribedSubject",
    "Example",
    "ExampleBody",
    "ExampleResult",
    "Group",
    "RunResult",
    "Runner",
    "collect",
    "hooks_for",
    "register_before_each",
    "run",
    "run_example",
]
