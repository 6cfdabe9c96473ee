from .context import (
    EXAMPLE_CONTEXT,
    RUN_CONTEXT,
    RunContext,
    current_example,
    example_context_scope,
    run_context_scope,
)

__all__ = [
    "EXAMPLE_CONTEXT",
    "RUN_CONTEXT",
    "RunContext",
    "current_example",
    "example_context_scope",
    "run_context_scope",
]
