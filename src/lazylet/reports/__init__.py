from .base import Reporter
from .console import ConsoleReporter
from .registry import get_reporter_registry, register_builtin, resolve_reporter, resolve_reporters

__all__ = [
    "ConsoleReporter",
    "Reporter",
    "get_reporter_registry",
    "register_builtin",
    "resolve_reporter",
    "resolve_reporters",
]
