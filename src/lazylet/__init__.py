"""lazylet - scoped, lazily computed named values for example groups."""

from .config import DEFAULT_CONFIG, LazyLetConfig, load_config
from .context import current_example
from .definitions import define, define_alias, project, resolve
from .errors import (
    LazyLetError,
    NoSuperDefinitionError,
    ProjectionAccessorMissingError,
    SelfReferentialDefinitionError,
    UndefinedNameError,
)
from .memo import MemoCache, get_or_compute
from .reports import ConsoleReporter
from .testing import Example, Group, Runner, RunResult, register_before_each, run
from .types import SUBJECT
from .version import __version__


__all__ = [
    # Core
    "Group",
    "Example",
    "define",
    "define_alias",
    "resolve",
    "project",
    "MemoCache",
    "get_or_compute",
    "register_before_each",
    "current_example",
    "SUBJECT",
    # Running
    "Runner",
    "RunResult",
    "run",
    "ConsoleReporter",
    # Config
    "LazyLetConfig",
    "DEFAULT_CONFIG",
    "load_config",
    # Errors
    "LazyLetError",
    "UndefinedNameError",
    "NoSuperDefinitionError",
    "SelfReferentialDefinitionError",
    "ProjectionAccessorMissingError",
]
