"""Reporter registry: reporters are found by class name or by import string.

Import strings take the form ``"package.module:ClassName"`` or
``"package.module.ClassName"``. Anything resolved must provide the hooks of
:class:`~lazylet.reports.base.Reporter`.
"""

from __future__ import annotations

import importlib
from typing import Any, TypeVar


T = TypeVar("T", bound=type)

REPORTER_HOOKS = ("on_collection_complete", "on_example_complete", "on_run_complete")

_reporter_registry: dict[str, type] = {}


def _check_reporter(cls: Any, origin: str) -> type:
    if not isinstance(cls, type):
        msg = f"{origin} is not a class"
        raise TypeError(msg)
    missing = [hook for hook in REPORTER_HOOKS if not callable(getattr(cls, hook, None))]
    if missing:
        msg = f"{origin} is not a Reporter (missing {', '.join(missing)})"
        raise TypeError(msg)
    return cls


def register_builtin(cls: T) -> T:
    """Register a reporter class under its class name."""
    _reporter_registry[cls.__name__] = _check_reporter(cls, cls.__name__)
    return cls


def get_reporter_registry() -> dict[str, type]:
    return _reporter_registry


def _split_import_path(import_path: str) -> tuple[str, str]:
    separator = ":" if ":" in import_path else "."
    module_path, _, class_name = import_path.rpartition(separator)
    if not module_path or not class_name:
        msg = f"Invalid import path: {import_path}"
        raise ValueError(msg)
    return module_path, class_name


def _find_reporter_class(name: str) -> type:
    if name in _reporter_registry:
        return _reporter_registry[name]
    if ":" not in name and "." not in name:
        available = ", ".join(sorted(_reporter_registry))
        msg = f"Unknown reporter: {name}. Available: {available}"
        raise ValueError(msg)

    module_path, class_name = _split_import_path(name)
    module = importlib.import_module(module_path)
    return _check_reporter(getattr(module, class_name, None), name)


def resolve_reporter(name: str, **kwargs: Any) -> Any:
    """Instantiate a reporter by registry name or import string.

    Raises:
        ValueError: If the name is neither registered nor an import string.
        TypeError: If the imported object does not implement the reporter hooks.
    """
    return _find_reporter_class(name)(**kwargs)


def resolve_reporters(names: list[str], **kwargs: Any) -> list[Any]:
    return [resolve_reporter(name, **kwargs) for name in names]


__all__ = [
    "REPORTER_HOOKS",
    "get_reporter_registry",
    "register_builtin",
    "resolve_reporter",
    "resolve_reporters",
]
