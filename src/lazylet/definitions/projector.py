"""Projection of an enclosing subject onto one of its attributes or keys.

Used by ``Group.its``: the child group's subject is the parent's subject with
an accessor path applied. Paths come in three shapes::

    "owner.name"      # attribute/key chain, applied left to right
    "phones.0.strip"  # digits index a sequence, methods are called
    ["a", "b"]        # one structured lookup: value["a", "b"]
    0                 # one key lookup: value[0]
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Hashable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from lazylet.errors import ProjectionAccessorMissingError


@dataclass(frozen=True, slots=True)
class Step:
    """One accessor applied to an intermediate value."""

    accessor: Any
    is_key: bool = False

    def apply(self, value: Any, path: Any) -> Any:
        if self.is_key:
            try:
                return value[self.accessor]
            except (KeyError, IndexError, TypeError) as exc:
                raise ProjectionAccessorMissingError(self.accessor, path, type(value)) from exc

        name = self.accessor
        if isinstance(value, Mapping) and name in value:
            return value[name]
        if name.isdigit() and isinstance(value, Sequence):
            try:
                return value[int(name)]
            except IndexError as exc:
                raise ProjectionAccessorMissingError(name, path, type(value)) from exc
        try:
            attribute = getattr(value, name)
        except AttributeError as exc:
            raise ProjectionAccessorMissingError(name, path, type(value)) from exc
        # Bound methods such as "keys" are called with no arguments.
        if inspect.ismethod(attribute) or inspect.isbuiltin(attribute):
            return attribute()
        return attribute


def parse_path(path: Any, separator: str = ".") -> tuple[Step, ...]:
    """Split ``path`` into the steps :func:`project` applies."""
    if isinstance(path, str):
        parts = path.split(separator)
        if not all(parts):
            msg = f"invalid projection path: {path!r}"
            raise ValueError(msg)
        return tuple(Step(part) for part in parts)

    if isinstance(path, (list, tuple)):
        if not path:
            msg = "projection key list must not be empty"
            raise ValueError(msg)
        keys = path[0] if len(path) == 1 else tuple(path)
        return (Step(keys, is_key=True),)

    if not isinstance(path, Hashable):
        msg = f"projection path must be a string, a key list or a hashable key, got {path!r}"
        raise TypeError(msg)
    return (Step(path, is_key=True),)


def project(
    enclosing_subject_fn: Callable[[Any], Any],
    path: Any,
    *,
    separator: str = ".",
) -> Callable[[Any], Any]:
    """Build a computation projecting the enclosing subject along ``path``.

    The returned callable takes the example instance, evaluates
    ``enclosing_subject_fn(example)`` and applies each step in order. It does
    not memoize anything itself.
    """
    steps = parse_path(path, separator)

    def projection(example: Any) -> Any:
        value = enclosing_subject_fn(example)
        for step in steps:
            value = step.apply(value, path)
        return value

    projection.__qualname__ = f"its({path!r})"
    return projection


__all__ = ["Step", "parse_path", "project"]
