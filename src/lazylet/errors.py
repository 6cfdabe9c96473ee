"""Error types raised while resolving and computing named values."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class LazyLetError(Exception):
    """Base class for faults raised by the value system."""


class UndefinedNameError(LazyLetError, LookupError):
    """Raised when a name has no definition anywhere in the group chain."""

    def __init__(
        self,
        name: str,
        group_description: str,
        available: Sequence[str] = (),
    ) -> None:
        self.name = name
        self.group_description = group_description
        self.available = list(available)

        message = f"undefined name {name!r} in group {group_description!r}"
        if self.available:
            message += f" (defined: {', '.join(self.available)})"
        super().__init__(message)


class NoSuperDefinitionError(LazyLetError):
    """Raised when a computation calls super() but no ancestor defines the name."""

    def __init__(self, name: str, group_description: str) -> None:
        self.name = name
        self.group_description = group_description
        super().__init__(
            f"super() called from {name!r} defined in group {group_description!r}, "
            "but no enclosing group defines it"
        )


class SelfReferentialDefinitionError(LazyLetError):
    """Raised when a computation requests its own not-yet-computed value."""

    def __init__(self, name: str, chain: Sequence[str]) -> None:
        self.name = name
        self.chain = list(chain)
        cycle = " -> ".join([*self.chain, name])
        super().__init__(f"definition of {name!r} refers to itself: {cycle}")


class ProjectionAccessorMissingError(LazyLetError):
    """Raised when a projection step cannot be applied to its intermediate value."""

    def __init__(self, step: Any, path: Any, value_type: type) -> None:
        self.step = step
        self.path = path
        self.value_type = value_type
        super().__init__(
            f"cannot apply {step!r} to {value_type.__name__} "
            f"while projecting {path!r}"
        )


__all__ = [
    "LazyLetError",
    "NoSuperDefinitionError",
    "ProjectionAccessorMissingError",
    "SelfReferentialDefinitionError",
    "UndefinedNameError",
]
