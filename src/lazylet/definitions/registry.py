"""Per-group definition tables and override-with-super resolution.

Every group owns a plain ``dict`` of :class:`Definition` objects keyed by the
name they are visible under. Lookups walk from a group out to the root and
stop at the first match, so a child's definition shadows its parent's without
removing it. A computation reaches the shadowed definition through a
super-call, which :func:`resolve_super` answers relative to the group that
*owns* the running definition.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol

from lazylet.errors import NoSuperDefinitionError, UndefinedNameError

if TYPE_CHECKING:
    from collections.abc import Iterator


logger = logging.getLogger(__name__)


class Scope(Protocol):
    """What the registry needs from a group.

    ``enclosing`` is the next scope searched when a name is not defined
    locally. For a root group it is the hidden scope holding the implicit
    subject.
    """

    @property
    def enclosing(self) -> Scope | None: ...

    @property
    def full_description(self) -> str: ...

    definitions: dict[str, Definition]


@dataclass(frozen=True, slots=True)
class Definition:
    """A named computation registered on a group.

    Attributes
    ----------
    name
        Name used for super lookups. For aliases this is the target's name.
    compute
        Callable taking either nothing or the example instance.
    owner
        Group the computation was registered on.
    cache_key
        Cache slot the computed value is stored under. Aliases share the
        slot of the definition they are bound to.
    eager
        Whether a before-each hook forces this value.
    """

    name: str
    compute: Callable[..., Any]
    owner: Scope = field(repr=False, compare=False)
    cache_key: str = ""
    eager: bool = False
    takes_example: bool = field(default=True, repr=False)

    def __post_init__(self) -> None:
        if not self.cache_key:
            object.__setattr__(self, "cache_key", self.name)

    def __call__(self, example: Any) -> Any:
        if self.takes_example:
            return self.compute(example)
        return self.compute()


def takes_example(fn: Callable[..., Any]) -> bool:
    """True when ``fn`` has a required positional parameter to bind the example to."""
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        return False
    for param in sig.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return True
        if (
            param.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
            and param.default is inspect.Parameter.empty
        ):
            return True
    return False


_reserved_names: set[str] = set()


def reserve_names(*names: str) -> None:
    """Refuse ``names`` as definition names; they are taken by the example accessor."""
    _reserved_names.update(names)


def _check_name(name: Any) -> None:
    if not isinstance(name, str) or not name.isidentifier():
        msg = f"invalid definition name: {name!r}"
        raise ValueError(msg)
    if name in _reserved_names:
        msg = f"reserved definition name: {name!r} is an attribute of the example"
        raise ValueError(msg)


def _chain(group: Scope | None) -> Iterator[Scope]:
    while group is not None:
        yield group
        group = group.enclosing


def lookup(group: Scope | None, name: str) -> Definition | None:
    """Nearest definition of ``name`` from ``group`` outward, or None."""
    for scope in _chain(group):
        definition = scope.definitions.get(name)
        if definition is not None:
            return definition
    return None


def define(
    group: Scope,
    name: str,
    computation: Callable[..., Any],
    *,
    eager: bool = False,
) -> Definition:
    """Install ``computation`` as the definition of ``name`` local to ``group``.

    A previous local definition of ``name`` is replaced. Definitions on
    ancestors and descendants are untouched; an ancestor's definition stays
    reachable from ``computation`` through a super-call.
    """
    _check_name(name)
    if not callable(computation):
        msg = f"computation for {name!r} must be callable, got {type(computation).__name__}"
        raise TypeError(msg)

    definition = Definition(
        name=name,
        compute=computation,
        owner=group,
        eager=eager,
        takes_example=takes_example(computation),
    )
    if name in group.definitions:
        logger.debug("replacing %r in %r", name, group.full_description)
    elif lookup(group.enclosing, name) is not None:
        logger.debug("overriding %r in %r", name, group.full_description)
    else:
        logger.debug("defining %r in %r", name, group.full_description)
    group.definitions[name] = definition
    return definition


def resolve(group: Scope, name: str) -> Definition:
    """Return the nearest definition of ``name`` visible from ``group``.

    Raises:
        UndefinedNameError: If no group in the chain defines ``name``.
    """
    definition = lookup(group, name)
    if definition is None:
        raise UndefinedNameError(name, group.full_description, defined_names(group))
    return definition


def resolve_super(definition: Definition) -> Definition:
    """Return the definition ``definition`` shadows, one group outward from its owner.

    Raises:
        NoSuperDefinitionError: If no enclosing group defines the name.
    """
    shadowed = lookup(definition.owner.enclosing, definition.name)
    if shadowed is None:
        raise NoSuperDefinitionError(definition.name, definition.owner.full_description)
    return shadowed


def define_alias(group: Scope, alias_name: str, target_name: str) -> Definition:
    """Make ``alias_name`` resolve to what ``target_name`` resolves to right now.

    The binding is static: later redefinitions of ``target_name`` do not move
    the alias. Alias and target share one cache entry.
    """
    _check_name(alias_name)
    target = resolve(group, target_name)
    logger.debug("aliasing %r to %r in %r", alias_name, target_name, group.full_description)
    group.definitions[alias_name] = target
    return target


def defined_names(group: Scope) -> list[str]:
    """Every name visible from ``group``, nearest group first."""
    names: list[str] = []
    for scope in _chain(group):
        for name in scope.definitions:
            if name not in names:
                names.append(name)
    return names


__all__ = [
    "Definition",
    "Scope",
    "define",
    "define_alias",
    "defined_names",
    "lookup",
    "reserve_names",
    "resolve",
    "resolve_super",
    "takes_example",
]
