"""Named-value definitions and their resolution through the group chain."""

from .projector import Step, parse_path, project
from .registry import (
    Definition,
    define,
    define_alias,
    defined_names,
    lookup,
    reserve_names,
    resolve,
    resolve_super,
    takes_example,
)


__all__ = [
    "Definition",
    "Step",
    "define",
    "define_alias",
    "defined_names",
    "lookup",
    "parse_path",
    "project",
    "reserve_names",
    "resolve",
    "resolve_super",
    "takes_example",
]
