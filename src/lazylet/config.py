"""Configuration loaded from the ``[tool.lazylet]`` table of ``pyproject.toml``."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


logger = logging.getLogger(__name__)

PYPROJECT = "pyproject.toml"


class LazyLetConfig(BaseModel):
    """Settings for running example groups.

    Attributes:
    ----------
    concurrency : int
        Number of examples run at once (0 for the runner's maximum).
    verbosity : int
        Output level passed to reporters.
    path_separator : str
        Separator between steps of an ``its`` attribute path.
    instantiate_described : bool
        Whether the implicit subject instantiates a described class.
    reporters : list[str]
        Reporter names or import strings.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    concurrency: int = Field(default=1, ge=0)
    verbosity: int = 0
    path_separator: str = Field(default=".", min_length=1)
    instantiate_described: bool = True
    reporters: list[str] = Field(default_factory=lambda: ["ConsoleReporter"])


DEFAULT_CONFIG = LazyLetConfig()


def find_pyproject(start: Path | str | None = None) -> Path | None:
    """Return the nearest ``pyproject.toml`` at or above ``start``."""
    path = Path(start) if start is not None else Path.cwd()
    path = path.resolve()
    for directory in (path, *path.parents):
        candidate = directory / PYPROJECT
        if candidate.is_file():
            return candidate
    return None


def load_config(start: Path | str | None = None) -> LazyLetConfig:
    """Load configuration, falling back to :data:`DEFAULT_CONFIG`.

    Raises:
        pydantic.ValidationError: If the table holds unknown keys or bad values.
    """
    pyproject = find_pyproject(start)
    if pyproject is None:
        return DEFAULT_CONFIG

    with pyproject.open("rb") as fh:
        data = tomllib.load(fh)

    table = data.get("tool", {}).get("lazylet")
    if table is None:
        return DEFAULT_CONFIG

    logger.debug("loading configuration from %s", pyproject)
    return LazyLetConfig.model_validate(table)


__all__ = ["DEFAULT_CONFIG", "LazyLetConfig", "find_pyproject", "load_config"]
