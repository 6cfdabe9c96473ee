"""Per-example memoization of named values.

A :class:`MemoCache` belongs to exactly one example instance. Each name is
computed at most once; later reads return the stored object itself. There is
no eviction: the cache lives until its example is discarded.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol

from lazylet.errors import SelfReferentialDefinitionError

if TYPE_CHECKING:
    from collections.abc import Iterator


logger = logging.getLogger(__name__)


class MemoCache:
    """Mapping from name to computed value for a single example instance."""

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}
        # Names whose computation has started but not returned, in call order.
        self._pending: list[str] = []

    def get_or_compute(self, name: str, compute_fn: Callable[[], Any]) -> Any:
        """Return the cached value for ``name``, computing it on first use.

        Raises:
            SelfReferentialDefinitionError: If ``compute_fn`` (directly or
                through other names) requests ``name`` before returning.
        """
        if name in self._values:
            return self._values[name]
        if name in self._pending:
            raise SelfReferentialDefinitionError(name, self._pending)

        self._pending.append(name)
        try:
            value = compute_fn()
        finally:
            self._pending.remove(name)

        logger.debug("computed %r", name)
        self._values[name] = value
        return value

    def names(self) -> list[str]:
        """Names computed so far, in computation order."""
        return list(self._values)

    def clear(self) -> None:
        self._values.clear()
        self._pending.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)


class HasCache(Protocol):
    cache: MemoCache


def get_or_compute(instance: HasCache, name: str, compute_fn: Callable[[], Any]) -> Any:
    """Memoize ``compute_fn`` under ``name`` in the cache owned by ``instance``."""
    return instance.cache.get_or_compute(name, compute_fn)
