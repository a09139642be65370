"""
Binding environment: variable name -> last assigned Value.

One Bindings instance belongs to one session. Entries are overwritten
by assignments and only removed all at once by clear().
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from vecalc.core.errors import UndefinedVariable
from vecalc.core.ir.values import Value

logger = logging.getLogger(__name__)


class Bindings:
    """Variables of a single session."""

    def __init__(self, initial: Mapping[str, Value] | None = None) -> None:
        self._values: dict[str, Value] = dict(initial or {})

    def __repr__(self) -> str:
        return f"Bindings({self._values!r})"

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def lookup(self, name: str) -> Value:
        """Return the value bound to ``name``.

        Raises:
            UndefinedVariable: If ``name`` was never assigned.
        """
        try:
            return self._values[name]
        except KeyError:
            raise UndefinedVariable(name) from None

    def record(self, name: str, value: Value) -> None:
        self._values[name] = value
        logger.debug("Bound %s = %s", name, value)

    def clear(self) -> None:
        self._values.clear()
        logger.debug("Cleared all bindings")

    def snapshot(self) -> Mapping[str, Value]:
        """Read-only copy of the current bindings."""
        return MappingProxyType(dict(self._values))


def clear_bindings(bindings: Bindings) -> None:
    """Wipe every variable stored in ``bindings``."""
    bindings.clear()
