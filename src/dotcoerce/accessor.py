"""Chained, one-level-at-a-time access into nested maps."""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import Any

from dotcoerce.registry import (
    MISSING,
    ConverterRegistry,
    TargetType,
    check_default,
    default_registry,
    or_default,
)


class Accessor:
    """Walks down a nested map one key at a time, then reads a typed value.

    Not thread-safe. Create one accessor per call site or thread::

        port = accessor().from_(config).map_node("server").int_value("port")

    A :meth:`map_node` step that does not land on a map breaks the chain.
    A broken chain reads as absent, which is distinct from an empty map.
    """

    def __init__(self, registry: ConverterRegistry | None = None) -> None:
        self._registry = registry if registry is not None else default_registry
        self._current: Mapping[Any, Any] | None = None

    @property
    def current(self) -> Mapping[Any, Any] | None:
        """The current root, or None if unset or broken."""
        return self._current

    @property
    def broken(self) -> bool:
        return self._current is None

    def from_(self, root: Mapping[Any, Any] | None) -> Accessor:
        """Reset the chain to start at ``root``."""
        self._current = self._registry.convert(root, TargetType.MAP)
        return self

    def map_node(self, key: Any) -> Accessor:
        """Descend into the map stored under ``key``."""
        if self._current is not None:
            self._current = self._registry.convert(self._current.get(key), TargetType.MAP)
        return self

    def value(self, key: Any, type_id: Hashable, default: Any = MISSING) -> Any:
        """Read ``key`` from the current root converted to ``type_id``."""
        check_default(default, type_id)
        if self._current is None:
            return or_default(None, default)
        return self._registry.convert(self._current.get(key), type_id, default)

    def bool_value(self, key: Any) -> bool:
        return self.value(key, TargetType.BOOLEAN, False)

    def char_value(self, key: Any) -> str:
        return self.value(key, TargetType.CHAR, "\0")

    def byte_value(self, key: Any) -> int:
        return self.value(key, TargetType.BYTE, 0)

    def short_value(self, key: Any) -> int:
        return self.value(key, TargetType.SHORT, 0)

    def int_value(self, key: Any) -> int:
        return self.value(key, TargetType.INT, 0)

    def long_value(self, key: Any) -> int:
        return self.value(key, TargetType.LONG, 0)

    def float_value(self, key: Any) -> float:
        return self.value(key, TargetType.FLOAT, 0.0)

    def double_value(self, key: Any) -> float:
        return self.value(key, TargetType.DOUBLE, 0.0)

    def str_value(self, key: Any) -> str:
        return self.value(key, TargetType.STRING, "")

    def map_value(self, key: Any) -> Mapping[Any, Any]:
        """Map under ``key``, or a new empty dict."""
        return self.value(key, TargetType.MAP, {})

    def list_value(self, key: Any) -> list[Any] | tuple[Any, ...]:
        """List under ``key``, or a new empty list."""
        return self.value(key, TargetType.LIST, [])


def accessor(registry: ConverterRegistry | None = None) -> Accessor:
    """Return a new :class:`Accessor`."""
    return Accessor(registry)


__all__ = ["Accessor", "accessor"]
