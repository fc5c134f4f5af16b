"""Type-keyed conversion registry.

The registry maps a target type identifier to a converter callable. It is
meant to be populated once during startup and then only read; lookups take
no lock. Call :meth:`ConverterRegistry.freeze` after setup to make that
contract explicit.
"""

from __future__ import annotations

import enum
import logging
import types
from collections.abc import Callable, Hashable, Iterator, Mapping
from typing import Any

from dotcoerce import _converters
from dotcoerce._errors import (
    ERR_MSG_INVALID_CONVERTER,
    ERR_MSG_MISSING_DEFAULT,
    ERR_MSG_REGISTRY_FROZEN,
    InvalidConverterError,
    MissingDefaultError,
    RegistryFrozenError,
)

logger = logging.getLogger(__name__)

Converter = Callable[[Any], Any]
"""Callable coercing an untyped value into a target type, or returning None."""


class TargetType(enum.StrEnum):
    BOOLEAN = "boolean"
    CHAR = "char"
    BYTE = "byte"
    SHORT = "short"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    STRING = "string"
    MAP = "map"
    LIST = "list"


class _Missing:
    """Sentinel for an omitted default argument."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def check_default(default: Any, type_id: Hashable) -> None:
    """Reject an explicit None default."""
    if default is None:
        raise MissingDefaultError(
            ERR_MSG_MISSING_DEFAULT,
            f"None default supplied for conversion to {type_id!r}",
        )


def or_default(result: Any, default: Any) -> Any:
    """Return ``default`` in place of a None ``result`` when one was given."""
    if result is None and default is not MISSING:
        return default
    return result

_BUILTINS: dict[TargetType, Converter] = {
    TargetType.BOOLEAN: _converters.convert_boolean,
    TargetType.CHAR: _converters.convert_char,
    TargetType.BYTE: _converters.convert_byte,
    TargetType.SHORT: _converters.convert_short,
    TargetType.INT: _converters.convert_int,
    TargetType.LONG: _converters.convert_long,
    TargetType.FLOAT: _converters.convert_float,
    TargetType.DOUBLE: _converters.convert_double,
    TargetType.STRING: _converters.convert_string,
    TargetType.MAP: _converters.convert_map,
    TargetType.LIST: _converters.convert_list,
}

# Python types accepted as shorthands for their natural target
_ALIASES: dict[type, TargetType] = {
    bool: TargetType.BOOLEAN,
    int: TargetType.LONG,
    float: TargetType.DOUBLE,
    str: TargetType.STRING,
    dict: TargetType.MAP,
    list: TargetType.LIST,
}


class ConverterRegistry:
    """Mapping of target type identifiers to converters.

    Not synchronized: finish all :meth:`register` calls before lookups start
    on other threads.
    """

    def __init__(self, *, builtins: bool = True) -> None:
        self._converters: dict[Hashable, Converter] | Mapping[Hashable, Converter] = {}
        self._frozen = False
        if builtins:
            for target, converter in _BUILTINS.items():
                self.register(target, converter)
            for alias, target in _ALIASES.items():
                self.register(alias, _BUILTINS[target])

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, type_id: Hashable, converter: Converter) -> None:
        """Install ``converter`` for ``type_id``, replacing any previous one.

        Raises:
            InvalidConverterError: If ``converter`` is not callable.
            RegistryFrozenError: If the registry has been frozen.
        """
        if not callable(converter):
            raise InvalidConverterError(
                ERR_MSG_INVALID_CONVERTER,
                f"converter for {type_id!r} is {type(converter).__name__}, not callable",
            )
        self._check_mutable(type_id)
        self._converters[type_id] = converter  # type: ignore[index]

    def unregister(self, type_id: Hashable) -> None:
        """Remove the converter for ``type_id`` if present."""
        self._check_mutable(type_id)
        self._converters.pop(type_id, None)  # type: ignore[union-attr]

    def freeze(self) -> None:
        """Make the registry read-only."""
        if not self._frozen:
            self._converters = types.MappingProxyType(dict(self._converters))
            self._frozen = True

    def converter_for(self, type_id: Hashable) -> Converter | None:
        return self._converters.get(type_id)

    def registered_types(self) -> list[Hashable]:
        return list(self._converters)

    def __contains__(self, type_id: object) -> bool:
        return type_id in self._converters

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._converters)

    def __len__(self) -> int:
        return len(self._converters)

    def convert(self, value: Any, type_id: Hashable, default: Any = MISSING) -> Any:
        """Convert ``value`` to the type registered under ``type_id``.

        Args:
            value: Untyped source value.
            type_id: Target type identifier.
            default: Returned instead of None when conversion yields nothing.
                Must not be None.

        Returns:
            The converted value, ``default`` if given and the conversion
            failed, otherwise None.

        Raises:
            MissingDefaultError: If ``default`` is explicitly None.
        """
        check_default(default, type_id)
        return or_default(self._convert(value, type_id), default)

    def _convert(self, value: Any, type_id: Hashable) -> Any:
        converter = self._converters.get(type_id)
        if converter is None:
            logger.warning("No converter found for type %r, returning None", type_id)
            return None

        try:
            return converter(value)
        except Exception:
            logger.warning(
                "Converter for type %r failed on %s value",
                type_id,
                type(value).__name__,
                exc_info=True,
            )
            return None

    def _check_mutable(self, type_id: Hashable) -> None:
        if self._frozen:
            raise RegistryFrozenError(
                ERR_MSG_REGISTRY_FROZEN,
                f"cannot change converter for {type_id!r} after freeze()",
            )


default_registry = ConverterRegistry()
"""Process-wide registry used by the module-level helpers."""


def register(type_id: Hashable, converter: Converter) -> None:
    """Register ``converter`` on the default registry."""
    default_registry.register(type_id, converter)


def convert(value: Any, type_id: Hashable, default: Any = MISSING) -> Any:
    """Convert ``value`` using the default registry."""
    return default_registry.convert(value, type_id, default)


__all__ = [
    "MISSING",
    "Converter",
    "ConverterRegistry",
    "TargetType",
    "convert",
    "default_registry",
    "register",
]
