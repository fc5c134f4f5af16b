"""Built-in scalar and container converters.

Each converter takes an untyped value and returns the coerced value or None
when the rule does not apply.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dotcoerce._constants import (
    BYTE_RANGE,
    FALSE_VALUES,
    INT_RANGE,
    LONG_RANGE,
    MAX_BOOLEAN_TEXT_LENGTH,
    MAX_INT_TEXT_LENGTH,
    MAX_LONG_TEXT_LENGTH,
    SHORT_RANGE,
    TRUE_VALUES,
)
from dotcoerce._utils import is_decimal_number, is_whole_number, to_float32


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a number here
    return isinstance(value, int) and not isinstance(value, bool)


def _in_range(value: int, bounds: tuple[int, int]) -> bool:
    return bounds[0] <= value <= bounds[1]


def _fixed_width(value: Any, bounds: tuple[int, int], max_length: int | None) -> int | None:
    if _is_int(value):
        return value if _in_range(value, bounds) else None

    if not isinstance(value, str):
        return None
    if max_length is not None and len(value) > max_length:
        return None
    if not is_whole_number(value):
        return None

    try:
        parsed = int(value)
    except ValueError:
        # Exceeds the interpreter's integer string conversion limit
        return None
    return parsed if _in_range(parsed, bounds) else None


def convert_boolean(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value

    if isinstance(value, str) and len(value) <= MAX_BOOLEAN_TEXT_LENGTH:
        lowered = value.lower()
        if lowered in TRUE_VALUES:
            return True
        if lowered in FALSE_VALUES:
            return False
    return None


def convert_char(value: Any) -> str | None:
    if isinstance(value, str) and len(value) == 1:
        return value
    return None


def convert_byte(value: Any) -> int | None:
    return _fixed_width(value, BYTE_RANGE, None)


def convert_short(value: Any) -> int | None:
    return _fixed_width(value, SHORT_RANGE, None)


def convert_int(value: Any) -> int | None:
    return _fixed_width(value, INT_RANGE, MAX_INT_TEXT_LENGTH)


def convert_long(value: Any) -> int | None:
    return _fixed_width(value, LONG_RANGE, MAX_LONG_TEXT_LENGTH)


def convert_float(value: Any) -> float | None:
    """Single precision: parsed text is narrowed to the nearest float32."""
    if isinstance(value, float):
        return value
    if isinstance(value, str) and is_decimal_number(value):
        return to_float32(float(value))
    return None


def convert_double(value: Any) -> float | None:
    if isinstance(value, float):
        return value
    if isinstance(value, str) and is_decimal_number(value):
        return float(value)
    return None


def convert_string(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return str(value)


def convert_map(value: Any) -> Mapping[Any, Any] | None:
    if isinstance(value, Mapping):
        return value
    return None


def convert_list(value: Any) -> list[Any] | tuple[Any, ...] | None:
    if isinstance(value, (list, tuple)):
        return value
    return None
