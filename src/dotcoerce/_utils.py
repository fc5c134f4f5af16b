"""Number grammar, dot-path token validation, and float narrowing helpers."""

from __future__ import annotations

import math
import re
import struct

WHOLE_NUMBER_RE = re.compile(r"[-+]?[0-9]+")
DECIMAL_NUMBER_RE = re.compile(r"[-+]?[0-9]+(\.[0-9]+)?")


def is_whole_number(text: str) -> bool:
    """Return whether ``text`` is an optionally signed run of ASCII digits."""
    return WHOLE_NUMBER_RE.fullmatch(text) is not None


def is_decimal_number(text: str) -> bool:
    """Return whether ``text`` is a whole number with an optional ``.digits`` part."""
    return DECIMAL_NUMBER_RE.fullmatch(text) is not None


def get_valid_tokens(dot_path: object) -> list[str] | None:
    """Split a dot path into tokens.

    Returns None if the path is not a string, is blank, or has any
    empty or whitespace-only token.
    """
    if not isinstance(dot_path, str) or not dot_path.strip():
        return None

    tokens = dot_path.split(".")
    for token in tokens:
        if not token.strip():
            return None
    return tokens


def to_float32(value: float) -> float:
    """Narrow a double to the nearest IEEE-754 single precision value."""
    if math.isnan(value) or math.isinf(value):
        return value
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        # Values rounding past FLOAT32_MAX saturate to infinity
        return math.copysign(math.inf, value)
