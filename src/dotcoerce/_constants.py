"""Coercion limits and vocabularies for the built-in converters."""

MAX_INT_TEXT_LENGTH = 11
"""Longest text accepted before parsing a 32-bit integer (sign + 10 digits)."""

MAX_LONG_TEXT_LENGTH = 21
"""Longest text accepted before parsing a 64-bit integer."""

MAX_BOOLEAN_TEXT_LENGTH = 5
"""Longest text considered for boolean matching ("false")."""

TRUE_VALUES = frozenset({"1", "t", "y", "yes", "true", "ok"})
FALSE_VALUES = frozenset({"0", "f", "n", "no", "false", "nok"})

# Inclusive (min, max) ranges of the fixed-width integer targets
BYTE_RANGE = (-(2**7), 2**7 - 1)
SHORT_RANGE = (-(2**15), 2**15 - 1)
INT_RANGE = (-(2**31), 2**31 - 1)
LONG_RANGE = (-(2**63), 2**63 - 1)
