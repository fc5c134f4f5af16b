"""dotcoerce - Extract typed values from nested maps and lists by dot path."""

from __future__ import annotations

import logging

try:
    from dotcoerce._version import __version__
except ModuleNotFoundError:  # source checkout that was never built
    __version__ = "0.0.0.dev0"

from dotcoerce._errors import (
    DotCoerceError,
    InvalidConverterError,
    MissingDefaultError,
    RegistryFrozenError,
)
from dotcoerce.accessor import Accessor, accessor
from dotcoerce.extractor import Extractor, extract, resolve_indexed, tokenize
from dotcoerce.registry import (
    MISSING,
    Converter,
    ConverterRegistry,
    TargetType,
    convert,
    default_registry,
    register,
)

__all__ = [
    "accessor",
    "convert",
    "extract",
    "register",
    "resolve_indexed",
    "tokenize",
    "MISSING",
    "Accessor",
    "Converter",
    "ConverterRegistry",
    "Extractor",
    "TargetType",
    "default_registry",
    "DotCoerceError",
    "InvalidConverterError",
    "MissingDefaultError",
    "RegistryFrozenError",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
