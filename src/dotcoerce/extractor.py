"""Dot-path traversal over nested maps and lists."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Mapping
from typing import Any

from dotcoerce._grammar import parse_indexed_token
from dotcoerce._utils import get_valid_tokens
from dotcoerce.accessor import Accessor
from dotcoerce.registry import (
    MISSING,
    ConverterRegistry,
    check_default,
    default_registry,
    or_default,
)

logger = logging.getLogger(__name__)


def tokenize(path: object) -> list[str] | None:
    """Split ``path`` on ``.`` into tokens.

    Returns None if the path is empty, blank, or has an empty or blank token.
    """
    return get_valid_tokens(path)


def resolve_indexed(node: Mapping[Any, Any], token: str) -> Any:
    """Resolve a ``key[index]`` token against ``node``.

    ``node[key]`` must be a list or tuple. Non-negative indices count from
    the start, negative ones from the end (``-1`` is the last element).

    Returns:
        The element, or None for malformed tokens, non-list values, and
        out-of-range indices.
    """
    parsed = parse_indexed_token(token)
    if parsed is None:
        logger.warning("Malformed index token %r", token)
        return None

    items = node.get(parsed.key)
    if not isinstance(items, (list, tuple)):
        return None

    size = len(items)
    if 0 <= parsed.index < size:
        return items[parsed.index]
    if -size <= parsed.index < 0:
        return items[size + parsed.index]

    logger.warning(
        "Index out of bounds: [index: %d, size: %d] in token %r",
        parsed.index,
        size,
        token,
    )
    return None


class Extractor:
    """Extracts typed values from nested structures by dot path.

    Args:
        registry: Registry used for the final conversion. Defaults to the
            process-wide default registry.
    """

    def __init__(self, registry: ConverterRegistry | None = None) -> None:
        self._registry = registry if registry is not None else default_registry

    @property
    def registry(self) -> ConverterRegistry:
        return self._registry

    def extract(
        self,
        root: Mapping[str, Any],
        path: str,
        type_id: Hashable,
        default: Any = MISSING,
    ) -> Any:
        """Extract the value at ``path`` in ``root`` converted to ``type_id``.

        Args:
            root: Top-level map.
            path: Dot path, e.g. ``"map1.map2.items[2].key"``.
            type_id: Target type identifier registered in the registry.
            default: Returned instead of None when nothing is found or the
                value cannot be converted. Must not be None.

        Returns:
            The converted value, ``default`` if given, otherwise None.

        Raises:
            MissingDefaultError: If ``default`` is explicitly None.
        """
        check_default(default, type_id)
        node = self._walk(root, path)
        if node is None:
            return or_default(None, default)
        return self._registry.convert(node, type_id, default)

    def accessor(self) -> Accessor:
        """Return a new chained accessor bound to this extractor's registry."""
        return Accessor(self._registry)

    def _walk(self, root: Mapping[str, Any], path: str) -> Any:
        tokens = tokenize(path)
        if not tokens or not isinstance(root, Mapping):
            return None

        # A lone token is always a plain key lookup
        if len(tokens) == 1:
            return root.get(tokens[0])

        node: Any = root
        for token in tokens:
            if not isinstance(node, Mapping):
                return None
            if token.endswith("]"):
                node = resolve_indexed(node, token)
            else:
                node = node.get(token)
        return node


_default_extractor = Extractor()


def extract(
    root: Mapping[str, Any],
    path: str,
    type_id: Hashable,
    default: Any = MISSING,
) -> Any:
    """Extract from ``root`` using the default registry."""
    return _default_extractor.extract(root, path, type_id, default)


__all__ = ["Extractor", "extract", "resolve_indexed", "tokenize"]
