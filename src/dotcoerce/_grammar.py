"""Lark grammar for indexed path tokens such as ``items[2]`` or ``items[-1]``."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

# KEY may contain "]" but not "[", so "a]b[1]" is key "a]b"; an empty key
# ("[0]") is allowed and looked up as "".
INDEX_GRAMMAR = r"""
    start: KEY? "[" INDEX "]"

    KEY: /[^\[]+/
    INDEX: /[-+]?[0-9]+/
"""


@dataclass(frozen=True)
class IndexedToken:
    """A parsed ``key[index]`` path token."""

    key: str
    index: int


class _IndexedTokenBuilder(Transformer):
    def start(self, children: list[Token]) -> IndexedToken:
        if len(children) == 1:
            return IndexedToken(key="", index=int(children[0]))
        key, index = children
        return IndexedToken(key=str(key), index=int(index))


_parser = Lark(INDEX_GRAMMAR, parser="lalr", transformer=_IndexedTokenBuilder())


@lru_cache(maxsize=1024)
def parse_indexed_token(token: str) -> IndexedToken | None:
    """Parse ``token`` as ``key[index]``.

    Returns None if the token is not exactly one key followed by one
    bracketed whole number at its end.
    """
    try:
        return _parser.parse(token)
    except LarkError:
        return None
    except ValueError:
        # Index digits beyond the interpreter's integer conversion limit
        return None


__all__ = ["INDEX_GRAMMAR", "IndexedToken", "parse_indexed_token"]
