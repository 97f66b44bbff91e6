"""Classifies normalized declarations by item kind."""

from __future__ import annotations

from typing import Optional, Sequence, Union

from .analyzers.utils import find_keyword, modifiers_before
from .lexer import IDENT, Token, skip_angle_group, tokenize
from .models import ItemKind, Unsupported

_UNSUPPORTED_KEYWORDS = ("trait", "union")
_LEADING_KEYWORDS = ("fn", "struct", "enum", *_UNSUPPORTED_KEYWORDS)


def classify_item(signature: str) -> Union[ItemKind, Unsupported]:
    """Return the item kind of ``signature`` or an :class:`Unsupported` marker.

    Checks run in order (function, struct, enum) and the first match wins.
    Declarations led by ``trait`` or ``union`` are always unsupported, even
    when their text contains a nested ``fn``.
    """
    tokens = tokenize(signature)
    leading = _leading_keyword(signature, tokens)
    if leading in _UNSUPPORTED_KEYWORDS:
        return Unsupported(text=signature, keyword=leading)
    if _has_function(tokens):
        return ItemKind.FUNCTION
    if find_keyword(tokens, "struct") != -1:
        return ItemKind.STRUCT
    if find_keyword(tokens, "enum") != -1:
        return ItemKind.ENUM
    return Unsupported(text=signature)


def classify(signature: str) -> Optional[ItemKind]:
    """Return the item kind of ``signature`` or ``None`` when it is unsupported."""
    result = classify_item(signature)
    return result if isinstance(result, ItemKind) else None


def _leading_keyword(text: str, tokens: Sequence[Token]) -> Optional[str]:
    for index, token in enumerate(tokens):
        if token.is_ident(*_LEADING_KEYWORDS):
            _, first = modifiers_before(text, tokens, index)
            return token.value if first == 0 else None
    return None


def _has_function(tokens: Sequence[Token]) -> bool:
    """True when ``fn <name>`` is followed by ``(``, optionally after ``<...>``."""
    for index in range(len(tokens) - 2):
        if not tokens[index].is_ident("fn") or tokens[index + 1].kind != IDENT:
            continue
        after = skip_angle_group(tokens, index + 2)
        if 0 <= after < len(tokens) and tokens[after].is_punct("("):
            return True
    return False


__all__ = ["classify", "classify_item"]
