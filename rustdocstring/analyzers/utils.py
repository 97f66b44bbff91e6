"""Shared helper utilities for analyzer implementations."""

from __future__ import annotations

import re
from typing import List, Optional, Sequence, Tuple

from ..lexer import IDENT, PUNCT, STRING, Token, find_closing, tokenize
from ..models import Modifiers, Visibility

ITEM_KEYWORDS = ("fn", "struct", "enum")
_SCOPE_HEADS = ("crate", "self", "super", "in")

_RESULT_PATTERN = re.compile(r"Result\s*<.+>")
_RECEIVER_PATTERN = re.compile(r"^(?:&\s*(?:'\w+\s+)?)?(?:mut\s+)?self$")

# Header helpers


def modifiers_before(
    text: str, tokens: Sequence[Token], index: int
) -> Tuple[Modifiers, int]:
    """Read the qualifiers written in front of ``tokens[index]``.

    Walks backwards over ``extern ["abi"]``, ``unsafe``, ``async``, ``const``
    and a visibility clause. Returns the modifiers and the index of the first
    token that belongs to them (``index`` itself when there are none).
    """
    position = index - 1

    def _take(keyword: str) -> bool:
        nonlocal position
        if position >= 0 and tokens[position].is_ident(keyword):
            position -= 1
            return True
        return False

    is_extern = False
    abi: Optional[str] = None
    if (
        position >= 1
        and tokens[position].kind == STRING
        and tokens[position - 1].is_ident("extern")
    ):
        abi = tokens[position].value.strip('"')
        is_extern = True
        position -= 2
    else:
        is_extern = _take("extern")

    is_unsafe = _take("unsafe")
    is_async = _take("async")
    is_const = _take("const")

    visibility = Visibility.PRIVATE
    scope: Optional[str] = None
    if position >= 0 and tokens[position].is_punct(")"):
        open_index = _find_opening(tokens, position)
        if (
            open_index >= 1
            and tokens[open_index - 1].is_ident("pub")
            and open_index + 1 < position
            and tokens[open_index + 1].is_ident(*_SCOPE_HEADS)
        ):
            visibility = Visibility.SCOPED
            scope = text[tokens[open_index + 1].start : tokens[position - 1].end]
            position = open_index - 2
    elif _take("pub"):
        visibility = Visibility.PUBLIC

    modifiers = Modifiers(
        visibility=visibility,
        scope=scope,
        is_const=is_const,
        is_async=is_async,
        is_unsafe=is_unsafe,
        is_extern=is_extern,
        abi=abi,
    )
    return modifiers, position + 1


def _find_opening(tokens: Sequence[Token], close_index: int) -> int:
    depth = 0
    for index in range(close_index, -1, -1):
        token = tokens[index]
        if token.is_punct(")"):
            depth += 1
        elif token.is_punct("("):
            depth -= 1
            if depth == 0:
                return index
    return -1


def find_keyword(tokens: Sequence[Token], keyword: str) -> int:
    """Index of the first ``keyword`` token followed by an identifier, or -1."""
    for index, token in enumerate(tokens[:-1]):
        if token.is_ident(keyword) and tokens[index + 1].kind == IDENT:
            return index
    return -1


def is_public_or_extern(text: str) -> bool:
    """True when the declaration mentions any visibility or ``extern`` clause."""
    return any(token.is_ident("pub", "extern") for token in tokenize(text))


def strip_visibility(entry: str) -> str:
    """Remove a leading ``pub`` / ``pub(...)`` clause from ``entry``."""
    tokens = tokenize(entry)
    if not tokens or not tokens[0].is_ident("pub"):
        return entry.strip()
    end = tokens[0].end
    if (
        len(tokens) > 2
        and tokens[1].is_punct("(")
        and tokens[2].is_ident(*_SCOPE_HEADS)
    ):
        close = find_closing(tokens, 1)
        if close != -1:
            end = tokens[close].end
    return entry[end:].strip()


def strip_attributes(entry: str) -> str:
    """Remove leading ``#[...]`` attributes from a field or variant entry."""
    while True:
        tokens = tokenize(entry)
        if len(tokens) < 2 or not tokens[0].is_punct("#") or not tokens[1].is_punct("["):
            return entry.strip()
        close = find_closing(tokens, 1)
        if close == -1:
            return entry.strip()
        entry = entry[tokens[close].end :]


# Body splitting


def split_top_level(body: str) -> List[str]:
    """Split ``body`` on commas outside ``()``, ``[]`` and ``{}`` groups.

    Pieces are trimmed and empty pieces are dropped. Commas inside ``<...>``
    generic arguments still split.
    """
    pieces: List[str] = []
    depth = 0
    segment_start = 0
    for token in tokenize(body):
        if token.kind != PUNCT:
            continue
        if token.value in "([{":
            depth += 1
        elif token.value in ")]}":
            depth -= 1
        elif token.value == "," and depth == 0:
            pieces.append(body[segment_start : token.start])
            segment_start = token.end
    pieces.append(body[segment_start:])
    return [piece.strip() for piece in pieces if piece.strip()]


def split_enum_variants(body: str) -> List[str]:
    """Split an enum body into variant strings, honouring nested payloads."""
    return split_top_level(body)


def split_name_type(entry: str) -> Tuple[str, str]:
    """Split ``name: Type`` on its first colon."""
    name, _, type_ = entry.partition(":")
    return name.strip(), type_.strip()


def is_result_type(return_type: Optional[str]) -> bool:
    return bool(return_type) and bool(_RESULT_PATTERN.search(return_type or ""))


def is_receiver(parameter: str) -> bool:
    """True for ``self``, ``&self``, ``&mut self``, ``mut self`` and ``&'a self``."""
    return bool(_RECEIVER_PATTERN.match(" ".join(parameter.split())))


def body_between(text: str, tokens: Sequence[Token], open_index: int) -> Optional[str]:
    """Return the raw text inside the bracket group opened at ``open_index``."""
    close = find_closing(tokens, open_index)
    if close == -1:
        return None
    return text[tokens[open_index].end : tokens[close].start]


__all__ = [
    "ITEM_KEYWORDS",
    "body_between",
    "find_keyword",
    "is_public_or_extern",
    "is_receiver",
    "is_result_type",
    "modifiers_before",
    "split_enum_variants",
    "split_name_type",
    "split_top_level",
    "strip_attributes",
    "strip_visibility",
]
