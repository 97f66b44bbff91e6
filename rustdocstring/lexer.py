"""Minimal tokenizer for Rust declaration headers.

The lexer only knows enough of the language to walk item signatures:
identifiers and keywords, string/char literals, lifetimes, numbers and
punctuation. Anything it does not recognise becomes a one-character
punctuation token, so tokenizing never fails.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, List, Sequence

IDENT = "ident"
STRING = "string"
CHAR = "char"
LIFETIME = "lifetime"
NUMBER = "number"
PUNCT = "punct"

_COMMENT = "comment"
_SKIP = "skip"

_TOKEN_SPEC = (
    (_SKIP, r"\s+"),
    (_COMMENT, r"//[^\n]*"),
    (_SKIP, r"/\*.*?\*/"),
    (STRING, r'b?r(?P<hashes>#*)".*?"(?P=hashes)'),
    (STRING, r'b?"(?:\\.|[^"\\])*"'),
    (CHAR, r"b?'(?:\\.|[^\\'])'"),
    (LIFETIME, r"'[A-Za-z_]\w*"),
    (IDENT, r"r#[A-Za-z_]\w*|[A-Za-z_]\w*"),
    (NUMBER, r"\d\w*"),
    (PUNCT, r"->|=>|::|\.\.=?|[^\s\w]"),
)

_MASTER = re.compile(
    "|".join(f"(?P<t{index}>{pattern})" for index, (_, pattern) in enumerate(_TOKEN_SPEC)),
    re.DOTALL,
)

OPENERS = {"(": ")", "[": "]", "{": "}"}
CLOSERS = {")": "(", "]": "[", "}": "{"}


@dataclass(frozen=True)
class Token:
    """A lexical token with its character span in the source text."""

    kind: str
    value: str
    start: int
    end: int

    def is_ident(self, *names: str) -> bool:
        return self.kind == IDENT and (not names or self.value in names)

    def is_punct(self, *values: str) -> bool:
        return self.kind == PUNCT and (not values or self.value in values)


def _scan(text: str) -> Iterator[Token]:
    for match in _MASTER.finditer(text):
        # The outer ``t<N>`` group always closes last, so it names the rule.
        kind = _TOKEN_SPEC[int(match.lastgroup[1:])][0]
        yield Token(kind, match.group(), match.start(), match.end())


def tokenize(text: str) -> List[Token]:
    """Return the significant tokens of ``text`` (no whitespace, no comments)."""
    return [token for token in _scan(text) if token.kind not in (_SKIP, _COMMENT)]


def strip_line_comment(line: str) -> str:
    """Drop a trailing ``//`` comment, ignoring ``//`` inside string literals."""
    for token in _scan(line):
        if token.kind == _COMMENT:
            return line[: token.start]
    return line


def bracket_depths(tokens: Sequence[Token]) -> tuple[int, int]:
    """Return the net ``{}`` and ``()`` depth change across ``tokens``."""
    braces = parens = 0
    for token in tokens:
        if token.kind != PUNCT:
            continue
        if token.value == "{":
            braces += 1
        elif token.value == "}":
            braces -= 1
        elif token.value == "(":
            parens += 1
        elif token.value == ")":
            parens -= 1
    return braces, parens


def find_closing(tokens: Sequence[Token], open_index: int) -> int:
    """Return the index of the bracket closing ``tokens[open_index]``, or -1."""
    depth = 0
    for index in range(open_index, len(tokens)):
        token = tokens[index]
        if token.kind != PUNCT:
            continue
        if token.value in OPENERS:
            depth += 1
        elif token.value in CLOSERS:
            depth -= 1
            if depth == 0:
                return index
    return -1


def skip_angle_group(tokens: Sequence[Token], index: int) -> int:
    """Skip a ``<...>`` generic list starting at ``index``.

    Returns the index just past the closing ``>``, the unchanged index when no
    list starts there, or -1 when the list is unterminated. ``->`` arrows
    inside the list (``Fn(u8) -> u8`` bounds) are not counted as closers.
    """
    if index >= len(tokens) or not tokens[index].is_punct("<"):
        return index
    depth = 0
    for position in range(index, len(tokens)):
        token = tokens[position]
        if token.is_punct("<"):
            depth += 1
        elif token.is_punct(">"):
            depth -= 1
            if depth == 0:
                return position + 1
        elif token.is_punct("{", ";"):
            return -1
    return -1


__all__ = [
    "CHAR",
    "IDENT",
    "LIFETIME",
    "NUMBER",
    "PUNCT",
    "STRING",
    "Token",
    "bracket_depths",
    "find_closing",
    "skip_angle_group",
    "strip_line_comment",
    "tokenize",
]
