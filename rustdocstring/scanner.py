"""Signature block scanner for Rust source buffers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Protocol, Sequence, Tuple, Union, runtime_checkable

from .analyzers.utils import ITEM_KEYWORDS, modifiers_before
from .lexer import PUNCT, bracket_depths, strip_line_comment, tokenize
from .logging import get_logger

_WHITESPACE = re.compile(r"\s+")
_FUNCTION_TERMINATORS = ("{", ";", "=>")
_BODY_TERMINATORS = ("}", ";")
_ATTRIBUTE_PREFIXES = ("#[", "#![")
_UNSUPPORTED_KEYWORDS = ("trait", "union")
_BODY_KEYWORDS = ("struct", "enum")


@runtime_checkable
class LineDocument(Protocol):
    """Editor-style document exposing numbered lines."""

    @property
    def line_count(self) -> int: ...

    def line_at(self, index: int) -> Any: ...


SourceBuffer = Union[Sequence[str], LineDocument]


@dataclass(frozen=True)
class SignatureBlock:
    """A normalized declaration and the buffer lines it was read from."""

    signature: str
    keyword: str
    start_line: int
    end_line: int


class SignatureScanner:
    """Finds the declaration that follows a cursor line.

    Blank lines and attributes between the cursor and the item are skipped.
    A closing brace or a line comment reached before any item means the
    cursor sits inside a body, which yields no result rather than skipping
    ahead to an unrelated item further down.
    """

    def __init__(self) -> None:
        self.logger = get_logger("scanner")

    def scan(self, buffer: SourceBuffer, cursor_line: int) -> Optional[str]:
        """Return the normalized signature after ``cursor_line`` or ``None``."""
        block = self.scan_block(buffer, cursor_line)
        return block.signature if block else None

    def scan_block(self, buffer: SourceBuffer, cursor_line: int) -> Optional[SignatureBlock]:
        if cursor_line < 0:
            raise ValueError(f"cursor line must be >= 0, got {cursor_line}")
        line_count, line_at = _line_source(buffer)

        collected: List[str] = []
        keyword: Optional[str] = None
        start_line = end_line = -1
        attribute_depth = 0
        braces = parens = 0

        for index in range(cursor_line + 1, line_count):
            line = line_at(index).strip()

            if keyword is None:
                if attribute_depth > 0:
                    attribute_depth = max(attribute_depth + _square_delta(line), 0)
                    continue
                if not line:
                    continue
                if line.startswith(_ATTRIBUTE_PREFIXES):
                    attribute_depth, tail = _attribute_tail(line)
                    if not tail or item_start(tail) is None:
                        continue
                    line = tail
                if line.startswith("}") or line.startswith("//"):
                    self.logger.debug("Line %d closes a body or is a comment; no item", index)
                    return None
                keyword = item_start(line)
                if keyword is None:
                    continue
                start_line = index

            cleaned = strip_line_comment(line).strip()
            end_line = index
            if not cleaned:
                continue
            collected.append(cleaned)

            if keyword not in _BODY_KEYWORDS:
                if cleaned.endswith(_FUNCTION_TERMINATORS):
                    break
            else:
                brace_delta, paren_delta = bracket_depths(tokenize(cleaned))
                braces += brace_delta
                parens += paren_delta
                if braces == 0 and parens == 0 and cleaned.endswith(_BODY_TERMINATORS):
                    break

        if not collected or keyword is None:
            self.logger.debug("No item found after line %d", cursor_line)
            return None

        signature = _WHITESPACE.sub(" ", " ".join(collected)).strip()
        return SignatureBlock(
            signature=signature,
            keyword=keyword,
            start_line=start_line,
            end_line=end_line,
        )


def item_start(line: str) -> Optional[str]:
    """Return the item keyword when ``line`` starts an item.

    ``trait`` and ``union`` are reported too so that the classifier can
    reject them instead of the scan running on into their members.

    Only visibility, ``const``, ``async``, ``unsafe`` and ``extern ["abi"]``
    may precede the keyword, and the keyword must be followed by whitespace.
    """
    text = strip_line_comment(line)
    tokens = tokenize(text)
    for index, token in enumerate(tokens):
        if not token.is_ident(*ITEM_KEYWORDS, *_UNSUPPORTED_KEYWORDS):
            continue
        _, first = modifiers_before(text, tokens, index)
        if first != 0:
            return None
        if not text[token.end : token.end + 1].isspace():
            return None
        return token.value
    return None


def scan(buffer: SourceBuffer, cursor_line: int) -> Optional[str]:
    """Module-level shortcut for :meth:`SignatureScanner.scan`."""
    return SignatureScanner().scan(buffer, cursor_line)


def _line_source(buffer: SourceBuffer) -> Tuple[int, Callable[[int], str]]:
    if isinstance(buffer, LineDocument):

        def _line_at(index: int) -> str:
            line = buffer.line_at(index)
            return str(getattr(line, "text", line))

        return buffer.line_count, _line_at
    return len(buffer), lambda index: str(buffer[index])


def _attribute_tail(line: str) -> Tuple[int, str]:
    """Split leading attributes off ``line``.

    Returns the ``[`` depth still open at the end of the line and the text
    that follows the last closed attribute (empty while one is still open).
    """
    depth = 0
    end = 0
    for token in tokenize(line):
        if token.is_punct("["):
            depth += 1
        elif token.is_punct("]"):
            depth -= 1
            if depth == 0:
                end = token.end
        elif depth == 0 and not token.is_punct("#", "!"):
            break
    if depth > 0:
        return depth, ""
    return 0, line[end:].strip()


def _square_delta(line: str) -> int:
    delta = 0
    for token in tokenize(line):
        if token.kind != PUNCT:
            continue
        if token.value == "[":
            delta += 1
        elif token.value == "]":
            delta -= 1
    return delta


__all__ = ["LineDocument", "SignatureBlock", "SignatureScanner", "SourceBuffer", "item_start", "scan"]
