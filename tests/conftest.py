from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Sequence

import pytest

from rustdocstring.config import GenerationOptions


@dataclass
class _Line:
    text: str


class EditorDocument:
    """Mimics an editor document: numbered lines exposing ``.text``."""

    def __init__(self, lines: Sequence[str]) -> None:
        self._lines: List[str] = list(lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line_at(self, index: int) -> _Line:
        return _Line(self._lines[index])


@pytest.fixture
def make_document() -> Callable[[Sequence[str]], EditorDocument]:
    """Build editor-style documents from a list of lines."""
    return EditorDocument


@pytest.fixture
def all_sections() -> GenerationOptions:
    """Options that enable every optional section."""
    return GenerationOptions(
        include_examples=True,
        examples_only_for_public_or_extern=False,
        include_safety_details=True,
    )
