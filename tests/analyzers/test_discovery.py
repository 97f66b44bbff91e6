"""Tests for analyzer discovery utilities."""

from __future__ import annotations

import pytest

from rustdocstring.analyzers import (
    EnumAnalyzer,
    FunctionAnalyzer,
    StructAnalyzer,
    discover_analyzers,
)
from rustdocstring.models import ItemKind


def test_discover_analyzers_returns_builtin_analyzers() -> None:
    analyzers = discover_analyzers()
    classes = [type(analyzer) for analyzer in analyzers]
    assert classes == [FunctionAnalyzer, StructAnalyzer, EnumAnalyzer]
    assert [analyzer.kind for analyzer in analyzers] == [
        ItemKind.FUNCTION,
        ItemKind.STRUCT,
        ItemKind.ENUM,
    ]


def test_discover_analyzers_respects_enabled_filter() -> None:
    analyzers = discover_analyzers(["Enum"])
    assert len(analyzers) == 1
    assert isinstance(analyzers[0], EnumAnalyzer)


def test_discover_analyzers_raises_for_unknown_name() -> None:
    with pytest.raises(ValueError):
        discover_analyzers(["trait"])


def test_supports_checks_declaration_shape() -> None:
    assert FunctionAnalyzer().supports("fn a() {")
    assert not StructAnalyzer().supports("struct Unit;")
    assert EnumAnalyzer().supports("enum A { B }")
