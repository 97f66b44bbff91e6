"""Analyzer implementations and discovery utilities."""

from __future__ import annotations

from typing import Callable, List, Sequence, Set

from .base import Analyzer
from .enums import EnumAnalyzer
from .functions import FunctionAnalyzer
from .structs import StructAnalyzer

_BUILTIN_FACTORIES: dict[str, Callable[[], Analyzer]] = {
    "function": FunctionAnalyzer,
    "struct": StructAnalyzer,
    "enum": EnumAnalyzer,
}


def discover_analyzers(enabled: Sequence[str] | None = None) -> List[Analyzer]:
    """Return instantiated analyzers, honoring optional enabled names."""

    enabled_set: Set[str] | None = None
    if enabled is not None:
        enabled_set = {name.lower() for name in enabled}

    analyzers: List[Analyzer] = []
    for name, factory in _BUILTIN_FACTORIES.items():
        if enabled_set is not None and name not in enabled_set:
            continue
        instance = factory()
        if not isinstance(instance, Analyzer):
            raise TypeError(f"Analyzer factory for '{name}' did not return an Analyzer instance")
        analyzers.append(instance)
        if enabled_set is not None:
            enabled_set.discard(name)

    if enabled_set:
        missing = ", ".join(sorted(enabled_set))
        raise ValueError(f"Unknown analyzers requested: {missing}")

    return analyzers


__all__ = [
    "Analyzer",
    "EnumAnalyzer",
    "FunctionAnalyzer",
    "StructAnalyzer",
    "discover_analyzers",
]
