"""Configuration loading for rustdocstring (.rustdocstring.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".rustdocstring.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass(frozen=True)
class GenerationOptions:
    """Per-call switches that shape the generated template.

    ``gate_struct_examples`` makes struct templates follow the same example
    gating as functions and enums; by default structs always get examples.
    """

    include_examples: bool = True
    examples_only_for_public_or_extern: bool = False
    include_safety_details: bool = False
    gate_struct_examples: bool = False

    def examples_enabled(self, is_public_or_extern: bool) -> bool:
        """Apply the example gating rule for an item's exposure."""
        return self.include_examples and (
            not self.examples_only_for_public_or_extern or is_public_or_extern
        )


@dataclass
class AnalyzerConfig:
    """Analyzer enablement."""

    enabled: List[str] = field(default_factory=list)


@dataclass
class RustDocConfig:
    """Represents the settings defined in .rustdocstring.yml."""

    root: Path
    options: GenerationOptions = field(default_factory=GenerationOptions)
    analyzers: AnalyzerConfig = field(default_factory=AnalyzerConfig)


# snake_case key, editor camelCase alias
_OPTION_KEYS: Dict[str, str] = {
    "include_examples": "includeExamples",
    "examples_only_for_public_or_extern": "examplesOnlyForPublicOrExtern",
    "include_safety_details": "includeSafetyDetails",
    "gate_struct_examples": "gateStructExamples",
}


def load_config(config_path: Path) -> RustDocConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return RustDocConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    nested = _as_dict(data.get("rustdocstring"))
    if nested:
        data = {**data, **nested}

    options = GenerationOptions()
    overrides: Dict[str, bool] = {}
    for key, alias in _OPTION_KEYS.items():
        raw = data.get(key, data.get(alias))
        if raw is None:
            continue
        value = _as_bool(raw)
        if value is None:
            raise ConfigError(f"'{key}' must be a boolean, got {raw!r}")
        overrides[key] = value
    if overrides:
        options = replace(options, **overrides)

    analyzers = AnalyzerConfig()
    analyzer_data = _as_dict(data.get("analyzers"))
    if analyzer_data:
        analyzers.enabled = _as_str_list(analyzer_data.get("enabled"))

    return RustDocConfig(root=root, options=options, analyzers=analyzers)


def _resolve_config_path(config_path: Path) -> Path:
    """Return the config file governing ``config_path``.

    A path that names the config file is used as is. Otherwise the directory
    (or the file's parent directory) and then its ancestors are searched, so a
    source file under ``src/`` picks up the file at the crate root. When none
    exists, the missing file in the starting directory is returned.
    """
    config_path = config_path.expanduser().resolve()
    if config_path.name == CONFIG_FILENAME:
        return config_path
    start = config_path if config_path.is_dir() else config_path.parent
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return start / CONFIG_FILENAME


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "AnalyzerConfig",
    "CONFIG_FILENAME",
    "ConfigError",
    "GenerationOptions",
    "RustDocConfig",
    "load_config",
]
