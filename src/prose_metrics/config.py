from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, MutableMapping

import yaml

from .models import Severity

_FIELD_TYPES = {"int": int, "str": str}


@dataclass(slots=True)
class AnalyzerConfig:
    """Host-facing options; scoring thresholds and rates are fixed constants."""

    content_offset: int = 1
    block_separator: str = "\n\n"
    selection_separator: str = " "
    warn_class: str = "heatmap-orange"
    danger_class: str = "heatmap-red"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        for item in fields(self):
            value = getattr(self, item.name)
            expected = _FIELD_TYPES[item.type]
            if not isinstance(value, expected) or isinstance(value, bool):
                raise ValueError(
                    f"Config field '{item.name}' must be {item.type}, "
                    f"got {type(value).__name__}."
                )

    def decoration_classes(self) -> Dict[Severity, str]:
        return {Severity.WARN: self.warn_class, Severity.DANGER: self.danger_class}

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def config_from_dict(data: Mapping[str, Any] | None) -> AnalyzerConfig:
    """Build an AnalyzerConfig from a dictionary-like input, ignoring unknown keys."""
    if data is None:
        return AnalyzerConfig()
    allowed = {field.name for field in fields(AnalyzerConfig)}
    return AnalyzerConfig(**{key: data[key] for key in data if key in allowed})


def config_from_yaml(path: str | Path) -> AnalyzerConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> AnalyzerConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return AnalyzerConfig()
    return config_from_yaml(path)
