from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

from .words import MAX_WORD_LENGTH


@dataclass(slots=True)
class RuneIndexConfig:
    """Configuration options for the rune-index command line tools."""

    max_word_length: int = MAX_WORD_LENGTH
    strict_count: bool = False
    json_indent: int = 2
    include_scalars: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    """Keep only keys that name RuneIndexConfig fields; unknown keys are dropped."""
    allowed = {field.name for field in fields(RuneIndexConfig)}
    return {key: data[key] for key in data if key in allowed}


def config_from_dict(data: Mapping[str, Any] | None) -> RuneIndexConfig:
    """Build a RuneIndexConfig from a dictionary-like input."""
    if data is None:
        return RuneIndexConfig()
    return RuneIndexConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> RuneIndexConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> RuneIndexConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return RuneIndexConfig()
    return config_from_yaml(path)
