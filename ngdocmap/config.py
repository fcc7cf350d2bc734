"""Configuration loading for ngdocmap (.ngdocmap.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .render import FORMATS

CONFIG_FILENAME = ".ngdocmap.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class MapperConfig:
    """Represents the settings defined in .ngdocmap.yml."""

    root: Path
    input: Optional[Path] = None
    output: Optional[Path] = None
    format: str = "json"
    indent: int = 2
    log_file: Optional[Path] = None


def load_config(config_path: Path) -> MapperConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent

    if not config_file.exists():
        return MapperConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    fmt = _as_str(data.get("format")) or "json"
    if fmt not in FORMATS:
        raise ConfigError(f"Unsupported format '{fmt}' in {CONFIG_FILENAME}")

    indent = data.get("indent", 2)
    if isinstance(indent, bool) or not isinstance(indent, int) or indent < 0:
        raise ConfigError("'indent' must be a non-negative integer")

    return MapperConfig(
        root=root,
        input=_as_path(root, data.get("input")),
        output=_as_path(root, data.get("output")),
        format=fmt,
        indent=indent,
        log_file=_as_path(root, data.get("log_file")),
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _as_path(root: Path, value: Any) -> Optional[Path]:
    text = _as_str(value)
    if text is None:
        return None
    path = Path(text).expanduser()
    return path if path.is_absolute() else root / path


__all__ = ["CONFIG_FILENAME", "ConfigError", "MapperConfig", "load_config"]
