from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError

from .model import MigrationConfig


class ConfigError(RuntimeError):
    pass


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        import yaml
    except ImportError as exc:
        raise ConfigError("PyYAML is required to load YAML config") from exc
    return yaml.safe_load(path.read_text(encoding="utf-8"))


def _load_json(path: Path) -> Dict[str, Any]:
    return json.loads(path.read_text(encoding="utf-8"))


def load_config(path: str | Path) -> MigrationConfig:
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")
    if config_path.suffix.lower() in {".yaml", ".yml"}:
        raw = _load_yaml(config_path)
    elif config_path.suffix.lower() == ".json":
        raw = _load_json(config_path)
    else:
        raise ConfigError("Config must be .json or .yaml")
    try:
        return MigrationConfig.model_validate(raw or {})
    except ValidationError as exc:
        raise ConfigError(f"Invalid config {config_path}: {exc}") from exc
