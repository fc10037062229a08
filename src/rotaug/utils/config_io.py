from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from rotaug.errors import ConfigError


def load_config_file(path: str | Path | None) -> dict[str, Any]:
    if path is None:
        return {}

    p = Path(path)
    if not p.exists():
        raise ConfigError(f"Config not found: {p}")

    suffix = p.suffix.lower()
    raw = p.read_text(encoding="utf-8")

    if suffix == ".json":
        return json.loads(raw)

    if suffix == ".toml":
        try:
            import tomllib
        except ImportError:  # pragma: no cover - Python < 3.11
            import tomli as tomllib  # type: ignore

        return tomllib.loads(raw)

    if suffix in {".yaml", ".yml"}:
        loaded = yaml.safe_load(raw)
        return loaded if loaded else {}

    raise ConfigError(f"Unsupported config extension: {suffix}")


def deep_merge(base: dict[str, Any], patch: dict[str, Any]) -> dict[str, Any]:
    for key, value in patch.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def prune_none(obj: Any) -> Any:
    """Drop `None` leaves and the empty sections they leave behind."""
    if isinstance(obj, dict):
        result = {k: prune_none(v) for k, v in obj.items() if v is not None}
        return {k: v for k, v in result.items() if v not in ({}, None)}
    return obj
