from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from dynaconf import Dynaconf

from rotaug.config.defaults import DEFAULT_CONFIG
from rotaug.config.models import (
    ExpandConfig,
    MarkerConfig,
    MonitoringConfig,
    OutputConfig,
    RotaugConfig,
)
from rotaug.constants import (
    CONFIG_FILE_NAMES,
    DEFAULT_FIXED_OUTPUT_NAME,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MALFORMED_POLICY,
    DEFAULT_OUTPUT_MODE,
    DEFAULT_OUTPUT_PREFIX,
    ENVVAR_PREFIX,
    FLIP_NONE_MARKER,
    FLIP_VERTICAL_MARKER,
    MALFORMED_POLICIES,
    OUTPUT_MODES,
    ROTATION_MARKER,
)
from rotaug.errors import ConfigError
from rotaug.utils.config_io import deep_merge, load_config_file


def _lower_keys(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {str(k).lower(): _lower_keys(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_lower_keys(item) for item in obj]
    return obj


def _load_env_overrides() -> dict[str, Any]:
    # ROTAUG_EXPAND__SORT_OUTPUT=true -> {"expand": {"sort_output": True}}
    settings = Dynaconf(
        envvar_prefix=ENVVAR_PREFIX,
        environments=False,
        load_dotenv=False,
    )
    return _lower_keys(settings.as_dict())


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def _coerce_int(value: Any, key: str) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{key} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{key} must be an integer, got {value!r}") from exc


def _choice(value: Any, key: str, choices: tuple[str, ...]) -> str:
    normalized = str(value).strip().lower()
    if normalized not in choices:
        raise ConfigError(f"{key} must be one of {', '.join(choices)}, got {value!r}")
    return normalized


def _normalize(data: dict[str, Any]) -> RotaugConfig:
    expand_data = data.get("expand", {})
    output_data = data.get("output", {})
    marker_data = data.get("markers", {})
    monitoring_data = data.get("monitoring", {})

    step = expand_data.get("rotation_step")
    workers = _coerce_int(expand_data.get("workers", 1), "expand.workers")
    if workers < 1:
        raise ConfigError(f"expand.workers must be >= 1, got {workers}")

    return RotaugConfig(
        expand=ExpandConfig(
            rotation_step=None if step is None else _coerce_int(step, "expand.rotation_step"),
            sort_output=_coerce_bool(expand_data.get("sort_output", False)),
            workers=workers,
            malformed_policy=_choice(
                expand_data.get("malformed_policy", DEFAULT_MALFORMED_POLICY),
                "expand.malformed_policy",
                MALFORMED_POLICIES,
            ),
        ),
        output=OutputConfig(
            path=str(output_data["path"]) if output_data.get("path") else None,
            mode=_choice(output_data.get("mode", DEFAULT_OUTPUT_MODE), "output.mode", OUTPUT_MODES),
            fixed_name=str(output_data.get("fixed_name", DEFAULT_FIXED_OUTPUT_NAME)),
            prefix=str(output_data.get("prefix", DEFAULT_OUTPUT_PREFIX)),
        ),
        markers=MarkerConfig(
            rotation=str(marker_data.get("rotation", ROTATION_MARKER)),
            flip_vertical=str(marker_data.get("flip_vertical", FLIP_VERTICAL_MARKER)),
            flip_none=str(marker_data.get("flip_none", FLIP_NONE_MARKER)),
        ),
        monitoring=MonitoringConfig(
            log_level=str(monitoring_data.get("log_level", DEFAULT_LOG_LEVEL)).upper(),
            json_logs=_coerce_bool(monitoring_data.get("json_logs", False)),
        ),
    )


def _default_config_copy() -> dict[str, Any]:
    return json.loads(json.dumps(DEFAULT_CONFIG))


def load_rotaug_config(
    work_dir: Path,
    config_path: str | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> RotaugConfig:
    """Merge defaults, config files, ROTAUG_* env vars and CLI overrides, in that order."""
    config_paths: list[Path] = []
    if config_path:
        config_paths.append(Path(config_path))
    else:
        for name in CONFIG_FILE_NAMES:
            candidate = work_dir / name
            if candidate.exists():
                config_paths.append(candidate)

    merged = _default_config_copy()
    for path in config_paths:
        deep_merge(merged, _lower_keys(load_config_file(path)))

    env_data = _load_env_overrides()
    if env_data:
        deep_merge(merged, env_data)

    if cli_overrides:
        deep_merge(merged, _lower_keys(cli_overrides))

    return _normalize(merged)


def rotaug_config_to_dict(config: RotaugConfig) -> dict[str, Any]:
    return asdict(config)
