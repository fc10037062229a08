from __future__ import annotations

from dataclasses import dataclass, field

from rotaug.constants import (
    DEFAULT_FIXED_OUTPUT_NAME,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MALFORMED_POLICY,
    DEFAULT_OUTPUT_MODE,
    DEFAULT_OUTPUT_PREFIX,
    FLIP_NONE_MARKER,
    FLIP_VERTICAL_MARKER,
    ROTATION_MARKER,
)


@dataclass
class ExpandConfig:
    rotation_step: int | None = None
    sort_output: bool = False
    workers: int = 1
    malformed_policy: str = DEFAULT_MALFORMED_POLICY


@dataclass
class OutputConfig:
    path: str | None = None
    mode: str = DEFAULT_OUTPUT_MODE
    fixed_name: str = DEFAULT_FIXED_OUTPUT_NAME
    prefix: str = DEFAULT_OUTPUT_PREFIX


@dataclass(frozen=True)
class MarkerConfig:
    rotation: str = ROTATION_MARKER
    flip_vertical: str = FLIP_VERTICAL_MARKER
    flip_none: str = FLIP_NONE_MARKER


@dataclass
class MonitoringConfig:
    log_level: str = DEFAULT_LOG_LEVEL
    json_logs: bool = False


@dataclass
class RotaugConfig:
    expand: ExpandConfig = field(default_factory=ExpandConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    markers: MarkerConfig = field(default_factory=MarkerConfig)
    monitoring: MonitoringConfig = field(default_factory=MonitoringConfig)
