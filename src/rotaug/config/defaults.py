from __future__ import annotations

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


DEFAULT_CONFIG: dict = {
    "expand": {
        "rotation_step": None,
        "sort_output": False,
        "workers": 1,
        "malformed_policy": DEFAULT_MALFORMED_POLICY,
    },
    "output": {
        "path": None,
        "mode": DEFAULT_OUTPUT_MODE,
        "fixed_name": DEFAULT_FIXED_OUTPUT_NAME,
        "prefix": DEFAULT_OUTPUT_PREFIX,
    },
    "markers": {
        "rotation": ROTATION_MARKER,
        "flip_vertical": FLIP_VERTICAL_MARKER,
        "flip_none": FLIP_NONE_MARKER,
    },
    "monitoring": {
        "log_level": DEFAULT_LOG_LEVEL,
        "json_logs": False,
    },
}
