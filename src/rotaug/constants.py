from __future__ import annotations

FULL_TURN_DEGREES = 360
ANGLE_WIDTH = 3

ROTATION_MARKER = "_rot_"
FLIP_VERTICAL_MARKER = "_flip_v"
FLIP_NONE_MARKER = "_flip_n"

DEFAULT_OUTPUT_PREFIX = "augmented_"
DEFAULT_FIXED_OUTPUT_NAME = "output.txt"

DEFAULT_OUTPUT_MODE = "augmented"
OUTPUT_MODES: tuple[str, ...] = (DEFAULT_OUTPUT_MODE, "fixed")
DEFAULT_MALFORMED_POLICY = "error"
MALFORMED_POLICIES: tuple[str, ...] = (DEFAULT_MALFORMED_POLICY, "skip")

DEFAULT_LOG_LEVEL = "INFO"

CONFIG_FILE_NAMES: tuple[str, ...] = (
    "rotaug.toml",
    "rotaug.yaml",
    "rotaug.yml",
    "rotaug.json",
)
ENVVAR_PREFIX = "ROTAUG"
