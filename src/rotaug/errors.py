from __future__ import annotations


class RotaugError(RuntimeError):
    """Base class for errors that abort an augmentation run."""


class InputNotFoundError(RotaugError):
    """Raised when the fold file list does not exist."""


class MalformedLineError(RotaugError):
    """Raised when an input line has fewer than two tokens."""

    def __init__(self, line_number: int, line: str) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__(
            f"Malformed line {line_number}: expected '<path> <label>', got {line.strip()!r}"
        )


class InvalidStepError(RotaugError):
    """Raised when the rotation step is not a positive integer."""


class OutputWriteError(RotaugError):
    """Raised when the augmented manifest cannot be written."""


class ConfigError(RotaugError):
    """Raised when configuration files or values are unusable."""
