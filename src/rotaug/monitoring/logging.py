from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, TextIO

from rotaug.constants import DEFAULT_LOG_LEVEL

ROOT_LOGGER_NAME = "rotaug"


class JsonFormatter(logging.Formatter):
    """One JSON object per record; `extra={"context": {...}}` fields are merged in."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        if hasattr(record, "context") and isinstance(record.context, dict):
            payload.update(record.context)
        return json.dumps(payload, ensure_ascii=True)


def configure_logging(
    level: str = DEFAULT_LOG_LEVEL,
    json_logs: bool = False,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Attach a single stderr handler to the `rotaug` logger tree.

    Calling it again replaces the previous handler, so each CLI invocation
    starts from a clean state.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    handler = logging.StreamHandler(stream)
    if json_logs:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s %(levelname)s %(name)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    logger.addHandler(handler)
    return logger
