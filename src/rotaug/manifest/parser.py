from __future__ import annotations

import logging
from typing import Iterable

from rotaug.constants import DEFAULT_MALFORMED_POLICY
from rotaug.errors import MalformedLineError
from rotaug.types import InputRecord

_LOGGER = logging.getLogger("rotaug.manifest.parser")


def tokenize(line: str) -> tuple[str, ...]:
    return tuple(line.split())


def parse_line(line: str, line_number: int = 0) -> InputRecord | None:
    """Parse one `<path> <label>` line; blank lines yield None."""
    tokens = tokenize(line)
    if not tokens:
        return None
    if len(tokens) < 2:
        raise MalformedLineError(line_number, line)
    return InputRecord(path=tokens[0], label=tokens[1], line_number=line_number)


def parse_lines(lines: Iterable[str], malformed_policy: str = DEFAULT_MALFORMED_POLICY) -> list[InputRecord]:
    records: list[InputRecord] = []
    skipped = 0
    for line_number, line in enumerate(lines, start=1):
        try:
            record = parse_line(line, line_number)
        except MalformedLineError as exc:
            if malformed_policy != "skip":
                raise
            skipped += 1
            _LOGGER.warning("skipping %s", exc)
            continue
        if record is not None:
            records.append(record)

    if skipped:
        _LOGGER.warning("skipped %d malformed line(s)", skipped)
    return records
