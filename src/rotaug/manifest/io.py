from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from rotaug.errors import InputNotFoundError, MalformedLineError, OutputWriteError
from rotaug.manifest.parser import tokenize
from rotaug.types import AugmentedRecord

_LOGGER = logging.getLogger("rotaug.manifest.io")


def read_filelist(path: Path) -> list[str]:
    """Lines of `path`, split on newlines only.

    `str.splitlines` would also break on form feeds and other characters that
    `str.split` treats as token whitespace.
    """
    if not path.is_file():
        raise InputNotFoundError(f"Invalid file path: {path}")
    lines = path.read_text(encoding="utf-8").split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def write_manifest(path: Path, records: Iterable[AugmentedRecord]) -> int:
    """Write records to a sibling temp file, then move it over `path`."""
    count = 0
    tmp_path = path.with_name(f".{path.name}.tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tmp_path.open("w", encoding="utf-8") as handle:
            for record in records:
                handle.write(record.to_line() + "\n")
                count += 1
        tmp_path.replace(path)
    except OSError as exc:
        if tmp_path.exists():
            tmp_path.unlink()
        raise OutputWriteError(f"Cannot write output {path}: {exc}") from exc
    _LOGGER.info("wrote %d records to %s", count, path)
    return count


def read_manifest(path: Path) -> list[AugmentedRecord]:
    records: list[AugmentedRecord] = []
    for line_number, line in enumerate(read_filelist(path), start=1):
        tokens = tokenize(line)
        if not tokens:
            continue
        if len(tokens) < 2:
            raise MalformedLineError(line_number, line)
        records.append(AugmentedRecord(path=tokens[0], label=tokens[1]))
    return records


def default_output_name(input_path: Path, mode: str, prefix: str, fixed_name: str) -> str:
    if mode == "fixed":
        return fixed_name
    return f"{prefix}{input_path.name}"
