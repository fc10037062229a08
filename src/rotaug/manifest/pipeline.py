from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from rotaug.config.models import RotaugConfig
from rotaug.errors import InvalidStepError
from rotaug.manifest.categories import collect_categories
from rotaug.manifest.expand import expand_records, validate_step, variants_per_record
from rotaug.manifest.io import read_filelist, write_manifest
from rotaug.manifest.parser import parse_lines
from rotaug.types import PathParts

_LOGGER = logging.getLogger("rotaug.pipeline")


def _log_input_details(input_path: Path, lines: list[str]) -> None:
    parts = PathParts.from_path(input_path.as_posix())
    _LOGGER.debug(
        "input directory=%s name=%s stem=%s extension=%s size_bytes=%d",
        parts.directory,
        parts.name,
        parts.stem,
        parts.extension,
        input_path.stat().st_size,
    )
    for line in lines:
        _LOGGER.debug("input line: %s", line)


def augment_filelist(input_path: Path, output_path: Path, config: RotaugConfig) -> dict[str, Any]:
    """Read a fold file list, expand every entry and write the augmented manifest."""
    if config.expand.rotation_step is None:
        raise InvalidStepError("Rotation step is required")
    step = validate_step(config.expand.rotation_step)

    _LOGGER.info("file list path=%s rotation_step=%d", input_path, step)
    lines = read_filelist(input_path)
    if _LOGGER.isEnabledFor(logging.DEBUG):
        _log_input_details(input_path, lines)
    _LOGGER.info("lines loaded: %d", len(lines))

    records = parse_lines(lines, malformed_policy=config.expand.malformed_policy)
    augmented = expand_records(
        records,
        step,
        markers=config.markers,
        workers=config.expand.workers,
        sort_output=config.expand.sort_output,
    )
    if _LOGGER.isEnabledFor(logging.DEBUG):
        for item in augmented:
            _LOGGER.debug("output: %s", item.to_line())

    written = write_manifest(output_path, augmented)
    summary = {
        "input": str(input_path),
        "output": str(output_path),
        "rotation_step": step,
        "variants_per_record": variants_per_record(step),
        "sorted": config.expand.sort_output,
        "input_records": len(records),
        "output_records": written,
    }
    _LOGGER.info("augmentation complete", extra={"context": summary})
    return summary


def list_categories(input_path: Path, config: RotaugConfig) -> dict[str, Any]:
    records = parse_lines(read_filelist(input_path), malformed_policy=config.expand.malformed_policy)
    categories = collect_categories(records)
    _LOGGER.info("categories found: %d", len(categories))
    return {
        "input": str(input_path),
        "records": len(records),
        "categories": categories,
    }
