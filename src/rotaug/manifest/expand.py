from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Sequence

from rotaug.config.models import MarkerConfig
from rotaug.constants import ANGLE_WIDTH, FULL_TURN_DEGREES
from rotaug.errors import InvalidStepError
from rotaug.types import AugmentedRecord, InputRecord

_LOGGER = logging.getLogger("rotaug.manifest.expand")


def validate_step(step: object) -> int:
    if isinstance(step, bool) or not isinstance(step, int):
        raise InvalidStepError(f"Rotation step must be a positive integer, got {step!r}")
    if step <= 0:
        raise InvalidStepError(f"Rotation step must be a positive integer, got {step}")
    return step


def rotation_angles(step: int) -> range:
    """Angles 0, step, 2*step, ... below a full turn; a partial last step is dropped."""
    return range(0, FULL_TURN_DEGREES, validate_step(step))


def format_angle(angle: int) -> str:
    return f"{angle:0{ANGLE_WIDTH}d}"


def variants_per_record(step: int) -> int:
    return 2 * len(rotation_angles(step))


def expand_record(
    record: InputRecord,
    step: int,
    markers: MarkerConfig | None = None,
) -> list[AugmentedRecord]:
    markers = markers or MarkerConfig()
    parts = record.parts
    output: list[AugmentedRecord] = []
    for angle in rotation_angles(step):
        rotated = f"{markers.rotation}{format_angle(angle)}"
        for flip in (markers.flip_vertical, markers.flip_none):
            output.append(
                AugmentedRecord(path=parts.with_stem_suffix(rotated + flip), label=record.label)
            )
    return output


def expand_records(
    records: Sequence[InputRecord],
    step: int,
    markers: MarkerConfig | None = None,
    workers: int = 1,
    sort_output: bool = False,
) -> list[AugmentedRecord]:
    """Expand every record, keeping input order unless `sort_output` is set.

    With `workers > 1` records are expanded on a thread pool; `map` yields
    results in submission order so the output matches the sequential run.
    """
    validate_step(step)
    expand_one = partial(expand_record, step=step, markers=markers)

    if workers > 1 and len(records) > 1:
        _LOGGER.debug("expanding %d records with %d workers", len(records), workers)
        with ThreadPoolExecutor(max_workers=workers) as executor:
            batches = list(executor.map(expand_one, records))
    else:
        batches = [expand_one(record) for record in records]

    output = [item for batch in batches for item in batch]
    if sort_output:
        output.sort(key=lambda item: item.to_line())
    return output
