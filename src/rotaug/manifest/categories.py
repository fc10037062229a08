from __future__ import annotations

from typing import Iterable

from rotaug.types import InputRecord


def category_of(path: str) -> str:
    """Top-level directory of a manifest path, or the whole path when it has none."""
    return path.split("/", 1)[0]


def collect_categories(records: Iterable[InputRecord]) -> list[str]:
    return sorted({category_of(record.path) for record in records})
