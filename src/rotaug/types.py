from __future__ import annotations

import posixpath
from dataclasses import dataclass, field


@dataclass(frozen=True)
class InputRecord:
    """One `<path> <label>` entry from a fold file list."""

    path: str
    label: str
    line_number: int = field(default=0, compare=False)

    @property
    def parts(self) -> PathParts:
        return PathParts.from_path(self.path)


@dataclass(frozen=True)
class PathParts:
    """Directory, stem and extension of a manifest path.

    Paths are split on `/` regardless of host platform, since fold file lists
    use `/` separators. The extension starts at the last `.` of the final
    segment, so `.jpg` has an empty stem; a trailing slash leaves both stem and
    extension empty.
    """

    directory: str
    stem: str
    extension: str

    @classmethod
    def from_path(cls, path: str) -> PathParts:
        directory, name = posixpath.split(path)
        dot = name.rfind(".")
        if dot < 0:
            return cls(directory=directory, stem=name, extension="")
        return cls(directory=directory, stem=name[:dot], extension=name[dot:])

    @property
    def name(self) -> str:
        return f"{self.stem}{self.extension}"

    def with_stem_suffix(self, suffix: str) -> str:
        """Rebuild the path with `suffix` inserted between stem and extension."""
        filename = f"{self.stem}{suffix}{self.extension}"
        if not self.directory:
            return filename
        return posixpath.join(self.directory, filename)


@dataclass(frozen=True)
class AugmentedRecord:
    path: str
    label: str

    def to_line(self) -> str:
        return f"{self.path} {self.label}"
