"""Dataclasses for scan locations and per-unit report metadata."""

from __future__ import annotations

from dataclasses import dataclass

from gherkinics.constants.reporting import UNLOCATED_LABEL


@dataclass(frozen=True)
class Token:
    """Location marker emitted by the scanning engine while it walks a unit."""

    id: int
    text: str = ""


@dataclass(frozen=True)
class LocationKey:
    """Bucket key for feedback: either a located line or the unit itself.

    ``line is None`` is the unit-level variant. It always sorts before every
    located key, so ``LocationKey.located(0)`` and ``UNLOCATED`` never collide.
    """

    line: int | None = None

    @classmethod
    def located(cls, line: int) -> LocationKey:
        """Build a key for a concrete line/position."""
        if isinstance(line, bool) or not isinstance(line, int):
            raise TypeError(f"Location line must be an int, got {type(line).__name__}")
        return cls(line=line)

    @classmethod
    def coerce(cls, value: LocationKey | Token | int | None) -> LocationKey:
        """Normalize tokens, raw integers, and ``None`` into a key.

        A raw ``0`` maps to ``UNLOCATED`` to accept feeders that still use the
        numeric sentinel.
        """
        if isinstance(value, LocationKey):
            return value
        if value is None:
            return UNLOCATED
        if isinstance(value, Token):
            return cls.located(value.id)
        if value == UNLOCATED_LABEL:
            return UNLOCATED
        return cls.located(value)

    @property
    def is_unlocated(self) -> bool:
        return self.line is None

    @property
    def label(self) -> int:
        """Numeric label for rendered output; unit-level feedback shows as ``0``."""
        return UNLOCATED_LABEL if self.line is None else self.line

    def sort_key(self) -> tuple[int, int]:
        if self.line is None:
            return (0, 0)
        return (1, self.line)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocationKey):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        return str(self.label)


UNLOCATED = LocationKey()


@dataclass(frozen=True)
class ScannedUnitMetadata:
    """Derived report metadata for one scanned unit."""

    source_path: str
    path: str
    directory: str
    name: str
    extension: str
    hash: str
    violated_line_count: int
    message_count: int = 0

    def to_dict(self) -> dict[str, object]:
        """Return template-facing fields in a stable key order."""
        return {
            "source_path": self.source_path,
            "path": self.path,
            "directory": self.directory,
            "name": self.name,
            "extension": self.extension,
            "hash": self.hash,
            "violated_line_count": self.violated_line_count,
            "message_count": self.message_count,
        }
