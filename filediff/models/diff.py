"""Diff-related data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class SegmentKind(str, Enum):
    """Classification of a run of lines in an edit script"""

    UNCHANGED = "unchanged"
    ADDED = "added"  # present only in B
    REMOVED = "removed"  # present only in A


class DiffSegment(BaseModel):
    """A maximal contiguous run of lines sharing one kind"""

    model_config = ConfigDict(frozen=True)

    kind: SegmentKind
    lines: tuple[str, ...]

    @field_validator("lines")
    @classmethod
    def _not_empty(cls, lines: tuple[str, ...]) -> tuple[str, ...]:
        if not lines:
            raise ValueError("segment must contain at least one line")
        return lines


class DiffStats(BaseModel):
    """Line counts per segment kind"""

    added: int = 0
    removed: int = 0
    unchanged: int = 0


class EditScript(BaseModel):
    """Ordered segments describing how to turn sequence A into sequence B"""

    model_config = ConfigDict(frozen=True)

    segments: tuple[DiffSegment, ...] = ()

    @model_validator(mode="after")
    def _kinds_alternate(self) -> "EditScript":
        for prev, cur in zip(self.segments, self.segments[1:]):
            if prev.kind == cur.kind:
                raise ValueError(f"adjacent segments share kind {cur.kind.value!r}")
        return self

    @property
    def changes(self) -> list[DiffSegment]:
        """Only the added/removed segments, in order"""
        return [s for s in self.segments if s.kind != SegmentKind.UNCHANGED]

    @property
    def has_changes(self) -> bool:
        return any(s.kind != SegmentKind.UNCHANGED for s in self.segments)

    @property
    def stats(self) -> DiffStats:
        counts = {kind: 0 for kind in SegmentKind}
        for segment in self.segments:
            counts[segment.kind] += len(segment.lines)
        return DiffStats(
            added=counts[SegmentKind.ADDED],
            removed=counts[SegmentKind.REMOVED],
            unchanged=counts[SegmentKind.UNCHANGED],
        )

    def lines_a(self) -> list[str]:
        """Rebuild sequence A from unchanged and removed segments"""
        return self._collect(SegmentKind.REMOVED)

    def lines_b(self) -> list[str]:
        """Rebuild sequence B from unchanged and added segments"""
        return self._collect(SegmentKind.ADDED)

    def _collect(self, side: SegmentKind) -> list[str]:
        lines: list[str] = []
        for segment in self.segments:
            if segment.kind in (SegmentKind.UNCHANGED, side):
                lines.extend(segment.lines)
        return lines
