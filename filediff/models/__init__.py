"""Models module - Pydantic data models"""

from .diff import DiffSegment, DiffStats, EditScript, SegmentKind
from .settings import ColorMode, DiffSettings

__all__ = [
    # Diff models
    "SegmentKind",
    "DiffSegment",
    "DiffStats",
    "EditScript",
    # Settings
    "ColorMode",
    "DiffSettings",
]
