"""Domain Entities"""
from .diff_result import (
    CharDiffResult,
    CharDiffSegment,
    DiffLine,
    DiffOptions,
    DiffResult,
    DiffStats,
    DiffType,
    InlineLine,
    LineNumber,
    SideBySideLine,
    SideBySideResult,
)

__all__ = [
    "CharDiffResult",
    "CharDiffSegment",
    "DiffLine",
    "DiffOptions",
    "DiffResult",
    "DiffStats",
    "DiffType",
    "InlineLine",
    "LineNumber",
    "SideBySideLine",
    "SideBySideResult",
]
