"""Result types shared by the EDTF engine.

``SegmentResult`` describes one side of a possibly two-sided EDTF value and
``ParseResult`` bundles the primary side with the optional secondary side of
an interval.  Both are immutable and created fresh for every call.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .modifiers import CustomModifier

__all__ = ["EdtfFormat", "SegmentResult", "ParseResult", "DateRange"]


class EdtfFormat(Enum):
    """Granularity of a clean EDTF date."""

    YEAR = "YYYY"
    YEAR_MONTH = "YYYY-MM"
    YEAR_MONTH_DAY = "YYYY-MM-DD"

    @property
    def unit(self) -> str:
        """Calendar unit name, usable as a ``relativedelta`` keyword."""

        return _UNITS[self]

    @classmethod
    def from_clean(cls, clean_segment: str) -> "EdtfFormat":
        """Derive the format from the length of ``clean_segment``."""

        for fmt in cls:
            if len(fmt.value) == len(clean_segment):
                return fmt
        raise ValueError(f"no EDTF format has length {len(clean_segment)}: {clean_segment!r}")


_UNITS = {
    EdtfFormat.YEAR: "years",
    EdtfFormat.YEAR_MONTH: "months",
    EdtfFormat.YEAR_MONTH_DAY: "days",
}


@dataclass(slots=True, frozen=True)
class SegmentResult:
    """One resolved side of an EDTF value.

    ``min_instant`` and ``max_instant`` are UTC datetimes already widened by
    the approximate variance (if any) and snapped to whole units.
    """

    clean_segment: str
    format: EdtfFormat
    detected_modifiers: tuple[CustomModifier, ...]
    is_approximate: bool
    is_uncertain: bool
    has_open_start: bool
    has_open_end: bool
    min_instant: datetime
    max_instant: datetime

    def __post_init__(self) -> None:
        if self.min_instant > self.max_instant:
            raise ValueError("min_instant must not be after max_instant")

    @property
    def qualifier(self) -> str:
        """Return the built-in qualifier symbol, or an empty string."""

        if self.is_approximate and self.is_uncertain:
            return "%"
        if self.is_approximate:
            return "~"
        if self.is_uncertain:
            return "?"
        return ""

    def to_edtf(self) -> str:
        """Rebuild an EDTF segment equivalent to the parsed one."""

        edtf = self.clean_segment + self.qualifier
        if self.has_open_start and self.has_open_end:
            edtf = f"[..{edtf}..]"
        elif self.has_open_start:
            edtf = f"[..{edtf}]"
        elif self.has_open_end:
            edtf = f"[{edtf}..]"
        for modifier in self.detected_modifiers:
            edtf = modifier.add(edtf)
        return edtf


@dataclass(slots=True, frozen=True)
class ParseResult:
    """Primary segment plus the secondary one of an interval."""

    primary: SegmentResult
    secondary: SegmentResult | None = None

    @property
    def is_interval(self) -> bool:
        return self.secondary is not None

    @property
    def segments(self) -> Iterator[SegmentResult]:
        yield self.primary
        if self.secondary is not None:
            yield self.secondary

    def to_edtf(self) -> str:
        return "/".join(segment.to_edtf() for segment in self.segments)


@dataclass(slots=True, frozen=True)
class DateRange:
    """Minimum and maximum instant an EDTF value can denote.

    ``None`` marks an open side of the range.
    """

    min: datetime | None
    max: datetime | None
