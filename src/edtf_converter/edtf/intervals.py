"""Interval assembly: split an EDTF value into segments and resolve them.

Each side of ``/`` flows through modifier detection, grammar validation and
range resolution independently.  :func:`combine_range` folds the resolved
segments into one :class:`DateRange`; only the primary segment's open flags
decide whether a side of the range is open.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..utils.errors import InvalidEdtf
from .grammar import validate_segment
from .models import DateRange, EdtfFormat, ParseResult, SegmentResult
from .modifiers import CustomModifier, detect_modifiers
from .resolver import resolve

if TYPE_CHECKING:  # pragma: no cover
    from ..config.schema import ApproximateVariance, ConverterOptions

__all__ = ["INTERVAL_SEPARATOR", "split_interval", "parse_segment", "parse_edtf", "combine_range"]

INTERVAL_SEPARATOR = "/"


def split_interval(edtf: str) -> list[str]:
    """Split ``edtf`` into at most two segments."""

    pieces = edtf.split(INTERVAL_SEPARATOR)
    if len(pieces) > 2:
        raise InvalidEdtf(edtf, f"more than one '{INTERVAL_SEPARATOR}' separator")
    return pieces


def parse_segment(
    raw_segment: str,
    variance: "ApproximateVariance",
    custom_modifiers: Sequence[CustomModifier] = (),
) -> SegmentResult:
    """Detect modifiers, validate and resolve one segment."""

    detection = detect_modifiers(raw_segment, custom_modifiers)
    validate_segment(detection.segment)
    fmt = EdtfFormat.from_clean(detection.clean_segment)
    min_instant, max_instant = resolve(
        detection.clean_segment, fmt, detection.is_approximate, variance
    )
    return SegmentResult(
        clean_segment=detection.clean_segment,
        format=fmt,
        detected_modifiers=detection.detected_modifiers,
        is_approximate=detection.is_approximate,
        is_uncertain=detection.is_uncertain,
        has_open_start=detection.has_open_start,
        has_open_end=detection.has_open_end,
        min_instant=min_instant,
        max_instant=max_instant,
    )


def parse_edtf(edtf: str, options: "ConverterOptions") -> ParseResult:
    """Parse ``edtf`` into its primary and optional secondary segment."""

    segments = [
        parse_segment(piece, options.approximate_variance, options.custom_modifiers)
        for piece in split_interval(edtf)
    ]
    return ParseResult(*segments)


def combine_range(result: ParseResult) -> DateRange:
    """Fold a parse result into the overall ``min``/``max`` range.

    An open start on the primary segment leaves ``min`` open, an open end
    leaves ``max`` open.  Open flags on the secondary segment are not
    consulted.
    """

    primary = result.primary
    if primary.has_open_start:
        return DateRange(min=None, max=primary.max_instant)
    if primary.has_open_end:
        return DateRange(min=primary.min_instant, max=None)
    upper = result.secondary if result.secondary is not None else primary
    return DateRange(min=primary.min_instant, max=upper.max_instant)
