"""Templated text rendering of resolved EDTF segments.

A segment renders as its keywords followed by its date: custom modifier
keywords, then the open-end, open-start, uncertain and approximate keywords
as applicable, then the date formatted with the most preferred template for
its granularity.  Two segments are joined by the preferred interval
delimiter.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..edtf.models import EdtfFormat, SegmentResult
from ..locales import LocaleData

__all__ = ["format_date", "render_segment", "render_text"]


def format_date(clean_segment: str, fmt: EdtfFormat, locale: LocaleData) -> str:
    """Format ``clean_segment`` with the first template for ``fmt``."""

    parts = clean_segment.split("-")
    fields: dict[str, str] = {"year": parts[0]}
    if fmt is not EdtfFormat.YEAR:
        month = int(parts[1])
        fields["month"] = f"{month:02d}"
        fields["month_name"] = locale.month_name(month)
    if fmt is EdtfFormat.YEAR_MONTH_DAY:
        day = int(parts[2])
        fields["day"] = str(day)
        fields["day2"] = f"{day:02d}"
    template = locale.date_formats.for_format(fmt)[0]
    return template.format(**fields)


def render_segment(segment: SegmentResult, locale: LocaleData) -> str:
    """Render one segment as keywords followed by its formatted date."""

    keywords = locale.keywords
    words = [modifier.keyword for modifier in segment.detected_modifiers]
    if segment.has_open_end:
        words.append(keywords.interval.open_end[0])
    if segment.has_open_start:
        words.append(keywords.interval.open_start[0])
    if segment.is_uncertain:
        words.append(keywords.uncertain[0])
    if segment.is_approximate:
        words.append(keywords.approximate[0])
    words.append(format_date(segment.clean_segment, segment.format, locale))
    return " ".join(words)


def render_text(segments: Iterable[SegmentResult], locale: LocaleData) -> str:
    """Render ``segments`` joined by the preferred interval delimiter."""

    delimiter = locale.keywords.interval.delimiters[0]
    return f" {delimiter} ".join(render_segment(segment, locale) for segment in segments)
