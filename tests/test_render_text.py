"""Tests for templated text rendering."""

from __future__ import annotations

import pytest

from edtf_converter.config import ConverterOptions
from edtf_converter.edtf.intervals import parse_edtf
from edtf_converter.edtf.models import EdtfFormat
from edtf_converter.locales import build_locale_data
from edtf_converter.render.text import format_date, render_segment, render_text

EN = build_locale_data(["en"])
FR = build_locale_data(["fr"])
OPTIONS = ConverterOptions()


@pytest.mark.parametrize(
    ("clean", "fmt", "expected_en", "expected_fr"),
    [
        ("1930", EdtfFormat.YEAR, "1930", "1930"),
        ("1930-05", EdtfFormat.YEAR_MONTH, "May 1930", "mai 1930"),
        ("1930-05-03", EdtfFormat.YEAR_MONTH_DAY, "May 3, 1930", "3 mai 1930"),
    ],
)
def test_format_date(clean: str, fmt: EdtfFormat, expected_en: str, expected_fr: str) -> None:
    assert format_date(clean, fmt, EN) == expected_en
    assert format_date(clean, fmt, FR) == expected_fr


def test_keyword_order() -> None:
    segment = parse_edtf("[..1930%]", OPTIONS).primary
    assert render_segment(segment, EN) == "before possibly circa 1930"


def test_open_end_precedes_open_start() -> None:
    segment = parse_edtf("[..1930..]", OPTIONS).primary
    assert render_segment(segment, EN) == "after before 1930"


def test_custom_keywords_come_first() -> None:
    options = ConverterOptions(custom_modifiers=[{"keyword": "early", "marker": "!e"}])
    segment = parse_edtf("1930~!e", options).primary
    assert render_segment(segment, EN) == "early circa 1930"


def test_interval_joined_with_primary_delimiter() -> None:
    result = parse_edtf("1930/1935-02", OPTIONS)
    assert render_text(result.segments, EN) == "1930 to February 1935"
    assert render_text(result.segments, FR) == "1930 à février 1935"


def test_merged_locale_uses_first_priority() -> None:
    fr_en = build_locale_data(["fr", "en"])
    segment = parse_edtf("~1930-01", OPTIONS).primary
    assert render_segment(segment, fr_en) == "vers janvier 1930"
