"""Tests for the EDTF grammar validator."""

from __future__ import annotations

import pytest

from edtf_converter.edtf.grammar import check_day, check_month, validate_edtf, validate_segment
from edtf_converter.edtf.modifiers import detect_modifiers
from edtf_converter.utils.errors import InvalidEdtf


@pytest.mark.parametrize(
    "segment",
    [
        "1930",
        "1930-05",
        "1930-05-03",
        "1930-10",
        "1930-05-10",
        "1930-05-20",
        "1930-05-31",
        "~1930",
        "1930~",
        "1930?",
        "%1930-05",
        "~ 1930",
        " 1930 ",
        "[..1930]",
        "[1930..]",
        "[..1930..]",
        "[.. 1930-05 ]",
        "[1930]",
        "[..1930~]",
    ],
)
def test_valid_segments(segment: str) -> None:
    validate_segment(segment)


def test_day_bound_is_not_calendar_aware() -> None:
    validate_segment("1930-02-31")


@pytest.mark.parametrize(
    "segment",
    [
        "",
        "193",
        "19305",
        "1930-5",
        "1930-13",
        "1930-00",
        "1930-05-00",
        "1930-05-32",
        "1930-05-03-01",
        "0000",
        "abc",
        "..1930",
        "1930..",
        "[..1930..",
        "~~1930",
        "1930-",
    ],
)
def test_invalid_segments(segment: str) -> None:
    with pytest.raises(InvalidEdtf) as excinfo:
        validate_segment(segment)
    assert excinfo.value.segment == segment


def test_error_message_names_segment() -> None:
    with pytest.raises(InvalidEdtf, match='"1930-13"'):
        validate_segment("1930-13")


def test_check_month_bounds() -> None:
    assert check_month("01") == 1
    assert check_month("12") == 12
    with pytest.raises(InvalidEdtf):
        check_month("13")
    with pytest.raises(InvalidEdtf):
        check_month("00")
    with pytest.raises(InvalidEdtf):
        check_month("5")


def test_check_day_bounds() -> None:
    assert check_day("01") == 1
    assert check_day("31") == 31
    with pytest.raises(InvalidEdtf):
        check_day("32")
    with pytest.raises(InvalidEdtf) as excinfo:
        check_day("00", "1930-05-00")
    assert excinfo.value.segment == "1930-05-00"


def test_validate_interval() -> None:
    validate_edtf("1930/1935")
    validate_edtf("~1930-05/[1935..]")


def test_validate_interval_reports_offending_side() -> None:
    with pytest.raises(InvalidEdtf) as excinfo:
        validate_edtf("1930/1935-13")
    assert excinfo.value.segment == "1935-13"


@pytest.mark.parametrize("edtf", ["1930/1931/1932", "1930//1931"])
def test_rejects_more_than_one_separator(edtf: str) -> None:
    with pytest.raises(InvalidEdtf):
        validate_edtf(edtf)


def test_rejects_empty_interval_side() -> None:
    with pytest.raises(InvalidEdtf):
        validate_edtf("1930/")


def test_unicode_whitespace_between_tokens() -> None:
    validate_segment("1930\u00a0")
    validate_segment("\u2003[..1930-05\u3000]")
    assert detect_modifiers("1930\u00a0").clean_segment == "1930"
