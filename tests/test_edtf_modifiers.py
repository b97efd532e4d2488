"""Tests for built-in and custom modifier detection."""

from __future__ import annotations

import re

import pytest

from edtf_converter.edtf.modifiers import (
    APPROXIMATE,
    BUILTIN_MODIFIERS,
    CustomModifier,
    Modifier,
    detect_modifiers,
)


@pytest.mark.parametrize(
    ("raw", "approximate", "uncertain"),
    [
        ("1930", False, False),
        ("~1930", True, False),
        ("1930~", True, False),
        ("1930?", False, True),
        ("%1930", True, True),
        ("1930-05%", True, True),
    ],
)
def test_qualifiers(raw: str, approximate: bool, uncertain: bool) -> None:
    result = detect_modifiers(raw)
    assert result.is_approximate is approximate
    assert result.is_uncertain is uncertain
    assert result.clean_segment == raw.strip("~?%")


def test_open_start() -> None:
    result = detect_modifiers("[..1930]")
    assert result.has_open_start is True
    assert result.has_open_end is False
    assert result.clean_segment == "1930"


def test_open_end() -> None:
    result = detect_modifiers("[1930-05..]")
    assert result.has_open_start is False
    assert result.has_open_end is True
    assert result.clean_segment == "1930-05"


def test_bracket_without_dots_is_not_open() -> None:
    result = detect_modifiers("[1930]")
    assert result.has_open_start is False
    assert result.has_open_end is False
    assert result.clean_segment == "1930"


def test_clean_segment_strips_whitespace_and_markers() -> None:
    result = detect_modifiers("[ .. 1930-05 ~ ]")
    assert result.clean_segment == "1930-05"
    assert result.has_open_start is True
    assert result.is_approximate is True


def test_builtins_satisfy_protocol() -> None:
    for modifier in BUILTIN_MODIFIERS:
        assert isinstance(modifier, Modifier)
    assert APPROXIMATE.strip("~1930%") == "1930"


def test_custom_modifier_from_marker() -> None:
    early = CustomModifier.from_marker("early", "!e")
    assert isinstance(early, Modifier)
    result = detect_modifiers("1930!e~", [early])
    assert result.detected_modifiers == (early,)
    assert result.segment == "1930~"
    assert result.is_approximate is True
    assert result.clean_segment == "1930"


def test_custom_pattern_string_is_compiled() -> None:
    modifier = CustomModifier(
        "late",
        r"late",  # type: ignore[arg-type]
        lambda s: s.replace("late", ""),
        lambda s: s + "late",
    )
    assert isinstance(modifier.pattern, re.Pattern)
    assert modifier.detect("1930late")


def test_custom_markers_stripped_before_builtins() -> None:
    questionable = CustomModifier.from_marker("questionable", "??")
    result = detect_modifiers("1930??", [questionable])
    assert result.detected_modifiers == (questionable,)
    assert result.is_uncertain is False
    assert result.clean_segment == "1930"


def test_custom_modifiers_layer_in_configuration_order() -> None:
    early = CustomModifier(
        "early",
        re.compile(r"early"),
        lambda s: s.replace("early", "").strip(),
        lambda s: f"early {s}",
    )
    anchored = CustomModifier("anchored", re.compile(r"^19"), lambda s: s, lambda s: s)

    layered = detect_modifiers("early 1930", [early, anchored])
    assert layered.detected_modifiers == (early, anchored)

    reversed_order = detect_modifiers("early 1930", [anchored, early])
    assert reversed_order.detected_modifiers == (early,)
