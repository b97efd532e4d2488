"""Tests for locale pack loading and merging."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from edtf_converter.locales import (
    LocaleData,
    available_locales,
    build_locale_data,
    load_locale_pack,
    merge_locale_data,
)
from edtf_converter.utils.errors import UnsupportedLocale


def test_available_locales() -> None:
    assert available_locales() == ["en", "fr"]


def test_single_locale_primary_keywords() -> None:
    en = build_locale_data(["en"])
    assert en.keywords.approximate[0] == "circa"
    assert en.keywords.interval.delimiters[0] == "to"
    assert en.month_name(5) == "May"
    fr = build_locale_data(["fr"])
    assert fr.keywords.approximate[0] == "vers"
    assert fr.month_name(5) == "mai"


def test_merge_order_changes_primary_not_set() -> None:
    en_fr = build_locale_data(["en", "fr"])
    fr_en = build_locale_data(["fr", "en"])
    assert en_fr.keywords.approximate[0] == "circa"
    assert fr_en.keywords.approximate[0] == "vers"
    assert set(en_fr.keywords.approximate) == set(fr_en.keywords.approximate)
    assert set(en_fr.keywords.interval.delimiters) == set(fr_en.keywords.interval.delimiters)
    assert en_fr.date_formats.year_month_day[0] == "{month_name} {day}, {year}"
    assert fr_en.date_formats.year_month_day[0] == "{day} {month_name} {year}"


def test_merge_deduplicates_shared_variants() -> None:
    en_fr = build_locale_data(["en", "fr"])
    assert en_fr.keywords.approximate.count("circa") == 1
    assert en_fr.months[1] == ("January", "Jan", "janvier", "janv.")


def test_merge_lists_concatenate_in_priority_order() -> None:
    merged = merge_locale_data([{"a": ["x", "", "y"]}, {"a": ["y", "z"]}])
    assert merged == {"a": ["x", "y", "z"]}


def test_merge_promotes_strings() -> None:
    assert merge_locale_data([{"a": "x"}, {"a": "y"}]) == {"a": ["x", "y"]}
    assert merge_locale_data([{"a": "x"}, {"a": "x"}]) == {"a": ["x"]}


def test_merge_nested_mappings() -> None:
    merged = merge_locale_data([{"k": {"a": ["1"]}}, {"k": {"a": ["2"], "b": ["3"]}}])
    assert merged == {"k": {"a": ["1", "2"], "b": ["3"]}}


def test_merge_does_not_mutate_packs() -> None:
    first = {"a": ["x"]}
    merge_locale_data([first, {"a": ["y"]}])
    assert first == {"a": ["x"]}


@pytest.mark.parametrize("locale", ["xx", "../en", "EN", ""])
def test_unknown_locale(locale: str) -> None:
    with pytest.raises(UnsupportedLocale) as excinfo:
        load_locale_pack(locale)
    assert excinfo.value.locale == locale


def test_build_rejects_unknown_locale_in_list() -> None:
    with pytest.raises(UnsupportedLocale):
        build_locale_data(["en", "xx"])


def test_single_string_keywords_promoted() -> None:
    pack = load_locale_pack("en")
    pack["keywords"]["approximate"] = "circa"
    data = LocaleData.model_validate(pack)
    assert data.keywords.approximate == ("circa",)


def test_incomplete_months_rejected() -> None:
    pack = load_locale_pack("en")
    del pack["months"][12]
    with pytest.raises(ValidationError):
        LocaleData.model_validate(pack)
