"""Locale data packs and the strategy merging them by priority.

Each pack is a YAML resource named ``<identifier>.yml`` in this package.
Packs are merged in priority order into one :class:`LocaleData` table:

* lists are concatenated, empty and duplicate entries dropped, first-seen
  order kept;
* a single string is promoted to a list holding it and the incoming value;
* nested mappings are merged key by key.

Consequently the *set* of recognized variants does not depend on the order
of the packs while index 0, the variant used for rendering, does.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping, Sequence
from functools import lru_cache
from importlib import resources as importlib_resources
from types import MappingProxyType
from typing import Annotated, Any

import yaml
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator

from ..edtf.models import EdtfFormat
from ..utils.errors import UnsupportedLocale
from ..utils.logging import get_logger

__all__ = [
    "LocaleData",
    "Keywords",
    "IntervalKeywords",
    "DateFormats",
    "available_locales",
    "load_locale_pack",
    "merge_locale_data",
    "build_locale_data",
]

logger = get_logger(__name__)

_IDENTIFIER_RX = re.compile(r"[a-z]{2,3}(?:[-_][A-Za-z0-9]+)*")


def _as_tuple(value: Any) -> Any:
    if isinstance(value, str):
        return (value,)
    return value


KeywordList = Annotated[tuple[str, ...], BeforeValidator(_as_tuple)]

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class IntervalKeywords(BaseModel):
    """Words delimiting or opening an interval."""

    delimiters: KeywordList = Field(min_length=1)
    open_start: KeywordList = Field(min_length=1)
    open_end: KeywordList = Field(min_length=1)

    model_config = ConfigDict(extra="forbid", frozen=True)


class Keywords(BaseModel):
    """Words signalling EDTF features."""

    approximate: KeywordList = Field(min_length=1)
    uncertain: KeywordList = Field(min_length=1)
    interval: IntervalKeywords

    model_config = ConfigDict(extra="forbid", frozen=True)


class DateFormats(BaseModel):
    """Rendering templates per date granularity, most preferred first.

    Templates use ``str.format`` placeholders: ``{year}``, ``{month}``
    (zero padded), ``{month_name}``, ``{day}`` and ``{day2}`` (zero padded).
    """

    year: KeywordList = Field(min_length=1)
    year_month: KeywordList = Field(min_length=1)
    year_month_day: KeywordList = Field(min_length=1)

    model_config = ConfigDict(extra="forbid", frozen=True)

    def for_format(self, fmt: EdtfFormat) -> tuple[str, ...]:
        if fmt is EdtfFormat.YEAR:
            return self.year
        if fmt is EdtfFormat.YEAR_MONTH:
            return self.year_month
        return self.year_month_day


class LocaleData(BaseModel):
    """Effective keyword/format table for one or more merged packs.

    Instances are cached and shared by converters using the same locales.
    Keyword lists are tuples and ``months`` is a read-only mapping.
    """

    keywords: Keywords
    months: Mapping[int, KeywordList]
    date_formats: DateFormats

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("months")
    @classmethod
    def _all_months(
        cls, value: Mapping[int, tuple[str, ...]]
    ) -> Mapping[int, tuple[str, ...]]:
        missing = [m for m in range(1, 13) if not value.get(m)]
        if missing:
            raise ValueError(f"month names missing for {missing}")
        return MappingProxyType(dict(value))

    def month_name(self, month: int) -> str:
        return self.months[month][0]


# ---------------------------------------------------------------------------
# Loading and merging
# ---------------------------------------------------------------------------


def available_locales() -> list[str]:
    """Return identifiers of the packaged locale data packs."""

    root = importlib_resources.files("edtf_converter.locales")
    return sorted(
        entry.name[: -len(".yml")] for entry in root.iterdir() if entry.name.endswith(".yml")
    )


def load_locale_pack(locale: str) -> dict[str, Any]:
    """Load the raw locale pack named ``locale``.

    Raises
    ------
    UnsupportedLocale
        If no pack exists for ``locale``.
    """

    if not _IDENTIFIER_RX.fullmatch(locale):
        raise UnsupportedLocale(locale)
    resource = importlib_resources.files("edtf_converter.locales").joinpath(f"{locale}.yml")
    if not resource.is_file():
        raise UnsupportedLocale(locale)
    with resource.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    logger.debug("loaded locale pack %s", locale)
    return data


def _unique(values: Iterable[Any]) -> list[Any]:
    result: list[Any] = []
    for value in values:
        if value in (None, "") or value in result:
            continue
        result.append(value)
    return result


def _merge_value(existing: Any, incoming: Any) -> Any:
    if isinstance(incoming, Mapping):
        base = existing if isinstance(existing, Mapping) else {}
        return _merge_mappings(base, incoming)
    extra = list(incoming) if isinstance(incoming, list) else [incoming]
    if isinstance(existing, list):
        return _unique([*existing, *extra])
    if isinstance(existing, str):
        return _unique([existing, *extra])
    if isinstance(incoming, list):
        return _unique(incoming)
    return incoming


def _merge_mappings(base: Mapping[Any, Any], incoming: Mapping[Any, Any]) -> dict[Any, Any]:
    result: dict[Any, Any] = dict(base)
    for key, value in incoming.items():
        result[key] = _merge_value(result.get(key), value)
    return result


def merge_locale_data(packs: Sequence[Mapping[str, Any]]) -> dict[str, Any]:
    """Merge raw locale packs, highest priority first."""

    merged: dict[str, Any] = {}
    for pack in packs:
        merged = _merge_mappings(merged, pack)
    return merged


@lru_cache(maxsize=32)
def _build_cached(locales: tuple[str, ...]) -> LocaleData:
    packs = [load_locale_pack(locale) for locale in locales]
    return LocaleData.model_validate(merge_locale_data(packs))


def build_locale_data(locales: Sequence[str]) -> LocaleData:
    """Load and merge the packs named in ``locales`` into a :class:`LocaleData`."""

    return _build_cached(tuple(locales))
