"""Turn one side of a normalized date phrase into an EDTF string.

The tokenizer walks the words left to right.  At every position it first
tries keyword phrases from the locale data (longest phrase first, so
``no later than`` wins over a shorter prefix) and custom modifier keywords,
then date parts:

* ``YYYY``, ``YYYY-MM`` or ``YYYY-MM-DD`` tokens,
* month names and abbreviations from every merged locale,
* day numbers, optionally with an ordinal suffix (``3rd``, ``1er``).

Trailing EDTF qualifier symbols glued to a word (``1930?``) are honoured as
well.  Words that match nothing are skipped.  The result is
``YYYY[-MM[-DD]]`` followed by ``~``, ``?`` or ``%`` and wrapped as
``[..X]`` for an open start or ``[X..]`` for an open end; custom modifiers
then insert their markers in configuration order.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..edtf.modifiers import CustomModifier
from ..locales import LocaleData
from ..preprocess.normalizer import normalize
from ..utils.errors import UnrecognizedText
from ..utils.logging import get_logger

if TYPE_CHECKING:  # pragma: no cover
    from ..config.schema import ConverterOptions

__all__ = ["tokenize_to_edtf"]

logger = get_logger(__name__)

_ISO_RX = re.compile(r"(\d{4})(?:-(\d{2})(?:-(\d{2}))?)?")
_DAY_RX = re.compile(r"(\d{1,2})(?:st|nd|rd|th|er|re|e)?")
_QUALIFIER_SUFFIX_RX = re.compile(r"^(.*?)([?~%]+)$")

_APPROXIMATE = "approximate"
_UNCERTAIN = "uncertain"
_OPEN_START = "open_start"
_OPEN_END = "open_end"


@dataclass
class _State:
    year: int | None = None
    month: int | None = None
    day: int | None = None
    flags: set[str] = field(default_factory=set)
    modifiers: list[CustomModifier] = field(default_factory=list)


def _phrase(text: str) -> tuple[str, ...]:
    return tuple(normalize(text).split())


def _keyword_phrases(
    locale: LocaleData, custom_modifiers: Sequence[CustomModifier]
) -> list[tuple[tuple[str, ...], str | CustomModifier]]:
    keywords = locale.keywords
    table: list[tuple[tuple[str, ...], str | CustomModifier]] = []
    for feature, variants in (
        (_APPROXIMATE, keywords.approximate),
        (_UNCERTAIN, keywords.uncertain),
        (_OPEN_START, keywords.interval.open_start),
        (_OPEN_END, keywords.interval.open_end),
    ):
        table.extend((_phrase(variant), feature) for variant in variants)
    table.extend((_phrase(modifier.keyword), modifier) for modifier in custom_modifiers)
    table = [entry for entry in table if entry[0]]
    table.sort(key=lambda entry: len(entry[0]), reverse=True)
    return table


def _month_names(locale: LocaleData) -> dict[str, int]:
    names: dict[str, int] = {}
    for month, variants in locale.months.items():
        for variant in variants:
            names.setdefault(normalize(variant), month)
    return names


def _take_date_word(word: str, state: _State, months: dict[str, int]) -> bool:
    iso = _ISO_RX.fullmatch(word)
    if iso and state.year is None:
        year, month, day = iso.groups()
        state.year = int(year)
        if month:
            state.month = int(month)
        if day:
            state.day = int(day)
        return True
    if word in months and state.month is None:
        state.month = months[word]
        return True
    day = _DAY_RX.fullmatch(word)
    if day and state.day is None and 1 <= int(day.group(1)) <= 31:
        state.day = int(day.group(1))
        return True
    return False


def _build(year: int, state: _State) -> str:
    edtf = f"{year:04d}"
    if state.month is not None:
        edtf += f"-{state.month:02d}"
        if state.day is not None:
            edtf += f"-{state.day:02d}"
    elif state.day is not None:
        logger.debug("ignoring day %d without a month", state.day)

    approximate = _APPROXIMATE in state.flags
    uncertain = _UNCERTAIN in state.flags
    if approximate and uncertain:
        edtf += "%"
    elif approximate:
        edtf += "~"
    elif uncertain:
        edtf += "?"

    open_start = _OPEN_START in state.flags
    open_end = _OPEN_END in state.flags
    if open_start and open_end:
        edtf = f"[..{edtf}..]"
    elif open_start:
        edtf = f"[..{edtf}]"
    elif open_end:
        edtf = f"[{edtf}..]"

    for modifier in state.modifiers:
        edtf = modifier.add(edtf)
    return edtf


def tokenize_to_edtf(
    words: Sequence[str], options: "ConverterOptions", locale: LocaleData
) -> str:
    """Return the EDTF string described by ``words``.

    ``words`` are expected to be normalized with
    :func:`edtf_converter.preprocess.normalize`.

    Raises
    ------
    UnrecognizedText
        If no year can be found among ``words``.
    """

    phrases = _keyword_phrases(locale, options.custom_modifiers)
    months = _month_names(locale)
    state = _State()

    i = 0
    while i < len(words):
        for phrase, feature in phrases:
            if tuple(words[i : i + len(phrase)]) == phrase:
                if isinstance(feature, CustomModifier):
                    if feature not in state.modifiers:
                        state.modifiers.append(feature)
                else:
                    state.flags.add(feature)
                i += len(phrase)
                break
        else:
            word = words[i]
            suffix = _QUALIFIER_SUFFIX_RX.match(word)
            if suffix:
                word, symbols = suffix.groups()
                if "~" in symbols or "%" in symbols:
                    state.flags.add(_APPROXIMATE)
                if "?" in symbols or "%" in symbols:
                    state.flags.add(_UNCERTAIN)
            if word and not _take_date_word(word, state, months):
                logger.debug("skipping unrecognized word %r", word)
            i += 1

    if state.year is None:
        raise UnrecognizedText(" ".join(words))

    # configuration order, not phrase order
    state.modifiers = [m for m in options.custom_modifiers if m in state.modifiers]
    return _build(state.year, state)
