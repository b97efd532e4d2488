"""Public converter between EDTF, natural language and date ranges.

A :class:`Converter` is built from immutable :class:`ConverterOptions`; the
merged locale data is computed once at construction.  Reconfiguration never
mutates an instance: :meth:`Converter.with_options` returns a new converter,
so one instance can be shared between threads without locking.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .config.schema import ConverterOptions
from .edtf.grammar import validate_segment
from .edtf.intervals import (
    INTERVAL_SEPARATOR,
    combine_range,
    parse_edtf,
    parse_segment,
    split_interval,
)
from .edtf.models import DateRange, ParseResult, SegmentResult
from .edtf.modifiers import detect_modifiers
from .locales import LocaleData, build_locale_data
from .parse.tokenizer import tokenize_to_edtf
from .preprocess.normalizer import EN_DASH, normalize
from .render.text import render_text
from .utils.errors import InvalidEdtf
from .utils.logging import get_logger

__all__ = ["Converter", "BUILTIN_DELIMITERS"]

logger = get_logger(__name__)

BUILTIN_DELIMITERS: tuple[str, ...] = ("-", EN_DASH)


class Converter:
    """Convert EDTF strings to text and dates and back.

    Parameters
    ----------
    options:
        :class:`ConverterOptions` or a mapping validated into one.  ``None``
        uses the defaults (English, variance of 3 years/months/days).

    Raises
    ------
    UnsupportedLocale
        If a requested locale has no data pack.
    """

    def __init__(self, options: ConverterOptions | Mapping[str, Any] | None = None) -> None:
        if options is None:
            options = ConverterOptions()
        elif not isinstance(options, ConverterOptions):
            options = ConverterOptions.model_validate(options)
        self._options = options
        self._locale_data = build_locale_data(options.locales)
        logger.debug("converter ready for locales %s", ", ".join(options.locales))

    @property
    def options(self) -> ConverterOptions:
        return self._options

    @property
    def locale_data(self) -> LocaleData:
        return self._locale_data

    def with_options(self, **changes: Any) -> "Converter":
        """Return a new converter with ``changes`` applied to the options."""

        data = {name: getattr(self._options, name) for name in ConverterOptions.model_fields}
        data.update(changes)
        return Converter(ConverterOptions.model_validate(data))

    # ------------------------------------------------------------------
    # Text to EDTF
    # ------------------------------------------------------------------

    def _delimiters(self) -> set[str]:
        localized = (normalize(d) for d in self._locale_data.keywords.interval.delimiters)
        return {*BUILTIN_DELIMITERS, *localized}

    def text_to_edtf(self, text: str) -> str:
        """Convert a natural-language phrase to an EDTF string.

        The first interior word matching an interval delimiter splits the
        phrase into start and end; the first and last word are never
        treated as delimiters.
        """

        words = normalize(text).split()
        delimiters = self._delimiters()
        index = next(
            (i for i in range(1, len(words) - 1) if words[i] in delimiters),
            None,
        )
        if index is None:
            edtf = tokenize_to_edtf(words, self._options, self._locale_data)
        else:
            start = tokenize_to_edtf(words[:index], self._options, self._locale_data)
            end = tokenize_to_edtf(words[index + 1 :], self._options, self._locale_data)
            edtf = f"{start}{INTERVAL_SEPARATOR}{end}"
        self.parse_edtf(edtf)
        logger.debug("text %r -> %s", text, edtf)
        return edtf

    # ------------------------------------------------------------------
    # EDTF to text and dates
    # ------------------------------------------------------------------

    def parse_edtf(self, edtf: str) -> ParseResult:
        """Parse ``edtf`` into segment results with modifiers and ranges."""

        return parse_edtf(edtf, self._options)

    def validate_edtf(self, edtf: str) -> None:
        """Raise :class:`InvalidEdtf` if ``edtf`` is not supported.

        Configured custom modifiers are stripped before validation.
        """

        for piece in split_interval(edtf):
            detection = detect_modifiers(piece, self._options.custom_modifiers)
            validate_segment(detection.segment)

    def edtf_to_text(self, edtf: str) -> str:
        """Render ``edtf`` as natural language.

        Segments failing validation are left out of the output.
        """

        segments: list[SegmentResult] = []
        for piece in split_interval(edtf):
            try:
                segments.append(
                    parse_segment(
                        piece,
                        self._options.approximate_variance,
                        self._options.custom_modifiers,
                    )
                )
            except InvalidEdtf as exc:
                logger.debug("omitting segment %r from text: %s", piece, exc)
        return render_text(segments, self._locale_data)

    def edtf_to_date(self, edtf: str) -> DateRange:
        """Return the ``min``/``max`` UTC instants ``edtf`` can denote."""

        return combine_range(self.parse_edtf(edtf))
