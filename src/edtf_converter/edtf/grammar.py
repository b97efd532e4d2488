"""Recursive-descent validator for the supported EDTF subset.

Accepted surface grammar for one segment (whitespace allowed between
tokens)::

    segment   := open_start? qualifier? date qualifier? open_end?
    open_start:= "[" ".."?
    open_end  := ".."? "]"
    qualifier := "?" | "~" | "%"
    date      := YYYY ("-" MM ("-" DD)?)?

``MM`` must lie in ``01``-``12`` and ``DD`` in ``01``-``31``.  The day bound
is not calendar aware, so ``1930-02-31`` passes.  A full EDTF value is one
segment or two segments joined by ``/``.  Custom modifiers are unknown here
and must be stripped before a segment reaches :func:`validate_segment`.
"""

from __future__ import annotations

from ..utils.errors import InvalidEdtf

__all__ = ["validate_segment", "validate_edtf", "check_month", "check_day"]

_DIGITS = frozenset("0123456789")
_QUALIFIERS = frozenset("?~%")


class _Scanner:
    """Cursor over a segment with small lookahead helpers."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    @property
    def rest(self) -> str:
        return self.text[self.pos :]

    def skip_ws(self) -> None:
        while not self.at_end and self.text[self.pos].isspace():
            self.pos += 1

    def accept(self, token: str) -> bool:
        if self.text.startswith(token, self.pos):
            self.pos += len(token)
            return True
        return False

    def accept_any(self, chars: frozenset[str]) -> str | None:
        if not self.at_end and self.text[self.pos] in chars:
            self.pos += 1
            return self.text[self.pos - 1]
        return None

    def digits(self, count: int) -> str | None:
        chunk = self.text[self.pos : self.pos + count]
        if len(chunk) == count and all(c in _DIGITS for c in chunk):
            self.pos += count
            return chunk
        return None


def check_month(month: str, segment: str | None = None) -> int:
    """Return ``month`` as an int or raise :class:`InvalidEdtf` if not ``01``-``12``."""

    if len(month) != 2 or not all(c in _DIGITS for c in month):
        raise InvalidEdtf(segment or month, "month must be two digits")
    value = int(month)
    if not 1 <= value <= 12:
        raise InvalidEdtf(segment or month, f"month {month} is not between 01 and 12")
    return value


def check_day(day: str, segment: str | None = None) -> int:
    """Return ``day`` as an int or raise :class:`InvalidEdtf` if not ``01``-``31``."""

    if len(day) != 2 or not all(c in _DIGITS for c in day):
        raise InvalidEdtf(segment or day, "day must be two digits")
    value = int(day)
    if not 1 <= value <= 31:
        raise InvalidEdtf(segment or day, f"day {day} is not between 01 and 31")
    return value


def _date(scanner: _Scanner, segment: str) -> None:
    year = scanner.digits(4)
    if year is None:
        raise InvalidEdtf(segment, "expected a four digit year")
    if year == "0000":
        raise InvalidEdtf(segment, "year 0000 is not supported")
    if not scanner.accept("-"):
        return
    month = scanner.digits(2)
    if month is None:
        raise InvalidEdtf(segment, "expected a two digit month after '-'")
    check_month(month, segment)
    if not scanner.accept("-"):
        return
    day = scanner.digits(2)
    if day is None:
        raise InvalidEdtf(segment, "expected a two digit day after '-'")
    check_day(day, segment)


def validate_segment(segment: str) -> None:
    """Raise :class:`InvalidEdtf` unless ``segment`` matches the grammar."""

    scanner = _Scanner(segment)
    scanner.skip_ws()
    if scanner.accept("["):
        scanner.skip_ws()
        scanner.accept("..")
    scanner.skip_ws()
    scanner.accept_any(_QUALIFIERS)
    scanner.skip_ws()
    _date(scanner, segment)
    scanner.skip_ws()
    scanner.accept_any(_QUALIFIERS)
    scanner.skip_ws()
    if scanner.accept(".."):
        scanner.skip_ws()
        if not scanner.accept("]"):
            raise InvalidEdtf(segment, "'..' must be followed by ']'")
    else:
        scanner.accept("]")
    scanner.skip_ws()
    if not scanner.at_end:
        raise InvalidEdtf(segment, f"unexpected text {scanner.rest!r}")


def validate_edtf(edtf: str) -> None:
    """Validate a single EDTF value or a two-sided interval."""

    pieces = edtf.split("/")
    if len(pieces) > 2:
        raise InvalidEdtf(edtf, "more than one '/' separator")
    for piece in pieces:
        validate_segment(piece)
