"""Deterministic normalization of natural-language date phrases.

The following transforms are applied in order:

1. **Unicode NFC** so that accented month names compare equal regardless of
   how they were composed.
2. **Whitespace and quote rationalization**: no-break spaces become regular
   spaces, zero-width characters are dropped and curly quotes/apostrophes
   become ASCII.
3. **Lower-casing**.
4. **Dash spacing**: en and em dashes, and a hyphen between two years
   (``1930-1935``), are surrounded by spaces so that they become standalone
   delimiter words.  Hyphens inside ISO dates and words are kept.
5. **Punctuation removal**: commas, semicolons, colons, exclamation marks,
   parentheses, double quotes and word-final periods are dropped.  EDTF
   symbols (``~ ? % [ ] /``) and apostrophes are kept.
6. **Whitespace collapsing** to single spaces with no leading or trailing
   space.

The function is pure and performs no I/O.

Example
-------

>>> normalize("Circa  May 3rd, 1930–1935")
'circa may 3rd 1930 – 1935'
"""

from __future__ import annotations

import re
import unicodedata

__all__ = ["normalize"]

_NBSP_EQUIVALENTS = {
    "\u00a0",  # NO-BREAK SPACE
    "\u202f",  # NARROW NO-BREAK SPACE
    "\u2007",  # FIGURE SPACE
}

_ZERO_WIDTHS = {
    "\u200b",  # ZERO WIDTH SPACE
    "\u200c",  # ZERO WIDTH NON-JOINER
    "\u200d",  # ZERO WIDTH JOINER
    "\ufeff",  # ZERO WIDTH NO-BREAK SPACE
}

_QUOTE_MAP = {
    "\u201c": '"',
    "\u201d": '"',
    "\u2018": "'",
    "\u2019": "'",
}

EN_DASH = "\u2013"
_EM_DASH = "\u2014"

_YEAR_HYPHEN_RX = re.compile(r"(?<=\b\d{4})-(?=\d{4}\b)")
_DASH_RX = re.compile(f"[{EN_DASH}{_EM_DASH}]")
_PUNCT_RX = re.compile(r"[,;:!()\"]")
_TRAILING_PERIOD_RX = re.compile(r"(?<=\w)\.(?=\s|$)")
_WS_RX = re.compile(r"\s+")


def normalize(text: str) -> str:
    """Return ``text`` normalized for tokenization."""

    text = unicodedata.normalize("NFC", text)
    chars: list[str] = []
    for ch in text:
        if ch in _ZERO_WIDTHS:
            continue
        if ch in _NBSP_EQUIVALENTS:
            chars.append(" ")
        else:
            chars.append(_QUOTE_MAP.get(ch, ch))
    text = "".join(chars).lower()

    text = _DASH_RX.sub(f" {EN_DASH} ", text)
    text = _YEAR_HYPHEN_RX.sub(" - ", text)
    text = _PUNCT_RX.sub(" ", text)
    text = _TRAILING_PERIOD_RX.sub("", text)
    return _WS_RX.sub(" ", text).strip()
