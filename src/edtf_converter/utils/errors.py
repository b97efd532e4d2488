"""Typed exceptions raised by the converter."""

from __future__ import annotations


class EdtfError(ValueError):
    """Base class for converter related errors."""


class InvalidEdtf(EdtfError):
    """Raised when an EDTF segment is outside the supported grammar."""

    def __init__(self, segment: str, reason: str | None = None) -> None:
        self.segment = segment
        self.reason = reason
        msg = f'Invalid EDTF: "{segment}" is not EDTF compliant or contains unsupported features'
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class UnsupportedLocale(EdtfError):
    """Raised when no locale data pack exists for a requested identifier."""

    def __init__(self, locale: str) -> None:
        self.locale = locale
        super().__init__(f'Locale "{locale}" is not supported.')


class UnrecognizedText(EdtfError):
    """Raised when natural-language input contains no recognizable date."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f'No date could be recognized in "{text}".')
