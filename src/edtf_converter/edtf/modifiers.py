"""Detection and stripping of EDTF modifiers.

Every modifier, built-in or user supplied, satisfies the :class:`Modifier`
protocol: ``detect`` tells whether the modifier is present in a segment and
``strip`` returns the segment with the modifier's marker removed.  Detection
runs as a fixed pipeline:

1. Custom modifiers in configuration order.  Each one is tested against the
   segment as left by the previous modifiers and stripped on a match, so
   custom markers can be layered and never reach the built-in checks.
2. Built-in modifiers, all tested against the same post-custom text.
   ``~`` and ``%`` mark a value approximate, ``?`` and ``%`` uncertain,
   ``[..`` an open start and ``..]`` an open end.
3. Residual brackets, dots and whitespace are removed to give the clean
   ``YYYY[-MM[-DD]]`` string.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

__all__ = [
    "Modifier",
    "CustomModifier",
    "SymbolModifier",
    "ModifierDetection",
    "APPROXIMATE",
    "UNCERTAIN",
    "OPEN_START",
    "OPEN_END",
    "BUILTIN_MODIFIERS",
    "detect_modifiers",
]


@runtime_checkable
class Modifier(Protocol):
    """Protocol shared by built-in and custom modifiers."""

    def detect(self, segment: str) -> bool:
        """Return ``True`` when the modifier is present in ``segment``."""

        ...

    def strip(self, segment: str) -> str:
        """Return ``segment`` without the modifier's marker."""

        ...


@dataclass(slots=True, frozen=True)
class CustomModifier:
    """User supplied modifier.

    Attributes
    ----------
    keyword:
        Text rendered for the modifier and recognized in natural language.
    pattern:
        Regular expression searched in a raw EDTF segment.
    remove:
        Transform stripping the modifier's marker from a segment.
    add:
        Transform inserting the marker into a segment.
    """

    keyword: str
    pattern: re.Pattern[str]
    remove: Callable[[str], str]
    add: Callable[[str], str]

    def __post_init__(self) -> None:
        if isinstance(self.pattern, str):
            object.__setattr__(self, "pattern", re.compile(self.pattern))

    def detect(self, segment: str) -> bool:
        return self.pattern.search(segment) is not None

    def strip(self, segment: str) -> str:
        return self.remove(segment)

    @classmethod
    def from_marker(cls, keyword: str, marker: str) -> "CustomModifier":
        """Build a modifier whose marker is the literal suffix ``marker``."""

        rx = re.compile(re.escape(marker))

        def remove(segment: str) -> str:
            return rx.sub("", segment)

        def add(segment: str) -> str:
            return segment + marker

        return cls(keyword, rx, remove, add)


@dataclass(slots=True, frozen=True)
class SymbolModifier:
    """Built-in modifier recognized by a fixed symbol pattern."""

    name: str
    pattern: re.Pattern[str]

    def detect(self, segment: str) -> bool:
        return self.pattern.search(segment) is not None

    def strip(self, segment: str) -> str:
        return self.pattern.sub("", segment)


APPROXIMATE = SymbolModifier("approximate", re.compile(r"[~%]"))
UNCERTAIN = SymbolModifier("uncertain", re.compile(r"[?%]"))
OPEN_START = SymbolModifier("open_start", re.compile(r"^\s*\[\s*\.\."))
OPEN_END = SymbolModifier("open_end", re.compile(r"\.\.\s*\]\s*$"))

BUILTIN_MODIFIERS: tuple[SymbolModifier, ...] = (APPROXIMATE, UNCERTAIN, OPEN_START, OPEN_END)

_RESIDUE_RX = re.compile(r"[\[\].\s]")


@dataclass(slots=True, frozen=True)
class ModifierDetection:
    """Outcome of :func:`detect_modifiers`.

    ``segment`` is the text after custom modifiers were stripped; it is what
    the grammar validator checks.  ``clean_segment`` has every marker removed.
    """

    segment: str
    clean_segment: str
    detected_modifiers: tuple[CustomModifier, ...]
    is_approximate: bool
    is_uncertain: bool
    has_open_start: bool
    has_open_end: bool


def detect_modifiers(
    raw_segment: str, custom_modifiers: Sequence[CustomModifier] = ()
) -> ModifierDetection:
    """Detect and strip custom and built-in modifiers from ``raw_segment``."""

    segment = raw_segment
    detected: list[CustomModifier] = []
    for modifier in custom_modifiers:
        if modifier.detect(segment):
            detected.append(modifier)
            segment = modifier.strip(segment)

    flags = {modifier.name: modifier.detect(segment) for modifier in BUILTIN_MODIFIERS}

    clean = segment
    for modifier in BUILTIN_MODIFIERS:
        clean = modifier.strip(clean)
    clean = _RESIDUE_RX.sub("", clean)

    return ModifierDetection(
        segment=segment,
        clean_segment=clean,
        detected_modifiers=tuple(detected),
        is_approximate=flags["approximate"],
        is_uncertain=flags["uncertain"],
        has_open_start=flags["open_start"],
        has_open_end=flags["open_end"],
    )
