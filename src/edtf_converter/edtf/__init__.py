"""EDTF parsing, validation and date-range resolution."""

from .grammar import check_day, check_month, validate_edtf, validate_segment
from .intervals import combine_range, parse_edtf, parse_segment
from .models import DateRange, EdtfFormat, ParseResult, SegmentResult
from .modifiers import CustomModifier, Modifier, detect_modifiers
from .resolver import end_of_unit, resolve, start_of_unit

__all__ = [
    "CustomModifier",
    "DateRange",
    "EdtfFormat",
    "Modifier",
    "ParseResult",
    "SegmentResult",
    "check_day",
    "check_month",
    "combine_range",
    "detect_modifiers",
    "end_of_unit",
    "parse_edtf",
    "parse_segment",
    "resolve",
    "start_of_unit",
    "validate_edtf",
    "validate_segment",
]
