"""Conversion between EDTF date strings, natural language and date ranges.

The :class:`Converter` is the main entry point::

    >>> from edtf_converter import Converter
    >>> Converter().edtf_to_text("~1930-05")
    'circa May 1930'

The command line interface lives in :mod:`edtf_converter.cli`.
"""

from .config import ApproximateVariance, ConverterOptions, load_config
from .converter import Converter
from .edtf import CustomModifier, DateRange, EdtfFormat, ParseResult, SegmentResult
from .utils.errors import EdtfError, InvalidEdtf, UnrecognizedText, UnsupportedLocale

__version__ = "0.1.0"

__all__ = [
    "ApproximateVariance",
    "Converter",
    "ConverterOptions",
    "CustomModifier",
    "DateRange",
    "EdtfError",
    "EdtfFormat",
    "InvalidEdtf",
    "ParseResult",
    "SegmentResult",
    "UnrecognizedText",
    "UnsupportedLocale",
    "load_config",
    "__version__",
]
