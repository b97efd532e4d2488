"""Word-level parsing of natural-language date phrases into EDTF."""

from .tokenizer import tokenize_to_edtf

__all__ = ["tokenize_to_edtf"]
