"""Rendering of parsed EDTF values as natural language."""

from .text import format_date, render_segment, render_text

__all__ = ["format_date", "render_segment", "render_text"]
