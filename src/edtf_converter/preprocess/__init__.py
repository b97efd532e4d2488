"""Text preparation applied before tokenization."""

from .normalizer import normalize

__all__ = ["normalize"]
