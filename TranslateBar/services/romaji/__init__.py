"""Romaji package: katakana transliteration."""
from .transliterator import GLYPH_MAP, is_katakana, romanize

__all__ = ["GLYPH_MAP", "is_katakana", "romanize"]
