"""Phonetic reading package: backend factory and shared interface.

Readers turn Japanese text into katakana, which the romaji package then
transliterates. Backends import their libraries lazily so the package stays
importable when none of mecab, pykakasi or sudachipy is installed.
"""
from .base import PhoneticReader, ReadingError
from .reading_adapter import create_reader

__all__ = ["PhoneticReader", "ReadingError", "create_reader"]
