"""Katakana to romaji transliteration.

Hepburn-style, table driven. The lookup prefers a two-character key over a
one-character key at every position, so digraph entries (small-kana
contractions) can be added to the table without touching the scan.
Anything the table does not know is copied through unchanged.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

_GLYPHS = {
    "ア": "a", "イ": "i", "ウ": "u", "エ": "e", "オ": "o",
    "カ": "ka", "キ": "ki", "ク": "ku", "ケ": "ke", "コ": "ko",
    "サ": "sa", "シ": "shi", "ス": "su", "セ": "se", "ソ": "so",
    "タ": "ta", "チ": "chi", "ツ": "tsu", "テ": "te", "ト": "to",
    "ナ": "na", "ニ": "ni", "ヌ": "nu", "ネ": "ne", "ノ": "no",
    "ハ": "ha", "ヒ": "hi", "フ": "fu", "ヘ": "he", "ホ": "ho",
    "マ": "ma", "ミ": "mi", "ム": "mu", "メ": "me", "モ": "mo",
    "ヤ": "ya", "ユ": "yu", "ヨ": "yo",
    "ラ": "ra", "リ": "ri", "ル": "ru", "レ": "re", "ロ": "ro",
    "ワ": "wa", "ヲ": "wo", "ン": "n",
    "ガ": "ga", "ギ": "gi", "グ": "gu", "ゲ": "ge", "ゴ": "go",
    "ザ": "za", "ジ": "ji", "ズ": "zu", "ゼ": "ze", "ゾ": "zo",
    "ダ": "da", "ヂ": "ji", "ヅ": "zu", "デ": "de", "ド": "do",
    "バ": "ba", "ビ": "bi", "ブ": "bu", "ベ": "be", "ボ": "bo",
    "パ": "pa", "ピ": "pi", "プ": "pu", "ペ": "pe", "ポ": "po",
}

# Read-only view shared by every call.
GLYPH_MAP: Mapping[str, str] = MappingProxyType(_GLYPHS)


def is_katakana(ch: str) -> bool:
    """Return True if ch is in the katakana block (U+30A0..U+30FF)."""
    return '\u30a0' <= ch <= '\u30ff'


def romanize(text: str, glyphs: Mapping[str, str] = GLYPH_MAP) -> str:
    """Convert katakana in `text` to romaji.

    Greedy left-to-right scan: a two-character match wins over a
    one-character match; unmapped characters are passed through verbatim.
    Never raises.

      コンニチハ      → konnichiha
      カタカナ123abc  → katakana123abc
    """
    out = []
    i = 0
    n = len(text)
    while i < n:
        if i + 1 < n:
            mapped = glyphs.get(text[i:i + 2])
            if mapped is not None:
                out.append(mapped)
                i += 2
                continue
        ch = text[i]
        out.append(glyphs.get(ch, ch))
        i += 1
    return ''.join(out)
