"""Languages offered in the source/target pickers."""
from __future__ import annotations

from typing import Dict, List, Tuple

LANGUAGES: Dict[str, str] = {
    "en": "English",
    "ja": "Japanese",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "it": "Italian",
    "ru": "Russian",
    "zh": "Chinese",
}

# Target language that gets a kana/romaji annotation
JAPANESE = "ja"


def is_supported(code: str) -> bool:
    return code in LANGUAGES


def display_name(code: str) -> str:
    return LANGUAGES.get(code, code)


def picker_choices() -> List[Tuple[str, str]]:
    """(code, name) pairs sorted by code, the order the pickers use."""
    return [(code, LANGUAGES[code]) for code in sorted(LANGUAGES)]
