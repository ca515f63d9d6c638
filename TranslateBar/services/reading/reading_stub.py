"""Fallback reader used when no reading backend is installed.

Returns empty readings so Japanese translations still display, with the
placeholder shown in place of kana and romaji.
"""
from __future__ import annotations

import logging

from TranslateBar.core.registry import READING_REGISTRY

logger = logging.getLogger(__name__)


class StubReader:
    def __init__(self):
        logger.warning('Using reading stub: no reading backend available. Install mecab, pykakasi or sudachipy to enable kana/romaji.')

    def available(self) -> bool:
        return True

    def reading(self, text: str) -> str:
        return ''


READING_REGISTRY.register('stub', lambda rc=None: StubReader())
