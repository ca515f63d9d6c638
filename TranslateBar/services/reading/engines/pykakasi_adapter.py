"""Reading backend built on pykakasi.

Importing this module does not import pykakasi; the library is loaded the
first time `available()` or `reading()` is called.
"""
from __future__ import annotations

import logging

from TranslateBar.core.registry import READING_REGISTRY
from TranslateBar.services.reading.base import ReadingError

logger = logging.getLogger(__name__)


class PykakasiReader:
    def __init__(self):
        self._impl = None
        self._module = None

    def available(self) -> bool:
        if self._module is not None:
            return True
        try:
            import pykakasi  # type: ignore
            self._module = pykakasi
            return True
        except ImportError as exc:
            logger.debug("pykakasi import failed: %s", exc, exc_info=True)
            return False

    def _ensure_impl(self):
        if self._impl is None:
            if not self.available():
                raise ReadingError('pykakasi not available')
            self._impl = self._module.kakasi()
        return self._impl

    def reading(self, text: str) -> str:
        kks = self._ensure_impl()
        # each item carries orig/hira/kana/hepburn; 'kana' is the katakana form
        return ''.join(item.get('kana', '') for item in kks.convert(text))


READING_REGISTRY.register('pykakasi', lambda rc=None: PykakasiReader())
