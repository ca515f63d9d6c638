"""Reading backend built on SudachiPy (split mode C).

Creating the tokenizer loads the system dictionary and takes a few
seconds, so it is created once per reader and reused.
"""
from __future__ import annotations

import logging

from TranslateBar.core.registry import READING_REGISTRY
from TranslateBar.services.reading.base import ReadingError

logger = logging.getLogger(__name__)


class SudachiReader:
    def __init__(self):
        self._tokenizer = None
        self._mode = None

    def available(self) -> bool:
        try:
            from sudachipy import dictionary, tokenizer  # type: ignore  # noqa: F401
            return True
        except ImportError as exc:
            logger.debug("sudachipy import failed: %s", exc, exc_info=True)
            return False

    def _ensure_tokenizer(self):
        if self._tokenizer is None:
            try:
                from sudachipy import dictionary, tokenizer  # type: ignore
                self._tokenizer = dictionary.Dictionary().create()
            except Exception as e:
                logger.exception('Failed initializing SudachiPy: %s', e)
                raise ReadingError(f'SudachiPy dictionary unavailable: {e}') from e
            self._mode = tokenizer.Tokenizer.SplitMode.C
        return self._tokenizer

    def reading(self, text: str) -> str:
        tok = self._ensure_tokenizer()
        return ''.join(m.reading_form() for m in tok.tokenize(text, self._mode))


READING_REGISTRY.register('sudachi', lambda rc=None: SudachiReader())
