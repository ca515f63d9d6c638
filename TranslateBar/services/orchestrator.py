"""Translation flow: translate, then annotate Japanese output with kana/romaji.

Failures from the translation provider or the reading backend never escape
`translate`; they are turned into an advisory status line for the user.
"""
from __future__ import annotations

import logging
from typing import Optional

from TranslateBar.core.languages import JAPANESE
from TranslateBar.core.models import PhoneticAnnotation, TranslationOutcome
from TranslateBar.services.reading.base import PhoneticReader, ReadingError
from TranslateBar.services.romaji import is_katakana, romanize
from TranslateBar.services.translate.google_translate import TranslationDecodeError, TranslationError

logger = logging.getLogger(__name__)

STATUS_EMPTY = "Input is empty"
STATUS_TRANSLATED = "Translated"
STATUS_NOT_FOUND = "No translation found, original text copied"


class TranslationOrchestrator:
    def __init__(self, client, reader: Optional[PhoneticReader] = None, placeholder: str = "(?)"):
        self.client = client
        self.reader = reader
        self.placeholder = placeholder

    def _kana(self, text: str) -> str:
        if self.reader is None or not text:
            return ''
        try:
            kana = self.reader.reading(text) or ''
        except (ReadingError, OSError) as e:
            logger.warning('Phonetic reading failed: %s', e)
            return ''
        if kana and not any(is_katakana(ch) for ch in kana):
            # backend echoed the input back without a reading
            logger.debug('Reading contains no katakana: %r', kana)
            return ''
        return kana

    def annotate(self, text: str) -> PhoneticAnnotation:
        """Kana reading of `text` and its romaji; the placeholder stands in for empty values."""
        kana = self._kana(text)
        romaji = romanize(kana)
        return PhoneticAnnotation(kana=kana or self.placeholder, romaji=romaji or self.placeholder)

    def translate(self, text: str, source: str, target: str) -> TranslationOutcome:
        clean = (text or '').strip()
        if not clean:
            return TranslationOutcome(output='', status=STATUS_EMPTY, ok=False)

        try:
            result = self.client.translate(clean, source=source, target=target)
        except TranslationDecodeError as e:
            logger.error('Decode error: %s', e)
            return TranslationOutcome(output='', status=f"Decode error: {e}", ok=False)
        except TranslationError as e:
            logger.error('Translation failed: %s', e)
            return TranslationOutcome(output='', status=f"Error: {e}", ok=False)

        translated = result.translated
        output = translated if translated else clean
        annotation = None
        if target == JAPANESE:
            annotation = self.annotate(translated)
            output += f"\n(かな: {annotation.kana})\n(ﾛｰﾏ字: {annotation.romaji})"

        status = STATUS_TRANSLATED if translated else STATUS_NOT_FOUND
        return TranslationOutcome(output=output, status=status, ok=True, result=result, annotation=annotation)
