"""State behind the translate popover, independent of any widget toolkit.

A front end binds its text fields and pickers to a TranslateSession and
forwards edits to `set_input`; typing Return (a trailing newline) submits.
"""
from __future__ import annotations

import logging
from typing import Optional

from TranslateBar.core import languages
from TranslateBar.core.models import TranslationOutcome

logger = logging.getLogger(__name__)

STATUS_TRANSLATING = "Translating..."


class TranslateSession:
    def __init__(self, orchestrator, source_lang: str = "en", target_lang: str = "ja"):
        self.orchestrator = orchestrator
        self.set_languages(source_lang, target_lang)
        self.input_text = ""
        self.output_text = ""
        self.status = ""

    def set_languages(self, source: str, target: str) -> None:
        for code in (source, target):
            if not languages.is_supported(code):
                raise ValueError(f"Unsupported language code: {code!r}")
        self.source_lang = source
        self.target_lang = target

    def swap(self) -> None:
        """Swap languages and move the output into the input field (and back)."""
        self.source_lang, self.target_lang = self.target_lang, self.source_lang
        self.input_text, self.output_text = self.output_text, self.input_text

    def set_input(self, text: str) -> Optional[TranslationOutcome]:
        self.input_text = text
        if text.endswith("\n"):
            self.input_text = text.strip("\r\n")
            return self.submit()
        return None

    def submit(self) -> TranslationOutcome:
        self.status = STATUS_TRANSLATING
        logger.debug('Submitting %d chars %s -> %s', len(self.input_text), self.source_lang, self.target_lang)
        outcome = self.orchestrator.translate(self.input_text, self.source_lang, self.target_lang)
        if outcome.ok:
            self.output_text = outcome.output
        self.status = outcome.status
        return outcome
