"""Translation providers.

`create_translator(cfg)` builds the provider named by
`cfg.translation.provider` from TRANSLATION_REGISTRY.
"""
from __future__ import annotations

from TranslateBar.core.config import AppConfig
from TranslateBar.core.registry import TRANSLATION_REGISTRY

from .google_translate import GoogleTranslateClient, TranslationDecodeError, TranslationError


def create_translator(cfg: AppConfig | None = None):
    cfg = cfg or AppConfig()
    t = cfg.translation
    return TRANSLATION_REGISTRY.create(t.provider, t.api_key, endpoint=t.endpoint, timeout=t.timeout)


__all__ = ["GoogleTranslateClient", "TranslationError", "TranslationDecodeError", "create_translator"]
