"""Factory for phonetic reading backends.

`create_reader(cfg=None)` prefers the environment variable `READING_BACKEND`,
then `cfg.reading.backend`. Supported backends: `mecab`, `pykakasi`,
`sudachi`, `stub`. With no explicit choice the first available of mecab,
pykakasi and sudachi is used; if none is installed, returns `StubReader`.
"""
from __future__ import annotations

import logging
import os

from TranslateBar.core.config import AppConfig, ReadingConfig
from TranslateBar.core.registry import READING_REGISTRY

# Engine modules register themselves on import.
from .engines import mecab_adapter, pykakasi_adapter, sudachi_adapter  # noqa: F401
from . import reading_stub  # noqa: F401

logger = logging.getLogger(__name__)

_ALIASES = {
    'mecab': 'mecab',
    'pykakasi': 'pykakasi',
    'kakasi': 'pykakasi',
    'sudachi': 'sudachi',
    'sudachipy': 'sudachi',
    'stub': 'stub',
    'none': 'stub',
}

AUTO_ORDER = ('mecab', 'pykakasi', 'sudachi')


def _select_backend_name(cfg: AppConfig | None, requested: str | None = None) -> str | None:
    # An explicit request wins, then the env var, then the config
    if requested:
        return requested.strip().lower()
    be = os.getenv('READING_BACKEND')
    if be:
        return be.strip().lower()
    if cfg is not None and cfg.reading.backend:
        return str(cfg.reading.backend).strip().lower()
    return None


def create_reader(cfg: AppConfig | None = None, backend: str | None = None):
    """Create an object implementing `reading(text) -> katakana`.

    `backend`, when given (e.g. from a command line flag), overrides both
    `READING_BACKEND` and `cfg.reading.backend`.
    """
    backend = _select_backend_name(cfg, backend)
    rc = cfg.reading if cfg is not None else ReadingConfig()

    if backend:
        name = _ALIASES.get(backend)
        if name is None or name not in READING_REGISTRY:
            msg = f"Unknown reading backend '{backend}'. Supported: {', '.join(sorted(set(_ALIASES.values())))}"
            logger.error(msg)
            raise RuntimeError(msg)
        reader = READING_REGISTRY.create(name, rc)
        if not reader.available():
            msg = f"Requested reading backend '{name}' is not available."
            logger.error(msg)
            raise RuntimeError(msg)
        logger.info('Using %s reading backend', name)
        return reader

    for name in AUTO_ORDER:
        reader = READING_REGISTRY.create(name, rc)
        if reader.available():
            logger.info('Using %s reading backend', name)
            return reader
        logger.debug('%s reading backend not available', name)

    logger.warning('No reading backend available. Falling back to stub.')
    return READING_REGISTRY.create('stub', rc)
