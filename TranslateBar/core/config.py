"""Configuration schema and loading.

Defaults live in the dataclasses below. `load_config` layers a JSON file and
then environment variables on top of them.
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://translation.googleapis.com/language/translate/v2"


@dataclass
class TranslationConfig:
    provider: str = "google"
    api_key: str | None = None
    endpoint: str = DEFAULT_ENDPOINT
    timeout: float = 10.0
    source_lang: str = "en"
    target_lang: str = "ja"


@dataclass
class ReadingConfig:
    backend: str | None = None  # mecab | pykakasi | sudachi | stub; None = first available
    mecab_path: str | None = None


@dataclass
class DisplayConfig:
    placeholder: str = "(?)"


@dataclass
class AppConfig:
    translation: TranslationConfig = field(default_factory=TranslationConfig)
    reading: ReadingConfig = field(default_factory=ReadingConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)


# env var -> (section, attribute)
_ENV_OVERRIDES = {
    'GOOGLE_TRANSLATE_API_KEY': ('translation', 'api_key'),
    'TRANSLATE_ENDPOINT': ('translation', 'endpoint'),
    'READING_BACKEND': ('reading', 'backend'),
    'MECAB_PATH': ('reading', 'mecab_path'),
}


def _coerce(current, value):
    """Convert `value` to the type of a numeric default; strings and None pass as-is."""
    if isinstance(current, bool) or not isinstance(current, (int, float)):
        return value
    return type(current)(value)


def _apply_section(target, values: dict) -> None:
    for k, v in values.items():
        if hasattr(target, k):
            try:
                v = _coerce(getattr(target, k), v)
            except (TypeError, ValueError):
                logger.warning('Ignoring invalid value %r for %s.%s', v, type(target).__name__, k)
                continue
            setattr(target, k, v)
        else:
            logger.debug('Ignoring unknown config key %r on %s', k, type(target).__name__)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Build an AppConfig from defaults, an optional JSON file and env vars.

    The JSON file mirrors `config_to_dict` output; unknown sections and keys
    are ignored. A missing or unreadable file leaves the defaults in place.
    """
    cfg = AppConfig()
    if path is not None:
        p = Path(path)
        if p.exists():
            try:
                with p.open('r', encoding='utf-8') as fh:
                    data = json.load(fh) or {}
                if not isinstance(data, dict):
                    raise ValueError(f"top level must be an object, got {type(data).__name__}")
                for section, values in data.items():
                    target = getattr(cfg, section, None)
                    if target is None or not isinstance(values, dict):
                        logger.debug('Ignoring unknown config section %r', section)
                        continue
                    _apply_section(target, values)
            except (OSError, ValueError) as e:
                logger.warning('Failed to read config %s: %s', p, e)
        else:
            logger.info('Config file %s not found; using defaults', p)

    for env, (section, attr) in _ENV_OVERRIDES.items():
        val = os.getenv(env)
        if val:
            setattr(getattr(cfg, section), attr, val.strip())
    return cfg


def config_to_dict(cfg: AppConfig) -> dict:
    return asdict(cfg)
