"""Core data model.

Plain dataclasses passed between the translation client, the reading
backends and the orchestrator. No operational logic lives here.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class TranslationResult:
    original: str
    translated: str  # empty when the provider returned no translation
    source: str = ""
    target: str = ""
    provider: str = ""
    meta: Dict[str, Any] = field(default_factory=dict)


@dataclass
class PhoneticAnnotation:
    kana: str
    romaji: str


@dataclass
class TranslationOutcome:
    output: str
    status: str
    ok: bool = True
    result: Optional[TranslationResult] = None
    annotation: Optional[PhoneticAnnotation] = None
