"""Interface shared by the phonetic reading backends."""
from __future__ import annotations

from typing import Protocol, runtime_checkable


class ReadingError(RuntimeError):
    """A reading backend failed to produce a reading."""


@runtime_checkable
class PhoneticReader(Protocol):
    def reading(self, text: str) -> str:
        """Return the katakana reading of `text` ('' when nothing could be read)."""
        ...
