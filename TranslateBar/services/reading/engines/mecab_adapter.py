"""Reading backend that shells out to the MeCab command line tool.

`mecab --output-format-type=yomi` reads lines on stdin and prints the
katakana reading of each line on stdout.
"""
from __future__ import annotations

import logging
import os
import shutil
import subprocess

from TranslateBar.core.registry import READING_REGISTRY
from TranslateBar.services.reading.base import ReadingError

logger = logging.getLogger(__name__)

HOMEBREW_MECAB = '/opt/homebrew/bin/mecab'


class MecabReader:
    """Run one mecab process per call.

    Usage:
        reader = MecabReader()
        if reader.available():
            kana = reader.reading('こんにちは')
    """

    def __init__(self, executable: str | None = None, timeout: float = 10.0):
        self.executable = executable
        self.timeout = timeout

    def _resolve(self) -> str | None:
        if self.executable:
            if os.path.isfile(self.executable):
                return self.executable
            return shutil.which(self.executable)
        found = shutil.which('mecab')
        if found:
            return found
        if os.path.isfile(HOMEBREW_MECAB):
            return HOMEBREW_MECAB
        return None

    def available(self) -> bool:
        return self._resolve() is not None

    def reading(self, text: str) -> str:
        exe = self._resolve()
        if exe is None:
            raise ReadingError('mecab executable not found')
        try:
            proc = subprocess.run(
                [exe, '--output-format-type=yomi'],
                input=text + '\n',
                capture_output=True,
                text=True,
                encoding='utf-8',
                timeout=self.timeout,
            )
        except (OSError, subprocess.SubprocessError) as e:
            raise ReadingError(f'Failed to run mecab: {e}') from e
        if proc.returncode != 0:
            logger.warning('mecab exited with %s: %s', proc.returncode, (proc.stderr or '').strip())
            raise ReadingError(f'mecab exited with status {proc.returncode}')
        return (proc.stdout or '').strip()


READING_REGISTRY.register('mecab', lambda rc=None: MecabReader(getattr(rc, 'mecab_path', None)))
