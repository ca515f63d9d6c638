"""Command line entry point.

    translatebar "Good morning" -s en -t ja
    translatebar --romanize コンニチハ
    translatebar --interactive

Interactive mode mirrors the popover: every line typed is submitted,
`:swap` swaps the languages (and input/output), `:quit` exits.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from TranslateBar.core.config import AppConfig, load_config
from TranslateBar.core.languages import picker_choices
from TranslateBar.core.session import TranslateSession
from TranslateBar.services.orchestrator import TranslationOrchestrator
from TranslateBar.services.reading import create_reader
from TranslateBar.services.romaji import romanize
from TranslateBar.services.translate import create_translator

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    codes = [code for code, _ in picker_choices()]
    parser = argparse.ArgumentParser(prog='translatebar', description='Translate text; Japanese output gets kana and romaji.')
    parser.add_argument('text', nargs='?', help='Text to translate (or katakana with --romanize)')
    parser.add_argument('-s', '--source', choices=codes, default=None, help='Source language code')
    parser.add_argument('-t', '--target', choices=codes, default=None, help='Target language code')
    parser.add_argument('--config', default=None, help='Path to a JSON config file')
    parser.add_argument('--reading', default=None, help='Reading backend: mecab, pykakasi, sudachi or stub')
    parser.add_argument('--romanize', action='store_true', help='Only transliterate katakana TEXT to romaji (no network)')
    parser.add_argument('--interactive', action='store_true', help='Read lines from stdin and translate each one')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser


def build_orchestrator(cfg: AppConfig, reading: Optional[str] = None) -> TranslationOrchestrator:
    client = create_translator(cfg)
    reader = create_reader(cfg, backend=reading)
    return TranslationOrchestrator(client, reader, placeholder=cfg.display.placeholder)


def run_interactive(session: TranslateSession, stdin: TextIO, stdout: TextIO) -> int:
    for line in stdin:
        command = line.strip()
        if command == ':quit':
            break
        if command == ':swap':
            session.swap()
            print(f'[{session.source_lang} -> {session.target_lang}]', file=stdout)
            continue
        outcome = session.set_input(line if line.endswith('\n') else line + '\n')
        if outcome is None:
            continue
        if outcome.ok:
            print(session.output_text, file=stdout)
        print(f'# {session.status}', file=stdout)
    return 0


def main(argv: Optional[List[str]] = None, orchestrator: Optional[TranslationOrchestrator] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='[%(levelname)s] %(name)s: %(message)s',
    )

    if args.romanize:
        if args.text is None:
            print('--romanize needs TEXT', file=sys.stderr)
            return 2
        print(romanize(args.text))
        return 0

    cfg = load_config(args.config)
    source = args.source or cfg.translation.source_lang
    target = args.target or cfg.translation.target_lang

    if orchestrator is None:
        try:
            orchestrator = build_orchestrator(cfg, args.reading)
        except (RuntimeError, KeyError) as e:
            print(f'Error: {e}', file=sys.stderr)
            return 1

    if args.interactive:
        session = TranslateSession(orchestrator, source, target)
        return run_interactive(session, sys.stdin, sys.stdout)

    if args.text is None:
        print('Nothing to translate (pass TEXT or --interactive)', file=sys.stderr)
        return 2
    outcome = orchestrator.translate(args.text, source, target)
    if outcome.ok:
        print(outcome.output)
    print(outcome.status, file=sys.stderr)
    return 0 if outcome.ok else 1


if __name__ == "__main__":
    sys.exit(main())
