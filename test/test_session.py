import sys
from pathlib import Path

# Add the project root (one level up from 'test') to sys.path
project_root = Path(__file__).resolve().parents[1]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import pytest

from TranslateBar.core.languages import LANGUAGES, display_name, picker_choices
from TranslateBar.core.models import TranslationOutcome
from TranslateBar.core.session import TranslateSession


class RecordingOrchestrator:
    def __init__(self, outcome):
        self.outcome = outcome
        self.calls = []

    def translate(self, text, source, target):
        self.calls.append((text, source, target))
        return self.outcome


def test_defaults():
    s = TranslateSession(RecordingOrchestrator(None))
    assert (s.source_lang, s.target_lang) == ("en", "ja")
    assert s.input_text == s.output_text == s.status == ""


def test_unsupported_language_rejected():
    with pytest.raises(ValueError):
        TranslateSession(RecordingOrchestrator(None), "en", "tlh")


def test_typing_without_newline_does_not_submit():
    orch = RecordingOrchestrator(TranslationOutcome("x", "Translated"))
    s = TranslateSession(orch)
    assert s.set_input("hello") is None
    assert orch.calls == []


def test_newline_submits_stripped_text():
    orch = RecordingOrchestrator(TranslationOutcome("こんにちは", "Translated"))
    s = TranslateSession(orch)
    outcome = s.set_input("hello\n")
    assert outcome.ok
    assert orch.calls == [("hello", "en", "ja")]
    assert s.input_text == "hello"
    assert s.output_text == "こんにちは"
    assert s.status == "Translated"


def test_failure_keeps_previous_output():
    s = TranslateSession(RecordingOrchestrator(TranslationOutcome("first", "Translated")))
    s.set_input("one\n")
    s.orchestrator = RecordingOrchestrator(TranslationOutcome("", "Error: boom", ok=False))
    s.set_input("two\n")
    assert s.output_text == "first"
    assert s.status == "Error: boom"


def test_swap_exchanges_languages_and_text():
    s = TranslateSession(RecordingOrchestrator(TranslationOutcome("Bonjour", "Translated")), "en", "fr")
    s.set_input("Hello\n")
    s.swap()
    assert (s.source_lang, s.target_lang) == ("fr", "en")
    assert s.input_text == "Bonjour"
    assert s.output_text == "Hello"


def test_language_table():
    assert len(LANGUAGES) == 8
    assert display_name("ja") == "Japanese"
    assert display_name("xx") == "xx"
    codes = [c for c, _ in picker_choices()]
    assert codes == sorted(codes)
