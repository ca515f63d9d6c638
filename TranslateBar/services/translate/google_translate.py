"""Google Cloud Translation (v2 REST) client.

GET https://translation.googleapis.com/language/translate/v2
    ?q=<text>&source=<code>&target=<code>&format=text&key=<api key>

Response shape:
    {"data": {"translations": [{"translatedText": "..."}]}}
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional

import requests

from TranslateBar.core.config import DEFAULT_ENDPOINT
from TranslateBar.core.models import TranslationResult
from TranslateBar.core.registry import TRANSLATION_REGISTRY

logger = logging.getLogger(__name__)


class TranslationError(RuntimeError):
    """Request to the translation API failed."""


class TranslationDecodeError(TranslationError):
    """The API answered but the body was not the expected JSON."""


def _decode_translations(payload) -> List[str]:
    try:
        translations = payload['data']['translations']
        return [t['translatedText'] for t in translations]
    except (KeyError, TypeError) as e:
        raise TranslationDecodeError(f"Unexpected response format: missing {e}") from e


class GoogleTranslateClient:
    provider = "google"

    def __init__(self, api_key: str | None, endpoint: str = DEFAULT_ENDPOINT,
                 timeout: float = 10.0, session: Optional[requests.Session] = None):
        self.api_key = api_key
        self.endpoint = endpoint
        self.timeout = timeout
        self._session = session or requests.Session()

    def _request(self, params: dict) -> List[str]:
        """Send one GET and return the decoded list of translated strings."""
        if not self.api_key:
            raise TranslationError("No API key configured (set GOOGLE_TRANSLATE_API_KEY)")
        query = dict(params, format='text', key=self.api_key)
        logger.info('Requesting: %s', self.endpoint)
        logger.debug('Parameters: %s', {k: ('***' if k == 'key' else v) for k, v in query.items()})
        try:
            resp = self._session.get(self.endpoint, params=query, timeout=self.timeout)
            resp.raise_for_status()
        except requests.exceptions.Timeout as e:
            raise TranslationError("Translation request timed out.") from e
        except requests.exceptions.ConnectionError as e:
            raise TranslationError("Cannot connect to the translation service.") from e
        except requests.exceptions.HTTPError as e:
            body = getattr(e.response, 'text', '') or ''
            logger.debug('Response body: %s', body)
            raise TranslationError(str(e)) from e
        except requests.exceptions.RequestException as e:
            raise TranslationError(str(e)) from e
        except (TypeError, ValueError) as e:
            # bad request arguments, e.g. a non-numeric timeout
            raise TranslationError(f"Invalid request settings: {e}") from e

        try:
            payload = resp.json()
        except ValueError as e:
            logger.debug('Raw data: %s', getattr(resp, 'text', ''))
            raise TranslationDecodeError(f"Response is not valid JSON: {e}") from e
        return _decode_translations(payload)

    def translate(self, text: str, source: str = "en", target: str = "ja") -> TranslationResult:
        """Translate one string. An empty translations list gives translated == ''."""
        translated = self._request({'q': text, 'source': source, 'target': target})
        return TranslationResult(
            original=text,
            translated=translated[0] if translated else "",
            source=source,
            target=target,
            provider=self.provider,
        )

    def translate_lines(self, lines: Iterable[str], source: str = "ja", target: str = "en") -> List[str]:
        """Translate several lines in one request; output order follows input."""
        lines = list(lines)
        if not lines:
            return []
        # requests expands a list value into repeated q= parameters
        translated = self._request({'q': lines, 'source': source, 'target': target})
        if len(translated) != len(lines):
            raise TranslationDecodeError(
                f"Expected {len(lines)} translations, got {len(translated)}")
        return translated


TRANSLATION_REGISTRY.register("google", GoogleTranslateClient)
