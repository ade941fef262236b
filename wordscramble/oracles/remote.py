"""
Remote dictionary oracle.

Asks a dictionary HTTP API whether a word exists:

    GET {base_url}/{language}/{word}

  - 200        -> recognized
  - 404        -> not recognized
  - anything else, timeouts and connection errors -> OracleUnavailableError

Answers (both True and False) are cached per (language, word) so repeated
submissions of the same word cost a single request.

The oracle owns the requests.Session it creates; call close() (or use it as
a context manager) when done. An injected session is left to its owner.
"""

from __future__ import annotations

import logging
from typing import Dict, Tuple
from urllib.parse import quote

import requests

from wordscramble.config import DEFAULT_LANGUAGE
from wordscramble.errors import OracleUnavailableError
from .base import BaseOracle, register

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.dictionaryapi.dev/api/v2/entries"
DEFAULT_TIMEOUT = 5.0


@register
class RemoteDictionaryOracle(BaseOracle):
    id = "remote"
    name = "Remote Dictionary API"

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: float = DEFAULT_TIMEOUT,
                 session: requests.Session | None = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = float(timeout)
        self._owns_http = session is None
        self._http = session or requests.Session()
        self._cache: Dict[Tuple[str, str], bool] = {}

    def close(self) -> None:
        """Release the HTTP session if this oracle created it."""
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "RemoteDictionaryOracle":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _url(self, word: str, language: str) -> str:
        return f"{self.base_url}/{quote(language)}/{quote(word)}"

    def is_recognized_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        if not word:
            return False
        key = (language, word.lower())
        if key in self._cache:
            return self._cache[key]

        try:
            r = self._http.get(self._url(key[1], language), timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("Dictionary request for %r failed: %s", word, e)
            raise OracleUnavailableError(f"dictionary service unreachable: {e}") from e

        if r.status_code == 200:
            found = True
        elif r.status_code == 404:
            found = False
        else:
            logger.warning("Dictionary service answered %s for %r", r.status_code, word)
            raise OracleUnavailableError(f"dictionary service returned HTTP {r.status_code}")

        self._cache[key] = found
        return found
