"""
Translation Core Service - Kakao language detection and translation.

Both endpoints accept GET (query string) or POST (form body); the method is
chosen with request_by() and the request is made right away.

See https://developers.kakao.com/docs/latest/ko/translate/dev-guide
"""

from __future__ import annotations

from typing import Any

import httpx

from kakao_client.adapters.config import KakaoConfig
from kakao_client.api.translation.models import DetectLanguageResult, TranslateResult
from kakao_client.contracts.errors import ConfigurationError
from kakao_client.utils.base_api_client import BaseAPIClient
from kakao_client.utils.get_logger import get_logger

logger = get_logger(__name__)

DETECT_PATH = "/v3/translation/language/detect"
TRANSLATE_PATH = "/v2/translation/translate"

METHODS = ("GET", "POST")

LANGUAGES = {
    "kr": "Korean",
    "en": "English",
    "jp": "Japanese",
    "cn": "Chinese",
    "vi": "Vietnamese",
    "id": "Indonesian",
    "ar": "Arabic",
    "bn": "Bengali",
    "de": "German",
    "es": "Spanish",
    "fr": "French",
    "hi": "Hindi",
    "it": "Italian",
    "ms": "Malay",
    "nl": "Dutch",
    "pt": "Portuguese",
    "ru": "Russian",
    "th": "Thai",
    "tr": "Turkish",
}


def _check_method(method: str) -> str:
    normalized = method.upper() if isinstance(method, str) else method
    if normalized not in METHODS:
        raise ConfigurationError(f"method must be GET or POST, got {method!r}")
    return normalized


def _check_language(code: str) -> str:
    if code not in LANGUAGES:
        raise ConfigurationError(
            f"unsupported language code {code!r}; expected one of {', '.join(LANGUAGES)}"
        )
    return code


class _TranslationRequest(BaseAPIClient):
    """Shared GET/POST dispatch for the translation endpoints."""

    def _send(self, method: str, path: str, fields: dict[str, Any]) -> Any:
        if method == "GET":
            return self._request("GET", path, params=fields)
        return self._request("POST", path, data=fields)


class LanguageDetectInitializer(_TranslationRequest):
    """Lazy language detector."""

    def __init__(
        self,
        query: str,
        config: KakaoConfig | None = None,
        client: httpx.Client | None = None,
    ):
        super().__init__(config=config, client=client)
        self.query = query.strip()

    def authorize_with(self, key: str) -> LanguageDetectInitializer:
        self._authorize_with(key)
        return self

    def request_by(self, method: str) -> DetectLanguageResult:
        """Detect the language of the query using GET or POST."""
        method = _check_method(method)
        payload = self._send(method, DETECT_PATH, {"query": self.query})
        res = self._decode(DetectLanguageResult, payload)
        if res.best:
            logger.info(f"Detected {res.best.name} ({res.best.confidence:.2f}) for {self.query[:20]!r}")
        return res


class TranslateInitializer(_TranslationRequest):
    """Lazy translator. Both source and target languages must be set before requesting."""

    def __init__(
        self,
        query: str,
        config: KakaoConfig | None = None,
        client: httpx.Client | None = None,
    ):
        super().__init__(config=config, client=client)
        self.query = query.strip()
        self.src_lang: str | None = None
        self.target_lang: str | None = None

    def authorize_with(self, key: str) -> TranslateInitializer:
        self._authorize_with(key)
        return self

    def source(self, lang: str) -> TranslateInitializer:
        """Set the language of the query, e.g. kr."""
        self.src_lang = _check_language(lang)
        return self

    def target(self, lang: str) -> TranslateInitializer:
        """Set the language to translate into, e.g. en."""
        self.target_lang = _check_language(lang)
        return self

    def request_by(self, method: str) -> TranslateResult:
        """Translate the query using GET or POST."""
        method = _check_method(method)
        if self.src_lang is None or self.target_lang is None:
            raise ConfigurationError("source and target languages must be set before translating")

        payload = self._send(
            method,
            TRANSLATE_PATH,
            {"query": self.query, "src_lang": self.src_lang, "target_lang": self.target_lang},
        )
        res = self._decode(TranslateResult, payload)
        logger.info(f"Translated {len(self.query)} characters {self.src_lang} -> {self.target_lang}")
        return res


def detect_language(
    query: str,
    config: KakaoConfig | None = None,
    client: httpx.Client | None = None,
) -> LanguageDetectInitializer:
    """Detect the language of ``query``."""
    return LanguageDetectInitializer(query, config=config, client=client)


def translate(
    query: str,
    config: KakaoConfig | None = None,
    client: httpx.Client | None = None,
) -> TranslateInitializer:
    """Translate ``query`` between two supported languages."""
    return TranslateInitializer(query, config=config, client=client)
