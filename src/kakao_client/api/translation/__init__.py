"""
Translation Service Package - Kakao language detection and translation.

This package provides:
- detect_language / LanguageDetectInitializer: detect the language of a text
- translate / TranslateInitializer: translate a text between supported languages
- Models: Pydantic models for both responses
"""

from kakao_client.api.translation.core import (
    LANGUAGES,
    LanguageDetectInitializer,
    TranslateInitializer,
    detect_language,
    translate,
)
from kakao_client.api.translation.models import DetectLanguageResult, LanguageInfo, TranslateResult

__all__ = [
    "LANGUAGES",
    # Builders
    "LanguageDetectInitializer",
    "TranslateInitializer",
    "detect_language",
    "translate",
    # Models
    "DetectLanguageResult",
    "LanguageInfo",
    "TranslateResult",
]
