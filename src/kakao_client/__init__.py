"""
kakao_client - typed builders for the Kakao REST APIs.

    from kakao_client import book_search

    page = book_search("오브젝트").authorize_with(key).result(1).display(5).next()
    page.save_as("books.json")
"""

from kakao_client.adapters.config import KakaoConfig, load_env
from kakao_client.api.daum import BookSearchIterator, BookSearchResult, BookSearchResults, book_search
from kakao_client.api.translation import (
    DetectLanguageResult,
    TranslateResult,
    detect_language,
    translate,
)
from kakao_client.api.vision import FaceDetectResult, face_detect
from kakao_client.contracts.errors import (
    APIError,
    ConfigurationError,
    DecodeError,
    EndOfPagesError,
    FileTooLargeError,
    KakaoError,
    SaveError,
    TransportError,
)

__version__ = "0.1.0"

__all__ = [
    "KakaoConfig",
    "load_env",
    # Builders
    "BookSearchIterator",
    "book_search",
    "detect_language",
    "translate",
    "face_detect",
    # Results
    "BookSearchResult",
    "BookSearchResults",
    "DetectLanguageResult",
    "TranslateResult",
    "FaceDetectResult",
    # Errors
    "KakaoError",
    "ConfigurationError",
    "TransportError",
    "APIError",
    "DecodeError",
    "FileTooLargeError",
    "SaveError",
    "EndOfPagesError",
]
