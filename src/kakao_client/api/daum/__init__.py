"""
Daum Service Package - Daum search APIs.

This package provides:
- book_search / BookSearchIterator: lazy, paginated Daum book search
- Models: Pydantic models for the book search response
"""

from kakao_client.api.daum.core import BookSearchIterator, book_search
from kakao_client.api.daum.models import BookResult, BookSearchResult, BookSearchResults

__all__ = [
    # Builders
    "BookSearchIterator",
    "book_search",
    # Models
    "BookResult",
    "BookSearchResult",
    "BookSearchResults",
]
