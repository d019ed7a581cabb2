"""
Daum Core Service - Lazy book search over the Daum Book API.

Usage:
    pages = book_search("오브젝트").authorize_with(key).display(5)
    first = pages.next()
    for page in pages:
        ...

See https://developers.kakao.com/docs/latest/ko/daum-search/dev-guide#search-book
"""

from __future__ import annotations

from collections.abc import Iterator

import httpx

from kakao_client.adapters.config import KakaoConfig
from kakao_client.api.daum.models import BookSearchResult, BookSearchResults
from kakao_client.contracts.errors import ConfigurationError, EndOfPagesError
from kakao_client.utils.base_api_client import BaseAPIClient
from kakao_client.utils.get_logger import get_logger

logger = get_logger(__name__)

BOOK_SEARCH_PATH = "/v3/search/book"

SORT_ORDERS = ("accuracy", "latest")
TARGETS = ("title", "isbn", "publisher", "person", "")
MIN_PAGE = 1
MAX_PAGE = 50
MIN_SIZE = 1
MAX_SIZE = 50


def _check_bounds(name: str, value: int, low: int, high: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    if not low <= value <= high:
        raise ConfigurationError(f"{name} must be between {low} and {high}, got {value}")
    return value


class BookSearchIterator(BaseAPIClient):
    """
    Lazy book search iterator.
    Every call to next() requests the current page and moves the cursor forward.
    """

    def __init__(
        self,
        query: str,
        config: KakaoConfig | None = None,
        client: httpx.Client | None = None,
    ):
        super().__init__(config=config, client=client)
        self.query = query.strip()
        self.sort = "accuracy"
        self.page = 1
        self.size = 10
        self.target = ""
        self._end = False

    @property
    def exhausted(self) -> bool:
        return self._end

    def authorize_with(self, key: str) -> BookSearchIterator:
        """Set the authorization key."""
        self._authorize_with(key)
        return self

    def sort_by(self, order: str) -> BookSearchIterator:
        """Set the sorting order of the documents: accuracy (default) or latest."""
        if order not in SORT_ORDERS:
            raise ConfigurationError(f"sort order must be one of {', '.join(SORT_ORDERS)}, got {order!r}")
        self.sort = order
        return self

    def result(self, page: int) -> BookSearchIterator:
        """Set the result page number (1 to 50)."""
        self.page = _check_bounds("page", page, MIN_PAGE, MAX_PAGE)
        return self

    def display(self, size: int) -> BookSearchIterator:
        """Set the number of documents on a single page (1 to 50)."""
        self.size = _check_bounds("size", size, MIN_SIZE, MAX_SIZE)
        return self

    def filter(self, target: str) -> BookSearchIterator:
        """Limit the searched field to title, isbn, publisher or person ("" searches all)."""
        if target not in TARGETS:
            raise ConfigurationError(
                f"target must be one of title, isbn, publisher, person, got {target!r}"
            )
        self.target = target
        return self

    def _params(self) -> dict[str, str | int]:
        params: dict[str, str | int] = {
            "query": self.query,
            "sort": self.sort,
            "page": self.page,
            "size": self.size,
        }
        if self.target:
            params["target"] = self.target
        return params

    def next(self) -> BookSearchResult:
        """Return the current page and advance the iterator.

        Raises:
            EndOfPagesError: If the server reported the last page or page 50 was passed
        """
        if self._end:
            raise EndOfPagesError(f"no more pages for book search {self.query!r}")

        payload = self._request("GET", BOOK_SEARCH_PATH, params=self._params())
        res = self._decode(BookSearchResult, payload)

        logger.info(
            f"Book search {self.query!r} page {self.page}: "
            f"{len(res.documents)} documents (total {res.meta.total_count})"
        )

        self.page += 1
        self._end = res.meta.is_end or self.page > MAX_PAGE
        return res

    def __iter__(self) -> Iterator[BookSearchResult]:
        return self

    def __next__(self) -> BookSearchResult:
        try:
            return self.next()
        except EndOfPagesError:
            raise StopIteration from None

    def collect(self, max_pages: int | None = None) -> BookSearchResults:
        """Drain the iterator (or at most ``max_pages`` pages) into a BookSearchResults."""
        results = BookSearchResults()
        while max_pages is None or len(results) < max_pages:
            try:
                results.append(self.next())
            except EndOfPagesError:
                break
        return results


def book_search(
    query: str,
    config: KakaoConfig | None = None,
    client: httpx.Client | None = None,
) -> BookSearchIterator:
    """Search books by ``query`` in the Daum Book service.

    Defaults: sort=accuracy, page=1, size=10, no target filter.
    """
    return BookSearchIterator(query, config=config, client=client)
