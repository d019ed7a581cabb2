"""
Daum Models - Pydantic models for Daum search API structures
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import Field, RootModel

from kakao_client.contracts.models import KakaoResult, PageableMeta, ResultFileMixin, WebResult


class BookResult(WebResult):
    """A single document of a Daum book search result."""

    isbn: str = ""  # ISBN10 and ISBN13 separated by a space
    authors: list[str] = Field(default_factory=list)
    publisher: str = ""
    translators: list[str] = Field(default_factory=list)
    price: int = 0
    sale_price: int = 0  # -1 when not on sale
    thumbnail: str = ""
    status: str = ""


class BookSearchResult(KakaoResult):
    """One page of a Daum book search."""

    meta: PageableMeta = Field(default_factory=PageableMeta)
    documents: list[BookResult] = Field(default_factory=list)


class BookSearchResults(ResultFileMixin, RootModel[list[BookSearchResult]]):
    """Every page collected from a book search iterator."""

    root: list[BookSearchResult] = Field(default_factory=list)

    def __iter__(self) -> Iterator[BookSearchResult]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> BookSearchResult:
        return self.root[index]

    def append(self, page: BookSearchResult) -> None:
        self.root.append(page)

    @property
    def documents(self) -> list[BookResult]:
        return [doc for page in self.root for doc in page.documents]
