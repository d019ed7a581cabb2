"""
Pytest utilities for testing.

Provides an in-memory stand-in for the Kakao API built on httpx.MockTransport,
so builders can be exercised without network access.

Usage:
    from kakao_client.utils.pytest_utils import MockKakaoAPI

    api = MockKakaoAPI()
    api.add_json(load_fixture("book_search_page1.json"))
    page = book_search("query", client=api.client).next()
    assert api.requests[0].url.params["page"] == "1"
"""

import json
from collections import deque
from pathlib import Path
from typing import Any

import httpx


def load_json(path: Path) -> Any:
    """Load a JSON fixture file."""
    if not path.exists():
        raise FileNotFoundError(f"Fixture file not found: {path}")
    with open(path, encoding="utf-8") as f:
        return json.load(f)


class MockKakaoAPI:
    """Queue of canned responses served in order; every request is recorded."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: deque[httpx.Response | Exception] = deque()
        self.client = httpx.Client(transport=httpx.MockTransport(self._handle))

    def add_json(self, payload: Any, status_code: int = 200) -> "MockKakaoAPI":
        self._responses.append(httpx.Response(status_code, json=payload))
        return self

    def add_text(self, text: str, status_code: int = 200) -> "MockKakaoAPI":
        self._responses.append(httpx.Response(status_code, text=text))
        return self

    def add_error(self, error: Exception) -> "MockKakaoAPI":
        self._responses.append(error)
        return self

    def _handle(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        if not self._responses:
            raise AssertionError(f"unexpected request: {request.method} {request.url}")
        response = self._responses.popleft()
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def close(self) -> None:
        self.client.close()
