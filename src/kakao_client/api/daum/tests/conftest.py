"""
Shared fixtures and utilities for Daum service tests.

Responses are served from JSON fixtures through MockKakaoAPI; no network access.
"""

from pathlib import Path

import pytest

from kakao_client.adapters.config import KakaoConfig
from kakao_client.utils.pytest_utils import MockKakaoAPI, load_json

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(filename: str) -> dict:
    """Load a fixture from JSON file."""
    return load_json(FIXTURES_DIR / filename)


@pytest.fixture
def mock_kakao_api_key():
    """Mock Kakao REST API key."""
    return "test_kakao_rest_api_key_12345"


@pytest.fixture
def kakao_config():
    """Config that never reads a real key from the environment."""
    return KakaoConfig(base_url="https://dapi.kakao.test")


@pytest.fixture
def mock_api():
    api = MockKakaoAPI()
    yield api
    api.close()


@pytest.fixture
def first_page():
    return load_fixture("book_search_page1.json")


@pytest.fixture
def last_page():
    return load_fixture("book_search_last_page.json")
