"""
Shared fixtures for Vision service tests.
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
    return KakaoConfig(base_url="https://dapi.kakao.test")


@pytest.fixture
def mock_api():
    api = MockKakaoAPI()
    yield api
    api.close()


@pytest.fixture
def face_payload():
    return load_fixture("face_detect.json")


@pytest.fixture
def small_image(tmp_path):
    """A tiny file standing in for a JPG upload."""
    path = tmp_path / "face.jpg"
    path.write_bytes(b"\xff\xd8\xff\xe0" + b"\x00" * 1024)
    return path


@pytest.fixture
def large_image(tmp_path):
    """A file one byte over the 2MB upload cap."""
    path = tmp_path / "large.jpg"
    path.write_bytes(b"\x00" * (2 * 1024 * 1024 + 1))
    return path
