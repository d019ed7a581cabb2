"""
Vision Core Service - Kakao Vision face detection.

The image is either an image URL or a local JPG/PNG file (at most 2MB).
See https://developers.kakao.com/docs/latest/ko/vision/dev-guide#recog-face
"""

from __future__ import annotations

import os

import httpx

from kakao_client.adapters.config import KakaoConfig
from kakao_client.api.vision.models import FaceDetectResult
from kakao_client.contracts.errors import ConfigurationError, FileTooLargeError
from kakao_client.utils.base_api_client import BaseAPIClient
from kakao_client.utils.get_logger import get_logger

logger = get_logger(__name__)

FACE_DETECT_PATH = "/v2/vision/face/detect"

MAX_UPLOAD_BYTES = 2 * 1024 * 1024
MIN_THRESHOLD = 0.1
MAX_THRESHOLD = 1.0
DEFAULT_THRESHOLD = 0.7


class FaceDetectInitializer(BaseAPIClient):
    """Lazy face detector. The last of with_url()/with_file() decides the image source."""

    def __init__(self, config: KakaoConfig | None = None, client: httpx.Client | None = None):
        super().__init__(config=config, client=client)
        self.image_url = ""
        self.filename = ""
        self.threshold = DEFAULT_THRESHOLD
        self._with_file = False

    def with_url(self, url: str) -> FaceDetectInitializer:
        self.image_url = url
        self._with_file = False
        return self

    def with_file(self, filename: str | os.PathLike[str]) -> FaceDetectInitializer:
        self.filename = os.fspath(filename)
        self._with_file = True
        return self

    def authorize_with(self, key: str) -> FaceDetectInitializer:
        self._authorize_with(key)
        return self

    def threshold_at(self, value: float) -> FaceDetectInitializer:
        """Set the score needed to report an area as a face (0.1 to 1.0).

        Too high and some faces are missed; too low and other areas are reported as faces.
        """
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise ConfigurationError(f"threshold must be a number, got {value!r}")
        if not MIN_THRESHOLD <= value <= MAX_THRESHOLD:
            raise ConfigurationError(
                f"threshold must be between {MIN_THRESHOLD} and {MAX_THRESHOLD}, got {value}"
            )
        self.threshold = float(value)
        return self

    def _formatted_threshold(self) -> str:
        return f"{self.threshold:f}"

    def _collect_file(self) -> dict:
        size = os.path.getsize(self.filename)
        if size > MAX_UPLOAD_BYTES:
            raise FileTooLargeError(self.filename, size, MAX_UPLOAD_BYTES)

        with open(self.filename, "rb") as image:
            return self._request(
                "POST",
                FACE_DETECT_PATH,
                data={"threshold": self._formatted_threshold()},
                files={"image": (os.path.basename(self.filename), image)},
            )

    def collect(self) -> FaceDetectResult:
        """Return the face detection result.

        Raises:
            ConfigurationError: If neither an image URL nor a file was given
            FileTooLargeError: If the image file is larger than 2MB (checked before upload)
            OSError: If the image file cannot be read
        """
        if self._with_file:
            payload = self._collect_file()
        elif self.image_url:
            payload = self._request(
                "POST",
                FACE_DETECT_PATH,
                params={"threshold": self._formatted_threshold(), "image_url": self.image_url},
            )
        else:
            raise ConfigurationError("an image URL or an image file must be set")

        res = self._decode(FaceDetectResult, payload)
        logger.info(f"Detected {len(res.result.faces)} face(s) (rid={res.rid})")
        return res


def face_detect(config: KakaoConfig | None = None, client: httpx.Client | None = None) -> FaceDetectInitializer:
    """Detect faces in an image given by URL or file."""
    return FaceDetectInitializer(config=config, client=client)
