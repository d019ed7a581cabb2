"""
Unit tests for the Vision face detector.
"""

import httpx
import pytest

from kakao_client.api.vision.core import DEFAULT_THRESHOLD, MAX_UPLOAD_BYTES, face_detect
from kakao_client.api.vision.models import FaceDetectResult
from kakao_client.contracts.errors import ConfigurationError, FileTooLargeError, TransportError

pytestmark = pytest.mark.unit


class TestFaceDetectBuilder:
    def test_defaults(self, kakao_config):
        detector = face_detect(config=kakao_config)
        assert detector.threshold == DEFAULT_THRESHOLD
        assert detector.image_url == ""
        assert detector.filename == ""

    @pytest.mark.parametrize("value", [0.1, 0.55, 1.0, 1])
    def test_threshold_in_range(self, kakao_config, value):
        assert face_detect(config=kakao_config).threshold_at(value).threshold == value

    @pytest.mark.parametrize("value", [0.0, 0.09, 1.01, -1, 2])
    def test_threshold_out_of_range_keeps_previous(self, kakao_config, value):
        detector = face_detect(config=kakao_config).threshold_at(0.5)
        with pytest.raises(ConfigurationError, match="threshold must be between"):
            detector.threshold_at(value)
        assert detector.threshold == 0.5

    def test_threshold_rejects_non_numbers(self, kakao_config):
        with pytest.raises(ConfigurationError):
            face_detect(config=kakao_config).threshold_at("0.5")

    def test_missing_image(self, kakao_config, mock_api):
        with pytest.raises(ConfigurationError, match="image URL or an image file"):
            face_detect(config=kakao_config, client=mock_api.client).collect()
        assert mock_api.requests == []


class TestFaceDetectCollect:
    def test_collect_with_url(self, kakao_config, mock_api, mock_kakao_api_key, face_payload):
        mock_api.add_json(face_payload)

        res = (
            face_detect(config=kakao_config, client=mock_api.client)
            .authorize_with(mock_kakao_api_key)
            .with_url("https://example.com/face.jpg")
            .threshold_at(0.8)
            .collect()
        )

        request = mock_api.last_request
        assert request.method == "POST"
        assert request.url.path == "/v2/vision/face/detect"
        assert request.url.params["image_url"] == "https://example.com/face.jpg"
        assert request.url.params["threshold"] == "0.800000"
        assert request.headers["Authorization"] == f"KakaoAK {mock_kakao_api_key}"

        assert isinstance(res, FaceDetectResult)
        assert res.rid == "3a2f1c9e8b7d6e5f"
        assert res.result.width == 640
        face = res.result.faces[0]
        assert face.facial_attributes.gender.female == 0.88
        assert face.facial_points.lip[1] == [0.51, 0.41]

    def test_collect_with_file_sends_multipart(self, kakao_config, mock_api, face_payload, small_image):
        mock_api.add_json(face_payload)

        face_detect(config=kakao_config, client=mock_api.client).with_file(small_image).collect()

        request = mock_api.last_request
        assert request.headers["Content-Type"].startswith("multipart/form-data")
        assert "image_url" not in request.url.params
        body = request.content
        assert b'name="threshold"' in body
        assert b"0.700000" in body
        assert b'name="image"; filename="face.jpg"' in body

    def test_last_source_wins(self, kakao_config, mock_api, face_payload, small_image):
        mock_api.add_json(face_payload)

        (
            face_detect(config=kakao_config, client=mock_api.client)
            .with_file(small_image)
            .with_url("https://example.com/face.jpg")
            .collect()
        )

        assert mock_api.last_request.url.params["image_url"] == "https://example.com/face.jpg"

    def test_large_file_rejected_before_upload(self, kakao_config, mock_api, large_image):
        detector = face_detect(config=kakao_config, client=mock_api.client).with_file(large_image)

        with pytest.raises(FileTooLargeError) as exc_info:
            detector.collect()

        assert exc_info.value.size == MAX_UPLOAD_BYTES + 1
        assert exc_info.value.limit == MAX_UPLOAD_BYTES
        assert mock_api.requests == []

    def test_missing_file(self, kakao_config, mock_api, tmp_path):
        detector = face_detect(config=kakao_config, client=mock_api.client).with_file(tmp_path / "nope.jpg")
        with pytest.raises(FileNotFoundError):
            detector.collect()
        assert mock_api.requests == []

    def test_network_error(self, kakao_config, mock_api):
        mock_api.add_error(httpx.ReadTimeout("timed out"))
        with pytest.raises(TransportError):
            face_detect(config=kakao_config, client=mock_api.client).with_url("https://example.com/a.png").collect()
