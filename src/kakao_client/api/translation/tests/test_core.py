"""
Unit tests for language detection and translation builders.
"""

from urllib.parse import parse_qs

import pytest

from kakao_client.api.translation.core import detect_language, translate
from kakao_client.api.translation.models import DetectLanguageResult, TranslateResult
from kakao_client.contracts.errors import APIError, ConfigurationError

pytestmark = pytest.mark.unit


def form_fields(request) -> dict[str, list[str]]:
    return parse_qs(request.content.decode("utf-8"))


class TestDetectLanguage:
    def test_detect_by_get(self, kakao_config, mock_api, mock_kakao_api_key, detect_payload):
        mock_api.add_json(detect_payload)

        res = (
            detect_language("안녕하세요", config=kakao_config, client=mock_api.client)
            .authorize_with(mock_kakao_api_key)
            .request_by("GET")
        )

        request = mock_api.last_request
        assert request.method == "GET"
        assert request.url.path == "/v3/translation/language/detect"
        assert request.url.params["query"] == "안녕하세요"
        assert request.headers["Authorization"] == f"KakaoAK {mock_kakao_api_key}"
        assert isinstance(res, DetectLanguageResult)
        assert res.best.code == "kr"

    def test_detect_by_post(self, kakao_config, mock_api, detect_payload):
        mock_api.add_json(detect_payload)

        res = detect_language("안녕하세요", config=kakao_config, client=mock_api.client).request_by("post")

        request = mock_api.last_request
        assert request.method == "POST"
        assert "query" not in request.url.params
        assert form_fields(request) == {"query": ["안녕하세요"]}
        assert res.language_info[0].name == "Korean"

    @pytest.mark.parametrize("method", ["PUT", "DELETE", "", "FETCH"])
    def test_invalid_method(self, kakao_config, mock_api, method):
        with pytest.raises(ConfigurationError, match="GET or POST"):
            detect_language("안녕하세요", config=kakao_config, client=mock_api.client).request_by(method)
        assert mock_api.requests == []

    def test_api_error_propagates(self, kakao_config, mock_api):
        mock_api.add_json({"code": -10, "msg": "exceeded request limit"}, 429)
        with pytest.raises(APIError) as exc_info:
            detect_language("안녕하세요", config=kakao_config, client=mock_api.client).request_by("GET")
        assert exc_info.value.code == -10
        assert exc_info.value.status_code == 429


class TestTranslate:
    def test_translate_by_post(self, kakao_config, mock_api, translate_payload):
        mock_api.add_json(translate_payload)

        res = (
            translate("안녕하세요. 반갑습니다.", config=kakao_config, client=mock_api.client)
            .source("kr")
            .target("en")
            .request_by("POST")
        )

        request = mock_api.last_request
        assert request.url.path == "/v2/translation/translate"
        assert form_fields(request) == {
            "query": ["안녕하세요. 반갑습니다."],
            "src_lang": ["kr"],
            "target_lang": ["en"],
        }
        assert isinstance(res, TranslateResult)
        assert res.translated_text[0] == ["Hello.", "Nice to meet you."]
        assert res.text == "Hello. Nice to meet you.\nThe weather is nice today."

    def test_translate_by_get(self, kakao_config, mock_api, translate_payload):
        mock_api.add_json(translate_payload)

        translate("안녕하세요", config=kakao_config, client=mock_api.client).source("kr").target("en").request_by("GET")

        params = mock_api.last_request.url.params
        assert params["src_lang"] == "kr"
        assert params["target_lang"] == "en"

    def test_unsupported_language_keeps_previous(self, kakao_config):
        translator = translate("hello", config=kakao_config).source("en")
        with pytest.raises(ConfigurationError, match="unsupported language code"):
            translator.source("ko")
        assert translator.src_lang == "en"

    def test_languages_required(self, kakao_config, mock_api):
        translator = translate("hello", config=kakao_config, client=mock_api.client).source("en")
        with pytest.raises(ConfigurationError, match="source and target"):
            translator.request_by("POST")
        assert mock_api.requests == []
