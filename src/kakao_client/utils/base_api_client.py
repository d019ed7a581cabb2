"""
Base API Client - Shared request handling for every Kakao request builder.

Each execution is exactly one blocking HTTP request: no caching, no retries,
no rate limiting. Failures are raised to the caller as KakaoError subclasses.
"""

from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from kakao_client.adapters.config import KakaoConfig, resolve_config
from kakao_client.api.auth import Auth
from kakao_client.contracts.errors import APIError, DecodeError, TransportError
from kakao_client.utils.get_logger import get_logger

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class BaseAPIClient:
    """
    Base class for Kakao request builders.
    Owns the config, the authorization state and the (optional) injected httpx client.
    """

    def __init__(self, config: KakaoConfig | None = None, client: httpx.Client | None = None):
        self.config = resolve_config(config)
        self.auth = Auth(self.config)
        self._client = client

    def _authorize_with(self, key: str) -> None:
        self.auth.authorize_with(key)

    @property
    def auth_key(self) -> str:
        return self.auth.auth_key

    def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
    ) -> Any:
        """Perform one request against the Kakao API and return the decoded JSON body.

        Args:
            method: HTTP method (GET or POST)
            path: Endpoint path, appended to config.base_url
            params: Query string parameters
            data: Form fields for POST bodies
            files: Multipart files for uploads

        Raises:
            TransportError: On any network level failure
            APIError: On a non-2xx response
            DecodeError: If the body is not JSON
        """
        url = f"{self.config.base_url}{path}"
        logger.info(f"{method} {url}")

        try:
            if self._client is not None:
                response = self._client.request(
                    method, url, params=params, data=data, files=files, headers=self.auth.headers
                )
            else:
                with httpx.Client() as client:
                    response = client.request(
                        method, url, params=params, data=data, files=files, headers=self.auth.headers
                    )
        except httpx.HTTPError as e:
            logger.error(f"Network error requesting {url}: {e}")
            raise TransportError(f"{method} {url} failed: {e}") from e

        if not response.is_success:
            raise self._api_error(response)

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Non-JSON response from {url}: {response.text[:200]}")
            raise DecodeError(f"response from {url} is not valid JSON") from e

    @staticmethod
    def _api_error(response: httpx.Response) -> APIError:
        try:
            body = response.json()
        except ValueError:
            body = None

        message = response.reason_phrase or "request failed"
        code = None
        if isinstance(body, dict):
            message = body.get("message") or body.get("msg") or message
            code = body.get("code", body.get("errorType"))

        logger.warning(f"Kakao API returned status {response.status_code}: {message}")
        return APIError(message, status_code=response.status_code, code=code, raw_response=body)

    @staticmethod
    def _decode(model: type[ModelT], payload: Any) -> ModelT:
        """Validate a decoded JSON payload into ``model``."""
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            logger.error(f"Response does not match {model.__name__}: {e}")
            raise DecodeError(f"response does not match {model.__name__}") from e
