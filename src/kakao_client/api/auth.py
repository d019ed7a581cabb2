"""
Kakao Auth - Authorization header handling shared by every service builder.
Kakao REST APIs expect ``Authorization: KakaoAK <REST API key>``.
"""

from kakao_client.adapters.config import KakaoConfig
from kakao_client.utils.get_logger import get_logger

logger = get_logger(__name__)

AUTHORIZATION = "Authorization"


def format_key(key: str, prefix: str) -> str:
    """Return the header value for ``key``, adding ``prefix`` unless already present."""
    key = key.strip()
    if prefix and key.startswith(prefix):
        return key
    return f"{prefix}{key}"


class Auth:
    """
    Holds the authorization header value for one builder.
    Starts from the REST API key in the config (if any) until authorize_with() replaces it.
    """

    def __init__(self, config: KakaoConfig):
        self.key_prefix = config.key_prefix
        self._auth_key: str | None = None
        self._default_key = config.rest_api_key

    @property
    def auth_key(self) -> str:
        """Lazy-format the header value from the configured key."""
        if self._auth_key is None:
            if self._default_key:
                logger.info("Using REST API key from configuration")
            self._auth_key = format_key(self._default_key or "", self.key_prefix)
        return self._auth_key

    def authorize_with(self, key: str) -> None:
        self._auth_key = format_key(key, self.key_prefix)

    @property
    def headers(self) -> dict[str, str]:
        return {AUTHORIZATION: self.auth_key}
