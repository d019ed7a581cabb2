import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_KEY_PREFIX = "KakaoAK "
DEFAULT_BASE_URL = "https://dapi.kakao.com"


def load_env(override: bool = False) -> bool:
    """Load environment variables from env file.

    Defaults to .env in the working directory.
    Set KAKAO_ENV_FILE environment variable to override.
    """
    env = os.getenv("KAKAO_ENV_FILE", ".env")
    return load_dotenv(env, override=override)


@dataclass(frozen=True)
class KakaoConfig:
    """Settings threaded through every request builder."""

    key_prefix: str = DEFAULT_KEY_PREFIX
    base_url: str = DEFAULT_BASE_URL
    rest_api_key: str | None = None

    @classmethod
    def from_env(cls) -> "KakaoConfig":
        return cls(
            key_prefix=os.getenv("KAKAO_KEY_PREFIX", DEFAULT_KEY_PREFIX),
            base_url=os.getenv("KAKAO_API_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            rest_api_key=os.getenv("KAKAO_REST_API_KEY") or None,
        )


def resolve_config(config: KakaoConfig | None) -> KakaoConfig:
    if config is not None:
        return config
    return KakaoConfig.from_env()
