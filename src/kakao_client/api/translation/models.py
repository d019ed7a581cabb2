"""
Translation Models - Pydantic models for Kakao translation API structures
"""

from pydantic import Field

from kakao_client.contracts.models import KakaoResult
from kakao_client.utils.pydantic_tools import BaseModelWithMethods


class LanguageInfo(BaseModelWithMethods):
    """A candidate language for the detected text."""

    code: str  # kr, en, jp, ...
    name: str
    confidence: float = 0.0


class DetectLanguageResult(KakaoResult):
    """Language detection result, most likely language first."""

    language_info: list[LanguageInfo] = Field(default_factory=list)

    @property
    def best(self) -> LanguageInfo | None:
        if not self.language_info:
            return None
        return max(self.language_info, key=lambda info: info.confidence)


class TranslateResult(KakaoResult):
    """Translation result: one list of translated sentences per input paragraph."""

    translated_text: list[list[str]] = Field(default_factory=list)

    @property
    def text(self) -> str:
        return "\n".join(" ".join(sentences) for sentences in self.translated_text)
