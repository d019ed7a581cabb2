"""
Contract Models - result shapes shared by every Kakao service.

Field names match the upstream JSON exactly so that a decoded result can be
saved and parsed back without loss.
"""

from __future__ import annotations

from pathlib import Path
from typing import Self

from pydantic import BaseModel

from kakao_client.contracts.errors import SaveError
from kakao_client.utils.get_logger import get_logger
from kakao_client.utils.pydantic_tools import BaseModelWithMethods

logger = get_logger(__name__)

JSON_INDENT = 2


def save_as_json(model: BaseModel, filename: str | Path) -> Path:
    """Write ``model`` to ``filename`` as indented JSON.

    Raises:
        SaveError: If the filename does not end in ``.json``
        OSError: If the file cannot be written
    """
    path = Path(filename)
    if path.suffix.lower() != ".json":
        raise SaveError(f"file extension must be .json, got {path.name!r}")

    with open(path, "w", encoding="utf-8") as f:
        f.write(model.model_dump_json(indent=JSON_INDENT))
        f.write("\n")

    logger.info(f"Saved {type(model).__name__} to {path}")
    return path


class ResultFileMixin:
    """Human-readable rendering plus JSON file persistence for result models."""

    def __str__(self) -> str:
        return self.model_dump_json(indent=JSON_INDENT)  # type: ignore[attr-defined]

    def save_as(self, filename: str | Path) -> Path:
        return save_as_json(self, filename)  # type: ignore[arg-type]

    @classmethod
    def load(cls, filename: str | Path) -> Self:
        """Parse a file previously written by ``save_as``."""
        with open(filename, encoding="utf-8") as f:
            return cls.model_validate_json(f.read())  # type: ignore[attr-defined]


class KakaoResult(ResultFileMixin, BaseModelWithMethods):
    """Base class for every decoded Kakao response."""


class PageableMeta(BaseModelWithMethods):
    """Pagination block returned by the Daum search APIs."""

    total_count: int = 0
    pageable_count: int = 0
    is_end: bool = True


class WebResult(BaseModelWithMethods):
    """Fields common to every Daum search document."""

    title: str = ""
    contents: str = ""
    url: str = ""
    datetime: str = ""  # ISO 8601 as sent by the server
