"""
Vision Models - Pydantic models for Kakao Vision face detection
"""

from __future__ import annotations

from pydantic import Field

from kakao_client.contracts.models import KakaoResult
from kakao_client.utils.pydantic_tools import BaseModelWithMethods


class Gender(BaseModelWithMethods):
    """Confidence that the detected face is male or female."""

    male: float = 0.0
    female: float = 0.0


class FacialAttributes(BaseModelWithMethods):
    """Estimated gender and age of the detected face."""

    gender: Gender = Field(default_factory=Gender)
    age: float = 0.0


class FacialPoints(BaseModelWithMethods):
    """Landmark coordinates of the detected face, each a value between 0 and 1.0."""

    jaw: list[list[float]] = Field(default_factory=list)
    right_eyebrow: list[list[float]] = Field(default_factory=list)
    left_eyebrow: list[list[float]] = Field(default_factory=list)
    nose: list[list[float]] = Field(default_factory=list)
    right_eye: list[list[float]] = Field(default_factory=list)
    left_eye: list[list[float]] = Field(default_factory=list)
    lip: list[list[float]] = Field(default_factory=list)


class Face(BaseModelWithMethods):
    """A detected face. x, y, w, h are ratios of the image size."""

    facial_attributes: FacialAttributes = Field(default_factory=FacialAttributes)
    facial_points: FacialPoints = Field(default_factory=FacialPoints)
    score: float = 0.0
    class_idx: int = 0
    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0
    pitch: float = 0.0
    yaw: float = 0.0
    roll: float = 0.0


class FaceResult(BaseModelWithMethods):
    width: int = 0
    height: int = 0
    faces: list[Face] = Field(default_factory=list)


class FaceDetectResult(KakaoResult):
    """Face detection result."""

    rid: str = ""
    result: FaceResult = Field(default_factory=FaceResult)
