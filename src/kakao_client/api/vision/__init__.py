"""
Vision Service Package - Kakao Vision APIs.

This package provides:
- face_detect / FaceDetectInitializer: detect faces in an image URL or file
- Models: Pydantic models for the face detection response
"""

from kakao_client.api.vision.core import MAX_UPLOAD_BYTES, FaceDetectInitializer, face_detect
from kakao_client.api.vision.models import (
    Face,
    FaceDetectResult,
    FacialAttributes,
    FacialPoints,
    FaceResult,
    Gender,
)

__all__ = [
    "MAX_UPLOAD_BYTES",
    # Builders
    "FaceDetectInitializer",
    "face_detect",
    # Models
    "Face",
    "FaceDetectResult",
    "FaceResult",
    "FacialAttributes",
    "FacialPoints",
    "Gender",
]
