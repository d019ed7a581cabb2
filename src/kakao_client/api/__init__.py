"""Kakao REST API services (daum, translation, vision)."""
