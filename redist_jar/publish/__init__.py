"""Jar publishing helpers."""

from .models import DEFAULT_ARTIFACT_TYPE, PublishRequest, PublishResult
from .publisher import ArtifactPublisher

__all__ = [
    "ArtifactPublisher",
    "DEFAULT_ARTIFACT_TYPE",
    "PublishRequest",
    "PublishResult",
]
