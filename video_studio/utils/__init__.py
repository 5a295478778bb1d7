"""Utility modules for AI Video Studio."""

from video_studio.utils.errors import (
    JobTransitionError,
    PlatformAPIError,
    ProviderAPIError,
    ProviderConfigError,
    ProviderError,
    ScriptGenerationError,
    UploadError,
    VideoStudioError,
    WebhookPayloadError,
)

__all__ = [
    "VideoStudioError",
    "ProviderError",
    "ProviderConfigError",
    "ProviderAPIError",
    "UploadError",
    "JobTransitionError",
    "WebhookPayloadError",
    "ScriptGenerationError",
    "PlatformAPIError",
]
