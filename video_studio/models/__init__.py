"""Pydantic data models for AI Video Studio."""

from video_studio.models.content import (
    Caption,
    ContentAnalysis,
    MonetizationPlan,
    VideoBrief,
)
from video_studio.models.job import (
    JobRecord,
    VideoGenerationConfig,
    VideoUploadSource,
)
from video_studio.models.monetization import (
    OptimizationSuggestion,
    PlatformCredential,
    RevenueEntry,
    RevenueSummary,
)
from video_studio.models.webhook import WebhookEvent, WebhookResult

__all__ = [
    "Caption",
    "ContentAnalysis",
    "MonetizationPlan",
    "VideoBrief",
    "JobRecord",
    "VideoGenerationConfig",
    "VideoUploadSource",
    "OptimizationSuggestion",
    "PlatformCredential",
    "RevenueEntry",
    "RevenueSummary",
    "WebhookEvent",
    "WebhookResult",
]
