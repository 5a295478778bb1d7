"""Service layer for AI Video Studio."""

from video_studio.services.content import ContentService, create_content_service
from video_studio.services.job_store import InMemoryJobStore
from video_studio.services.monetization import (
    MonetizationService,
    calculate_projected_revenue,
    create_monetization_service,
    get_optimization_suggestions,
)
from video_studio.services.video_generation import (
    VideoGenerationService,
    create_video_generation_service,
)
from video_studio.services.webhooks import WebhookNormalizer

__all__ = [
    "ContentService",
    "create_content_service",
    "InMemoryJobStore",
    "MonetizationService",
    "calculate_projected_revenue",
    "create_monetization_service",
    "get_optimization_suggestions",
    "VideoGenerationService",
    "create_video_generation_service",
    "WebhookNormalizer",
]
