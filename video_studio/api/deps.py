"""FastAPI dependencies for AI Video Studio API."""

from functools import lru_cache
from typing import Optional

from video_studio.config import get_settings
from video_studio.services.content import ContentService, create_content_service
from video_studio.services.job_store import InMemoryJobStore
from video_studio.services.monetization import (
    MonetizationService,
    create_monetization_service,
)
from video_studio.services.video_generation import (
    VideoGenerationService,
    create_video_generation_service,
)
from video_studio.services.webhooks import WebhookNormalizer


@lru_cache
def get_job_store() -> Optional[InMemoryJobStore]:
    """Process-wide job store, or None when job tracking is disabled."""
    settings = get_settings()
    if settings.track_jobs:
        return InMemoryJobStore(max_jobs=settings.job_store_max_jobs)
    return None


def get_video_service() -> VideoGenerationService:
    """Dependency for the video job router."""
    return create_video_generation_service(job_store=get_job_store())


def get_webhook_normalizer() -> WebhookNormalizer:
    """Dependency for the webhook normalizer."""
    return WebhookNormalizer(job_store=get_job_store())


def get_monetization_service() -> MonetizationService:
    """Dependency for the revenue aggregator."""
    return create_monetization_service()


def get_content_service() -> ContentService:
    """Dependency for the script and content assistant."""
    return create_content_service()
