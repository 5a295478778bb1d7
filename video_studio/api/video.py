"""FastAPI routes for video generation, upload and provider webhooks."""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from pydantic import Field

from video_studio.api.deps import get_video_service, get_webhook_normalizer
from video_studio.models.base import ApiResponse, CamelModel
from video_studio.models.job import JobRecord, VideoGenerationConfig, VideoUploadSource
from video_studio.services.video_generation import VideoGenerationService
from video_studio.services.webhooks import WebhookNormalizer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/video", tags=["video"])


# ==================== Request/Response Models ====================


class GenerateVideoRequest(CamelModel):
    """Request model for video generation."""

    prompt: str = Field(min_length=1, description="Text prompt for the video")
    config: VideoGenerationConfig
    webhook_url: Optional[str] = None


class UploadVideoRequest(CamelModel):
    """Request model for video upload."""

    upload_source: VideoUploadSource


class WebhookAckResponse(CamelModel):
    """Response model for webhook endpoint."""

    success: bool
    message: str
    job_id: Optional[str] = None


# ==================== Endpoints ====================


@router.post("/generate", response_model=ApiResponse[JobRecord])
async def generate_video(
    request: GenerateVideoRequest,
    service: VideoGenerationService = Depends(get_video_service),
) -> ApiResponse[JobRecord]:
    """
    Start a video generation with the requested provider.

    Provider failures come back as a job with ``status="error"``, not as an
    HTTP error.
    """
    job = await service.generate_video(request.prompt, request.config, request.webhook_url)
    return ApiResponse[JobRecord](data=job)


@router.get("/generate", response_model=ApiResponse[JobRecord])
async def get_job_status(
    job_id: Optional[str] = Query(default=None, alias="jobId"),
    provider: Optional[str] = Query(default=None),
    service: VideoGenerationService = Depends(get_video_service),
) -> ApiResponse[JobRecord]:
    """Get the status of a generation job."""
    if not job_id or not provider:
        raise HTTPException(status_code=400, detail="jobId and provider are required")

    job = await service.check_job_status(job_id, provider)
    if job is None:
        raise HTTPException(status_code=404, detail="Job not found")

    return ApiResponse[JobRecord](data=job)


@router.post("/upload", response_model=ApiResponse[JobRecord])
async def upload_video(
    request: UploadVideoRequest,
    service: VideoGenerationService = Depends(get_video_service),
) -> ApiResponse[JobRecord]:
    """Ingest a video from a URL, cloud storage path or local file reference."""
    job = await service.upload_video(request.upload_source)
    return ApiResponse[JobRecord](data=job)


@router.get("/upload")
async def describe_upload() -> dict[str, Any]:
    """Describe the upload API."""
    return {
        "message": "Video Upload API",
        "supportedTypes": ["url", "cloud", "file"],
        "examples": {
            "url": {
                "type": "url",
                "source": "https://example.com/video.mp4",
                "filename": "my-video.mp4",
            },
            "cloud": {
                "type": "cloud",
                "source": "s3://bucket/path/video.mp4",
                "filename": "cloud-video.mp4",
            },
            "file": {
                "type": "file",
                "source": "local-file-reference",
                "filename": "uploaded-video.mp4",
                "size": 1024000,
            },
        },
    }


# ==================== Webhook Endpoints ====================


@router.post("/webhook/{provider}", response_model=WebhookAckResponse)
async def receive_webhook(
    provider: str,
    payload: Any = Body(default=None),
    normalizer: WebhookNormalizer = Depends(get_webhook_normalizer),
) -> WebhookAckResponse:
    """Receive a completion callback from a video generation provider."""
    result = normalizer.handle_webhook(provider, payload)
    if not result.success:
        raise HTTPException(status_code=400, detail="Failed to process webhook")

    return WebhookAckResponse(
        success=True,
        message="Webhook processed successfully",
        job_id=result.job_id,
    )


@router.get("/webhook/{provider}")
async def describe_webhook(provider: str) -> dict[str, Any]:
    """Describe the webhook endpoint for a provider."""
    return {
        "message": f"Webhook endpoint for {provider}",
        "provider": provider,
        "method": "POST",
        "description": (
            "This endpoint receives webhook notifications from video generation providers"
        ),
    }
