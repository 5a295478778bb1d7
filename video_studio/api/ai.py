"""FastAPI routes for the script and content assistant."""

from typing import Any, Optional

from fastapi import APIRouter, Depends
from pydantic import Field

from video_studio.api.deps import get_content_service
from video_studio.models.base import ApiResponse, CamelModel
from video_studio.models.content import Caption, ContentAnalysis, MonetizationPlan, VideoBrief
from video_studio.services.content import ContentService

router = APIRouter(prefix="/ai", tags=["ai"])


class ScriptRequest(CamelModel):
    topic: str = Field(min_length=1, description="What the video is about")
    duration: Optional[int] = Field(default=None, ge=0, description="Length in seconds")


class ScriptData(CamelModel):
    script: str


class ThumbnailRequest(CamelModel):
    title: str = Field(min_length=1)


class ThumbnailData(CamelModel):
    concepts: list[str]


class CaptionRequest(CamelModel):
    transcript: str = Field(min_length=1)


class CaptionData(CamelModel):
    captions: list[Caption]


class AnalyzeRequest(CamelModel):
    title: str = Field(min_length=1)
    description: str = ""
    tags: list[str] = Field(default_factory=list)


@router.post("/generate-script", response_model=ApiResponse[ScriptData])
async def generate_script(
    request: ScriptRequest,
    service: ContentService = Depends(get_content_service),
) -> ApiResponse[ScriptData]:
    """Write a video script for a topic (60 seconds unless told otherwise)."""
    script = await service.generate_script(request.topic, request.duration or 60)
    return ApiResponse[ScriptData](data=ScriptData(script=script))


@router.get("/generate-script")
async def describe_generate_script() -> dict[str, Any]:
    return {
        "message": "AI Script Generation API",
        "endpoints": {
            "POST": "Generate video script",
            "body": {
                "topic": "string (required)",
                "duration": "number (optional, default: 60)",
            },
        },
    }


@router.post("/thumbnails", response_model=ApiResponse[ThumbnailData])
async def generate_thumbnails(
    request: ThumbnailRequest,
    service: ContentService = Depends(get_content_service),
) -> ApiResponse[ThumbnailData]:
    concepts = await service.generate_thumbnail_prompts(request.title)
    return ApiResponse[ThumbnailData](data=ThumbnailData(concepts=concepts))


@router.post("/captions", response_model=ApiResponse[CaptionData])
async def generate_captions(
    request: CaptionRequest,
    service: ContentService = Depends(get_content_service),
) -> ApiResponse[CaptionData]:
    captions = await service.generate_captions(request.transcript)
    return ApiResponse[CaptionData](data=CaptionData(captions=captions))


@router.post("/analyze", response_model=ApiResponse[ContentAnalysis])
async def analyze_content(
    request: AnalyzeRequest,
    service: ContentService = Depends(get_content_service),
) -> ApiResponse[ContentAnalysis]:
    analysis = await service.analyze_video_content(
        request.title, request.description, request.tags
    )
    return ApiResponse[ContentAnalysis](data=analysis)


@router.post("/monetization-plan", response_model=ApiResponse[MonetizationPlan])
async def plan_monetization(
    request: VideoBrief,
    service: ContentService = Depends(get_content_service),
) -> ApiResponse[MonetizationPlan]:
    plan = await service.get_monetization_suggestions(request)
    return ApiResponse[MonetizationPlan](data=plan)
