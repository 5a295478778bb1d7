"""HTTP API for AI Video Studio."""

from video_studio.api.ai import router as ai_router
from video_studio.api.monetization import router as monetization_router
from video_studio.api.video import router as video_router

__all__ = ["ai_router", "monetization_router", "video_router"]
