"""Script and content assistant built on PydanticAI agents."""

import logging
from typing import Optional

from pydantic_ai.exceptions import UnexpectedModelBehavior

from video_studio.agents.scriptwriter import (
    build_script_prompt,
    build_thumbnail_prompt,
    create_script_agent,
    create_thumbnail_agent,
)
from video_studio.agents.strategist import (
    build_analysis_prompt,
    build_caption_prompt,
    build_monetization_prompt,
    create_caption_agent,
    create_monetization_agent,
    create_seo_agent,
)
from video_studio.models.content import Caption, ContentAnalysis, MonetizationPlan, VideoBrief
from video_studio.utils.errors import ScriptGenerationError

logger = logging.getLogger(__name__)

FALLBACK_ANALYSIS = ContentAnalysis(
    seo_score=75,
    suggestions=[
        "Optimize title for keywords",
        "Add trending hashtags",
        "Improve thumbnail design",
    ],
    recommended_tags=["viral", "trending", "tutorial"],
)

FALLBACK_PLAN = MonetizationPlan(
    platforms=["YouTube", "TikTok", "Instagram"],
    strategies=["Ad revenue", "Sponsorships", "Affiliate marketing"],
    estimated_revenue={"youtube": 100, "tiktok": 50, "instagram": 30},
)


class ContentService:
    """Service for AI-written scripts, thumbnails, captions and content advice."""

    def __init__(self, model: Optional[str] = None) -> None:
        """
        Initialize the ContentService.

        Args:
            model: PydanticAI model name; defaults to the configured script model
        """
        self.script_agent = create_script_agent(model)
        self.thumbnail_agent = create_thumbnail_agent(model)
        self.caption_agent = create_caption_agent(model)
        self.seo_agent = create_seo_agent(model)
        self.monetization_agent = create_monetization_agent(model)

    async def generate_script(self, topic: str, duration: int = 60) -> str:
        """
        Write a video script.

        Args:
            topic: What the video is about
            duration: Target length in seconds

        Returns:
            The script as natural speech (may be empty if the model says nothing)

        Raises:
            ScriptGenerationError: If the model call fails
        """
        try:
            result = await self.script_agent.run(build_script_prompt(topic, duration))
        except Exception as e:
            logger.error(f"Error generating script: {e}")
            raise ScriptGenerationError("Failed to generate script") from e

        return result.output or ""

    async def generate_thumbnail_prompts(self, video_title: str) -> list[str]:
        """
        Draft thumbnail concepts for a video.

        Raises:
            ScriptGenerationError: If the model call fails
        """
        try:
            result = await self.thumbnail_agent.run(build_thumbnail_prompt(video_title))
        except Exception as e:
            logger.error(f"Error generating thumbnail prompts: {e}")
            raise ScriptGenerationError("Failed to generate thumbnail prompts") from e

        return [concept.strip() for concept in (result.output or "").split("\n\n") if concept.strip()]

    async def generate_captions(self, transcript: str) -> list[Caption]:
        """
        Split a transcript into timed captions.

        If the model output cannot be parsed, a single caption covering the
        first ten seconds is returned.

        Raises:
            ScriptGenerationError: If the model call fails for any other reason
        """
        try:
            result = await self.caption_agent.run(build_caption_prompt(transcript))
        except UnexpectedModelBehavior as e:
            logger.warning(f"Caption output unusable, using fallback: {e}")
            return [Caption(start=0, end=10, text=transcript[:50] + "...")]
        except Exception as e:
            logger.error(f"Error generating captions: {e}")
            raise ScriptGenerationError("Failed to generate captions") from e

        return result.output

    async def analyze_video_content(
        self, title: str, description: str, tags: list[str]
    ) -> ContentAnalysis:
        """
        Score a video's metadata for SEO and suggest improvements.

        Raises:
            ScriptGenerationError: If the model call fails
        """
        try:
            result = await self.seo_agent.run(build_analysis_prompt(title, description, tags))
        except UnexpectedModelBehavior as e:
            logger.warning(f"Content analysis output unusable, using fallback: {e}")
            return FALLBACK_ANALYSIS.model_copy(deep=True)
        except Exception as e:
            logger.error(f"Error analyzing video content: {e}")
            raise ScriptGenerationError("Failed to analyze video content") from e

        return result.output

    async def get_monetization_suggestions(self, video: VideoBrief) -> MonetizationPlan:
        """
        Recommend platforms and revenue strategies for a video.

        Raises:
            ScriptGenerationError: If the model call fails
        """
        try:
            result = await self.monetization_agent.run(build_monetization_prompt(video))
        except UnexpectedModelBehavior as e:
            logger.warning(f"Monetization output unusable, using fallback: {e}")
            return FALLBACK_PLAN.model_copy(deep=True)
        except Exception as e:
            logger.error(f"Error getting monetization suggestions: {e}")
            raise ScriptGenerationError("Failed to get monetization suggestions") from e

        return result.output


def create_content_service() -> ContentService:
    """Create a ContentService instance using application settings."""
    return ContentService()
