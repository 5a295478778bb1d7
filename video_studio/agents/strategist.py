"""Content strategist agents: captions, SEO analysis and monetization plans."""

from pydantic_ai import Agent

from video_studio.agents.scriptwriter import resolve_model
from video_studio.models.content import Caption, ContentAnalysis, MonetizationPlan, VideoBrief

CAPTIONER_SYSTEM_PROMPT = (
    "You are a video captioning expert. Create engaging, readable captions with perfect timing."
)

SEO_SYSTEM_PROMPT = (
    "You are a video SEO and monetization expert who helps creators optimize "
    "their content for maximum reach and revenue."
)

MONETIZATION_SYSTEM_PROMPT = (
    "You are a content monetization strategist who helps creators maximize "
    "revenue across platforms."
)


def build_caption_prompt(transcript: str) -> str:
    return f"""Convert this video transcript into properly timed captions suitable for social media.
Break into short, readable segments (max 5 words per caption) with estimated timing in seconds.

Transcript: "{transcript}\""""


def build_analysis_prompt(title: str, description: str, tags: list[str]) -> str:
    return f"""Analyze this video content for SEO and monetization optimization:

Title: "{title}"
Description: "{description}"
Current Tags: {", ".join(tags)}

Provide:
1. SEO score (0-100)
2. 5 specific improvement suggestions
3. 10 recommended tags for better discoverability"""


def build_monetization_prompt(video: VideoBrief) -> str:
    return f"""Suggest monetization strategies for this video:

Title: "{video.title}"
Category: "{video.category}"
Target Audience: "{video.audience}"
Duration: {video.duration} seconds

Recommend:
1. Best platforms for this content
2. Monetization strategies
3. Estimated revenue potential per platform"""


def create_caption_agent(model: str | None = None) -> Agent[None, list[Caption]]:
    return Agent(
        resolve_model(model),
        system_prompt=CAPTIONER_SYSTEM_PROMPT,
        output_type=list[Caption],
        model_settings={"max_tokens": 1000, "temperature": 0.3},
        retries=2,
        defer_model_check=True,
    )


def create_seo_agent(model: str | None = None) -> Agent[None, ContentAnalysis]:
    return Agent(
        resolve_model(model),
        system_prompt=SEO_SYSTEM_PROMPT,
        output_type=ContentAnalysis,
        model_settings={"max_tokens": 800, "temperature": 0.5},
        retries=2,
        defer_model_check=True,
    )


def create_monetization_agent(model: str | None = None) -> Agent[None, MonetizationPlan]:
    return Agent(
        resolve_model(model),
        system_prompt=MONETIZATION_SYSTEM_PROMPT,
        output_type=MonetizationPlan,
        model_settings={"max_tokens": 600, "temperature": 0.6},
        retries=2,
        defer_model_check=True,
    )
