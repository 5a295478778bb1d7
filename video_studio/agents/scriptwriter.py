"""Scriptwriter agent configuration.

Writes short-form video scripts and thumbnail concepts for social platforms.
"""

import os

from pydantic_ai import Agent

from video_studio.config import get_settings

SCRIPTWRITER_SYSTEM_PROMPT = (
    "You are a professional video script writer specializing in engaging, "
    "monetizable content for social media platforms."
)

THUMBNAIL_SYSTEM_PROMPT = (
    "You are a thumbnail design expert who creates viral, high-CTR thumbnail concepts."
)


def build_script_prompt(topic: str, duration: int) -> str:
    return f"""Create a compelling video script for a {duration}-second video about "{topic}".
Include:
- Hook in the first 5 seconds
- Clear structure with introduction, main points, and conclusion
- Engaging language suitable for social media
- Call-to-action at the end

Format as natural speech, not bullet points."""


def build_thumbnail_prompt(video_title: str) -> str:
    return f"""Generate 3 compelling thumbnail concepts for a video titled "{video_title}".
Each concept should be described as a detailed prompt for image generation, including:
- Visual composition
- Color scheme
- Text overlay suggestions
- Emotional appeal

Separate concepts with a blank line. Focus on high click-through rate elements."""


def resolve_model(model: str | None = None) -> str:
    """Return the model to use, exporting the OpenAI key for pydantic-ai."""
    settings = get_settings()

    # Set environment variable for pydantic-ai to pick up
    if settings.openai_api_key:
        os.environ["OPENAI_API_KEY"] = settings.openai_api_key

    return model or settings.script_model


def create_script_agent(model: str | None = None) -> Agent[None, str]:
    """Create the agent that writes full video scripts.

    Returns:
        A PydanticAI Agent producing the script as plain text.
    """
    return Agent(
        resolve_model(model),
        system_prompt=SCRIPTWRITER_SYSTEM_PROMPT,
        output_type=str,
        model_settings={"max_tokens": 800, "temperature": 0.7},
        defer_model_check=True,
    )


def create_thumbnail_agent(model: str | None = None) -> Agent[None, str]:
    """Create the agent that drafts thumbnail concepts."""
    return Agent(
        resolve_model(model),
        system_prompt=THUMBNAIL_SYSTEM_PROMPT,
        output_type=str,
        model_settings={"max_tokens": 600, "temperature": 0.8},
        defer_model_check=True,
    )
