"""PydanticAI agent configurations for the content assistant."""

from video_studio.agents.scriptwriter import (
    SCRIPTWRITER_SYSTEM_PROMPT,
    THUMBNAIL_SYSTEM_PROMPT,
    create_script_agent,
    create_thumbnail_agent,
)
from video_studio.agents.strategist import (
    CAPTIONER_SYSTEM_PROMPT,
    MONETIZATION_SYSTEM_PROMPT,
    SEO_SYSTEM_PROMPT,
    create_caption_agent,
    create_monetization_agent,
    create_seo_agent,
)

__all__ = [
    "create_script_agent",
    "create_thumbnail_agent",
    "create_caption_agent",
    "create_seo_agent",
    "create_monetization_agent",
    "SCRIPTWRITER_SYSTEM_PROMPT",
    "THUMBNAIL_SYSTEM_PROMPT",
    "CAPTIONER_SYSTEM_PROMPT",
    "SEO_SYSTEM_PROMPT",
    "MONETIZATION_SYSTEM_PROMPT",
]
