"""Content assistant Pydantic models."""

from pydantic import Field, field_validator

from video_studio.models.base import CamelModel


class Caption(CamelModel):
    """A single timed caption segment."""

    start: float = Field(ge=0)
    end: float = Field(ge=0)
    text: str


class ContentAnalysis(CamelModel):
    """SEO analysis for a video's metadata."""

    seo_score: int = Field(ge=0, le=100)
    suggestions: list[str] = Field(default_factory=list)
    recommended_tags: list[str] = Field(default_factory=list)


class VideoBrief(CamelModel):
    """Description of a video used to plan monetization."""

    title: str = Field(min_length=1)
    category: str = Field(min_length=1)
    audience: str = Field(min_length=1)
    duration: int = Field(ge=1)

    @field_validator("title")
    @classmethod
    def title_not_whitespace(cls, v: str) -> str:
        """Validate that title is not only whitespace."""
        if not v.strip():
            raise ValueError("title cannot be only whitespace")
        return v


class MonetizationPlan(CamelModel):
    """Where and how a video could earn revenue."""

    platforms: list[str] = Field(default_factory=list)
    strategies: list[str] = Field(default_factory=list)
    estimated_revenue: dict[str, float] = Field(default_factory=dict)
