"""Monetization Pydantic models."""

from typing import Any, Literal, Optional

from pydantic import AliasChoices, Field

from video_studio.models.base import CamelModel

SuggestionType = Literal["low_revenue", "low_engagement", "not_connected"]
Priority = Literal["high", "medium", "low"]


class PlatformCredential(CamelModel):
    """Credentials for one creator platform, supplied per request."""

    type: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("type", "platformType")
    )
    api_key: Optional[str] = None
    access_token: Optional[str] = None
    channel_id: Optional[str] = None


class RevenueEntry(CamelModel):
    """Revenue and stats for one platform."""

    platform: Optional[str] = None
    revenue: float = Field(default=0.0, ge=0)
    stats: dict[str, Any] = Field(default_factory=dict)
    last_updated: str
    error: Optional[str] = None


class OptimizationSuggestion(CamelModel):
    platform: Optional[str] = None
    type: SuggestionType
    message: str
    priority: Priority


class RevenueSummary(CamelModel):
    """Aggregated revenue across all requested platforms."""

    platforms: list[RevenueEntry]
    total_revenue: float
    suggestions: list[OptimizationSuggestion] = Field(default_factory=list)
    last_updated: str
