"""Normalized webhook models."""

from typing import Literal, Optional

from pydantic import Field

from video_studio.models.base import CamelModel

WebhookStatus = Literal["processing", "completed", "error"]


class WebhookEvent(CamelModel):
    """A vendor callback reduced to the fields every provider shares."""

    provider: str
    job_id: str = Field(min_length=1)
    status: WebhookStatus
    video_url: Optional[str] = None


class WebhookResult(CamelModel):
    """Outcome of handling one inbound webhook."""

    success: bool
    job_id: Optional[str] = None
    event: Optional[WebhookEvent] = None
