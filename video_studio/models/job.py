"""Job record Pydantic models."""

import copy
from datetime import datetime, timezone
from typing import Any, Literal, Optional
from uuid import uuid4

from pydantic import ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from video_studio.models.base import CamelModel
from video_studio.utils.errors import JobTransitionError

Provider = Literal["runway", "pika", "stable-video", "luma", "custom"]
UploadType = Literal["url", "cloud", "file"]
Resolution = Literal["720p", "1080p", "4k"]

JobType = Literal[
    "video-generation",
    "video-upload",
    "script-generation",
    "voice-synthesis",
    "auto-edit",
    "thumbnail-generation",
    "captions",
    "scene-detection",
]
JobState = Literal["pending", "processing", "completed", "error"]

TERMINAL_STATES = frozenset({"completed", "error"})


def new_job_id() -> str:
    """Generate an opaque job identifier."""
    return f"job-{uuid4().hex[:12]}"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class VideoGenerationConfig(CamelModel):
    """Provider selection and render options for a generation request."""

    provider: Provider
    api_key: Optional[str] = None
    webhook_url: Optional[str] = None
    max_duration: int = Field(default=10, ge=1)
    resolution: Resolution = "1080p"
    style: Optional[str] = None


class VideoUploadSource(CamelModel):
    """Where an uploaded video comes from."""

    type: UploadType
    source: str = Field(min_length=1)
    filename: Optional[str] = None
    size: Optional[int] = Field(default=None, ge=0)
    duration: Optional[float] = Field(default=None, ge=0)


class JobRecord(CamelModel):
    """
    State of a single generation or upload request.

    Records are immutable. Each transition returns a new record, and once a
    record reaches ``completed`` or ``error`` any further transition raises
    ``JobTransitionError``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    id: str = Field(default_factory=new_job_id, min_length=1)
    type: JobType
    status: JobState = "pending"
    input: dict[str, Any] = Field(default_factory=dict)
    output: Optional[dict[str, Any]] = None
    progress: int = Field(default=0, ge=0, le=100)
    error: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    completed_at: Optional[datetime] = None
    video_url: Optional[str] = None
    webhook_url: Optional[str] = None

    @field_validator("input", "output")
    @classmethod
    def _detach(cls, value: Optional[dict[str, Any]]) -> Optional[dict[str, Any]]:
        # Callers keep no reference into a stored record
        return copy.deepcopy(value)

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATES

    def _transition(self, status: JobState, **update: Any) -> "JobRecord":
        if self.is_terminal:
            raise JobTransitionError(self.id, self.status, status)

        progress = update.pop("progress", None)
        if progress is not None:
            update["progress"] = max(self.progress, min(int(progress), 100))

        output = update.pop("output", None)
        if output:
            update["output"] = copy.deepcopy({**(self.output or {}), **output})

        return self.model_copy(update={"status": status, **update}, deep=True)

    def mark_processing(
        self, progress: Optional[int] = None, output: Optional[dict[str, Any]] = None
    ) -> "JobRecord":
        """Advance to ``processing``, merging any provider identifiers into output."""
        return self._transition("processing", progress=progress, output=output)

    def mark_completed(
        self,
        video_url: Optional[str] = None,
        output: Optional[dict[str, Any]] = None,
    ) -> "JobRecord":
        """Finish successfully and stamp ``completed_at``."""
        update: dict[str, Any] = {"progress": 100, "completed_at": utcnow()}
        if video_url:
            update["video_url"] = video_url
        return self._transition("completed", output=output, **update)

    def mark_error(self, message: str) -> "JobRecord":
        """Finish with a human-readable error message."""
        return self._transition("error", error=message or "Unknown error")
