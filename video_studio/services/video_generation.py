"""Job router for video generation and upload requests."""

import logging
from datetime import datetime, timezone
from typing import Optional

import httpx

from video_studio.models.job import JobRecord, VideoGenerationConfig, VideoUploadSource
from video_studio.services.job_store import InMemoryJobStore
from video_studio.services.providers import VideoProvider, build_provider_registry
from video_studio.services.uploads import UploadAdapter, build_upload_registry
from video_studio.utils.errors import ProviderConfigError, UploadError

logger = logging.getLogger(__name__)


class VideoGenerationService:
    """
    Dispatch generation and upload requests to the matching adapter.

    Adapter failures never escape: they become a job record with
    ``status="error"`` so callers must inspect ``status`` on the result.
    """

    def __init__(
        self,
        providers: dict[str, VideoProvider],
        uploaders: dict[str, UploadAdapter],
        job_store: Optional[InMemoryJobStore] = None,
    ) -> None:
        """
        Initialize the VideoGenerationService.

        Args:
            providers: Provider adapters keyed by provider tag
            uploaders: Upload adapters keyed by upload type
            job_store: Where to remember returned jobs (optional)
        """
        self.providers = providers
        self.uploaders = uploaders
        self.job_store = job_store

    async def generate_video(
        self,
        prompt: str,
        config: VideoGenerationConfig,
        webhook_url: Optional[str] = None,
    ) -> JobRecord:
        """
        Start a video generation with the provider named in ``config``.

        Args:
            prompt: Text prompt describing the video
            config: Provider selection and render options
            webhook_url: Callback URL handed to the provider (optional)

        Returns:
            The job record in ``processing``, ``completed`` or ``error`` state
        """
        job = JobRecord(
            type="video-generation",
            input={
                "prompt": prompt,
                "config": config.model_dump(by_alias=True, exclude={"api_key"}),
            },
            webhook_url=webhook_url or config.webhook_url,
        )

        try:
            provider = self.providers.get(config.provider)
            if provider is None:
                raise ProviderConfigError(f"Unsupported provider: {config.provider}")
            result = await provider.generate(prompt, config, job)
        except Exception as e:
            logger.error(f"Video generation job {job.id} failed ({config.provider}): {e}")
            result = job.mark_error(str(e) or "Unknown error")

        if result.status == "pending":
            result = result.mark_error(f"Provider {config.provider} did not start the job")

        logger.info(
            f"Video generation job {result.id} via {config.provider}: {result.status}"
        )
        return self._remember(result)

    async def upload_video(self, upload_source: VideoUploadSource) -> JobRecord:
        """
        Ingest an existing video from a URL, cloud path or local file.

        Args:
            upload_source: Upload type and source reference

        Returns:
            The job record in ``completed`` or ``error`` state
        """
        job = JobRecord(
            type="video-upload",
            input={"uploadSource": upload_source.model_dump(by_alias=True, exclude_none=True)},
        )

        try:
            uploader = self.uploaders.get(upload_source.type)
            if uploader is None:
                raise UploadError(f"Unsupported upload type: {upload_source.type}")
            result = await uploader.upload(upload_source, job)
        except Exception as e:
            logger.error(f"Upload job {job.id} failed ({upload_source.type}): {e}")
            result = job.mark_error(str(e) or "Upload failed")

        logger.info(f"Upload job {result.id} from {upload_source.type}: {result.status}")
        return self._remember(result)

    async def check_job_status(self, job_id: str, provider: str) -> Optional[JobRecord]:
        """
        Look up a job by id.

        Without a job store there is nothing to look up, so a completed
        placeholder record is returned for any id.

        Returns:
            The job record, or None when tracking is enabled and the id is unknown
        """
        if self.job_store is not None:
            return self.job_store.get(job_id)

        now = datetime.now(timezone.utc)
        return JobRecord(
            id=job_id,
            type="video-generation",
            status="completed",
            input={"provider": provider},
            progress=100,
            created_at=now,
            completed_at=now,
            video_url=f"/generated/{job_id}.mp4",
        )

    def _remember(self, job: JobRecord) -> JobRecord:
        if self.job_store is not None:
            self.job_store.save(job)
        return job


def create_video_generation_service(
    job_store: Optional[InMemoryJobStore] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> VideoGenerationService:
    """
    Create a VideoGenerationService instance using application settings.

    Args:
        job_store: Optional store for returned jobs
        transport: Optional httpx transport for all outbound calls

    Returns:
        Configured VideoGenerationService instance
    """
    from video_studio.config import get_settings

    settings = get_settings()
    return VideoGenerationService(
        providers=build_provider_registry(settings, transport),
        uploaders=build_upload_registry(settings, transport),
        job_store=job_store,
    )
