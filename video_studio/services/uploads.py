"""Upload adapters for ingesting existing videos."""

import asyncio
import logging
import posixpath
from typing import Any, Optional

import httpx

from video_studio.models.job import JobRecord, VideoUploadSource
from video_studio.utils.errors import UploadError

logger = logging.getLogger(__name__)


class UploadAdapter:
    """Base interface for upload sources."""

    name: str = "unknown"

    async def upload(self, source: VideoUploadSource, job: JobRecord) -> JobRecord:
        raise NotImplementedError


class UrlUploadAdapter(UploadAdapter):
    """Download a video from a public http(s) URL."""

    name = "url"

    def __init__(
        self,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.timeout = timeout
        self.transport = transport

    def _validate_url(self, source: str) -> httpx.URL:
        try:
            url = httpx.URL(source)
        except httpx.InvalidURL as e:
            raise UploadError(f"Failed to upload from URL: {e}")

        if url.scheme not in ("http", "https") or not url.host:
            raise UploadError(f"Failed to upload from URL: invalid URL {source!r}")
        return url

    async def upload(self, source: VideoUploadSource, job: JobRecord) -> JobRecord:
        url = self._validate_url(source.source)
        job = job.mark_processing(progress=0)

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport, follow_redirects=True
            ) as client:
                async with client.stream("GET", str(url)) as response:
                    if response.status_code >= 400:
                        raise UploadError(
                            f"Failed to upload from URL: HTTP {response.status_code}"
                        )

                    total = int(response.headers.get("content-length") or 0)
                    loaded = 0
                    async for chunk in response.aiter_bytes():
                        loaded += len(chunk)
                        if total:
                            progress = round(loaded / total * 100)
                            if progress > job.progress:
                                job = job.mark_processing(progress=progress)
        except httpx.HTTPError as e:
            raise UploadError(f"Failed to upload from URL: {e}")

        logger.info(f"Downloaded {loaded} bytes for job {job.id} from {url}")
        # Stored in place until a storage backend exists
        return job.mark_completed(video_url=source.source)


class CloudUploadAdapter(UploadAdapter):
    """Register a video already held in cloud storage (s3://, gs://, ...)."""

    name = "cloud"

    def __init__(self, delay_seconds: float = 2.0) -> None:
        self.delay_seconds = delay_seconds

    async def upload(self, source: VideoUploadSource, job: JobRecord) -> JobRecord:
        job = job.mark_processing(progress=50)
        await asyncio.sleep(self.delay_seconds)
        return job.mark_completed(video_url=source.source)


class FileUploadAdapter(UploadAdapter):
    """Accept a file reference handed over by the browser."""

    name = "file"

    def __init__(self, delay_seconds: float = 1.5) -> None:
        self.delay_seconds = delay_seconds

    async def upload(self, source: VideoUploadSource, job: JobRecord) -> JobRecord:
        job = job.mark_processing(progress=30)
        await asyncio.sleep(self.delay_seconds)
        filename = source.filename or posixpath.basename(source.source) or source.source
        return job.mark_completed(video_url=f"/uploads/{filename}")


def build_upload_registry(
    settings: Any,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> dict[str, UploadAdapter]:
    """Build the upload adapter lookup table keyed by upload type."""
    adapters: list[UploadAdapter] = [
        UrlUploadAdapter(settings.http_timeout_seconds, transport),
        CloudUploadAdapter(settings.cloud_upload_delay_seconds),
        FileUploadAdapter(settings.file_upload_delay_seconds),
    ]
    return {adapter.name: adapter for adapter in adapters}
