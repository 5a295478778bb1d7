"""Video generation provider adapters.

Each adapter turns a normalized generation request into one vendor call and
maps the vendor's first response onto the job record. Adapters differ in how
they treat vendor failures: some fall back to a locally generated correlation
id so the job keeps ``processing``, others raise and let the router mark the
job as failed.
"""

import logging
import time
from typing import Any, Optional

import httpx

from video_studio.models.job import JobRecord, VideoGenerationConfig
from video_studio.utils.errors import (
    ProviderAPIError,
    ProviderConfigError,
    ProviderError,
)

logger = logging.getLogger(__name__)


_last_timestamp_ms = 0


def _timestamp_ms() -> int:
    """Millisecond clock reading, strictly increasing within the process."""
    global _last_timestamp_ms
    _last_timestamp_ms = max(int(time.time() * 1000), _last_timestamp_ms + 1)
    return _last_timestamp_ms


class VideoProvider:
    """Base interface every video provider adapter implements."""

    name: str = "unknown"

    def __init__(
        self,
        api_url: str = "",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize the adapter.

        Args:
            api_url: Vendor endpoint that starts a generation
            timeout: Outbound request timeout in seconds
            transport: Optional httpx transport, used to fake the vendor
        """
        self.api_url = api_url
        self.timeout = timeout
        self.transport = transport

    async def generate(
        self, prompt: str, config: VideoGenerationConfig, job: JobRecord
    ) -> JobRecord:
        raise NotImplementedError

    async def _post(self, payload: dict[str, Any], api_key: Optional[str]) -> Any:
        """
        POST a JSON payload to the vendor and return the decoded body.

        Raises:
            ProviderAPIError: If the vendor answers with a non-2xx status
            ProviderError: If the request fails or the body is not JSON
        """
        headers = {"Content-Type": "application/json"}
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.post(self.api_url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            raise ProviderError(f"HTTP error calling {self.name}: {e}")

        if not response.is_success:
            raise ProviderAPIError(self.name, response.status_code, response.text)

        try:
            return response.json()
        except ValueError as e:
            raise ProviderError(f"Invalid JSON from {self.name}: {e}")


class RunwayProvider(VideoProvider):
    """Runway ML. Vendor failures fail the job."""

    name = "runway"

    async def generate(
        self, prompt: str, config: VideoGenerationConfig, job: JobRecord
    ) -> JobRecord:
        payload = {
            "prompt": prompt,
            "duration": config.max_duration,
            "resolution": config.resolution,
            "style": config.style,
            "webhook_url": job.webhook_url,
        }
        try:
            data = await self._post(payload, config.api_key)
            task_id = data["id"]
        except (ProviderError, KeyError, TypeError) as e:
            logger.error(f"Runway API error for job {job.id}: {e}")
            raise ProviderError("Failed to start Runway video generation")

        return job.mark_processing(progress=10, output={"taskId": task_id})


class PikaProvider(VideoProvider):
    """Pika Labs. Vendor failures fall back to a synthetic task id."""

    name = "pika"

    async def generate(
        self, prompt: str, config: VideoGenerationConfig, job: JobRecord
    ) -> JobRecord:
        payload = {
            "prompt": prompt,
            "duration": config.max_duration,
            "aspect_ratio": "16:9" if config.resolution == "1080p" else "1:1",
            "webhook_url": job.webhook_url,
        }
        try:
            data = await self._post(payload, config.api_key)
            task_id = data["task_id"]
        except (ProviderError, KeyError, TypeError) as e:
            logger.error(f"Pika API error for job {job.id}, using placeholder task: {e}")
            task_id = f"pika_{_timestamp_ms()}"

        return job.mark_processing(progress=15, output={"taskId": task_id})


class StableVideoProvider(VideoProvider):
    """Stability AI Stable Video Diffusion. Falls back like Pika."""

    name = "stable-video"

    async def generate(
        self, prompt: str, config: VideoGenerationConfig, job: JobRecord
    ) -> JobRecord:
        payload = {
            "prompt": prompt,
            "duration": config.max_duration,
            "dimensions": config.resolution,
            "webhook": job.webhook_url,
        }
        try:
            data = await self._post(payload, config.api_key)
            generation_id = data["id"]
        except (ProviderError, KeyError, TypeError) as e:
            logger.error(
                f"Stable Video API error for job {job.id}, using placeholder generation: {e}"
            )
            generation_id = f"stable_{_timestamp_ms()}"

        return job.mark_processing(progress=20, output={"generationId": generation_id})


class LumaProvider(VideoProvider):
    """Luma Dream Machine. No public start endpoint yet, so nothing is sent."""

    name = "luma"

    async def generate(
        self, prompt: str, config: VideoGenerationConfig, job: JobRecord
    ) -> JobRecord:
        return job.mark_processing(
            progress=25,
            output={
                "generationId": f"luma_{_timestamp_ms()}",
                "estimatedTime": config.max_duration * 30,
            },
        )


class CustomProvider(VideoProvider):
    """User-defined endpoint. Missing configuration and vendor failures fail the job."""

    name = "custom"

    async def generate(
        self, prompt: str, config: VideoGenerationConfig, job: JobRecord
    ) -> JobRecord:
        if not self.api_url:
            raise ProviderConfigError("Custom API endpoint not configured")

        payload = {
            "prompt": prompt,
            "config": config.model_dump(by_alias=True, exclude={"api_key"}),
            "webhook_url": job.webhook_url,
        }
        try:
            data = await self._post(payload, config.api_key)
        except ProviderError as e:
            logger.error(f"Custom API error for job {job.id}: {e}")
            raise ProviderError("Failed to start custom video generation")

        output = data if isinstance(data, dict) else {"result": data}
        return job.mark_processing(progress=30, output=output)


def build_provider_registry(
    settings: Any,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> dict[str, VideoProvider]:
    """
    Build the provider lookup table keyed by provider tag.

    Args:
        settings: Application settings holding vendor endpoints
        transport: Optional httpx transport shared by every adapter

    Returns:
        Mapping of provider tag to adapter
    """
    timeout = settings.http_timeout_seconds
    providers: list[VideoProvider] = [
        RunwayProvider(settings.runway_api_url, timeout, transport),
        PikaProvider(settings.pika_api_url, timeout, transport),
        StableVideoProvider(settings.stable_video_api_url, timeout, transport),
        LumaProvider(timeout=timeout, transport=transport),
        CustomProvider(settings.custom_video_api_endpoint, timeout, transport),
    ]
    return {provider.name: provider for provider in providers}
