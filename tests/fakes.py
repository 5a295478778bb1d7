"""Fake HTTP transports and builders shared by tests."""

import json
from typing import Any, Callable, Optional

import httpx

from video_studio.config import Settings
from video_studio.services.job_store import InMemoryJobStore
from video_studio.services.providers import build_provider_registry
from video_studio.services.uploads import build_upload_registry
from video_studio.services.video_generation import VideoGenerationService


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)

    def json_bodies(self) -> list[Any]:
        return [json.loads(request.content) for request in self.requests if request.content]


def json_transport(body: Any, status_code: int = 200) -> RecordingTransport:
    """Transport answering every request with the same JSON body."""
    return RecordingTransport(lambda request: httpx.Response(status_code, json=body))


def unreachable_transport() -> RecordingTransport:
    """Transport where every request fails to connect."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    return RecordingTransport(handler)


def make_settings(**overrides: Any) -> Settings:
    values: dict[str, Any] = {
        "openai_api_key": "",
        "custom_video_api_endpoint": "",
        "cloud_upload_delay_seconds": 0,
        "file_upload_delay_seconds": 0,
        "simulation_mode": True,
        "track_jobs": False,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_video_service(
    transport: httpx.AsyncBaseTransport,
    job_store: Optional[InMemoryJobStore] = None,
    **settings_overrides: Any,
) -> VideoGenerationService:
    settings = make_settings(**settings_overrides)
    return VideoGenerationService(
        providers=build_provider_registry(settings, transport),
        uploaders=build_upload_registry(settings, transport),
        job_store=job_store,
    )
