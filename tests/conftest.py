"""Pytest fixtures for AI Video Studio tests."""

import pytest

from tests.fakes import make_settings
from video_studio.config import Settings
from video_studio.services.job_store import InMemoryJobStore


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def job_store() -> InMemoryJobStore:
    return InMemoryJobStore()


@pytest.fixture
def sample_generation_request() -> dict:
    """Sample generation request body for testing."""
    return {
        "prompt": "demo",
        "config": {"provider": "pika", "maxDuration": 10, "resolution": "1080p"},
    }


@pytest.fixture
def sample_runway_webhook() -> dict:
    """Sample Runway callback payload for testing."""
    return {
        "id": "x",
        "status": "SUCCEEDED",
        "output": "https://cdn.runwayml.com/x.mp4",
    }
