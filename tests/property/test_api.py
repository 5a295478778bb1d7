"""Tests for the HTTP surface: status codes, envelopes and error bodies."""

import re
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from hypothesis import given, settings, strategies as st

from tests.fakes import RecordingTransport, json_transport, make_video_service, unreachable_transport
from video_studio.api.deps import (
    get_content_service,
    get_monetization_service,
    get_video_service,
    get_webhook_normalizer,
)
from video_studio.main import app
from video_studio.services.job_store import InMemoryJobStore
from video_studio.services.monetization import MonetizationService
from video_studio.services.webhooks import WebhookNormalizer
from video_studio.utils.errors import ScriptGenerationError

VALID_PROVIDERS = {"runway", "pika", "stable-video", "luma", "custom"}


@pytest.fixture
def transport() -> RecordingTransport:
    return unreachable_transport()


@pytest.fixture
def client(transport: RecordingTransport):
    app.dependency_overrides[get_video_service] = lambda: make_video_service(transport)
    app.dependency_overrides[get_webhook_normalizer] = lambda: WebhookNormalizer()
    app.dependency_overrides[get_monetization_service] = lambda: MonetizationService(
        transport=unreachable_transport()
    )
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()


class TestGenerateEndpoint:
    def test_pika_fallback_scenario(self, client, sample_generation_request: dict) -> None:
        response = client.post("/video/generate", json=sample_generation_request)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["status"] == "processing"
        assert re.fullmatch(r"pika_\d+", body["data"]["output"]["taskId"])
        assert "createdAt" in body["data"]

    @settings(max_examples=50, deadline=None)
    @given(provider=st.text(max_size=15).filter(lambda p: p not in VALID_PROVIDERS))
    def test_invalid_provider_rejected_without_outbound_call(self, provider: str) -> None:
        transport = json_transport({"id": "should-not-happen"})
        app.dependency_overrides[get_video_service] = lambda: make_video_service(transport)
        try:
            with TestClient(app) as test_client:
                response = test_client.post(
                    "/video/generate", json={"prompt": "demo", "config": {"provider": provider}}
                )
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 400
        assert "provider" in response.json()["error"]
        assert transport.requests == []

    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"prompt": "demo"},
            {"config": {"provider": "pika"}},
            {"prompt": "", "config": {"provider": "pika"}},
        ],
    )
    def test_missing_fields_rejected(self, client, body: dict) -> None:
        response = client.post("/video/generate", json=body)

        assert response.status_code == 400
        assert isinstance(response.json()["error"], str)

    def test_provider_failure_is_still_200(self, client) -> None:
        response = client.post(
            "/video/generate", json={"prompt": "demo", "config": {"provider": "runway"}}
        )

        assert response.status_code == 200
        assert response.json()["data"]["status"] == "error"
        assert response.json()["data"]["error"] == "Failed to start Runway video generation"


class TestStatusEndpoint:
    @pytest.mark.parametrize("query", ["", "?jobId=abc", "?provider=pika"])
    def test_missing_query_params(self, client, query: str) -> None:
        response = client.get(f"/video/generate{query}")

        assert response.status_code == 400
        assert response.json() == {"error": "jobId and provider are required"}

    def test_untracked_returns_completed_placeholder(self, client) -> None:
        response = client.get("/video/generate?jobId=abc&provider=pika")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["id"] == "abc"
        assert data["status"] == "completed"
        assert data["videoUrl"] == "/generated/abc.mp4"

    def test_tracked_unknown_job_is_404(self) -> None:
        store = InMemoryJobStore()
        app.dependency_overrides[get_video_service] = lambda: make_video_service(
            json_transport({"id": "rw-1"}), job_store=store
        )
        try:
            with TestClient(app) as test_client:
                missing = test_client.get("/video/generate?jobId=nope&provider=runway")
                created = test_client.post(
                    "/video/generate", json={"prompt": "demo", "config": {"provider": "runway"}}
                ).json()["data"]
                found = test_client.get(f"/video/generate?jobId={created['id']}&provider=runway")
        finally:
            app.dependency_overrides.clear()

        assert missing.status_code == 404
        assert missing.json() == {"error": "Job not found"}
        assert found.status_code == 200
        assert found.json()["data"]["output"] == {"taskId": "rw-1"}


class TestUploadEndpoint:
    def test_file_upload(self, client) -> None:
        response = client.post(
            "/video/upload",
            json={"uploadSource": {"type": "file", "source": "ref", "filename": "a.mp4", "size": 10}},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["status"] == "completed"
        assert data["videoUrl"] == "/uploads/a.mp4"
        assert data["completedAt"] is not None

    @settings(max_examples=50, deadline=None)
    @given(upload_type=st.text(max_size=10).filter(lambda t: t not in {"url", "cloud", "file"}))
    def test_invalid_upload_type(self, upload_type: str) -> None:
        with TestClient(app) as test_client:
            response = test_client.post(
                "/video/upload", json={"uploadSource": {"type": upload_type, "source": "x"}}
            )

        assert response.status_code == 400
        assert "error" in response.json()

    @pytest.mark.parametrize(
        "body", [{}, {"uploadSource": {"type": "url"}}, {"uploadSource": {"source": "x"}}]
    )
    def test_missing_upload_fields(self, client, body: dict) -> None:
        assert client.post("/video/upload", json=body).status_code == 400

    def test_upload_description(self, client) -> None:
        body = client.get("/video/upload").json()
        assert body["supportedTypes"] == ["url", "cloud", "file"]


class TestWebhookEndpoint:
    def test_runway_webhook(self, client, sample_runway_webhook: dict) -> None:
        response = client.post("/video/webhook/runway", json=sample_runway_webhook)

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Webhook processed successfully",
            "jobId": "x",
        }

    def test_unextractable_payload_is_400(self, client) -> None:
        response = client.post("/video/webhook/pika", json={"status": "completed"})

        assert response.status_code == 400
        assert response.json() == {"error": "Failed to process webhook"}

    def test_non_object_payload_is_400(self, client) -> None:
        assert client.post("/video/webhook/runway", json=[1, 2]).status_code == 400

    def test_webhook_description(self, client) -> None:
        body = client.get("/video/webhook/luma").json()

        assert body["provider"] == "luma"
        assert body["method"] == "POST"


class TestMonetizationEndpoint:
    def test_revenue_aggregation(self, client) -> None:
        response = client.post(
            "/monetization/revenue",
            json={"platforms": [{"type": "youtube", "apiKey": "k", "channelId": "c"}, {"type": "instagram"}]},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert len(data["platforms"]) == 2
        assert data["totalRevenue"] == 0
        assert data["platforms"][0]["error"]
        assert {s["type"] for s in data["suggestions"]} == {"low_revenue"}
        assert data["lastUpdated"]

    def test_platform_type_alias(self, client) -> None:
        response = client.post(
            "/monetization/revenue", json={"platforms": [{"platformType": "instagram"}]}
        )
        assert response.json()["data"]["platforms"][0]["platform"] == "instagram"

    def test_untyped_platform_yields_zero_entry(self, client) -> None:
        response = client.post(
            "/monetization/revenue",
            json={"platforms": [{"type": "youtube"}, {"accessToken": "t"}]},
        )

        assert response.status_code == 200
        platforms = response.json()["data"]["platforms"]
        assert len(platforms) == 2
        assert platforms[0]["platform"] == "youtube"
        assert platforms[1]["platform"] is None
        assert platforms[1]["revenue"] == 0
        assert platforms[1]["error"] is None

    @pytest.mark.parametrize("body", [{}, {"platforms": "youtube"}, {"platforms": {"type": "x"}}])
    def test_platforms_must_be_array(self, client, body: dict) -> None:
        response = client.post("/monetization/revenue", json=body)
        assert response.status_code == 400
        assert "platforms" in response.json()["error"]

    def test_static_dashboard(self, client) -> None:
        data = client.get("/monetization/revenue").json()["data"]

        assert data["totalRevenue"] == 4540.75
        assert [p["platform"] for p in data["platforms"]] == ["youtube", "tiktok", "patreon"]
        assert data["suggestions"][0]["type"] == "not_connected"


class TestScriptEndpoint:
    def test_generate_script(self, client) -> None:
        service = SimpleNamespace(generate_script=AsyncMock(return_value="A script"))
        app.dependency_overrides[get_content_service] = lambda: service

        response = client.post("/ai/generate-script", json={"topic": "cats"})

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": {"script": "A script"}}
        service.generate_script.assert_awaited_once_with("cats", 60)

    def test_missing_topic(self, client) -> None:
        response = client.post("/ai/generate-script", json={"duration": 30})

        assert response.status_code == 400
        assert "topic" in response.json()["error"]

    def test_script_failure_is_500(self, client) -> None:
        service = SimpleNamespace(
            generate_script=AsyncMock(side_effect=ScriptGenerationError("Failed to generate script"))
        )
        app.dependency_overrides[get_content_service] = lambda: service

        response = client.post("/ai/generate-script", json={"topic": "cats"})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to generate script"}

    def test_unexpected_error_is_generic_500(self, client) -> None:
        service = SimpleNamespace(generate_script=AsyncMock(side_effect=RuntimeError("boom")))
        app.dependency_overrides[get_content_service] = lambda: service

        response = client.post("/ai/generate-script", json={"topic": "cats"})

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

    def test_thumbnails(self, client) -> None:
        service = SimpleNamespace(generate_thumbnail_prompts=AsyncMock(return_value=["a", "b"]))
        app.dependency_overrides[get_content_service] = lambda: service

        response = client.post("/ai/thumbnails", json={"title": "My Video"})

        assert response.json()["data"] == {"concepts": ["a", "b"]}


def test_health(client) -> None:
    assert client.get("/health").json()["status"] == "ok"


def test_unknown_route_uses_error_body(client) -> None:
    response = client.get("/nope")
    assert response.status_code == 404
    assert "error" in response.json()
