"""Webhook normalizer for provider callbacks."""

import logging
from typing import Any, Callable, Optional

from video_studio.models.job import JobRecord
from video_studio.models.webhook import WebhookEvent, WebhookResult, WebhookStatus
from video_studio.services.job_store import InMemoryJobStore
from video_studio.utils.errors import JobTransitionError, WebhookPayloadError

logger = logging.getLogger(__name__)

# (job id, status, video url) as found in a vendor payload
Extracted = tuple[Any, WebhookStatus, Optional[str]]

GENERIC_COMPLETED = {"completed", "complete", "succeeded", "success"}
GENERIC_FAILED = {"error", "failed", "failure"}


def _map_status(raw: Any, completed: str, failed: str) -> WebhookStatus:
    if raw == completed:
        return "completed"
    if raw == failed:
        return "error"
    return "processing"


def _extract_runway(payload: dict[str, Any]) -> Extracted:
    output = payload.get("output")
    if isinstance(output, list):
        output = output[0] if output else None
    return payload.get("id"), _map_status(payload.get("status"), "SUCCEEDED", "FAILED"), output


def _extract_pika(payload: dict[str, Any]) -> Extracted:
    status = _map_status(payload.get("status"), "completed", "failed")
    return payload.get("task_id"), status, payload.get("video_url")


def _extract_stable_video(payload: dict[str, Any]) -> Extracted:
    artifacts = payload.get("artifacts") or []
    video_url = None
    if isinstance(artifacts, list) and artifacts and isinstance(artifacts[0], dict):
        video_url = artifacts[0].get("url")
    status = _map_status(payload.get("status"), "complete", "failed")
    return payload.get("id"), status, video_url


def _extract_generic(payload: dict[str, Any]) -> Extracted:
    raw = str(payload.get("status") or "").lower()
    if raw in GENERIC_COMPLETED:
        status: WebhookStatus = "completed"
    elif raw in GENERIC_FAILED:
        status = "error"
    else:
        status = "processing"
    job_id = payload.get("jobId") or payload.get("id")
    video_url = payload.get("videoUrl") or payload.get("video_url")
    return job_id, status, video_url


EXTRACTORS: dict[str, Callable[[dict[str, Any]], Extracted]] = {
    "runway": _extract_runway,
    "pika": _extract_pika,
    "stable-video": _extract_stable_video,
}


class WebhookNormalizer:
    """Map vendor callback payloads onto a common (job id, status, video url) event."""

    def __init__(self, job_store: Optional[InMemoryJobStore] = None) -> None:
        """
        Initialize the WebhookNormalizer.

        Args:
            job_store: Store whose records are updated from callbacks (optional).
                Without one, normalized callbacks are only logged.
        """
        self.job_store = job_store

    def normalize(self, provider: str, payload: Any) -> WebhookEvent:
        """
        Normalize a vendor payload.

        Unknown providers use a generic field-name guess.

        Raises:
            WebhookPayloadError: If the payload is not an object or has no job id
        """
        if not isinstance(payload, dict):
            raise WebhookPayloadError(
                f"Webhook payload from {provider} must be a JSON object"
            )

        extract = EXTRACTORS.get(provider, _extract_generic)
        job_id, status, video_url = extract(payload)

        if job_id is None or isinstance(job_id, (dict, list, bool)) or str(job_id) == "":
            raise WebhookPayloadError(f"Webhook payload from {provider} has no job id")

        return WebhookEvent(
            provider=provider,
            job_id=str(job_id),
            status=status,
            video_url=video_url if isinstance(video_url, str) and video_url else None,
        )

    def handle_webhook(self, provider: str, payload: Any) -> WebhookResult:
        """
        Normalize a callback and apply it to the tracked job, if any.

        The job's own ``webhook_url`` is never called again from here.

        Returns:
            WebhookResult with ``success=False`` only when extraction failed
        """
        try:
            event = self.normalize(provider, payload)
        except WebhookPayloadError as e:
            logger.error(f"Webhook processing error: {e}")
            return WebhookResult(success=False)

        logger.info(f"Webhook received for job {event.job_id}: {event.status}")
        if event.video_url:
            logger.info(f"Video available at: {event.video_url}")

        if self.job_store is not None:
            self._apply(event)

        return WebhookResult(success=True, job_id=event.job_id, event=event)

    def _apply(self, event: WebhookEvent) -> Optional[JobRecord]:
        job = self.job_store.get(event.job_id)
        if job is None:
            logger.warning(f"Webhook for untracked job {event.job_id} from {event.provider}")
            return None

        try:
            if event.status == "completed":
                updated = job.mark_completed(video_url=event.video_url)
            elif event.status == "error":
                updated = job.mark_error(f"{event.provider} reported the job as failed")
            else:
                updated = job.mark_processing()
        except JobTransitionError as e:
            logger.warning(f"Ignoring webhook for finished job: {e}")
            return job

        return self.job_store.save(updated)
