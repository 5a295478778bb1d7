"""Property-based tests for job record lifecycle.

Job records are immutable; transitions return new records and a record in
a terminal state refuses every further transition.
"""

import pytest
from hypothesis import given, settings, strategies as st
from pydantic import ValidationError

from video_studio.models.job import JobRecord, VideoGenerationConfig, VideoUploadSource
from video_studio.utils.errors import JobTransitionError

job_types = st.sampled_from([
    "video-generation", "video-upload", "script-generation", "voice-synthesis",
    "auto-edit", "thumbnail-generation", "captions", "scene-detection",
])
progress_values = st.integers(min_value=0, max_value=100)


def finished_job(kind: str) -> JobRecord:
    job = JobRecord(type="video-generation").mark_processing(progress=40)
    if kind == "completed":
        return job.mark_completed(video_url="https://example.com/v.mp4")
    return job.mark_error("vendor exploded")


class TestJobRecordTransitions:
    """Transitions produce new records and respect terminal states."""

    @settings(max_examples=100)
    @given(job_type=job_types)
    def test_new_job_is_pending_with_id(self, job_type: str) -> None:
        job = JobRecord(type=job_type)

        assert job.status == "pending"
        assert job.progress == 0
        assert job.id.startswith("job-")
        assert job.completed_at is None
        assert job.error is None

    def test_ids_are_unique(self) -> None:
        ids = {JobRecord(type="video-generation").id for _ in range(200)}
        assert len(ids) == 200

    def test_transition_returns_new_record(self) -> None:
        job = JobRecord(type="video-generation")
        started = job.mark_processing(progress=10, output={"taskId": "t-1"})

        assert job.status == "pending"
        assert job.output is None
        assert started.status == "processing"
        assert started.output == {"taskId": "t-1"}
        assert started.id == job.id

    def test_record_is_frozen(self) -> None:
        job = JobRecord(type="video-generation")
        with pytest.raises(ValidationError):
            job.status = "completed"

    def test_transitions_do_not_share_input(self) -> None:
        job = JobRecord(type="video-generation", input={"prompt": "a", "config": {"provider": "pika"}})
        done = job.mark_processing().mark_completed()

        done.input["prompt"] = "b"
        done.input["config"]["provider"] = "luma"

        assert job.input == {"prompt": "a", "config": {"provider": "pika"}}

    def test_caller_dicts_are_not_aliased(self) -> None:
        payload = {"prompt": "a", "tags": ["x"]}
        output = {"taskId": "t-1", "frames": [1]}
        job = JobRecord(type="video-generation", input=payload).mark_processing(output=output)

        payload["tags"].append("y")
        output["frames"].append(2)

        assert job.input == {"prompt": "a", "tags": ["x"]}
        assert job.output == {"taskId": "t-1", "frames": [1]}

    def test_transitions_do_not_share_output(self) -> None:
        started = JobRecord(type="video-generation").mark_processing(output={"meta": {"step": 1}})
        done = started.mark_completed(output={"durationSeconds": 8})

        done.output["meta"]["step"] = 2

        assert started.output == {"meta": {"step": 1}}

    def test_output_is_merged_incrementally(self) -> None:
        job = (
            JobRecord(type="video-generation")
            .mark_processing(output={"taskId": "t-1"})
            .mark_completed(output={"durationSeconds": 8})
        )
        assert job.output == {"taskId": "t-1", "durationSeconds": 8}

    @settings(max_examples=100)
    @given(steps=st.lists(progress_values, min_size=1, max_size=10))
    def test_progress_never_decreases(self, steps: list[int]) -> None:
        job = JobRecord(type="video-upload")
        seen = [job.progress]
        for step in steps:
            job = job.mark_processing(progress=step)
            seen.append(job.progress)

        assert seen == sorted(seen)
        assert job.progress == max([0] + steps)

    def test_completion_stamps_completed_at(self) -> None:
        job = JobRecord(type="video-upload").mark_completed(video_url="/uploads/a.mp4")

        assert job.status == "completed"
        assert job.progress == 100
        assert job.video_url == "/uploads/a.mp4"
        assert job.completed_at is not None
        assert job.completed_at >= job.created_at

    def test_error_sets_message_only(self) -> None:
        job = JobRecord(type="video-generation").mark_error("Failed to start")

        assert job.status == "error"
        assert job.error == "Failed to start"
        assert job.completed_at is None

    @settings(max_examples=50)
    @given(
        kind=st.sampled_from(["completed", "error"]),
        action=st.sampled_from(["processing", "completed", "error"]),
    )
    def test_terminal_states_are_final(self, kind: str, action: str) -> None:
        job = finished_job(kind)

        with pytest.raises(JobTransitionError) as exc_info:
            if action == "processing":
                job.mark_processing(progress=100)
            elif action == "completed":
                job.mark_completed()
            else:
                job.mark_error("again")

        assert exc_info.value.current == kind
        assert exc_info.value.job_id == job.id

    def test_serializes_with_camel_case_keys(self) -> None:
        job = JobRecord(type="video-generation", webhook_url="https://hooks.example/cb")
        data = job.model_dump(by_alias=True, mode="json")

        assert {"createdAt", "completedAt", "videoUrl", "webhookUrl"} <= set(data)
        assert data["webhookUrl"] == "https://hooks.example/cb"


class TestRequestModels:
    """Generation config and upload source validation."""

    @given(provider=st.text(max_size=20).filter(
        lambda p: p not in {"runway", "pika", "stable-video", "luma", "custom"}
    ))
    @settings(max_examples=100)
    def test_unknown_provider_rejected(self, provider: str) -> None:
        with pytest.raises(ValidationError):
            VideoGenerationConfig(provider=provider)

    @given(upload_type=st.text(max_size=20).filter(lambda t: t not in {"url", "cloud", "file"}))
    @settings(max_examples=100)
    def test_unknown_upload_type_rejected(self, upload_type: str) -> None:
        with pytest.raises(ValidationError):
            VideoUploadSource(type=upload_type, source="s3://bucket/v.mp4")

    def test_config_accepts_camel_case(self) -> None:
        config = VideoGenerationConfig.model_validate(
            {"provider": "runway", "apiKey": "k", "maxDuration": 5, "resolution": "4k"}
        )
        assert config.api_key == "k"
        assert config.max_duration == 5
        assert config.resolution == "4k"
