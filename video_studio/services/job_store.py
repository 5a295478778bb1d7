"""In-memory job record store."""

import logging
from typing import Optional

from video_studio.models.job import JobRecord

logger = logging.getLogger(__name__)

# Output fields holding a provider-assigned id that callbacks refer to
PROVIDER_ID_FIELDS = ("taskId", "generationId")

DEFAULT_MAX_JOBS = 1000


class InMemoryJobStore:
    """
    Process-local map of job id to the latest job record.

    Jobs can also be found by the id their provider assigned, since that is
    what webhook callbacks carry. Only used when job tracking is enabled;
    contents are lost on restart and not shared between worker processes.

    This is a demo store, not a persistence layer. It holds at most
    ``max_jobs`` records and drops the oldest job (with its provider-id
    aliases) once the cap is reached.
    """

    def __init__(self, max_jobs: int = DEFAULT_MAX_JOBS) -> None:
        if max_jobs < 1:
            raise ValueError("max_jobs must be at least 1")
        self.max_jobs = max_jobs
        self._jobs: dict[str, JobRecord] = {}
        self._provider_ids: dict[str, str] = {}

    def save(self, job: JobRecord) -> JobRecord:
        if job.id not in self._jobs:
            while len(self._jobs) >= self.max_jobs:
                self._evict_oldest()

        self._jobs[job.id] = job
        for field in PROVIDER_ID_FIELDS:
            provider_id = (job.output or {}).get(field)
            if provider_id:
                self._provider_ids[str(provider_id)] = job.id
        return job

    def _evict_oldest(self) -> None:
        oldest = next(iter(self._jobs))
        del self._jobs[oldest]
        self._provider_ids = {
            alias: job_id
            for alias, job_id in self._provider_ids.items()
            if job_id != oldest
        }
        logger.debug(f"Job store full, evicted {oldest}")

    def get(self, job_id: str) -> Optional[JobRecord]:
        job = self._jobs.get(job_id)
        if job is None and job_id in self._provider_ids:
            job = self._jobs.get(self._provider_ids[job_id])
        return job

    def __len__(self) -> int:
        return len(self._jobs)

    def __contains__(self, job_id: object) -> bool:
        return isinstance(job_id, str) and self.get(job_id) is not None
