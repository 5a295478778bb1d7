"""Custom exception classes for AI Video Studio."""


class VideoStudioError(Exception):
    """Base exception for all application errors."""

    pass


class ProviderError(VideoStudioError):
    """Errors from a video generation provider adapter."""

    pass


class ProviderConfigError(ProviderError):
    """Provider is missing a required endpoint or credential."""

    pass


class ProviderAPIError(ProviderError):
    """Provider API returned an error."""

    def __init__(self, provider: str, status_code: int, message: str) -> None:
        self.provider = provider
        self.status_code = status_code
        super().__init__(f"{provider} error {status_code}: {message}")


class UploadError(VideoStudioError):
    """Errors while ingesting an uploaded video."""

    pass


class JobTransitionError(VideoStudioError):
    """A job record was asked to leave a terminal state."""

    def __init__(self, job_id: str, current: str, requested: str) -> None:
        self.job_id = job_id
        self.current = current
        self.requested = requested
        super().__init__(
            f"Job {job_id} is {current} and cannot transition to {requested}"
        )


class WebhookPayloadError(VideoStudioError):
    """Webhook payload could not be normalized."""

    pass


class ScriptGenerationError(VideoStudioError):
    """Errors from the script and content assistant."""

    pass


class PlatformAPIError(VideoStudioError):
    """Creator platform API returned an error."""

    def __init__(self, platform: str, status_code: int, message: str) -> None:
        self.platform = platform
        self.status_code = status_code
        super().__init__(f"{platform} error {status_code}: {message}")
