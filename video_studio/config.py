"""Application settings from environment variables."""

from functools import lru_cache

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

# Load environment variables
load_dotenv()


class Settings(BaseSettings):
    """Application settings from environment."""

    # API Keys
    openai_api_key: str = ""

    # Script assistant
    script_model: str = "openai:gpt-4"

    # Video providers
    runway_api_url: str = "https://api.runwayml.com/v1/generate"
    pika_api_url: str = "https://api.pika.art/v1/generate"
    stable_video_api_url: str = (
        "https://api.stability.ai/v2alpha/generation/video/stable-video"
    )
    custom_video_api_endpoint: str = ""
    http_timeout_seconds: float = 30.0

    # Uploads
    cloud_upload_delay_seconds: float = 2.0
    file_upload_delay_seconds: float = 1.5

    # Configuration
    log_level: str = "INFO"
    simulation_mode: bool = True
    track_jobs: bool = False
    job_store_max_jobs: int = 1000

    model_config = {"env_file": ".env"}


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
