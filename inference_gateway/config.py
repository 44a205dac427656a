"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - storage_root is never blank; per-request paths are <storage_root>/<inference_request_id>

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out-of-the-box in a container
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from inference_gateway.core.domain_types import (
    COMPLETED_RETENTION,
    JOB_NAME_MAX_LENGTH,
    MAX_RETRY_LIMIT,
)


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Working storage for retrieved payloads
    storage_root: str = "/var/lib/inference-gateway/payloads"

    @field_validator("storage_root")
    @classmethod
    def strip_storage_root(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("storage_root cannot be empty or whitespace")
        return v.rstrip("/") or "/"

    # Job pipeline
    max_retry_limit: int = Field(MAX_RETRY_LIMIT, ge=0)
    job_name_max_length: int = Field(JOB_NAME_MAX_LENGTH, ge=16)

    # Request store
    completed_retention: int = Field(COMPLETED_RETENTION, ge=0)

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
