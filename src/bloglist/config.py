"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

STORAGE_BACKENDS = {"memory", "supabase"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    storage_backend: str = "memory"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    min_credential_length: int = 3
    session_token_bytes: int = 32
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def testing_enabled(self) -> bool:
        """Whether the test-only maintenance routes are mounted."""
        return self.environment == "test"


def parse_storage_backend(raw: str | None) -> str:
    """Normalize the storage backend name."""
    cleaned = (raw or "memory").strip().lower()
    if cleaned not in STORAGE_BACKENDS:
        raise ValueError(f"Unknown storage backend: {raw!r}")
    return cleaned
