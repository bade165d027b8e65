"""Runtime configuration for the Nexus publish plugin."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration values mapped from the pipeline's PLUGIN_* environment."""

    model_config = SettingsConfigDict(
        env_prefix="PLUGIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )

    # Multi-file upload
    nexus_version: str = ""
    nexus_url: str = ""
    protocol: str = ""
    group_id: str = ""
    repository: str = ""
    artifacts: str = Field("", description="YAML list of artifact descriptors")
    artifact_version: str = Field("", description="Version applied to artifacts that omit one")

    # Credentials
    username: str = ""
    password: str = ""
    credentials_id: str = Field("", description="Legacy name of the password input")

    # Single-file upload, kept for backward compatibility
    server_url: str = ""
    filename: str = ""
    format: str = ""
    attributes: str = ""

    # Runtime
    log_level: str = "INFO"
    timeout: float = 30.0
    dev_testing: bool = False
    output_file: str = Field("", validation_alias="DRONE_OUTPUT")

    @property
    def resolved_password(self) -> str:
        return self.password or self.credentials_id


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
