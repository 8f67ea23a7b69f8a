"""Configuration and environment for the access URL tool."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment and .env."""

    model_config = SettingsConfigDict(
        env_prefix="ACCESS_URLS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Kubernetes
    kubeconfig: Path | None = Field(
        default=None,
        description="Path to kubeconfig; uses KUBECONFIG env or default location if unset",
    )
    context: str | None = Field(default=None, description="Kubernetes context to use")
    namespace: str = Field(default="default", description="Namespace the application runs in")
    label_selector: str | None = Field(
        default=None,
        description="Label selector matching the application's Services and Ingresses",
    )
    request_timeout: int = Field(
        default=10,
        ge=1,
        le=300,
        description="Timeout in seconds for each Kubernetes API request",
    )

    # Output
    output: Literal["table", "json"] = Field(
        default="table",
        description="Render a Rich table or print the section as JSON",
    )


def get_settings() -> Settings:
    """Return validated settings instance."""
    return Settings()
