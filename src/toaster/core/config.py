"""Application configuration loaded from environment and config files."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class ToastConfig(BaseSettings):
    """Toast store configuration."""

    model_config = {"env_prefix": "TOASTER_TOAST_"}

    limit: int = Field(default=5, ge=1)
    remove_delay_ms: int = Field(default=1000, ge=0)
    templates_path: str | None = None

    @property
    def remove_delay_seconds(self) -> float:
        return self.remove_delay_ms / 1000


class Settings(BaseSettings):
    """Root application settings."""

    model_config = {"env_prefix": "TOASTER_"}

    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    toast: ToastConfig = Field(default_factory=ToastConfig)
