"""Runtime configuration for halcli.

Values come from ``HAL_*`` environment variables (or a local ``.env``)
and are then overridden by global command-line options.  Settings are
resolved once at startup and passed explicitly to the console sink and
the daemon client; nothing reads them from module state afterwards.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class HalSettings(BaseSettings):
    """Process-wide settings, read-only after startup."""

    model_config = SettingsConfigDict(
        env_prefix="HAL_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        frozen=True,
    )

    daemon_endpoint: str = Field(
        default="http://localhost:8064",
        min_length=1,
        description="Base URL of the daemon.",
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout per daemon request (seconds).",
    )
    color: bool = Field(
        default=True,
        description="Style output with ANSI colors.",
    )
    deployment: str | None = Field(
        default=None,
        description="Deployment to operate on; the daemon's current one when unset.",
    )

    def with_overrides(self, **overrides: object) -> HalSettings:
        """Return a copy with every non-``None`` override applied."""
        update = {key: value for key, value in overrides.items() if value is not None}
        if not update:
            return self
        return self.model_copy(update=update)
