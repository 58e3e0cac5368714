"""Status settings powered by Pydantic BaseSettings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StatusSettings(BaseSettings):
    """Environment configuration for status checks.

    Attributes:
        debug_checks: Whether debug-only checks (dcheck_ok) are enforced.
        fatal_abort: Terminate failed checks with abort() instead of exit.
        fatal_exit_code: Exit code used when fatal_abort is disabled.
    """

    model_config = SettingsConfigDict(
        env_prefix="STATUS_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug_checks: bool = False
    fatal_abort: bool = True
    fatal_exit_code: int = Field(default=134, ge=1, le=255)


def get_settings() -> StatusSettings:
    """Get a settings instance."""
    return StatusSettings()
