from __future__ import annotations

from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..exceptions import ConfigurationError

__all__ = ["MessageEnvironment", "load_environment"]


class MessageEnvironment(BaseSettings):
    """Message settings defaults read from ``STORM_MESSAGE_*`` variables."""

    project_number: Optional[str] = Field(None, description="Push console project number")
    default_receiver: bool = Field(True, description="Install the default MessageReceiver")
    debug_mode: bool = Field(False)

    @field_validator("project_number", mode="before")
    def _validate_project_number(cls, v: Optional[str]) -> Optional[str]:  # noqa: D401
        if v is None:
            return None
        v = str(v).strip()
        if not v:
            return None
        if not v.isdigit():
            raise ValueError("Project number must contain digits only")
        return v

    model_config = SettingsConfigDict(
        env_prefix="STORM_MESSAGE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


def load_environment() -> MessageEnvironment:
    """Return a freshly loaded :class:`MessageEnvironment`."""
    try:
        return MessageEnvironment()
    except ValidationError as exc:
        raise ConfigurationError(
            f"Invalid storm-message environment configuration: {exc}",
            error_code="invalid_environment",
        ) from exc
