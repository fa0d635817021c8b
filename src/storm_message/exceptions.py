from __future__ import annotations

from typing import Any, Dict, Optional

__all__ = [
    "StormMessageError",
    "SettingsAccessError",
    "InvalidArgumentError",
    "ConfigurationError",
    "RegistrationError",
]


class StormMessageError(Exception):
    """Base exception for all storm-message errors."""

    def __init__(
        self,
        message: str,
        *,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context: Dict[str, Any] = context or {}

    def __str__(self) -> str:  # pragma: no cover – thin wrapper
        return self.message


class SettingsAccessError(StormMessageError):
    """Raised when settings are looked up before a builder has published them."""


class InvalidArgumentError(StormMessageError, ValueError):
    """Raised at the call that hands the builder an unusable argument."""


class ConfigurationError(StormMessageError):
    """Raised when environment configuration is invalid or missing."""


class RegistrationError(StormMessageError):
    """Reported to a register listener when token registration cannot start."""
