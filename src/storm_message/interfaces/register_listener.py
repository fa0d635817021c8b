"""Callback capability invoked by the messaging transport.

The transport calls back on its own delivery thread once a push token has
been issued, or when registration with the remote push service fails.
Implementations must therefore be safe to call from any thread.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = ["RegisterListener"]


class RegisterListener(ABC):
    """Receives the outcome of push-token registration."""

    @abstractmethod
    def on_registered(self, token: str) -> None:  # noqa: D401
        """Called with the opaque push *token* issued by the push service."""

    @abstractmethod
    def on_error(self, cause: BaseException) -> None:  # noqa: D401
        """Called with the *cause* when registration failed."""
