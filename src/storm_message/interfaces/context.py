from __future__ import annotations

from abc import ABC, abstractmethod

from .transport import IMessageTransport

__all__ = ["IAppContext"]


class IAppContext(ABC):
    """Handle to the host application.

    Short-lived contexts hand out the long-lived application context through
    :pyattr:`application_context`; builders keep only that one.
    """

    @property
    @abstractmethod
    def application_context(self) -> "IAppContext":  # noqa: D401
        """Return the application-scoped context."""

    @property
    @abstractmethod
    def transport(self) -> IMessageTransport:  # noqa: D401
        """Return the messaging transport of the host platform."""
