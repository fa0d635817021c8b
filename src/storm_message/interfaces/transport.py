from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover
    from ..receiver import MessageReceiver
    from .register_listener import RegisterListener

__all__ = ["IMessageTransport"]


class IMessageTransport(ABC):
    """Host platform messaging transport a receiver installs itself with."""

    @abstractmethod
    def install(self, receiver: "MessageReceiver") -> None:  # noqa: D401
        """Route inbound push messages to *receiver*."""

    @abstractmethod
    def request_token(
        self,
        project_number: str,
        listener: Optional["RegisterListener"],
    ) -> None:  # noqa: D401
        """Start token registration for *project_number*.

        May return before registration completes; the outcome is reported to
        *listener* (if any) from the transport's own thread.
        """
