from __future__ import annotations

from typing import Optional

from .exceptions import InvalidArgumentError
from .interfaces.context import IAppContext
from .interfaces.transport import IMessageTransport

__all__ = ["ApplicationContext", "ScopedContext"]


class ApplicationContext(IAppContext):
    """Application-scoped context, created once by the host at startup."""

    def __init__(self, transport: IMessageTransport, *, name: str = "application") -> None:
        if transport is None:
            raise InvalidArgumentError("A messaging transport is required", error_code="missing_transport")
        self._transport = transport
        self.name = name

    @property
    def application_context(self) -> "ApplicationContext":  # noqa: D401
        return self

    @property
    def transport(self) -> IMessageTransport:  # noqa: D401
        return self._transport

    def __repr__(self) -> str:
        return f"ApplicationContext(name={self.name!r})"


class ScopedContext(IAppContext):
    """Short-lived context (a screen, a request) bound to a parent context."""

    def __init__(self, parent: IAppContext, *, name: Optional[str] = None) -> None:
        if parent is None:
            raise InvalidArgumentError("A parent context is required", error_code="missing_context")
        self._parent = parent
        self.name = name or "scoped"

    @property
    def application_context(self) -> IAppContext:  # noqa: D401
        return self._parent.application_context

    @property
    def transport(self) -> IMessageTransport:  # noqa: D401
        return self._parent.transport

    def __repr__(self) -> str:
        return f"ScopedContext(name={self.name!r}, parent={self._parent!r})"
