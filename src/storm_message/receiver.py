"""Default receiver for inbound push messages.

The receiver installs itself with the host transport and, using the published
:class:`~storm_message.settings.MessageSettings`, asks the transport for a push
token on behalf of the configured project. Subclass it and override
:meth:`MessageReceiver.on_message` to handle incoming payloads.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from .exceptions import RegistrationError
from .interfaces.context import IAppContext
from .utils import mask_identifier

logger = logging.getLogger("storm_message.receiver")

__all__ = ["MessageReceiver"]


class MessageReceiver:
    """Receives push messages from the platform transport."""

    def __init__(self) -> None:
        self._context: Optional[IAppContext] = None

    @property
    def context(self) -> Optional[IAppContext]:
        """Context the receiver was last registered with, if any."""
        return self._context

    @property
    def is_registered(self) -> bool:
        return self._context is not None

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------
    def register(self, context: IAppContext) -> None:
        """Install this receiver with *context*'s transport and request a token.

        Problems with the configuration are reported to the published
        register listener rather than raised.
        """
        from .settings import get_instance  # noqa: E402 – avoid circular

        settings = get_instance()
        transport = context.transport
        transport.install(self)
        self._context = context

        listener = settings.register_listener
        project_number = settings.project_number
        if not project_number:
            error = RegistrationError(
                "No project number configured; set one on the builder before build()",
                error_code="missing_project_number",
            )
            logger.error("Push registration skipped: %s", error)
            if listener is not None:
                listener.on_error(error)
            return

        logger.info("Requesting push token for project %s", mask_identifier(project_number))
        transport.request_token(project_number, listener)

    # ------------------------------------------------------------------
    # Delivery
    # ------------------------------------------------------------------
    def on_message(self, data: Mapping[str, Any]) -> None:  # noqa: D401
        """Handle one inbound push message. The default only logs it."""
        logger.debug("Push message received with keys: %s", sorted(data))
