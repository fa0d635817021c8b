"""Entry point of the library.

Build a :class:`MessageSettings` once, at application startup, through
:class:`Builder`; every other component then fetches it with
:func:`get_instance`:

>>> settings = (
...     MessageSettings.Builder(app_context)
...     .project_number("123456789012")
...     .register_listener(listener)
...     .build()
... )
>>> get_instance() is settings
True

``build()`` publishes the settings first and only then registers the
receiver, so the receiver (and anything it triggers) already sees them.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config.environment import MessageEnvironment, load_environment
from .exceptions import InvalidArgumentError
from .interfaces.context import IAppContext
from .interfaces.register_listener import RegisterListener
from .receiver import MessageReceiver
from .state import SettingsSlot, SlotState
from .utils import mask_identifier

logger = logging.getLogger("storm_message.settings")

__all__ = ["MessageSettings", "Builder", "get_instance", "is_configured", "new_builder"]

_BUILD_KEY = object()

_slot: SettingsSlot["MessageSettings"] = SettingsSlot()


def get_instance() -> "MessageSettings":
    """Return the published settings.

    Raises :class:`~storm_message.exceptions.SettingsAccessError` when no
    builder has run yet.
    """
    return _slot.get()


def is_configured() -> bool:
    return _slot.state is SlotState.CONFIGURED


def new_builder(context: IAppContext) -> "Builder":
    """Shorthand for ``MessageSettings.Builder(context)``."""
    return Builder(context)


class MessageSettings:
    """Published push-messaging configuration. Create it with :class:`Builder`."""

    def __init__(self, *, _key: object = None) -> None:
        if _key is not _BUILD_KEY:
            raise TypeError(
                "MessageSettings cannot be instantiated directly; use MessageSettings.Builder"
            )
        self._project_number: Optional[str] = None
        self._register_listener: Optional[RegisterListener] = None
        self._receiver: Optional[MessageReceiver] = None

    @property
    def project_number(self) -> Optional[str]:
        """Project number from the push console."""
        return self._project_number

    @property
    def register_listener(self) -> Optional[RegisterListener]:
        """Callback for when the device has been registered for a push token."""
        return self._register_listener

    @property
    def receiver(self) -> Optional[MessageReceiver]:
        """Receiver for inbound push messages."""
        return self._receiver

    def _detached_copy(self) -> "MessageSettings":
        clone = MessageSettings(_key=_BUILD_KEY)
        clone._project_number = self._project_number
        clone._register_listener = self._register_listener
        clone._receiver = self._receiver
        return clone

    def __repr__(self) -> str:
        return (
            f"MessageSettings(project_number={mask_identifier(self._project_number)!r}, "
            f"register_listener={self._register_listener is not None}, "
            f"receiver={type(self._receiver).__name__ if self._receiver else None})"
        )


class Builder:
    """Stages a :class:`MessageSettings` until :meth:`build` publishes it.

    Every setter returns the builder so calls can be chained.
    """

    def __init__(self, context: IAppContext) -> None:
        if context is None:
            raise InvalidArgumentError("An application context is required", error_code="missing_context")
        if not isinstance(context, IAppContext):
            raise InvalidArgumentError(
                f"Expected an IAppContext, got {type(context).__name__}",
                error_code="invalid_context",
            )
        # Only the application-scoped context outlives the builder.
        self._context: IAppContext = context.application_context
        self._construct = MessageSettings(_key=_BUILD_KEY)
        self._builds = 0

        self.message_receiver(MessageReceiver())

    @classmethod
    def from_environment(
        cls,
        context: IAppContext,
        environment: Optional[MessageEnvironment] = None,
    ) -> "Builder":
        """Return a builder pre-populated from ``STORM_MESSAGE_*`` variables."""
        env = environment if environment is not None else load_environment()
        builder = cls(context)
        if env.project_number:
            builder.project_number(env.project_number)
        if not env.default_receiver:
            builder.message_receiver(None)
        return builder

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------
    def project_number(self, project_number: str) -> "Builder":
        """Set the project number shown on the push console's project page."""
        if project_number is None or not str(project_number).strip():
            raise InvalidArgumentError("A project number is required", error_code="missing_project_number")
        self._construct._project_number = str(project_number).strip()
        return self

    def register_listener(self, listener: Optional[RegisterListener]) -> "Builder":
        """Set the callback notified once a push token has been issued."""
        if listener is not None and not isinstance(listener, RegisterListener):
            raise InvalidArgumentError(
                f"Expected a RegisterListener, got {type(listener).__name__}",
                error_code="invalid_listener",
            )
        self._construct._register_listener = listener
        return self

    def message_receiver(self, receiver: Optional[MessageReceiver]) -> "Builder":
        """Replace the receiver. Nothing is registered until :meth:`build`."""
        self._construct._receiver = receiver
        return self

    # ------------------------------------------------------------------
    # Finalisation
    # ------------------------------------------------------------------
    def build(self) -> MessageSettings:
        """Publish the settings, then register the receiver (if any).

        Building more than once re-publishes and re-registers. This is
        allowed, but an application is expected to build once per process.
        """
        settings = self._publish()
        self._register(settings)
        return settings

    def _publish(self) -> MessageSettings:
        settings = self._construct
        # Later setter calls must not reach the published instance.
        self._construct = settings._detached_copy()
        self._builds += 1

        previous = _slot.publish(settings)
        if previous is not None:
            logger.warning(
                "Message settings were already built; replacing the published instance "
                "(build #%d of this builder)",
                self._builds,
            )
        logger.info("Message settings published: %r", settings)
        return settings

    def _register(self, settings: MessageSettings) -> None:
        receiver = settings.receiver
        if receiver is None:
            logger.debug("No message receiver configured; skipping registration")
            return
        logger.debug("Registering %s with %r", type(receiver).__name__, self._context)
        receiver.register(self._context)


MessageSettings.Builder = Builder  # type: ignore[attr-defined]
