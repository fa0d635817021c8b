"""Process-wide push-messaging settings.

Build the settings once at startup with :class:`MessageSettings.Builder` and
fetch them anywhere afterwards with :func:`get_instance`.
"""

from .context import ApplicationContext, ScopedContext
from .exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    RegistrationError,
    SettingsAccessError,
    StormMessageError,
)
from .interfaces import IAppContext, IMessageTransport, RegisterListener
from .receiver import MessageReceiver
from .settings import Builder, MessageSettings, get_instance, is_configured, new_builder

__all__ = [
    "ApplicationContext",
    "ScopedContext",
    "IAppContext",
    "IMessageTransport",
    "RegisterListener",
    "MessageReceiver",
    "MessageSettings",
    "Builder",
    "get_instance",
    "is_configured",
    "new_builder",
    "StormMessageError",
    "SettingsAccessError",
    "InvalidArgumentError",
    "ConfigurationError",
    "RegistrationError",
]
