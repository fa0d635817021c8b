"""Process-wide, publish-once holder for the message settings."""

from __future__ import annotations

from enum import Enum
from threading import Lock
from typing import Generic, Optional, TypeVar

from .exceptions import InvalidArgumentError, SettingsAccessError

T = TypeVar("T")

__all__ = ["SlotState", "SettingsSlot"]


class SlotState(str, Enum):
    UNCONFIGURED = "unconfigured"
    CONFIGURED = "configured"


class SettingsSlot(Generic[T]):
    """Single reference written by builders and read by everyone else.

    The slot starts ``UNCONFIGURED`` and moves to ``CONFIGURED`` on the first
    publish; it never goes back. Values are complete before they are
    published, so a reader sees either nothing or a whole instance.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._value: Optional[T] = None

    @property
    def state(self) -> SlotState:
        return SlotState.UNCONFIGURED if self._value is None else SlotState.CONFIGURED

    def publish(self, value: T) -> Optional[T]:
        """Make *value* visible to all readers and return the value it replaced."""
        if value is None:
            raise InvalidArgumentError("Cannot publish an empty settings instance")
        with self._lock:
            previous = self._value
            self._value = value
        return previous

    def get(self) -> T:
        value = self._value
        if value is None:
            raise SettingsAccessError(
                "You must build the message settings first using MessageSettings.Builder",
                error_code="settings_not_built",
            )
        return value
