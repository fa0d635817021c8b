"""Environment-backed configuration and logging bootstrap."""

from .environment import MessageEnvironment, load_environment
from .log import LOG_FORMAT, configure_logging

__all__ = ["MessageEnvironment", "load_environment", "configure_logging", "LOG_FORMAT"]
