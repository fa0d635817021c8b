from __future__ import annotations

import logging
from typing import Optional

from .environment import load_environment

__all__ = ["configure_logging", "LOG_FORMAT"]

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(debug_mode: Optional[bool] = None) -> logging.Logger:
    """Set up root logging for applications that do not configure their own.

    The library never calls this on import. With *debug_mode* unset the
    ``STORM_MESSAGE_DEBUG_MODE`` variable decides the level.
    """
    if debug_mode is None:
        debug_mode = load_environment().debug_mode
    level = logging.DEBUG if debug_mode else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)

    logger = logging.getLogger("storm_message")
    logger.setLevel(level)
    logger.debug("storm-message logging configured (debug=%s)", debug_mode)
    return logger
