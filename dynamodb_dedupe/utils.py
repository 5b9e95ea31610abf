"""
Logging helpers for the dedupe shim.
"""

import logging
from typing import Optional

from .config import ReplicationConfig


def create_logger(name: str, config: Optional[ReplicationConfig] = None) -> logging.Logger:
    """Get a named logger honouring the debug logging switch.

    Handlers are left to the application; this only raises the level to
    DEBUG when ``enable_debug_logging`` is set.

    Args:
        name: Logger name (usually ``__name__``)
        config: Replication configuration (defaults to environment)

    Returns:
        Configured logger
    """
    if config is None:
        config = ReplicationConfig.from_env()

    logger = logging.getLogger(name)
    if config.enable_debug_logging:
        logger.setLevel(logging.DEBUG)
    return logger
