"""Package-wide logger.

Every module logs through ``from .log import logger`` so a single
switch controls verbosity for the whole tool.
"""

from __future__ import annotations

import logging

logger = logging.getLogger("wdr")
logger.addHandler(logging.NullHandler())


def enable_debug_logging() -> None:
    """Send debug output to stderr (used by ``wdr --verbose``)."""
    if any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        logger.setLevel(logging.DEBUG)
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
