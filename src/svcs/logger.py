"""Logging configuration for SVCS."""

import logging
import os
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from svcs.constants import ENV_DEBUG

LOGGER_NAME = "svcs"


def is_debug_mode() -> bool:
    """Check whether debug logging was requested through the environment."""
    return os.environ.get(ENV_DEBUG, "").lower() in ("1", "true", "yes")


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> logging.Logger:
    """Attach a rich handler writing to stderr to the ``svcs`` logger.

    The default level is WARNING so normal command output stays clean.
    ``verbose`` or ``SVCS_DEBUG=1`` lowers it to DEBUG.
    """
    logger = logging.getLogger(LOGGER_NAME)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)

    level = logging.DEBUG if verbose or is_debug_mode() else logging.WARNING
    logger.setLevel(level)
    return logger
