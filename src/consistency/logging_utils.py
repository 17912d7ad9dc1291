"""Logging setup for the command line entry point.

Library modules only create loggers (``logging.getLogger(__name__)``);
handlers are installed here, once, by the console script.
"""

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"
LOG_LEVEL_ENV = "CONSISTENCY_LOG_LEVEL"


def configure_logging(level: int | str | None = None) -> None:
    """Send log records to stderr.

    Args:
        level: Explicit level; defaults to $CONSISTENCY_LOG_LEVEL, then WARNING
    """
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "WARNING").upper()

    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def set_verbose() -> None:
    logging.getLogger("consistency").setLevel(logging.DEBUG)
