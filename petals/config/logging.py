"""Logging setup for the console game."""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: str = "WARNING") -> None:
    """Send log records to stderr so they never mix with the dice on stdout.

    Raises:
        ValueError: If level is not a known logging level name
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")

    logging.basicConfig(level=numeric, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger("petals").setLevel(numeric)
    logger.debug("Logging configured at %s", level.upper())
