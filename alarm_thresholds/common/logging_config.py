"""
Logging configuration for the alarm-thresholds CLI.

Log records go to stderr; stdout is reserved for the resolved JSON.
"""

import logging
import sys

PACKAGE_LOGGER = "alarm_thresholds"


def setup_logging(log_level: str = "INFO") -> None:
    """
    Configure logging for threshold resolution.

    Root handlers are only installed when none exist yet, but the package
    logger level always follows ``log_level`` so clamping warnings and the
    debug dump honor it.

    Args:
        log_level: Level name (DEBUG, INFO, WARNING, ...); unknown names fall back to INFO
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="[%(levelname)s] %(asctime)s - %(name)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
