"""
Centralized logging helpers.

All modules should use `get_logger(__name__)` to obtain a logger instance.
repokit never configures handlers or levels on the root logger; the host
application decides where records go. Until it does, the package logger
stays silent.
"""

import logging

_PACKAGE_LOGGER = "repokit"
_BANNER_WIDTH = 20

logging.getLogger(_PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        logging.Logger for `name`; records propagate to the host's handlers.
    """
    return logging.getLogger(name)


def emphasis_start(logger: logging.Logger, label: str) -> None:
    """Write an opening banner so a block of related lines stands out."""
    logger.info(f"{'=' * _BANNER_WIDTH} START {label} {'=' * _BANNER_WIDTH}")


def emphasis_end(logger: logging.Logger, label: str) -> None:
    logger.info(f"{'=' * _BANNER_WIDTH} END {label} {'=' * _BANNER_WIDTH}")
