"""Verbosity-controlled logging for registry changes, loading and class output.

The CLI's ``-v`` flag maps onto three levels:

- 1 (CHANGES): concerns registered, replaced or removed by user code
- 2 (CHECKS): config discovery, style modules and page files being loaded
- 3 (DEBUG): the class list produced by every concern call

Library code never configures handlers; until ``setup_logger`` runs only
errors are shown.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import Any, TextIO

CHANGES_LEVEL = 25  # Between INFO (20) and WARNING (30)
CHECKS_LEVEL = 15  # Between DEBUG (10) and INFO (20)

logging.addLevelName(CHANGES_LEVEL, "CHANGES")
logging.addLevelName(CHECKS_LEVEL, "CHECKS")

VERBOSITY_SILENT = 0
VERBOSITY_CHANGES = 1
VERBOSITY_CHECKS = 2
VERBOSITY_DEBUG = 3

_LEVELS = {
    VERBOSITY_SILENT: logging.ERROR,
    VERBOSITY_CHANGES: CHANGES_LEVEL,
    VERBOSITY_CHECKS: CHECKS_LEVEL,
    VERBOSITY_DEBUG: logging.DEBUG,
}


class ClassweaveLogger(logging.Logger):
    """Logger with one method per verbosity level above silent."""

    def changes(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """A user-visible registry change (verbosity 1)."""
        if self.isEnabledFor(CHANGES_LEVEL):
            self._log(CHANGES_LEVEL, msg, args, **kwargs)

    def checks(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """A loading or discovery step (verbosity 2)."""
        if self.isEnabledFor(CHECKS_LEVEL):
            self._log(CHECKS_LEVEL, msg, args, **kwargs)

    def classes(self, concern: str, modifiers: Sequence[str], classes: Sequence[str]) -> None:
        """The classes one concern call produced (verbosity 3).

        Formatted as ``padding['hover'] -> ['p-2']``; nothing is formatted
        below debug verbosity.
        """
        if self.isEnabledFor(logging.DEBUG):
            self._log(logging.DEBUG, "%s%s -> %s", (concern, list(modifiers), list(classes)))


def get_logger() -> ClassweaveLogger:
    """The shared ``classweave`` logger."""
    previous = logging.getLoggerClass()
    logging.setLoggerClass(ClassweaveLogger)
    try:
        logger = logging.getLogger("classweave")
    finally:
        logging.setLoggerClass(previous)
    assert isinstance(logger, ClassweaveLogger)
    return logger


def setup_logger(verbosity: int, stream: TextIO | None = None) -> None:
    """Configure the classweave logger for a CLI verbosity.

    Can be called again to reconfigure; unknown verbosities fall back to
    silent.

    Args:
        verbosity: 0=silent, 1=changes, 2=checks, 3=debug
        stream: Output stream (defaults to sys.stderr, so stdout stays
            reserved for rendered HTML and class lists)
    """
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(_LEVELS.get(verbosity, logging.ERROR))

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


def reset_logger() -> None:
    """Drop handlers and return to silent."""
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(logging.ERROR)


def is_silent() -> bool:
    return get_logger().level >= logging.ERROR


def changes_enabled() -> bool:
    return get_logger().isEnabledFor(CHANGES_LEVEL)


def checks_enabled() -> bool:
    return get_logger().isEnabledFor(CHECKS_LEVEL)


def debug_enabled() -> bool:
    return get_logger().isEnabledFor(logging.DEBUG)
