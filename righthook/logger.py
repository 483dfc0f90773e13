"""Console logging for righthook, with levels chosen from the environment."""

from __future__ import annotations

import logging
import sys

from termcolor import colored

from righthook import env

TRACE = 5
LOGGER_NAME = "righthook"

logging.addLevelName(TRACE, "TRACE")


class _ConsoleHandler(logging.Handler):
    """Prints records to standard output; debug and trace lines are dimmed."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = record.getMessage()
            if record.levelno <= logging.DEBUG:
                message = colored(f"|  {message}", "dark_grey")
            print(message, file=sys.stdout, flush=True)
        except Exception:
            self.handleError(record)


def _level() -> int:
    if env.is_trace():
        return TRACE
    if env.is_verbose():
        return logging.DEBUG
    return logging.INFO


def init() -> logging.Logger:
    """Configure and return the righthook logger."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_level())
    logger.propagate = False
    if not any(isinstance(handler, _ConsoleHandler) for handler in logger.handlers):
        logger.addHandler(_ConsoleHandler())
    return logger