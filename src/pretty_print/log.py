"""Logging setup for the pretty_print command-line tool."""

import logging
import sys

LOGGER_NAME = "pretty_print"
LOG_FORMAT = "%(levelname)s: %(message)s"


def configure_logging(debug: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Any handler installed by a previous call is replaced, so repeated invocations (e.g.
    from tests calling ``main()`` several times) never duplicate messages or write to a
    stale stream.

    Args:
        debug: Emit the DEBUG-level diagnostic trace when True, only warnings otherwise.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.propagate = False
    return logger
