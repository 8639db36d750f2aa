"""Logging setup for the docstore package logger"""

import logging
import sys


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
HANDLER_NAME = "docstore-stderr"


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Attach one stderr handler to the `docstore` logger and set its level.

    A handler from an earlier call is replaced so output follows the current sys.stderr.
    """
    logger = logging.getLogger("docstore")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    for h in [h for h in logger.handlers if h.name == HANDLER_NAME]:
        logger.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
