"""Logging configuration.

The display owns stdout and stderr, so log records only go to a file, and
only when TERMBROT_LOG names one.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Mapping, Optional

LOG_FILE_ENV = "TERMBROT_LOG"
LOG_LEVEL_ENV = "TERMBROT_LOG_LEVEL"

MAX_BYTES = 5 * 1024 * 1024
BACKUP_COUNT = 2
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(environ: Optional[Mapping[str, str]] = None) -> logging.Logger:
    """Configure the package logger from the environment and return it."""
    if environ is None:
        environ = os.environ

    logger = logging.getLogger("termbrot")
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()

    level_name = environ.get(LOG_LEVEL_ENV, "INFO").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level in {LOG_LEVEL_ENV}: {level_name}")
    logger.setLevel(level)

    log_file = environ.get(LOG_FILE_ENV)
    if log_file:
        handler = RotatingFileHandler(log_file, maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    # Never fall through to the root logger's stderr handler.
    logger.propagate = False
    return logger
