"""
Logging configuration for the material order service.

Every module logs through ``get_logger(__name__)``; ``setup_logging()`` is
called once when the FastAPI app is built (or by CLI entry points).

Environment:
    LOG_LEVEL   root level name, default INFO
    LOG_FILE    optional path of an additional log file
"""

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - [PID:%(process)d] - %(name)s - %(message)s"


def setup_logging():
    """
    Configures the root logger: stdout handler, optional file handler and
    reduced verbosity for SQLAlchemy (engine echo is driven by SQL_ECHO).
    """
    handlers = [logging.StreamHandler(sys.stdout)]
    log_file = os.getenv("LOG_FILE")
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format=LOG_FORMAT,
        handlers=handlers,
    )

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name):
    return logging.getLogger(name)
