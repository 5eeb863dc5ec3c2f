"""
Logging configuration for the service's own loggers.

Handlers are attached to the ``string_service_api`` logger rather
than the root logger, and that logger does not propagate.  Setting
``LOG_LEVEL=DEBUG`` therefore turns on the per-invocation messages of
the transport binding without making FastAPI, Starlette or other
libraries chatty.  Uvicorn keeps its own access and error logs.
"""

import logging
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "string_service_api"

_FORMATTER = logging.Formatter(
    fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    name: str = PACKAGE_LOGGER,
) -> logging.Logger:
    """Configure the service logger ``name`` and return it.

    The level is (re)applied on every call, so a later call may change
    verbosity; handlers are only attached the first time.  Unknown
    level names fall back to ``INFO``.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.
    logfile : Optional[str]
        Path of a file that also receives the service's log records.
    name : str
        Logger to configure; defaults to the package logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False

    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(_FORMATTER)
    logger.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(_FORMATTER)
        logger.addHandler(file_handler)

    return logger
