"""Logging configuration for the dcp_model package loggers."""

import logging
import sys
from typing import IO, Optional

from pythonjsonlogger import jsonlogger

from dcp_model.config import Settings, get_settings

PACKAGE_LOGGER = "dcp_model"

_JSON_FIELDS = "%(asctime)s %(levelname)s %(name)s %(message)s"
_TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class _PackageHandler(logging.StreamHandler):
    """Stream handler owned by configure_logging, replaced on reconfiguration."""


def _build_formatter(log_format: str) -> logging.Formatter:
    if log_format.lower() == "json":
        return jsonlogger.JsonFormatter(
            _JSON_FIELDS,
            rename_fields={"levelname": "level", "asctime": "timestamp"},
        )
    return logging.Formatter(_TEXT_FORMAT)


def configure_logging(
    settings: Optional[Settings] = None, stream: Optional[IO[str]] = None
) -> logging.Logger:
    """
    Attach a handler to the dcp_model package logger.

    Level and format come from ``settings.log_level`` and
    ``settings.log_format``. Calling this again replaces the handler it
    installed earlier; handlers added by the host application are kept.

    Args:
        settings: Settings to read, defaults to get_settings()
        stream: Output stream, defaults to stdout

    Returns:
        The configured package logger
    """
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level.upper())

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, _PackageHandler):
            logger.removeHandler(handler)

    handler = _PackageHandler(stream or sys.stdout)
    handler.setFormatter(_build_formatter(settings.log_format))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given name.

    Args:
        name: Name for the logger (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
