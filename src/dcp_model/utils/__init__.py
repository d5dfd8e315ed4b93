"""Shared utilities for the DCP container model."""

from .exceptions import DcpModelError, InvalidArgumentError
from .logging import configure_logging, get_logger

__all__ = ["DcpModelError", "InvalidArgumentError", "configure_logging", "get_logger"]
