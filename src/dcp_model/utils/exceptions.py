"""Custom exceptions for the DCP container model."""

from typing import Any


class DcpModelError(Exception):
    """Base exception for DCP container model errors."""

    pass


class InvalidArgumentError(DcpModelError, ValueError):
    """Exception raised when a value falls outside a closed set."""

    def __init__(self, argument: str, value: Any, message: str) -> None:
        """
        Initialize InvalidArgumentError.

        Args:
            argument: Name of the offending argument
            value: Value that was rejected
            message: Error message
        """
        self.argument = argument
        self.value = value
        super().__init__(message)
