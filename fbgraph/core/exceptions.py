"""
Custom exceptions for Graph SDK operations.

This module defines the exception classes raised by the SDK itself.
Errors returned by the Graph API are classified in ``core.api.errors``.
"""
from typing import Optional


class SDKError(Exception):
    """Base exception for all SDK errors."""

    def __init__(self, message: str, code: Optional[int] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            code: Numeric error code (if available)
        """
        self.code = code
        super().__init__(message)


class ProtocolError(SDKError):
    """Raised when a response lacks a field the current protocol step requires."""

    def __init__(self, message: str, field: Optional[str] = None, code: Optional[int] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            field: Name of the missing field
            code: Numeric error code (if available)
        """
        self.field = field
        super().__init__(message, code)


class DecodingError(SDKError):
    """Raised when a response cannot be cast to the requested node or edge."""
    pass


class FileError(SDKError):
    """Raised when a file to upload cannot be read."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        self.path = path
        super().__init__(message)


class SignedRequestError(SDKError):
    """Raised for malformed or badly signed signed requests."""
    pass
