"""Custom exceptions for the Pitwall backend client."""

from __future__ import annotations


class PitwallError(Exception):
    """Base exception for all Pitwall client errors."""


class PitwallConnectionError(PitwallError):
    """Raised when the client cannot connect to the backend."""


class PitwallTimeoutError(PitwallError):
    """Raised when a request to the backend times out."""


class PitwallAPIError(PitwallError):
    """Raised when the backend returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class PitwallValidationError(PitwallError):
    """Raised when response data fails model validation."""
