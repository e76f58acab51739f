"""Pitwall — typed Python client for the F1 analytics backend."""

from pitwall.client import AsyncPitwallClient, PitwallClient, SessionBundle
from pitwall.exceptions import (
    PitwallAPIError,
    PitwallConnectionError,
    PitwallError,
    PitwallTimeoutError,
    PitwallValidationError,
)

__all__ = [
    "AsyncPitwallClient",
    "PitwallAPIError",
    "PitwallClient",
    "PitwallConnectionError",
    "PitwallError",
    "PitwallTimeoutError",
    "PitwallValidationError",
    "SessionBundle",
]

__version__ = "0.1.0"
