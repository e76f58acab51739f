"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import httpx

from pitwall.exceptions import (
    PitwallAPIError,
    PitwallConnectionError,
    PitwallTimeoutError,
    PitwallValidationError,
)

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_TIMEOUT = 30.0

_HEADERS = {"Accept": "application/json"}


@contextmanager
def _translate_errors() -> Iterator[None]:
    """Map httpx transport failures onto the client's exception types."""
    try:
        yield
    except httpx.ConnectError as exc:
        raise PitwallConnectionError(str(exc)) from exc
    except httpx.TimeoutException as exc:
        raise PitwallTimeoutError(str(exc)) from exc


def _handle_response(response: httpx.Response) -> list[dict[str, Any]]:
    """Validate response status and return the parsed JSON list.

    Every backend endpoint answers with a JSON array; anything else is
    reported as a validation error rather than handed to the models.
    """
    if response.status_code >= 400:
        raise PitwallAPIError(
            status_code=response.status_code,
            message=response.text,
        )
    try:
        payload = response.json()
    except ValueError as exc:
        raise PitwallValidationError(
            f"Response from {response.request.url.path} is not JSON",
        ) from exc
    if not isinstance(payload, list):
        raise PitwallValidationError(
            f"Expected a JSON array from {response.request.url.path}, "
            f"got {type(payload).__name__}",
        )
    return payload


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.Client(base_url=base_url, timeout=timeout, headers=_HEADERS)

    def get(self, endpoint: str, params: list[tuple[str, str]]) -> list[dict[str, Any]]:
        """Perform a GET request and return parsed JSON."""
        with _translate_errors():
            response = self._client.get(endpoint, params=params)
        return _handle_response(response)

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, headers=_HEADERS)

    async def get(self, endpoint: str, params: list[tuple[str, str]]) -> list[dict[str, Any]]:
        """Perform an async GET request and return parsed JSON."""
        with _translate_errors():
            response = await self._client.get(endpoint, params=params)
        return _handle_response(response)

    async def close(self) -> None:
        await self._client.aclose()
