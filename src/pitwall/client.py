"""Public client classes for the Pitwall analytics backend."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

from pydantic import TypeAdapter

from pitwall._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, AsyncTransport, SyncTransport
from pitwall._params import build_query_params
from pitwall.exceptions import PitwallError, PitwallValidationError
from pitwall.models.race_result import RaceResult
from pitwall.models.stint_analysis import StintAnalysis
from pitwall.models.strategy import DriverStrategy

logger = logging.getLogger(__name__)


def _validate_list[T](model_type: type[T], data: list[dict[str, Any]]) -> list[T]:
    """Validate a list of dicts against a Pydantic model."""
    try:
        adapter = TypeAdapter(list[model_type])
        return adapter.validate_python(data)
    except Exception as exc:
        raise PitwallValidationError(
            f"Failed to validate {model_type.__name__} response: {exc}"
        ) from exc


def _results_endpoint(year: int, event: str) -> str:
    return f"/api/results/race/{year}/{quote(event, safe='')}"


@dataclass(frozen=True)
class SessionBundle:
    """Everything the tire-strategy view needs for one session."""

    strategies: list[DriverStrategy]
    results: list[RaceResult]
    stints: list[StintAnalysis]


class PitwallClient:
    """Synchronous client for the Pitwall analytics backend.

    Usage:
        with PitwallClient("http://localhost:8000") as api:
            strategies = api.tire_strategy(2024, "Bahrain Grand Prix", "R")
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = SyncTransport(base_url=base_url, timeout=timeout)

    def __enter__(self) -> PitwallClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    def _get[T](self, endpoint: str, model: type[T], **kwargs: Any) -> list[T]:
        params = build_query_params(**kwargs)
        data = self._transport.get(endpoint, params)
        return _validate_list(model, data)

    # ── Endpoints ──────────────────────────────────────────────

    def tire_strategy(self, year: int, event: str, session: str) -> list[DriverStrategy]:
        """Get declared tire stints for every driver in a session."""
        return self._get(
            "/api/strategy", DriverStrategy, year=year, event=event, session=session,
        )

    def stint_analysis(self, year: int, event: str, session: str) -> list[StintAnalysis]:
        """Get per-stint lap timings for every driver in a session."""
        return self._get(
            "/api/stint-analysis", StintAnalysis, year=year, event=event, session=session,
        )

    def race_results(self, year: int, event: str, session: str) -> list[RaceResult]:
        """Get the classification of a session."""
        return self._get(_results_endpoint(year, event), RaceResult, session=session)


class AsyncPitwallClient:
    """Asynchronous client for the Pitwall analytics backend.

    Usage:
        async with AsyncPitwallClient() as api:
            bundle = await api.session_bundle(2024, "Bahrain Grand Prix", "R")
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = AsyncTransport(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> AsyncPitwallClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    async def _get[T](self, endpoint: str, model: type[T], **kwargs: Any) -> list[T]:
        params = build_query_params(**kwargs)
        data = await self._transport.get(endpoint, params)
        return _validate_list(model, data)

    # ── Endpoints ──────────────────────────────────────────────

    async def tire_strategy(self, year: int, event: str, session: str) -> list[DriverStrategy]:
        """Get declared tire stints for every driver in a session."""
        return await self._get(
            "/api/strategy", DriverStrategy, year=year, event=event, session=session,
        )

    async def stint_analysis(self, year: int, event: str, session: str) -> list[StintAnalysis]:
        """Get per-stint lap timings for every driver in a session."""
        return await self._get(
            "/api/stint-analysis", StintAnalysis, year=year, event=event, session=session,
        )

    async def race_results(self, year: int, event: str, session: str) -> list[RaceResult]:
        """Get the classification of a session."""
        return await self._get(_results_endpoint(year, event), RaceResult, session=session)

    async def _optional_race_results(
        self, year: int, event: str, session: str,
    ) -> list[RaceResult]:
        # Any client error here degrades to "no classification".
        try:
            return await self.race_results(year, event, session)
        except PitwallError as exc:
            logger.warning("Race results unavailable for %s %s %s: %s", year, event, session, exc)
            return []

    async def session_bundle(self, year: int, event: str, session: str) -> SessionBundle:
        """Fetch strategy, results and stint timings concurrently."""
        strategies, results, stints = await asyncio.gather(
            self.tire_strategy(year, event, session),
            self._optional_race_results(year, event, session),
            self.stint_analysis(year, event, session),
        )
        return SessionBundle(strategies=strategies, results=results, stints=stints)
