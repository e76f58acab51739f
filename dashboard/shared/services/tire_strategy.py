"""Tire strategy service — fetches a session and runs the stint pipeline."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from pitwall import PitwallClient, PitwallError
from pitwall.models import DriverStrategy, RaceResult, StintAnalysis

from ..api_logging import log_service_call
from ..data.types import Compound, DriverStintRecord
from ..formatters import compound_color, is_race_session
from .common import normalize_laps
from .race_order import RacePositionIndex
from .sorting import SortKey, default_order, sort_rows
from .stint_analysis import aggregate_driver_stints, aggregate_stint_analysis
from .stint_helpers import segment_stints, stint_ranges


@dataclass(frozen=True)
class StintBar:
    compound: Compound
    start_lap: int
    end_lap: int
    left_pct: float
    width_pct: float
    color: str


@dataclass(frozen=True)
class StrategyRow:
    driver_code: str
    position_label: str
    bars: list[StintBar]


@dataclass(frozen=True)
class StrategyOverview:
    rows: list[StrategyRow]
    max_laps: int


@dataclass(frozen=True)
class StintTable:
    rows: list[DriverStintRecord]
    sort_key: SortKey | None
    descending: bool
    show_race_metrics: bool


def max_lap(strategies: Iterable[DriverStrategy]) -> int:
    """Highest declared end lap across all drivers, never below 1."""
    ends = [s.total_laps for s in strategies if s.total_laps is not None]
    return max([*ends, 1])


def stint_bar_geometry(start_lap: int, end_lap: int, max_laps: int) -> tuple[float, float]:
    """Return (left offset %, width %) of a stint bar on a 0..max_laps axis."""
    width = (end_lap - start_lap + 1) / max_laps * 100
    left = (start_lap - 1) / max_laps * 100
    return left, width


class TireStrategyService:
    """Business logic behind the tire strategy page.

    The backend client is passed in so tests can hand over a fake.
    """

    def __init__(self, client: PitwallClient) -> None:
        self._client = client

    @log_service_call
    def fetch_session(
        self,
        year: int,
        event: str,
        session: str,
    ) -> tuple[list[DriverStrategy], list[RaceResult]]:
        """Fetch declared strategies and, if available, the classification."""
        strategies = self._client.tire_strategy(year, event, session)
        try:
            results = self._client.race_results(year, event, session)
        except PitwallError:
            results = []
        return strategies, results

    @log_service_call
    def fetch_stint_analysis(self, year: int, event: str, session: str) -> list[StintAnalysis]:
        return self._client.stint_analysis(year, event, session)

    @log_service_call
    def build_overview(
        self,
        strategies: Sequence[DriverStrategy],
        results: Sequence[RaceResult],
        session: str,
    ) -> StrategyOverview:
        """Strategy bars per driver, ordered by finishing position."""
        index = RacePositionIndex.from_results(results)
        show_positions = is_race_session(session)
        laps = max_lap(strategies)

        rows = []
        for strategy in index.order_strategies(strategies):
            code = strategy.driver or ""
            bars = []
            for stint_range in stint_ranges(strategy.stints):
                left, width = stint_bar_geometry(stint_range.start_lap, stint_range.end_lap, laps)
                bars.append(StintBar(
                    compound=stint_range.compound,
                    start_lap=stint_range.start_lap,
                    end_lap=stint_range.end_lap,
                    left_pct=left,
                    width_pct=width,
                    color=compound_color(stint_range.compound),
                ))
            rows.append(StrategyRow(
                driver_code=code,
                position_label=index.position_label(code) if show_positions else "",
                bars=bars,
            ))
        return StrategyOverview(rows=rows, max_laps=laps)

    @log_service_call
    def build_stint_table(
        self,
        stints: Sequence[StintAnalysis],
        session: str,
        sort_key: SortKey | str | None = None,
        descending: bool = False,
    ) -> StintTable:
        """Aggregate backend stints and sort them for display.

        Without a sort column the rows stay in driver/stint order.
        """
        records = aggregate_stint_analysis(stints)
        key = SortKey.parse(sort_key) if sort_key is not None else None
        if key is not None:
            records = sort_rows(records, key, descending)
        return StintTable(
            rows=records,
            sort_key=key,
            descending=descending if key is not None else False,
            show_race_metrics=is_race_session(session),
        )

    @log_service_call
    def analyse_declared(
        self,
        strategies: Sequence[DriverStrategy],
        laps_by_driver: dict[str, list[dict]],
    ) -> list[DriverStintRecord]:
        """Aggregate raw per-driver laps against their declared stints."""
        records: list[DriverStintRecord] = []
        for strategy in strategies:
            code = strategy.driver or ""
            laps = normalize_laps(laps_by_driver.get(code, []))
            records.extend(aggregate_driver_stints(code, segment_stints(strategy.stints, laps)))
        return default_order(records)
