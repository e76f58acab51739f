"""Per-stint performance metrics: fastest lap, consistency, degradation."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from ..data.types import DriverStintRecord, TireStint
from .common import (
    compute_avg_lap,
    compute_degradation,
    compute_fastest_lap,
    compute_std_dev,
    normalize_laps,
    trimmed_laps,
)
from .sorting import default_order
from .stint_helpers import segment_stints


def aggregate_stint(driver_code: str, stint_number: int, stint: TireStint) -> DriverStintRecord:
    """Compute the metrics for one stint.

    ``fastest_lap`` looks at every lap; the other metrics use the trimmed
    set (first and last lap removed).
    """
    representative = trimmed_laps(stint.lap_details)
    return DriverStintRecord(
        driver_code=driver_code,
        stint_number=stint_number,
        compound=stint.compound,
        start_lap=stint.start_lap,
        end_lap=stint.end_lap,
        stint_length=stint.stint_length,
        fastest_lap=compute_fastest_lap(stint.lap_details),
        avg_lap_time=compute_avg_lap(representative),
        consistency=compute_std_dev(representative),
        degradation=compute_degradation(representative),
    )


def aggregate_driver_stints(
    driver_code: str,
    stints: Sequence[TireStint],
) -> list[DriverStintRecord]:
    """Aggregate a driver's stints, numbering them from 1 in order."""
    return [
        aggregate_stint(driver_code, number, stint)
        for number, stint in enumerate(stints, start=1)
    ]


def _entry_value(entry: object, camel: str, snake: str) -> object:
    if isinstance(entry, Mapping):
        return entry.get(camel, entry.get(snake))
    return getattr(entry, snake, None)


def aggregate_stint_analysis(entries: Iterable[object]) -> list[DriverStintRecord]:
    """Aggregate pre-segmented backend stints for a whole session.

    Each entry carries its driver, stint number, bounds, compound and raw
    lap timings. Laps are normalized and clipped to the entry's bounds;
    entries without usable bounds are skipped. A missing stint number falls
    back to the entry's position among that driver's stints. The result is
    ordered by driver code, then stint number.
    """
    records: list[DriverStintRecord] = []
    seen_per_driver: dict[str, int] = {}

    for entry in entries:
        driver_code = str(_entry_value(entry, "driverCode", "driver_code") or "")
        seen_per_driver[driver_code] = seen_per_driver.get(driver_code, 0) + 1

        raw_laps = _entry_value(entry, "lapDetails", "lap_details") or []
        segmented = segment_stints([entry], normalize_laps(raw_laps))
        if not segmented:
            continue

        stint_number = _entry_value(entry, "stintNumber", "stint_number")
        if not isinstance(stint_number, int):
            stint_number = seen_per_driver[driver_code]
        records.append(aggregate_stint(driver_code, stint_number, segmented[0]))

    return default_order(records)
