"""Shared pure functions for the service layer (no Streamlit dependency)."""

from __future__ import annotations

import math
import statistics
from collections.abc import Iterable, Mapping, Sequence
from numbers import Real

from ..data.types import LapDetail

_LAP_NUMBER_KEYS = ("lapNumber", "lap_number")
_LAP_TIME_KEYS = ("lapTime", "lap_time")


def _field(entry: object, keys: tuple[str, ...]) -> object:
    """Read the first present key from a mapping, else the snake_case attribute."""
    if isinstance(entry, Mapping):
        for key in keys:
            if key in entry:
                return entry[key]
        return None
    return getattr(entry, keys[-1], None)


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _as_lap_number(value: object) -> int | None:
    """Return a positive integral lap number, or None."""
    if not _is_number(value) or not math.isfinite(value):
        return None
    if int(value) != value or value < 1:
        return None
    return int(value)


def normalize_laps(raw_laps: Iterable[object]) -> list[LapDetail]:
    """Return typed laps for entries with a finite, strictly positive time.

    Entries may be backend dicts (``lapNumber``/``lapTime``), snake_case
    dicts, or objects exposing ``lap_number``/``lap_time``. Missing, zero,
    negative or non-numeric times mark in/out laps, safety-car laps and DNF
    laps; those entries are dropped. Input order is preserved.
    """
    laps: list[LapDetail] = []
    for entry in raw_laps:
        lap_number = _as_lap_number(_field(entry, _LAP_NUMBER_KEYS))
        lap_time = _field(entry, _LAP_TIME_KEYS)
        if lap_number is None or not _is_number(lap_time):
            continue
        lap_time = float(lap_time)
        if not math.isfinite(lap_time) or lap_time <= 0:
            continue
        laps.append(LapDetail(lap_number=lap_number, lap_time=lap_time))
    return laps


def trimmed_laps(lap_details: Sequence[LapDetail]) -> list[LapDetail]:
    """Drop the out-lap and in-lap of a stint.

    Stints of two laps or fewer have no representative laps at all.
    """
    if len(lap_details) <= 2:
        return []
    return list(lap_details[1:-1])


def compute_fastest_lap(lap_details: Sequence[LapDetail]) -> float | None:
    """Return the quickest lap time across the whole stint, or None."""
    return min((lap.lap_time for lap in lap_details), default=None)


def compute_avg_lap(lap_details: Sequence[LapDetail]) -> float | None:
    """Return the mean lap time, or None for an empty set."""
    if not lap_details:
        return None
    return statistics.fmean([lap.lap_time for lap in lap_details])


def compute_std_dev(lap_details: Sequence[LapDetail]) -> float | None:
    """Population standard deviation of lap times; needs at least two laps."""
    if len(lap_details) < 2:
        return None
    return statistics.pstdev([lap.lap_time for lap in lap_details])


def compute_degradation(lap_details: Sequence[LapDetail]) -> float | None:
    """Least-squares slope of lap time against lap number (s/lap).

    Positive means the car is getting slower. Needs at least two laps; a
    zero denominator (all lap numbers equal) gives 0.0.
    """
    n = len(lap_details)
    if n < 2:
        return None

    sum_x = sum_y = sum_xy = sum_x2 = 0.0
    for lap in lap_details:
        x, y = lap.lap_number, lap.lap_time
        sum_x += x
        sum_y += y
        sum_xy += x * y
        sum_x2 += x * x

    denominator = n * sum_x2 - sum_x * sum_x
    if denominator == 0:
        return 0.0
    return (n * sum_xy - sum_x * sum_y) / denominator
