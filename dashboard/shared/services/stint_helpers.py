"""Stint segmentation and compound lookup."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import NamedTuple

from ..data.types import Compound, LapDetail, TireStint

_START_KEYS = ("startLap", "start_lap", "lap_start")
_END_KEYS = ("endLap", "end_lap", "lap_end")


class StintRange(NamedTuple):
    start_lap: int
    end_lap: int
    compound: Compound

    def contains(self, lap_number: int) -> bool:
        return self.start_lap <= lap_number <= self.end_lap


def _is_lap(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _lookup(entry: Mapping, keys: tuple[str, ...]) -> object:
    for key in keys:
        if entry.get(key) is not None:
            return entry[key]
    return None


def to_stint_range(declared: object) -> StintRange | None:
    """Coerce a declared stint into a range, or None if it has no usable bounds.

    Accepts ``(start_lap, end_lap, compound)`` tuples, backend or snake_case
    dicts, and objects with ``start_lap``/``end_lap``/``compound``.
    """
    if isinstance(declared, Mapping):
        start = _lookup(declared, _START_KEYS)
        end = _lookup(declared, _END_KEYS)
        compound = declared.get("compound")
    elif isinstance(declared, tuple) and len(declared) == 3:
        start, end, compound = declared
    else:
        start = getattr(declared, "start_lap", None)
        end = getattr(declared, "end_lap", None)
        compound = getattr(declared, "compound", None)

    if not _is_lap(start) or not _is_lap(end) or start > end:
        return None
    return StintRange(start, end, Compound.parse(compound))


def stint_ranges(declared: Iterable[object]) -> list[StintRange]:
    """Usable ranges in declaration order; unusable declarations are skipped."""
    ranges = []
    for item in declared:
        stint_range = to_stint_range(item)
        if stint_range is not None:
            ranges.append(stint_range)
    return ranges


def get_compound_for_lap(lap_number: int, declared: Iterable[object]) -> Compound:
    """Return the compound of the first stint covering *lap_number*."""
    for stint_range in stint_ranges(declared):
        if stint_range.contains(lap_number):
            return stint_range.compound
    return Compound.UNKNOWN


def segment_stints(declared: Iterable[object], laps: Sequence[LapDetail]) -> list[TireStint]:
    """Group a driver's laps into their declared stints.

    A lap goes to the first range (in declaration order) containing its lap
    number, so overlapping declarations never share a lap. Laps outside
    every range are left out. Each stint's laps are sorted by lap number.
    """
    ranges = stint_ranges(declared)
    buckets: list[list[LapDetail]] = [[] for _ in ranges]

    for lap in laps:
        for idx, stint_range in enumerate(ranges):
            if stint_range.contains(lap.lap_number):
                buckets[idx].append(lap)
                break

    return [
        TireStint(
            compound=stint_range.compound,
            start_lap=stint_range.start_lap,
            end_lap=stint_range.end_lap,
            lap_details=tuple(sorted(bucket, key=lambda lap: lap.lap_number)),
        )
        for stint_range, bucket in zip(ranges, buckets)
    ]
