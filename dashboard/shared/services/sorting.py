"""Column sorting for the stint table."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from enum import Enum

from ..data.types import DriverStintRecord

# Null policies: a missing lap time or spread is worst-case, a missing
# slope is neutral.
NULLS_LAST = math.inf
NULL_AS_NEUTRAL = 0.0


def _numeric(field: str, null_value: float) -> Callable[[DriverStintRecord], float]:
    def extract(row: DriverStintRecord) -> float:
        value = getattr(row, field)
        return null_value if value is None else value

    return extract


class SortKey(Enum):
    """Sortable stint-table columns, each with its own null handling."""

    DRIVER_CODE = ("driverCode", lambda row: row.driver_code)
    STINT_LENGTH = ("stintLength", lambda row: row.stint_length)
    FASTEST_LAP = ("fastestLap", _numeric("fastest_lap", NULLS_LAST))
    CONSISTENCY = ("consistency", _numeric("consistency", NULLS_LAST))
    DEGRADATION = ("degradation", _numeric("degradation", NULL_AS_NEUTRAL))

    def __init__(self, column: str, extractor: Callable[[DriverStintRecord], object]) -> None:
        self.column = column
        self.extractor = extractor

    @classmethod
    def parse(cls, name: str | SortKey) -> SortKey:
        """Accept a member, its column name, or its member name (any case)."""
        if isinstance(name, SortKey):
            return name
        wanted = name.strip().lower()
        for key in cls:
            if wanted in (key.column.lower(), key.name.lower()):
                return key
        raise ValueError(f"Unknown sort column: {name!r}")


def sort_rows(
    rows: Iterable[DriverStintRecord],
    key: SortKey | str,
    descending: bool = False,
) -> list[DriverStintRecord]:
    """Return *rows* sorted by one column.

    The sort is stable in both directions: rows with equal keys keep their
    input order.
    """
    sort_key = SortKey.parse(key)
    return sorted(rows, key=sort_key.extractor, reverse=descending)


def toggle_direction(
    current: SortKey | None,
    descending: bool,
    clicked: SortKey,
) -> tuple[SortKey, bool]:
    """Header-click behaviour: same column flips direction, a new one starts ascending."""
    if current is clicked:
        return clicked, not descending
    return clicked, False


def default_order(rows: Iterable[DriverStintRecord]) -> list[DriverStintRecord]:
    """Driver code, then stint number."""
    return sorted(rows, key=lambda row: (row.driver_code, row.stint_number))
