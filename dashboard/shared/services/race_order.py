"""Order drivers by race classification instead of by name."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from numbers import Real
from typing import TypeVar

T = TypeVar("T")


def _read(entry: object, camel: str, snake: str) -> object:
    if isinstance(entry, Mapping):
        return entry.get(camel, entry.get(snake))
    return getattr(entry, snake, None)


def _finite_position(value: object) -> int | None:
    """Integral finite positions only; DNF/DNS/DSQ sentinels give None."""
    if not isinstance(value, Real) or isinstance(value, bool):
        return None
    if not math.isfinite(value) or int(value) != value:
        return None
    return int(value)


@dataclass(frozen=True)
class RacePositionIndex:
    """Maps driver code to finishing position for one session.

    Drivers missing from the index sort after every classified driver;
    among themselves they sort by driver code.
    """

    positions: Mapping[str, int] = field(default_factory=dict)

    @classmethod
    def from_results(cls, results: Iterable[object]) -> RacePositionIndex:
        """Build the index from result rows (dicts or RaceResult models).

        Rows without a driver code or a finite position are ignored; the
        first row seen for a driver wins.
        """
        positions: dict[str, int] = {}
        for row in results:
            code = _read(row, "driverCode", "driver_code")
            position = _finite_position(_read(row, "position", "position"))
            if not code or position is None or code in positions:
                continue
            positions[code] = position
        return cls(positions=positions)

    def position(self, driver_code: str) -> int | None:
        return self.positions.get(driver_code)

    def sort_key(self, driver_code: str) -> tuple[int, int | str]:
        """Key equivalent to :meth:`compare`, for use with ``sorted``."""
        position = self.positions.get(driver_code)
        if position is None:
            return (1, driver_code)
        return (0, position)

    def compare(self, a: str, b: str) -> int:
        """Negative if *a* finishes ahead of *b*, positive if behind, else 0."""
        pos_a = self.positions.get(a)
        pos_b = self.positions.get(b)
        if pos_a is not None and pos_b is not None:
            return pos_a - pos_b
        if pos_a is not None:
            return -1
        if pos_b is not None:
            return 1
        return (a > b) - (a < b)

    def order_drivers(self, driver_codes: Iterable[str]) -> list[str]:
        return sorted(driver_codes, key=self.sort_key)

    def order_strategies(self, strategies: Iterable[T]) -> list[T]:
        """Sort per-driver strategy rows (``driver`` field) by classification."""
        return sorted(
            strategies,
            key=lambda s: self.sort_key(str(_read(s, "driver", "driver") or "")),
        )

    def position_label(self, driver_code: str) -> str:
        position = self.positions.get(driver_code)
        return f"P{position}" if position is not None else ""
