"""Data contracts for the stint analytics engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Compound(str, Enum):
    """Tire compounds reported by the backend."""

    SOFT = "SOFT"
    MEDIUM = "MEDIUM"
    HARD = "HARD"
    INTERMEDIATE = "INTERMEDIATE"
    WET = "WET"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def parse(cls, value: object) -> Compound:
        """Case-insensitive lookup; anything unrecognised is UNKNOWN."""
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        return cls.UNKNOWN


@dataclass(frozen=True)
class LapDetail:
    lap_number: int
    lap_time: float  # seconds, finite and > 0


@dataclass(frozen=True)
class TireStint:
    """A declared stint with the laps that fall inside it."""

    compound: Compound
    start_lap: int
    end_lap: int
    lap_details: tuple[LapDetail, ...] = ()

    @property
    def stint_length(self) -> int:
        return self.end_lap - self.start_lap + 1


@dataclass(frozen=True)
class DriverStintRecord:
    """Derived metrics for one driver's stint.

    Metrics that need more laps than the stint has are None.
    """

    driver_code: str
    stint_number: int
    compound: Compound
    start_lap: int
    end_lap: int
    stint_length: int
    fastest_lap: float | None
    avg_lap_time: float | None
    consistency: float | None
    degradation: float | None
