"""Shared fixtures for dashboard tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add dashboard to path so `shared` is importable
_dashboard_dir = str(Path(__file__).resolve().parent.parent.parent / "dashboard")
if _dashboard_dir not in sys.path:
    sys.path.insert(0, _dashboard_dir)

from shared.data.types import Compound, DriverStintRecord, LapDetail, TireStint  # noqa: E402


# ── Sample data fixtures ─────────────────────────────────────────────────────


def _make_lap(lap_number: int, lap_time: float) -> LapDetail:
    return LapDetail(lap_number=lap_number, lap_time=lap_time)


def _make_stint(
    start_lap: int,
    end_lap: int,
    times: list[float] | None = None,
    compound: Compound = Compound.SOFT,
) -> TireStint:
    """Stint whose laps start at *start_lap* with the given times."""
    laps = tuple(
        _make_lap(start_lap + i, t) for i, t in enumerate(times or [])
    )
    return TireStint(compound=compound, start_lap=start_lap, end_lap=end_lap, lap_details=laps)


def _make_record(
    driver_code: str = "VER",
    stint_number: int = 1,
    stint_length: int = 10,
    fastest_lap: float | None = 90.0,
    consistency: float | None = 0.3,
    degradation: float | None = 0.05,
    compound: Compound = Compound.MEDIUM,
) -> DriverStintRecord:
    return DriverStintRecord(
        driver_code=driver_code,
        stint_number=stint_number,
        compound=compound,
        start_lap=1,
        end_lap=stint_length,
        stint_length=stint_length,
        fastest_lap=fastest_lap,
        avg_lap_time=fastest_lap,
        consistency=consistency,
        degradation=degradation,
    )


def _raw_lap(lap_number: object, lap_time: object) -> dict:
    return {"lapNumber": lap_number, "lapTime": lap_time}


@pytest.fixture
def raw_laps() -> list[dict]:
    """Backend laps: 6 usable, 4 that must be dropped."""
    return [
        _raw_lap(1, 98.7),
        _raw_lap(2, 91.2),
        _raw_lap(3, None),  # safety car, no time
        _raw_lap(4, 91.6),
        _raw_lap(5, 0),
        _raw_lap(6, 92.0),
        _raw_lap(7, "PIT"),
        _raw_lap(8, 92.3),
        _raw_lap(9, -1.0),
        _raw_lap(10, 97.5),
    ]


@pytest.fixture
def sample_declared() -> list[dict]:
    return [
        {"compound": "soft", "startLap": 1, "endLap": 4},
        {"compound": "HARD", "startLap": 5, "endLap": 10},
    ]


@pytest.fixture
def sample_stint_analysis() -> list[dict]:
    """Two drivers, unsorted, with one unusable lap each."""
    return [
        {
            "driverCode": "NOR",
            "stintNumber": 2,
            "compound": "hard",
            "startLap": 20,
            "endLap": 24,
            "lapDetails": [
                {"lapNumber": 22, "lapTime": 91.0},
                {"lapNumber": 20, "lapTime": 96.0},
                {"lapNumber": 21, "lapTime": 90.5},
                {"lapNumber": 23, "lapTime": 91.5},
                {"lapNumber": 24, "lapTime": None},
            ],
        },
        {
            "driverCode": "NOR",
            "stintNumber": 1,
            "compound": "MEDIUM",
            "startLap": 1,
            "endLap": 19,
            "lapDetails": [
                {"lapNumber": 1, "lapTime": 95.0},
                {"lapNumber": 2, "lapTime": 92.0},
            ],
        },
        {
            "driverCode": "LEC",
            "stintNumber": 1,
            "compound": "SOFT",
            "startLap": 1,
            "endLap": 4,
            "lapDetails": [
                {"lapNumber": 1, "lapTime": 94.0},
                {"lapNumber": 2, "lapTime": 90.0},
                {"lapNumber": 3, "lapTime": 91.0},
                {"lapNumber": 4, "lapTime": 0},
            ],
        },
    ]


@pytest.fixture
def make_lap():
    """Factory fixture for creating typed laps."""
    return _make_lap


@pytest.fixture
def make_stint():
    """Factory fixture for creating typed stints."""
    return _make_stint


@pytest.fixture
def make_record():
    """Factory fixture for creating aggregated stint rows."""
    return _make_record
