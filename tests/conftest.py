"""Shared test fixtures and sample backend responses."""

from __future__ import annotations

import pytest

BASE_URL = "http://localhost:8000"


SAMPLE_STRATEGY = {
    "driver": "VER",
    "stints": [
        {"compound": "MEDIUM", "startLap": 1, "endLap": 18, "lapCount": 18},
        {"compound": "hard", "startLap": 19, "endLap": 57, "lapCount": 39},
    ],
}

SAMPLE_STINT_ANALYSIS = {
    "driverCode": "VER",
    "stintNumber": 1,
    "compound": "MEDIUM",
    "startLap": 1,
    "endLap": 5,
    "lapDetails": [
        {"lapNumber": 1, "lapTime": 99.1},
        {"lapNumber": 2, "lapTime": 96.2},
        {"lapNumber": 3, "lapTime": 96.5},
        {"lapNumber": 4, "lapTime": 96.9},
        {"lapNumber": 5, "lapTime": 101.4},
    ],
}

SAMPLE_RACE_RESULT = {
    "position": 1,
    "driverCode": "VER",
    "fullName": "Max Verstappen",
    "team": "Red Bull Racing",
    "points": 26,
    "status": "Finished",
    "gridPosition": 1,
    "teamColor": "#3671C6",
    "isFastestLap": True,
}


@pytest.fixture
def base_url() -> str:
    return BASE_URL
