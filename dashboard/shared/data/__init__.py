"""Data layer — contracts shared by the service layer."""

from __future__ import annotations

from .types import Compound, DriverStintRecord, LapDetail, TireStint

__all__ = [
    "Compound",
    "DriverStintRecord",
    "LapDetail",
    "TireStint",
]
