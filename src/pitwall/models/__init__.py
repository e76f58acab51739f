"""Pitwall backend data models."""

from pitwall.models.race_result import RaceResult
from pitwall.models.stint_analysis import LapTiming, StintAnalysis
from pitwall.models.strategy import DriverStrategy, StintDeclaration

__all__ = [
    "DriverStrategy",
    "LapTiming",
    "RaceResult",
    "StintAnalysis",
    "StintDeclaration",
]
