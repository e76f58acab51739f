"""Tire strategy models (declared stints per driver)."""

from __future__ import annotations

from pitwall.models._base import PitwallModel


class StintDeclaration(PitwallModel):
    """One declared stint: a lap range run on a single compound."""

    compound: str | None = None
    start_lap: int | None = None
    end_lap: int | None = None
    lap_count: int | None = None


class DriverStrategy(PitwallModel):
    """A driver's full tire strategy for a session."""

    driver: str | None = None
    stints: list[StintDeclaration] = []

    @property
    def total_laps(self) -> int | None:
        """Highest declared end lap, or None if no stint declares one."""
        ends = [s.end_lap for s in self.stints if s.end_lap is not None]
        return max(ends, default=None)
