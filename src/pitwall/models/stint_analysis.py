"""Per-stint lap timing model."""

from __future__ import annotations

from pitwall.models._base import PitwallModel


class LapTiming(PitwallModel):
    """A single lap inside a stint.

    ``lap_time`` is kept as sent: in/out laps and safety-car laps arrive
    without a usable time and are filtered later, not rejected here.
    """

    lap_number: int | None = None
    lap_time: float | str | None = None


class StintAnalysis(PitwallModel):
    """A pre-segmented stint with its recorded lap times."""

    driver_code: str | None = None
    stint_number: int | None = None
    compound: str | None = None
    start_lap: int | None = None
    end_lap: int | None = None
    lap_details: list[LapTiming] = []
