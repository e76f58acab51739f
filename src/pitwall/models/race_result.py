"""Race classification model."""

from __future__ import annotations

from pitwall.models._base import PitwallModel


class RaceResult(PitwallModel):
    """Classified result for one driver.

    ``position`` may carry a non-numeric sentinel for DNS/DNF/DSQ entries.
    """

    position: int | float | str | None = None
    driver_code: str | None = None
    full_name: str | None = None
    team: str | None = None
    points: float | None = None
    status: str | None = None
    grid_position: int | None = None
    team_color: str | None = None
    is_fastest_lap: bool | None = None
