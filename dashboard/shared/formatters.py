"""Formatting helpers for the stint dashboard."""

from __future__ import annotations

import math

from .constants import COMPOUND_COLORS, RACE_SESSION_TYPES

NOT_AVAILABLE = "N/A"


def _missing(value: float | None) -> bool:
    return value is None or math.isnan(value)


def format_lap_time(seconds: float | None) -> str:
    """Format seconds as m:ss.fff or 'N/A' if missing."""
    if _missing(seconds):
        return NOT_AVAILABLE
    mins, secs = divmod(seconds, 60)
    return f"{int(mins)}:{secs:06.3f}"


def format_consistency(std_dev: float | None) -> str:
    if _missing(std_dev):
        return NOT_AVAILABLE
    return f"{std_dev:.3f}"


def format_degradation(slope: float | None) -> str:
    """Format a degradation slope as s/lap with two decimals."""
    if _missing(slope):
        return NOT_AVAILABLE
    return f"{slope:.2f}s/lap"


def is_degrading(slope: float | None) -> bool:
    """True only when the stint is measurably getting slower."""
    return not _missing(slope) and slope > 0


def compound_color(compound: str | None) -> str:
    return COMPOUND_COLORS.get((compound or "").upper(), COMPOUND_COLORS["UNKNOWN"])


def compound_label(compound: str | None) -> str:
    """'SOFT' -> 'Soft'."""
    return (compound or "UNKNOWN").capitalize()


def is_race_session(session: str | None) -> bool:
    return session in RACE_SESSION_TYPES
