"""Shared dashboard utilities (importable without Streamlit)."""

# --- Constants & formatting ---
from .constants import (
    API_URL,
    COMPOUND_COLORS,
    F1_RED,
    PLOTLY_LAYOUT_DEFAULTS,
    RACE_SESSION_TYPES,
)
from .formatters import (
    compound_color,
    compound_label,
    format_consistency,
    format_degradation,
    format_lap_time,
    is_degrading,
    is_race_session,
)

# --- Data contracts ---
from .data import Compound, DriverStintRecord, LapDetail, TireStint

# --- Service layer ---
from .services import (
    RacePositionIndex,
    SortKey,
    TireStrategyService,
    sort_rows,
    toggle_direction,
)

__all__ = [
    "API_URL",
    "COMPOUND_COLORS",
    "Compound",
    "DriverStintRecord",
    "F1_RED",
    "LapDetail",
    "PLOTLY_LAYOUT_DEFAULTS",
    "RACE_SESSION_TYPES",
    "RacePositionIndex",
    "SortKey",
    "TireStint",
    "TireStrategyService",
    "compound_color",
    "compound_label",
    "format_consistency",
    "format_degradation",
    "format_lap_time",
    "is_degrading",
    "is_race_session",
    "sort_rows",
    "toggle_direction",
]
