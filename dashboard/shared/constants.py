"""Shared constants for the stint dashboard."""

from __future__ import annotations

import os

F1_RED = "#E10600"

DEFAULT_API_URL = "http://localhost:8000"
API_URL = os.environ.get("PITWALL_API_URL", DEFAULT_API_URL)

COMPOUND_COLORS: dict[str, str] = {
    "SOFT": "#EF4444",
    "MEDIUM": "#FACC15",
    "HARD": "#E5E7EB",
    "INTERMEDIATE": "#22C55E",
    "WET": "#3B82F6",
    "UNKNOWN": "#6B7280",
}

# Session identifiers that carry consistency/degradation columns
RACE_SESSION_TYPES = {"R", "SPRINT", "Race"}

PLOTLY_LAYOUT_DEFAULTS = dict(
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font_color="#F0F0F0",
    margin=dict(l=40, r=20, t=40, b=40),
)
