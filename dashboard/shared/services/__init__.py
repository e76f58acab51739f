"""Service layer — stint analytics for the dashboard."""

from .common import (
    compute_avg_lap,
    compute_degradation,
    compute_fastest_lap,
    compute_std_dev,
    normalize_laps,
    trimmed_laps,
)
from .race_order import RacePositionIndex
from .sorting import NULL_AS_NEUTRAL, NULLS_LAST, SortKey, default_order, sort_rows, toggle_direction
from .stint_analysis import aggregate_driver_stints, aggregate_stint, aggregate_stint_analysis
from .stint_helpers import StintRange, get_compound_for_lap, segment_stints, stint_ranges
from .tire_strategy import (
    StintBar,
    StintTable,
    StrategyOverview,
    StrategyRow,
    TireStrategyService,
    max_lap,
    stint_bar_geometry,
)

__all__ = [
    "NULLS_LAST",
    "NULL_AS_NEUTRAL",
    "RacePositionIndex",
    "SortKey",
    "StintBar",
    "StintRange",
    "StintTable",
    "StrategyOverview",
    "StrategyRow",
    "TireStrategyService",
    "aggregate_driver_stints",
    "aggregate_stint",
    "aggregate_stint_analysis",
    "compute_avg_lap",
    "compute_degradation",
    "compute_fastest_lap",
    "compute_std_dev",
    "default_order",
    "get_compound_for_lap",
    "max_lap",
    "normalize_laps",
    "segment_stints",
    "sort_rows",
    "stint_bar_geometry",
    "stint_ranges",
    "toggle_direction",
    "trimmed_laps",
]
