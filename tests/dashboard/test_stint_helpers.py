"""Tests for shared/services/stint_helpers.py — segmentation and compound lookup."""

from __future__ import annotations

from shared.data.types import Compound
from shared.services.common import normalize_laps
from shared.services.stint_helpers import (
    StintRange,
    get_compound_for_lap,
    segment_stints,
    stint_ranges,
    to_stint_range,
)
from pitwall.models import StintDeclaration


class TestToStintRange:
    def test_tuple(self):
        assert to_stint_range((1, 12, "soft")) == StintRange(1, 12, Compound.SOFT)

    def test_backend_dict(self):
        declared = {"compound": "Medium", "startLap": 13, "endLap": 30}
        assert to_stint_range(declared) == StintRange(13, 30, Compound.MEDIUM)

    def test_snake_case_dict(self):
        declared = {"compound": "HARD", "lap_start": 31, "lap_end": 57}
        assert to_stint_range(declared) == StintRange(31, 57, Compound.HARD)

    def test_model(self):
        declared = StintDeclaration(compound="WET", start_lap=1, end_lap=5)
        assert to_stint_range(declared) == StintRange(1, 5, Compound.WET)

    def test_unknown_compound(self):
        assert to_stint_range((1, 5, "HYPERSOFT")).compound is Compound.UNKNOWN
        assert to_stint_range((1, 5, None)).compound is Compound.UNKNOWN

    def test_unusable_bounds(self):
        assert to_stint_range({"compound": "SOFT", "startLap": 5}) is None
        assert to_stint_range((10, 4, "SOFT")) is None
        assert to_stint_range("SOFT") is None

    def test_single_lap_stint(self):
        assert to_stint_range((7, 7, "SOFT")) == StintRange(7, 7, Compound.SOFT)


class TestGetCompoundForLap:
    def test_finds_correct_compound(self, sample_declared):
        assert get_compound_for_lap(1, sample_declared) is Compound.SOFT
        assert get_compound_for_lap(4, sample_declared) is Compound.SOFT
        assert get_compound_for_lap(5, sample_declared) is Compound.HARD
        assert get_compound_for_lap(10, sample_declared) is Compound.HARD

    def test_unknown_for_gap(self, sample_declared):
        assert get_compound_for_lap(99, sample_declared) is Compound.UNKNOWN

    def test_empty_stints(self):
        assert get_compound_for_lap(1, []) is Compound.UNKNOWN

    def test_overlap_first_match_wins(self):
        declared = [(1, 10, "SOFT"), (8, 20, "HARD")]
        assert get_compound_for_lap(9, declared) is Compound.SOFT


class TestSegmentStints:
    def test_one_stint_per_declared_range(self, raw_laps, sample_declared):
        stints = segment_stints(sample_declared, normalize_laps(raw_laps))
        assert len(stints) == 2
        assert [lap.lap_number for lap in stints[0].lap_details] == [1, 2, 4]
        assert [lap.lap_number for lap in stints[1].lap_details] == [6, 8, 10]
        assert stints[0].compound is Compound.SOFT
        assert stints[1].stint_length == 6

    def test_laps_sorted_by_number(self, make_lap):
        laps = [make_lap(3, 90.0), make_lap(1, 95.0), make_lap(2, 91.0)]
        stints = segment_stints([(1, 3, "SOFT")], laps)
        assert [lap.lap_number for lap in stints[0].lap_details] == [1, 2, 3]

    def test_laps_outside_ranges_excluded(self, make_lap):
        laps = [make_lap(1, 95.0), make_lap(5, 91.0), make_lap(12, 90.0)]
        stints = segment_stints([(1, 3, "SOFT"), (10, 15, "HARD")], laps)
        assert [lap.lap_number for lap in stints[0].lap_details] == [1]
        assert [lap.lap_number for lap in stints[1].lap_details] == [12]

    def test_overlap_assigns_to_first_range(self, make_lap):
        laps = [make_lap(n, 90.0) for n in range(1, 13)]
        stints = segment_stints([(1, 10, "SOFT"), (8, 12, "HARD")], laps)
        assert [lap.lap_number for lap in stints[0].lap_details] == list(range(1, 11))
        assert [lap.lap_number for lap in stints[1].lap_details] == [11, 12]

    def test_declared_stint_without_laps(self, make_lap):
        stints = segment_stints([(1, 5, "SOFT")], [])
        assert len(stints) == 1
        assert stints[0].lap_details == ()

    def test_unusable_declarations_skipped(self, make_lap):
        stints = segment_stints([{"compound": "SOFT"}, (1, 3, "HARD")], [make_lap(2, 90.0)])
        assert len(stints) == 1
        assert stints[0].compound is Compound.HARD

    def test_empty(self):
        assert segment_stints([], []) == []


class TestStintRanges:
    def test_declaration_order_kept(self):
        ranges = stint_ranges([(20, 30, "HARD"), (1, 19, "SOFT")])
        assert [r.start_lap for r in ranges] == [20, 1]
