"""Tests for max-HR estimation and %max-HR zone calculation."""

import pytest

from cardio_engine.math.zones import (
    calculate_max_hr,
    calculate_zones,
    round_half_up,
    select_target_zone,
    zones_for_max_hr,
)
from cardio_engine.models.enums import Gender


class TestRoundHalfUp:
    def test_half_rounds_up(self) -> None:
        assert round_half_up(92.5) == 93
        assert round_half_up(95.5) == 96

    def test_below_half_rounds_down(self) -> None:
        assert round_half_up(76.4) == 76

    def test_integers_unchanged(self) -> None:
        assert round_half_up(114.0) == 114


class TestMaxHR:
    def test_male_formula(self) -> None:
        assert calculate_max_hr(30, Gender.MALE) == 190

    def test_female_formula(self) -> None:
        assert calculate_max_hr(35, Gender.FEMALE) == 191

    def test_accepts_raw_gender_value(self) -> None:
        assert calculate_max_hr(40, "F") == 186

    def test_age_bounds_inclusive(self) -> None:
        assert calculate_max_hr(18, "M") == 202
        assert calculate_max_hr(100, "F") == 126

    @pytest.mark.parametrize("age", [17, 0, 101, -5])
    def test_out_of_range_age_rejected(self, age: int) -> None:
        with pytest.raises(ValueError, match="age must be between"):
            calculate_max_hr(age, "M")

    def test_unknown_gender_rejected(self) -> None:
        with pytest.raises(ValueError, match="unknown gender"):
            calculate_max_hr(30, "X")


class TestZones:
    def test_male_30_reference_table(self) -> None:
        max_hr, zones = calculate_zones(30, "M")
        assert max_hr == 190
        assert [(z.min_bpm, z.max_bpm) for z in zones] == [
            (76, 95),
            (95, 114),
            (114, 152),
            (152, 171),
        ]

    def test_female_35_reference_table(self) -> None:
        max_hr, zones = calculate_zones(35, Gender.FEMALE)
        assert max_hr == 191
        assert [(z.min_bpm, z.max_bpm) for z in zones] == [
            (76, 96),
            (96, 115),
            (115, 153),
            (153, 172),
        ]

    def test_half_bpm_bounds_round_up(self) -> None:
        max_hr, zones = calculate_zones(35, "M")
        assert max_hr == 185
        light = next(z for z in zones if z.identifier == "light")
        assert light.min_bpm == 93

    def test_zones_in_ascending_order(self) -> None:
        _, zones = calculate_zones(50, "F")
        assert [z.identifier for z in zones] == ["warmup", "light", "aerobic", "anaerobic"]
        for lower, upper in zip(zones, zones[1:]):
            assert lower.max_bpm <= upper.min_bpm or lower.max_bpm == upper.min_bpm

    def test_min_never_above_max(self) -> None:
        for age in range(18, 101):
            for gender in Gender:
                _, zones = calculate_zones(age, gender)
                for zone in zones:
                    assert zone.min_bpm <= zone.max_bpm

    def test_only_aerobic_is_target(self) -> None:
        _, zones = calculate_zones(30, "M")
        targets = [z for z in zones if z.is_target]
        assert len(targets) == 1
        assert targets[0].identifier == "aerobic"
        assert targets[0].range_label == "60-80%"

    def test_zones_for_max_hr_matches_calculate_zones(self) -> None:
        max_hr, zones = calculate_zones(42, "F")
        assert zones_for_max_hr(max_hr) == zones

    def test_zone_metadata_filled(self) -> None:
        _, zones = calculate_zones(30, "M")
        for zone in zones:
            assert zone.name
            assert zone.duration
            assert zone.goal
            assert zone.color.startswith("#")


class TestSelectTargetZone:
    def test_picks_flagged_zone(self) -> None:
        _, zones = calculate_zones(30, "M")
        assert select_target_zone(zones).identifier == "aerobic"

    def test_falls_back_to_first_zone(self, narrow_zone, degenerate_zone) -> None:
        assert select_target_zone([narrow_zone, degenerate_zone]) is narrow_zone

    def test_empty_table_gives_none(self) -> None:
        assert select_target_zone([]) is None
