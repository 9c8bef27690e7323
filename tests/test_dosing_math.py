"""Tests for line speed, dwell time and valve dosing formulas."""

import math

import pytest

from dosing_systems.dosing_math import (
    check_trigger_time,
    compute_line_speed,
    compute_line_speed_from_circumference,
    compute_line_speed_from_pitch,
    compute_line_speed_from_radius,
    compute_max_dwell_time,
    compute_required_valve_count,
    compute_valve_dosing_volume,
    compute_valve_trigger_time,
)
from dosing_systems.quantities import FlowRate, Length, Speed, Time, Volume


class TestComputeLineSpeed:
    """Test cases for the line speed formulas."""

    def test_from_pitch(self):
        """Test line speed for the sample bottle line."""
        # 32000 UPH * 108 mm / 3600 s = 960 mm/s
        speed = compute_line_speed_from_pitch(32000, Length.millimeter(108))
        assert speed.in_mm_per_s == pytest.approx(960.0)

    def test_from_pitch_in_inches(self):
        """Test that the pitch unit does not matter."""
        speed = compute_line_speed_from_pitch(3600, Length.inch(1.0))
        assert speed.in_mm_per_s == pytest.approx(25.4)

    def test_from_circumference(self):
        """Test line speed from a transfer star circumference."""
        # 720 mm / 24 pockets = 30 mm pitch; 18000 UPH * 30 / 3600 = 150 mm/s
        speed = compute_line_speed_from_circumference(18000, Length.millimeter(720), 24)
        assert speed.in_mm_per_s == pytest.approx(150.0)

    def test_from_radius(self):
        """Test line speed from a transfer star radius."""
        # 2π * 120 / 24 = 31.4159 mm pitch; 18000 * 31.4159 / 3600 = 157.08 mm/s
        speed = compute_line_speed_from_radius(18000, Length.millimeter(120), 24)
        assert speed.in_mm_per_s == pytest.approx(157.0796, rel=1e-6)

    @pytest.mark.parametrize(
        "uph, radius, pockets",
        [(32000, 120.0, 24), (9000, 45.5, 6), (1, 1000.0, 72), (0, 80.0, 12)],
    )
    def test_radius_and_circumference_agree(self, uph, radius, pockets):
        """Test that radius and circumference forms agree when C = 2πr."""
        from_radius = compute_line_speed_from_radius(uph, Length.millimeter(radius), pockets)
        from_circumference = compute_line_speed_from_circumference(
            uph, Length.millimeter(2 * math.pi * radius), pockets
        )
        assert from_radius.in_mm_per_s == pytest.approx(from_circumference.in_mm_per_s)

    def test_zero_pockets_gives_infinite_speed(self):
        """Test that zero pockets propagates as IEEE infinity."""
        speed = compute_line_speed_from_circumference(18000, Length.millimeter(720), 0)
        assert speed.in_mm_per_s == math.inf

    def test_keyword_dispatch_pitch(self):
        """Test compute_line_speed with pitch=."""
        speed = compute_line_speed(32000, pitch=Length.millimeter(108))
        assert speed == compute_line_speed_from_pitch(32000, Length.millimeter(108))

    def test_keyword_dispatch_radius(self):
        """Test compute_line_speed with transfer_star_radius=."""
        speed = compute_line_speed(
            18000, transfer_star_radius=Length.millimeter(120), number_of_pockets=24
        )
        assert speed == compute_line_speed_from_radius(18000, Length.millimeter(120), 24)

    def test_keyword_dispatch_circumference(self):
        """Test compute_line_speed with transfer_star_circumference=."""
        speed = compute_line_speed(
            18000, transfer_star_circumference=Length.millimeter(720), number_of_pockets=24
        )
        assert speed.in_mm_per_s == pytest.approx(150.0)

    def test_keyword_dispatch_no_geometry_raises(self):
        """Test that omitting all geometry raises ValueError."""
        with pytest.raises(ValueError, match="exactly one of"):
            compute_line_speed(32000)

    def test_keyword_dispatch_two_geometries_raises(self):
        """Test that supplying two geometries raises ValueError."""
        with pytest.raises(ValueError, match="exactly one of"):
            compute_line_speed(
                32000,
                pitch=Length.millimeter(108),
                transfer_star_radius=Length.millimeter(120),
                number_of_pockets=24,
            )

    def test_keyword_dispatch_missing_pockets_raises(self):
        """Test that a transfer star without pocket count raises ValueError."""
        with pytest.raises(ValueError, match="number_of_pockets is required"):
            compute_line_speed(18000, transfer_star_radius=Length.millimeter(120))

    def test_keyword_dispatch_pitch_with_pockets_raises(self):
        """Test that pocket count cannot be combined with pitch."""
        with pytest.raises(ValueError, match="cannot be combined with pitch"):
            compute_line_speed(32000, pitch=Length.millimeter(108), number_of_pockets=24)


class TestComputeMaxDwellTime:
    """Test cases for compute_max_dwell_time."""

    def test_sample_line(self):
        """Test dwell time for the sample bottle line."""
        # 21 mm * 0.75 / 960 mm/s = 16.40625 ms
        dwell = compute_max_dwell_time(
            Length.millimeter(21), Speed.millimeter_per_second(960), 0.75
        )
        assert isinstance(dwell, Time)
        assert dwell.in_ms == pytest.approx(16.40625)

    def test_default_safety_factor(self):
        """Test that the safety factor defaults to 1.0."""
        dwell = compute_max_dwell_time(Length.millimeter(21), Speed.millimeter_per_second(960))
        assert dwell.in_ms == pytest.approx(21.875)

    def test_decreases_with_line_speed(self):
        """Test that a faster line leaves less dwell time."""
        opening = Length.millimeter(21)
        dwells = [
            compute_max_dwell_time(opening, Speed.millimeter_per_second(v), 0.75)
            for v in (100.0, 480.0, 960.0, 2000.0)
        ]
        assert dwells == sorted(dwells, reverse=True)

    def test_increases_with_opening(self):
        """Test that a wider container mouth gives more dwell time."""
        speed = Speed.millimeter_per_second(960)
        dwells = [
            compute_max_dwell_time(Length.millimeter(w), speed, 0.75) for w in (5.0, 21.0, 70.0)
        ]
        assert dwells == sorted(dwells)

    def test_increases_with_safety_factor(self):
        """Test that a larger safety factor gives more dwell time."""
        opening = Length.millimeter(21)
        speed = Speed.millimeter_per_second(960)
        dwells = [compute_max_dwell_time(opening, speed, f) for f in (0.5, 0.75, 1.0)]
        assert dwells == sorted(dwells)

    def test_zero_speed_gives_infinite_dwell(self):
        """Test that a stopped line propagates as IEEE infinity."""
        dwell = compute_max_dwell_time(Length.millimeter(21), Speed.millimeter_per_second(0))
        assert dwell.in_ms == math.inf


class TestValveDosing:
    """Test cases for the valve volume and trigger time formulas."""

    @pytest.fixture
    def gain(self):
        """Standard valve gain."""
        return FlowRate.milliliter_per_millisecond(0.07867)

    @pytest.fixture
    def offset(self):
        """Standard valve offset."""
        return Volume.milliliter(0.01335)

    def test_dosing_volume(self, gain, offset):
        """Test volume = gain * trigger_time + offset."""
        # 0.07867 * 6.40625 + 0.01335 = 0.51733 mL
        volume = compute_valve_dosing_volume(Time.millisecond(6.40625), gain, offset)
        assert isinstance(volume, Volume)
        assert volume.in_ml == pytest.approx(0.517329, rel=1e-5)

    def test_zero_trigger_time_gives_offset(self, gain, offset):
        """Test that a zero trigger time still dispenses the offset."""
        volume = compute_valve_dosing_volume(Time.millisecond(0), gain, offset)
        assert volume == offset

    def test_trigger_time(self, gain, offset):
        """Test trigger_time = (volume - offset) / gain."""
        # (0.80005 - 0.01335) / 0.07867 = 10 ms
        trigger = compute_valve_trigger_time(Volume.milliliter(0.80005), gain, offset)
        assert isinstance(trigger, Time)
        assert trigger.in_ms == pytest.approx(10.0)

    @pytest.mark.parametrize("ms", [0.0, 6.40625, 53.66, 250.0, -4.0])
    def test_trigger_time_inverts_dosing_volume(self, gain, offset, ms):
        """Test that the trigger time formula inverts the volume formula."""
        volume = compute_valve_dosing_volume(Time.millisecond(ms), gain, offset)
        trigger = compute_valve_trigger_time(volume, gain, offset)
        assert trigger.in_ms == pytest.approx(ms, abs=1e-9)

    def test_zero_gain_gives_infinite_trigger_time(self, offset):
        """Test that a zero gain propagates as IEEE infinity."""
        trigger = compute_valve_trigger_time(
            Volume.milliliter(1.0), FlowRate.milliliter_per_millisecond(0.0), offset
        )
        assert trigger.in_ms == math.inf


class TestComputeRequiredValveCount:
    """Test cases for compute_required_valve_count."""

    def test_rounds_up(self):
        """Test that a fractional ratio rounds up to the next valve."""
        count = compute_required_valve_count(Volume.milliliter(5), Volume.milliliter(2))
        assert count == 3

    def test_exact_ratio(self):
        """Test that an exact ratio does not add a valve."""
        count = compute_required_valve_count(Volume.milliliter(4), Volume.milliliter(2))
        assert count == 2

    def test_returns_int(self):
        """Test that the count is a plain int."""
        count = compute_required_valve_count(Volume.milliliter(1.8), Volume.milliliter(0.517))
        assert type(count) is int
        assert count == 4

    def test_single_valve_is_enough(self):
        """Test a target below one valve's capacity."""
        count = compute_required_valve_count(Volume.milliliter(0.1), Volume.milliliter(2))
        assert count == 1

    def test_zero_capacity_raises_overflow(self):
        """Test that an infinite ratio cannot be converted to a count."""
        with pytest.raises(OverflowError):
            compute_required_valve_count(Volume.milliliter(1), Volume.milliliter(0))

    def test_nan_ratio_raises_value_error(self):
        """Test that a NaN ratio cannot be converted to a count."""
        with pytest.raises(ValueError):
            compute_required_valve_count(Volume.milliliter(0), Volume.milliliter(0))


class TestCheckTriggerTime:
    """Test cases for check_trigger_time."""

    def test_trigger_within_dwell(self):
        """Test a dose that fits inside the dwell time."""
        assert check_trigger_time(Time.millisecond(6.4), Time.millisecond(16.4)) is False

    def test_trigger_exceeds_dwell(self):
        """Test a dose that needs longer than the dwell time."""
        assert check_trigger_time(Time.millisecond(22.0), Time.millisecond(16.4)) is True

    def test_trigger_exactly_at_dwell(self):
        """Test that a trigger time equal to the dwell time does NOT exceed it."""
        assert check_trigger_time(Time.millisecond(16.4), Time.millisecond(16.4)) is False


class TestSampleScenario:
    """End-to-end scenario for the sample bottle line."""

    def test_full_chain(self):
        """Test line speed, dwell, volume and valve count together."""
        speed = compute_line_speed_from_pitch(32000, Length.millimeter(108))
        dwell = compute_max_dwell_time(Length.millimeter(21), speed, 0.75)
        volume = compute_valve_dosing_volume(
            dwell - Time.millisecond(10),
            FlowRate.milliliter_per_millisecond(0.07867),
            Volume.milliliter(0.01335),
        )
        count = compute_required_valve_count(Volume.milliliter(1.8), volume)

        assert speed.in_mm_per_s == pytest.approx(960.0)
        assert dwell.in_ms == pytest.approx(16.406, abs=1e-3)
        assert (dwell - Time.millisecond(10)).in_ms == pytest.approx(6.406, abs=1e-3)
        assert volume.in_ml == pytest.approx(0.517, abs=1e-3)
        assert count == 4
