"""Tests for LineConfig model."""

import math

import pytest

from dosing_systems.models.line import LineConfig
from dosing_systems.quantities import Length


class TestLineConfig:
    """Tests for the LineConfig model."""

    def test_valid_line_creation(self):
        """Test creating a valid line configuration."""
        line = LineConfig(
            uph=32000,
            pitch=Length.millimeter(108),
            container_opening=Length.millimeter(21),
            opening_safety_factor=0.75,
        )
        assert line.uph == 32000
        assert line.pitch == Length.millimeter(108)
        assert line.container_opening == Length.millimeter(21)
        assert line.opening_safety_factor == 0.75

    def test_default_safety_factor(self):
        """Test that the opening safety factor defaults to 1.0."""
        line = LineConfig(uph=9000, pitch=Length.millimeter(160), container_opening=Length.millimeter(70))
        assert line.opening_safety_factor == 1.0

    def test_zero_uph_raises_error(self):
        """Test that zero uph raises ValueError."""
        with pytest.raises(ValueError, match="uph must be positive"):
            LineConfig(uph=0, pitch=Length.millimeter(108), container_opening=Length.millimeter(21))

    def test_negative_pitch_raises_error(self):
        """Test that negative pitch raises ValueError."""
        with pytest.raises(ValueError, match="pitch must be positive"):
            LineConfig(uph=32000, pitch=Length.millimeter(-108), container_opening=Length.millimeter(21))

    def test_zero_opening_raises_error(self):
        """Test that zero container_opening raises ValueError."""
        with pytest.raises(ValueError, match="container_opening must be positive"):
            LineConfig(uph=32000, pitch=Length.millimeter(108), container_opening=Length.millimeter(0))

    @pytest.mark.parametrize("factor", [0.0, -0.5, 1.01])
    def test_safety_factor_out_of_range_raises_error(self, factor):
        """Test that the safety factor must be in (0, 1]."""
        with pytest.raises(ValueError, match=r"opening_safety_factor must be in \(0, 1\]"):
            LineConfig(
                uph=32000,
                pitch=Length.millimeter(108),
                container_opening=Length.millimeter(21),
                opening_safety_factor=factor,
            )

    def test_line_immutability(self):
        """Test that LineConfig is immutable (frozen dataclass)."""
        line = LineConfig(uph=32000, pitch=Length.millimeter(108), container_opening=Length.millimeter(21))
        with pytest.raises(Exception):  # FrozenInstanceError
            line.uph = 16000

    def test_line_speed(self):
        """Test line_speed() for the sample bottle line."""
        line = LineConfig(uph=32000, pitch=Length.millimeter(108), container_opening=Length.millimeter(21))
        assert line.line_speed().in_mm_per_s == pytest.approx(960.0)

    def test_max_dwell_time(self):
        """Test max_dwell_time() applies the safety factor."""
        line = LineConfig(
            uph=32000,
            pitch=Length.millimeter(108),
            container_opening=Length.millimeter(21),
            opening_safety_factor=0.75,
        )
        assert line.max_dwell_time().in_ms == pytest.approx(16.40625)


class TestTransferStarConstructors:
    """Tests for the transfer star alternate constructors."""

    def test_from_circumference_sets_pitch(self):
        """Test that pitch is circumference / pockets."""
        line = LineConfig.from_transfer_star_circumference(
            uph=18000,
            transfer_star_circumference=Length.millimeter(720),
            number_of_pockets=24,
            container_opening=Length.millimeter(12.5),
        )
        assert line.pitch.in_mm == pytest.approx(30.0)
        assert line.line_speed().in_mm_per_s == pytest.approx(150.0)

    def test_from_radius_matches_circumference(self):
        """Test that the radius form gives the same pitch as the circumference form."""
        by_radius = LineConfig.from_transfer_star_radius(
            uph=18000,
            transfer_star_radius=Length.millimeter(120),
            number_of_pockets=24,
            container_opening=Length.millimeter(12.5),
            opening_safety_factor=0.8,
        )
        by_circumference = LineConfig.from_transfer_star_circumference(
            uph=18000,
            transfer_star_circumference=Length.millimeter(2 * math.pi * 120),
            number_of_pockets=24,
            container_opening=Length.millimeter(12.5),
            opening_safety_factor=0.8,
        )
        assert by_radius.pitch.in_mm == pytest.approx(by_circumference.pitch.in_mm)
        assert by_radius.opening_safety_factor == 0.8

    def test_zero_pockets_raises_error(self):
        """Test that a star needs at least one pocket."""
        with pytest.raises(ValueError, match="number_of_pockets must be >= 1"):
            LineConfig.from_transfer_star_radius(
                uph=18000,
                transfer_star_radius=Length.millimeter(120),
                number_of_pockets=0,
                container_opening=Length.millimeter(12.5),
            )
