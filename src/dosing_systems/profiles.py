"""Valve and filling line presets for common configurations."""

from enum import Enum

from dosing_systems.models.line import LineConfig
from dosing_systems.models.valve import ValveConfig
from dosing_systems.quantities import FlowRate, Length, Volume


class ValveProfile(Enum):
    """Common dosing valve classes with typical response curves."""

    STANDARD = "standard"  # General purpose valve for small liquid doses
    HIGH_FLOW = "high_flow"  # Large orifice: high gain, larger transient volume
    MICRO = "micro"  # Micro-dosing valve: low gain, tiny transient volume


class LineProfile(Enum):
    """Common filling line layouts."""

    BOTTLE_LINE = "bottle_line"  # High-speed conveyor with small bottle necks
    VIAL_LINE = "vial_line"  # Vials indexed by a transfer star
    JAR_LINE = "jar_line"  # Slow line with wide-mouth jars


def create_valve_config(profile: ValveProfile) -> ValveConfig:
    """
    Create a ValveConfig from a predefined profile.

    Args:
        profile: Valve profile to use

    Returns:
        ValveConfig with gain and offset matching the selected profile

    Examples:
        >>> valve = create_valve_config(ValveProfile.STANDARD)
        >>> print(f"Gain: {valve.gain.in_ml_per_ms} mL/ms")
        Gain: 0.07867 mL/ms
    """
    if profile == ValveProfile.STANDARD:
        return ValveConfig(
            gain=FlowRate.milliliter_per_millisecond(0.07867),
            offset=Volume.milliliter(0.01335),
        )
    elif profile == ValveProfile.HIGH_FLOW:
        return ValveConfig(
            gain=FlowRate.milliliter_per_millisecond(0.15),
            offset=Volume.milliliter(0.025),
        )
    elif profile == ValveProfile.MICRO:
        return ValveConfig(
            gain=FlowRate.milliliter_per_millisecond(0.02),
            offset=Volume.milliliter(0.004),
        )
    else:
        raise ValueError(f"Unknown valve profile: {profile}")


def create_line_config(profile: LineProfile) -> LineConfig:
    """
    Create a LineConfig from a predefined line layout.

    - BOTTLE_LINE: 32000 UPH on a 108 mm pitch, 21 mm necks
    - VIAL_LINE: 18000 UPH through a 24-pocket star of 120 mm radius
    - JAR_LINE: 9000 UPH on a 160 mm pitch, 70 mm mouths

    Args:
        profile: Line profile to use

    Returns:
        LineConfig matching the selected layout

    Examples:
        >>> line = create_line_config(LineProfile.BOTTLE_LINE)
        >>> print(f"{line.line_speed().in_mm_per_s:.1f} mm/s")
        960.0 mm/s
    """
    if profile == LineProfile.BOTTLE_LINE:
        return LineConfig(
            uph=32000,
            pitch=Length.millimeter(108),
            container_opening=Length.millimeter(21),
            opening_safety_factor=0.75,  # Neck alignment tolerance
        )
    elif profile == LineProfile.VIAL_LINE:
        return LineConfig.from_transfer_star_radius(
            uph=18000,
            transfer_star_radius=Length.millimeter(120),
            number_of_pockets=24,
            container_opening=Length.millimeter(12.5),
            opening_safety_factor=0.8,
        )
    elif profile == LineProfile.JAR_LINE:
        return LineConfig(
            uph=9000,
            pitch=Length.millimeter(160),
            container_opening=Length.millimeter(70),
            opening_safety_factor=0.9,  # Wide mouth, little margin needed
        )
    else:
        raise ValueError(f"Unknown line profile: {profile}")
