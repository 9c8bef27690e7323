"""Line speed, dwell time and valve dosing formulas.

Every function is pure and works on the quantity types from
:mod:`dosing_systems.quantities`. No input validation is performed: negative
or non-finite inputs propagate arithmetically, and dividing by a zero-valued
quantity yields ``inf`` or ``nan``.
"""

import math
from typing import Optional

from dosing_systems.quantities import FlowRate, Length, Speed, Time, Volume

# Time conversion constant
SECONDS_PER_HOUR = 3600.0


def compute_line_speed_from_pitch(uph: float, pitch: Length) -> Speed:
    """Calculate conveyor speed from throughput and container pitch.

    Args:
        uph: Line throughput in units (containers) per hour
        pitch: Center-to-center spacing of containers on the conveyor

    Returns:
        Line speed in mm/s

    Examples:
        >>> compute_line_speed_from_pitch(32000, Length.millimeter(108))
        Speed(mm_per_s=960.0)
    """
    return Speed.millimeter_per_second(uph * pitch.in_mm / SECONDS_PER_HOUR)


def compute_line_speed_from_radius(
    uph: float, transfer_star_radius: Length, number_of_pockets: int
) -> Speed:
    """Calculate line speed from a transfer star given by its pitch radius.

    The star's circumference divided by its pocket count is the effective
    pitch between consecutive containers.

    Args:
        uph: Line throughput in units per hour
        transfer_star_radius: Radius of the transfer star pitch circle
        number_of_pockets: Number of evenly spaced pockets on the star

    Returns:
        Line speed in mm/s
    """
    circumference = transfer_star_radius * (2.0 * math.pi)
    return compute_line_speed_from_circumference(uph, circumference, number_of_pockets)


def compute_line_speed_from_circumference(
    uph: float, transfer_star_circumference: Length, number_of_pockets: int
) -> Speed:
    """Calculate line speed from a transfer star given by its circumference.

    Args:
        uph: Line throughput in units per hour
        transfer_star_circumference: Circumference of the star pitch circle
        number_of_pockets: Number of evenly spaced pockets on the star

    Returns:
        Line speed in mm/s
    """
    return compute_line_speed_from_pitch(uph, transfer_star_circumference / number_of_pockets)


def compute_line_speed(
    uph: float,
    *,
    pitch: Optional[Length] = None,
    transfer_star_radius: Optional[Length] = None,
    transfer_star_circumference: Optional[Length] = None,
    number_of_pockets: Optional[int] = None,
) -> Speed:
    """Calculate line speed from whichever geometry is supplied.

    Exactly one of these keyword forms is accepted:

    - ``pitch=...``
    - ``transfer_star_radius=..., number_of_pockets=...``
    - ``transfer_star_circumference=..., number_of_pockets=...``

    Raises:
        ValueError: If the keywords do not match one of the forms above

    Examples:
        >>> compute_line_speed(32000, pitch=Length.millimeter(108))
        Speed(mm_per_s=960.0)
    """
    supplied = [
        name
        for name, value in (
            ("pitch", pitch),
            ("transfer_star_radius", transfer_star_radius),
            ("transfer_star_circumference", transfer_star_circumference),
        )
        if value is not None
    ]
    if len(supplied) != 1:
        raise ValueError(
            "exactly one of pitch, transfer_star_radius or "
            f"transfer_star_circumference must be given, got {supplied or 'none'}"
        )

    if pitch is not None:
        if number_of_pockets is not None:
            raise ValueError("number_of_pockets cannot be combined with pitch")
        return compute_line_speed_from_pitch(uph, pitch)

    if number_of_pockets is None:
        raise ValueError(f"number_of_pockets is required with {supplied[0]}")

    if transfer_star_radius is not None:
        return compute_line_speed_from_radius(uph, transfer_star_radius, number_of_pockets)
    return compute_line_speed_from_circumference(
        uph, transfer_star_circumference, number_of_pockets
    )


def compute_max_dwell_time(
    container_opening: Length,
    line_speed: Speed,
    opening_safety_factor: float = 1.0,
) -> Time:
    """Calculate how long a container mouth stays under the dosing valve.

    The safety factor (typically below 1.0, e.g. 0.75) shrinks the usable
    opening to leave margin for alignment tolerance.

    Args:
        container_opening: Width of the container mouth along the line
        line_speed: Conveyor speed
        opening_safety_factor: Fraction of the opening treated as usable

    Returns:
        Maximum dwell time

    Examples:
        >>> dwell = compute_max_dwell_time(
        ...     Length.millimeter(21), Speed.millimeter_per_second(960), 0.75
        ... )
        >>> round(dwell.in_ms, 3)
        16.406
    """
    return (container_opening * opening_safety_factor) / line_speed


def compute_valve_dosing_volume(
    trigger_time: Time, valve_gain: FlowRate, valve_offset: Volume
) -> Volume:
    """Calculate the volume a valve dispenses for a given trigger time.

    Uses the linear valve model ``volume = gain * trigger_time + offset``,
    where the offset is the residual volume from opening/closing transients.

    Args:
        trigger_time: How long the valve is commanded open
        valve_gain: Steady-state flow rate of the open valve
        valve_offset: Volume dispensed independent of trigger duration

    Returns:
        Dispensed volume
    """
    return valve_gain * trigger_time + valve_offset


def compute_valve_trigger_time(
    dosing_volume: Volume, valve_gain: FlowRate, valve_offset: Volume
) -> Time:
    """Calculate the trigger time needed to dispense a volume.

    Inverse of :func:`compute_valve_dosing_volume`. The result is only
    achievable when it does not exceed the max dwell time at the chosen line
    speed; see :func:`check_trigger_time`.
    """
    return (dosing_volume - valve_offset) / valve_gain


def compute_required_valve_count(target_volume: Volume, max_volume_per_valve: Volume) -> int:
    """Calculate how many valve stations are needed to reach a target volume.

    The ratio is rounded up, since a partially used valve is still a physical
    station.

    Args:
        target_volume: Total volume to dose into each container
        max_volume_per_valve: Most one valve can dispense per container

    Returns:
        Number of valves

    Note:
        ``max_volume_per_valve`` must be positive and finite. Otherwise the
        ratio is NaN or infinite and ``math.ceil`` raises ``ValueError`` or
        ``OverflowError``.

    Examples:
        >>> compute_required_valve_count(Volume.milliliter(5), Volume.milliliter(2))
        3
        >>> compute_required_valve_count(Volume.milliliter(4), Volume.milliliter(2))
        2
    """
    return math.ceil(target_volume / max_volume_per_valve)


def check_trigger_time(trigger_time: Time, dwell_time: Time) -> bool:
    """Check if a trigger time is longer than the available dwell time.

    Args:
        trigger_time: Valve trigger time for the dose
        dwell_time: Max dwell time of the container under the valve

    Returns:
        True if the dose cannot be placed within the dwell time, False otherwise
    """
    return trigger_time > dwell_time
