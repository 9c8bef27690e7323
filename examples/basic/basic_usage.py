"""Basic usage example.

This example demonstrates:
- Creating quantities from raw measurements
- Computing line speed and dwell time
- Sizing the dosing valves for a target fill volume

This is the simplest way to use the dosing calculations.
"""

from dosing_systems import (
    FlowRate,
    Length,
    Time,
    Volume,
    compute_line_speed_from_pitch,
    compute_max_dwell_time,
    compute_required_valve_count,
    compute_valve_dosing_volume,
)


def main():
    """Basic usage example with given values."""
    uph = 32_000.0

    pitch = Length.millimeter(108)
    opening = Length.millimeter(21)

    speed = compute_line_speed_from_pitch(uph, pitch)

    # Dwell time: how long a moving container stays under the dosing valve
    # and is available for dispensing
    dwell = compute_max_dwell_time(
        container_opening=opening,
        line_speed=speed,
        opening_safety_factor=0.75,
    )

    # Valve response curve
    valve_offset = Volume.milliliter(0.01335)
    valve_gain = FlowRate.milliliter_per_millisecond(0.07867)

    # Maximal volume dispensed per container, leaving 10 ms to settle
    vol = compute_valve_dosing_volume(
        trigger_time=dwell - Time.millisecond(10),
        valve_gain=valve_gain,
        valve_offset=valve_offset,
    )

    max_target_volume = Volume.milliliter(1.8)
    required_valve_count = compute_required_valve_count(
        target_volume=max_target_volume,
        max_volume_per_valve=vol,
    )

    print("-" * 40)
    print(f"Line Speed is {speed.in_mm_per_s:.2f} mm/s.")
    print(f"Dwell Time is {dwell.in_ms:.2f} ms.")
    print(f"Maximal Dosing Volume is {vol.in_ml:.2f} ml.")
    print(f"Required System Number of Valves: {required_valve_count:d} ")
    print("-" * 40)


if __name__ == "__main__":
    main()
