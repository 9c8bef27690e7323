"""Line and valve preset comparison example.

This example demonstrates:
- Using line profiles (bottle conveyor, transfer-star vial line, jar line)
- Combining them with different valve profiles
- Checking that a requested dose fits inside the dwell time
- Plotting how valve count grows with throughput

Shows how to size a dosing station for your own line.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from plot_helper import generate_example_plot

from dosing_systems import DosingPlanner, Length, Volume, compute_line_speed
from dosing_systems.dosing_math import check_trigger_time
from dosing_systems.profiles import (
    LineProfile,
    ValveProfile,
    create_line_config,
    create_valve_config,
)


def main():
    """Compare every line preset against every valve preset."""
    print("=" * 80)
    print("DOSING STATION COMPARISON")
    print("=" * 80)

    target_volume = Volume.milliliter(1.8)
    planner = DosingPlanner()

    print(f"\n  {'Line':<14} {'Valve':<12} {'Speed':<12} {'Dwell':<10} {'Per valve':<12} {'Valves'}")
    print(f"  {'':14} {'':12} {'(mm/s)':<12} {'(ms)':<10} {'(mL)':<12}")
    print("  " + "-" * 70)

    for line_profile in LineProfile:
        line = create_line_config(line_profile)
        for valve_profile in ValveProfile:
            valve = create_valve_config(valve_profile)
            plan = planner.process(line, valve, target_volume)
            print(
                f"  {line_profile.value:<14} {valve_profile.value:<12} "
                f"{plan.line_speed.in_mm_per_s:<12.2f} {plan.dwell_time.in_ms:<10.2f} "
                f"{plan.volume_per_valve.in_ml:<12.3f} {plan.valve_count}"
            )

    # A single valve asked to place the whole dose on the vial line
    vial_line = create_line_config(LineProfile.VIAL_LINE)
    micro = create_valve_config(ValveProfile.MICRO)
    trigger = micro.trigger_time(target_volume)
    dwell = vial_line.max_dwell_time()
    print(f"\nSingle micro valve for {target_volume.in_ml:.2f} mL on the vial line:")
    print(f"  trigger {trigger.in_ms:.2f} ms vs dwell {dwell.in_ms:.2f} ms")
    if check_trigger_time(trigger, dwell):
        print("  Dose does not fit the dwell time - more valves are needed.")
    else:
        print("  Dose fits within the dwell time.")

    # The same star described by circumference gives the same speed
    speed = compute_line_speed(
        18000,
        transfer_star_circumference=Length.millimeter(753.98),
        number_of_pockets=24,
    )
    print(f"\nVial star by circumference: {speed.in_mm_per_s:.2f} mm/s")

    print("\n" + "=" * 80)
    print("GENERATING PLOT")
    print("=" * 80)
    generate_example_plot(
        "vial_line",
        vial_line,
        create_valve_config(ValveProfile.STANDARD),
        target_volume,
        uph_values=range(6000, 30001, 1000),
    )
    print()


if __name__ == "__main__":
    main()
