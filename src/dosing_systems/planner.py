"""End-to-end dosing station planning.

This module chains the dosing formulas for one filling station:
line speed, dwell time, valve trigger time, per-valve volume and valve count.

Example:
    >>> from dosing_systems.planner import DosingPlanner
    >>> from dosing_systems.profiles import (
    ...     LineProfile, ValveProfile, create_line_config, create_valve_config,
    ... )
    >>> from dosing_systems.quantities import Volume
    >>>
    >>> planner = DosingPlanner()
    >>> plan = planner.process(
    ...     create_line_config(LineProfile.BOTTLE_LINE),
    ...     create_valve_config(ValveProfile.STANDARD),
    ...     Volume.milliliter(1.8),
    ... )
    >>> plan.valve_count
    4
"""

import logging
from dataclasses import dataclass

from dosing_systems.dosing_math import (
    compute_max_dwell_time,
    compute_required_valve_count,
    compute_valve_dosing_volume,
)
from dosing_systems.models import LineConfig, ValveConfig
from dosing_systems.quantities import Speed, Time, Volume

logger = logging.getLogger(__name__)

# Default margin between the container reaching the valve and the valve opening
DEFAULT_SETTLE_TIME = Time.millisecond(10)


@dataclass(frozen=True)
class DosingPlan:
    """Result of planning one dosing station.

    Attributes:
        line_speed: Conveyor speed
        dwell_time: Max time a container mouth spends under a valve
        trigger_time: Valve open time after subtracting the settle time
        volume_per_valve: Most one valve dispenses per container
        valve_count: Number of valve stations needed for the target volume
        target_volume: Total volume to dose into each container
    """

    line_speed: Speed
    dwell_time: Time
    trigger_time: Time
    volume_per_valve: Volume
    valve_count: int
    target_volume: Volume

    def volume_per_container_per_valve(self) -> Volume:
        """Share of the target volume each valve actually doses."""
        return self.target_volume / self.valve_count


class DosingPlanner:
    """Plans valve timing and valve count for a filling line.

    Args:
        settle_time: Margin subtracted from the dwell time before the valve
                     is triggered. Default: 10 ms

    Example:
        >>> planner = DosingPlanner(settle_time=Time.millisecond(5))
        >>> plan = planner.process(line, valve, Volume.milliliter(1.8))
    """

    def __init__(self, settle_time: Time = DEFAULT_SETTLE_TIME):
        """Initialize the dosing planner.

        Raises:
            ValueError: If settle_time is negative
        """
        if settle_time.in_ms < 0:
            raise ValueError(f"settle_time must be non-negative, got {settle_time.in_ms} ms")

        self.settle_time = settle_time

    def process(
        self,
        line: LineConfig,
        valve: ValveConfig,
        target_volume: Volume,
    ) -> DosingPlan:
        """Plan a dosing station.

        Args:
            line: Filling line configuration
            valve: Dosing valve response curve
            target_volume: Total volume to dose into each container

        Returns:
            DosingPlan with the intermediate and final quantities

        Raises:
            ValueError: If the settle time consumes the whole dwell time
        """
        line_speed = line.line_speed()
        dwell_time = compute_max_dwell_time(
            line.container_opening, line_speed, line.opening_safety_factor
        )

        trigger_time = dwell_time - self.settle_time
        if trigger_time.in_ms <= 0:
            raise ValueError(
                f"settle_time leaves no time to dispense: dwell time is "
                f"{dwell_time.in_ms:.2f} ms, settle time is {self.settle_time.in_ms:.2f} ms"
            )

        volume_per_valve = compute_valve_dosing_volume(trigger_time, valve.gain, valve.offset)
        valve_count = compute_required_valve_count(target_volume, volume_per_valve)

        logger.debug(
            "Planned %.0f UPH: speed %.2f mm/s, dwell %.2f ms, trigger %.2f ms, "
            "%.3f mL per valve, %d valve(s)",
            line.uph,
            line_speed.in_mm_per_s,
            dwell_time.in_ms,
            trigger_time.in_ms,
            volume_per_valve.in_ml,
            valve_count,
        )

        return DosingPlan(
            line_speed=line_speed,
            dwell_time=dwell_time,
            trigger_time=trigger_time,
            volume_per_valve=volume_per_valve,
            valve_count=valve_count,
            target_volume=target_volume,
        )

    def __repr__(self) -> str:
        """Return string representation of the planner."""
        return f"DosingPlanner(settle_time={self.settle_time.in_ms} ms)"
