"""Dosing line calculations: line speed, dwell time and valve sizing."""

from .dosing_math import (
    compute_line_speed,
    compute_line_speed_from_circumference,
    compute_line_speed_from_pitch,
    compute_line_speed_from_radius,
    compute_max_dwell_time,
    compute_required_valve_count,
    compute_valve_dosing_volume,
    compute_valve_trigger_time,
)
from .models import LineConfig, ValveConfig
from .planner import DosingPlan, DosingPlanner
from .quantities import FlowRate, Length, Speed, Time, Volume

__all__ = [
    "Length",
    "Time",
    "Speed",
    "Volume",
    "FlowRate",
    "compute_line_speed",
    "compute_line_speed_from_pitch",
    "compute_line_speed_from_radius",
    "compute_line_speed_from_circumference",
    "compute_max_dwell_time",
    "compute_valve_dosing_volume",
    "compute_valve_trigger_time",
    "compute_required_valve_count",
    "LineConfig",
    "ValveConfig",
    "DosingPlan",
    "DosingPlanner",
]
