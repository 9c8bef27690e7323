"""Strongly typed physical quantities used by the dosing calculations.

Each type holds one float in a fixed canonical unit and only combines with the
types it is dimensionally compatible with.
"""

from dosing_systems.quantities.base import Quantity
from dosing_systems.quantities.flow_rate import FlowRate
from dosing_systems.quantities.length import MM_PER_INCH, Length
from dosing_systems.quantities.speed import Speed
from dosing_systems.quantities.time import MS_PER_SECOND, Time
from dosing_systems.quantities.volume import ML_PER_FLUID_OUNCE_US, Volume

__all__ = [
    "Quantity",
    "Length",
    "Time",
    "Speed",
    "Volume",
    "FlowRate",
    "MM_PER_INCH",
    "MS_PER_SECOND",
    "ML_PER_FLUID_OUNCE_US",
]
