"""Configuration models for filling lines and dosing valves.

This package contains the validated configuration dataclasses.
"""

from dosing_systems.models.line import LineConfig
from dosing_systems.models.valve import ValveConfig

__all__ = [
    "LineConfig",
    "ValveConfig",
]
