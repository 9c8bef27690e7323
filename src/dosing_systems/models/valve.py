"""Dosing valve configuration model."""

from dataclasses import dataclass

from dosing_systems.dosing_math import compute_valve_dosing_volume, compute_valve_trigger_time
from dosing_systems.quantities import FlowRate, Time, Volume


@dataclass(frozen=True)
class ValveConfig:
    """Linear response curve of a dosing valve.

    The valve dispenses ``gain * trigger_time + offset``.

    Attributes:
        gain: Steady-state flow rate while the valve is open
        offset: Residual volume from opening/closing transients
    """

    gain: FlowRate
    offset: Volume

    def __post_init__(self) -> None:
        """Validate that gain is positive and offset is non-negative."""
        if self.gain.in_ml_per_ms <= 0:
            raise ValueError(f"gain must be positive, got {self.gain.in_ml_per_ms} mL/ms")
        if self.offset.in_ml < 0:
            raise ValueError(f"offset must be non-negative, got {self.offset.in_ml} mL")

    def dosing_volume(self, trigger_time: Time) -> Volume:
        """Volume dispensed when the valve is triggered for ``trigger_time``."""
        return compute_valve_dosing_volume(trigger_time, self.gain, self.offset)

    def trigger_time(self, dosing_volume: Volume) -> Time:
        """Trigger time needed to dispense ``dosing_volume``."""
        return compute_valve_trigger_time(dosing_volume, self.gain, self.offset)
