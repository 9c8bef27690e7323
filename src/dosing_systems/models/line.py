"""Filling line configuration model."""

import math
from dataclasses import dataclass

from dosing_systems.dosing_math import (
    compute_line_speed_from_pitch,
    compute_max_dwell_time,
)
from dosing_systems.quantities import Length, Speed, Time


@dataclass(frozen=True)
class LineConfig:
    """Conveyor and container parameters of a filling line.

    Attributes:
        uph: Throughput in units (containers) per hour
        pitch: Center-to-center spacing of containers on the conveyor
        container_opening: Width of the container mouth along the line
        opening_safety_factor: Usable fraction of the opening, in (0, 1]
    """

    uph: float
    pitch: Length
    container_opening: Length
    opening_safety_factor: float = 1.0

    def __post_init__(self) -> None:
        """Validate line parameters."""
        if self.uph <= 0:
            raise ValueError(f"uph must be positive, got {self.uph}")
        if self.pitch.in_mm <= 0:
            raise ValueError(f"pitch must be positive, got {self.pitch.in_mm} mm")
        if self.container_opening.in_mm <= 0:
            raise ValueError(
                f"container_opening must be positive, got {self.container_opening.in_mm} mm"
            )
        if not 0 < self.opening_safety_factor <= 1:
            raise ValueError(
                f"opening_safety_factor must be in (0, 1], got {self.opening_safety_factor}"
            )

    @classmethod
    def from_transfer_star_circumference(
        cls,
        uph: float,
        transfer_star_circumference: Length,
        number_of_pockets: int,
        container_opening: Length,
        opening_safety_factor: float = 1.0,
    ) -> "LineConfig":
        """Build a line whose pitch is set by a transfer star's pocket spacing."""
        if number_of_pockets < 1:
            raise ValueError(f"number_of_pockets must be >= 1, got {number_of_pockets}")
        return cls(
            uph=uph,
            pitch=transfer_star_circumference / number_of_pockets,
            container_opening=container_opening,
            opening_safety_factor=opening_safety_factor,
        )

    @classmethod
    def from_transfer_star_radius(
        cls,
        uph: float,
        transfer_star_radius: Length,
        number_of_pockets: int,
        container_opening: Length,
        opening_safety_factor: float = 1.0,
    ) -> "LineConfig":
        """Build a line from a transfer star given by its pitch radius."""
        return cls.from_transfer_star_circumference(
            uph,
            transfer_star_radius * (2.0 * math.pi),
            number_of_pockets,
            container_opening,
            opening_safety_factor,
        )

    def line_speed(self) -> Speed:
        """Conveyor speed in mm/s."""
        return compute_line_speed_from_pitch(self.uph, self.pitch)

    def max_dwell_time(self) -> Time:
        """Time each container mouth spends under the valve."""
        return compute_max_dwell_time(
            self.container_opening, self.line_speed(), self.opening_safety_factor
        )
