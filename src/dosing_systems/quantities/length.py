"""Length quantity, stored in millimeters."""

from dataclasses import dataclass

from dosing_systems.quantities.base import Quantity

MM_PER_INCH = 25.4


@dataclass(frozen=True, eq=False)
class Length(Quantity):
    """A distance such as container pitch, opening width or star radius.

    Attributes:
        mm: Canonical magnitude in millimeters
    """

    mm: float

    @classmethod
    def millimeter(cls, value: float) -> "Length":
        return cls(float(value))

    @classmethod
    def inch(cls, value: float) -> "Length":
        return cls(value * MM_PER_INCH)

    @property
    def magnitude(self) -> float:
        return self.mm

    @property
    def in_mm(self) -> float:
        return self.mm

    @property
    def in_inch(self) -> float:
        return self.mm / MM_PER_INCH
