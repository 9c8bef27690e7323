"""Time quantity, stored in milliseconds."""

from dataclasses import dataclass

from dosing_systems.quantities.base import Quantity

MS_PER_SECOND = 1000.0


@dataclass(frozen=True, eq=False)
class Time(Quantity):
    """A duration such as dwell time or valve trigger time.

    Attributes:
        ms: Canonical magnitude in milliseconds
    """

    ms: float

    @classmethod
    def millisecond(cls, value: float) -> "Time":
        return cls(float(value))

    @classmethod
    def second(cls, value: float) -> "Time":
        return cls(value * MS_PER_SECOND)

    @property
    def magnitude(self) -> float:
        return self.ms

    @property
    def in_ms(self) -> float:
        return self.ms

    @property
    def in_second(self) -> float:
        return self.ms / MS_PER_SECOND
