"""Speed quantity, stored in millimeters per second."""

from dataclasses import dataclass

from dosing_systems.quantities.base import Quantity, divide
from dosing_systems.quantities.length import Length
from dosing_systems.quantities.time import Time


@dataclass(frozen=True, eq=False)
class Speed(Quantity):
    """Linear conveyor speed.

    Besides scalar scaling, a Speed combines with the other kinematic types:

    * ``Speed * Time`` and ``Time * Speed`` give the ``Length`` travelled
    * ``Length / Speed`` gives the ``Time`` needed to cover that length

    Examples:
        >>> Speed.millimeter_per_second(960.0) * Time.second(0.5)
        Length(mm=480.0)
        >>> Length.millimeter(480.0) / Speed.millimeter_per_second(960.0)
        Time(ms=500.0)

    Attributes:
        mm_per_s: Canonical magnitude in millimeters per second
    """

    mm_per_s: float

    @classmethod
    def millimeter_per_second(cls, value: float) -> "Speed":
        return cls(float(value))

    @property
    def magnitude(self) -> float:
        return self.mm_per_s

    @property
    def in_mm_per_s(self) -> float:
        return self.mm_per_s

    def __mul__(self, other):
        if isinstance(other, Time):
            return Length.millimeter(self.mm_per_s * other.in_second)
        return super().__mul__(other)

    def __rmul__(self, other):
        if isinstance(other, Time):
            return Length.millimeter(other.in_second * self.mm_per_s)
        return super().__rmul__(other)

    def __rtruediv__(self, other):
        # Length / Speed; Length.__truediv__ defers here for non-scalars
        if isinstance(other, Length):
            return Time.second(divide(other.mm, self.mm_per_s))
        return NotImplemented
