"""Flow rate quantity, stored in milliliters per millisecond."""

from dataclasses import dataclass

from dosing_systems.quantities.base import Quantity, divide
from dosing_systems.quantities.time import MS_PER_SECOND, Time
from dosing_systems.quantities.volume import Volume


@dataclass(frozen=True, eq=False)
class FlowRate(Quantity):
    """Volumetric flow through an open dosing valve.

    * ``FlowRate * Time`` and ``Time * FlowRate`` give the dispensed ``Volume``
    * ``Volume / FlowRate`` gives the ``Time`` needed to dispense it

    Attributes:
        ml_per_ms: Canonical magnitude in milliliters per millisecond
    """

    ml_per_ms: float

    @classmethod
    def milliliter_per_millisecond(cls, value: float) -> "FlowRate":
        return cls(float(value))

    @classmethod
    def milliliter_per_second(cls, value: float) -> "FlowRate":
        return cls(value / MS_PER_SECOND)

    @property
    def magnitude(self) -> float:
        return self.ml_per_ms

    @property
    def in_ml_per_ms(self) -> float:
        return self.ml_per_ms

    @property
    def in_ml_per_s(self) -> float:
        return self.ml_per_ms * MS_PER_SECOND

    def __mul__(self, other):
        if isinstance(other, Time):
            return Volume.milliliter(self.ml_per_ms * other.ms)
        return super().__mul__(other)

    def __rmul__(self, other):
        if isinstance(other, Time):
            return Volume.milliliter(other.ms * self.ml_per_ms)
        return super().__rmul__(other)

    def __rtruediv__(self, other):
        if isinstance(other, Volume):
            return Time.millisecond(divide(other.ml, self.ml_per_ms))
        return NotImplemented
