"""Volume quantity, stored in milliliters."""

from dataclasses import dataclass

from dosing_systems.quantities.base import Quantity, divide

ML_PER_FLUID_OUNCE_US = 29.5735


@dataclass(frozen=True, eq=False)
class Volume(Quantity):
    """A liquid volume such as a dose or a valve offset.

    Dividing two volumes gives their dimensionless ratio as a plain float.

    Attributes:
        ml: Canonical magnitude in milliliters
    """

    ml: float

    @classmethod
    def milliliter(cls, value: float) -> "Volume":
        return cls(float(value))

    @classmethod
    def fluid_ounce_us(cls, value: float) -> "Volume":
        return cls(value * ML_PER_FLUID_OUNCE_US)

    @property
    def magnitude(self) -> float:
        return self.ml

    @property
    def in_ml(self) -> float:
        return self.ml

    @property
    def in_fluid_ounce_us(self) -> float:
        return self.ml / ML_PER_FLUID_OUNCE_US

    def __truediv__(self, other):
        if isinstance(other, Volume):
            return divide(self.ml, other.ml)
        return super().__truediv__(other)
