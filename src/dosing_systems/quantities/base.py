"""Shared behaviour for the physical quantity types.

Every quantity wraps a single float held in a fixed canonical unit. The base
class supplies comparison, same-type addition/subtraction and scalar scaling.
Cross-dimension operators live on the concrete types and rely on Python's
reflected operators: an unsupported pairing returns ``NotImplemented`` from
both sides, so the interpreter raises ``TypeError``.

Comparisons and arithmetic follow IEEE-754 double precision. NaN is unordered
and never equal to itself, and division by zero yields ``inf`` or ``nan``
instead of raising ``ZeroDivisionError``.
"""

from numbers import Real

import numpy as np


def divide(numerator: float, denominator: float) -> float:
    """Divide two floats with IEEE-754 semantics.

    Plain Python float division raises ``ZeroDivisionError`` on a zero
    denominator. This helper returns ``inf``, ``-inf`` or ``nan`` instead.

    Examples:
        >>> divide(1.0, 4.0)
        0.25
        >>> divide(1.0, 0.0)
        inf
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.true_divide(numerator, denominator))


def is_scalar(value: object) -> bool:
    """Return True for plain real numbers usable as a scaling factor."""
    return isinstance(value, Real)


class Quantity:
    """Base class for single-value physical quantities.

    Subclasses are frozen dataclasses with exactly one float field holding the
    canonical magnitude. They expose that field through ``magnitude``.
    """

    __slots__ = ()

    @property
    def magnitude(self) -> float:
        raise NotImplementedError

    def _same_type(self, other: object) -> bool:
        return type(other) is type(self)

    def __eq__(self, other: object) -> bool:
        if not self._same_type(other):
            return NotImplemented
        return self.magnitude == other.magnitude

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.magnitude))

    def __lt__(self, other: object) -> bool:
        if not self._same_type(other):
            return NotImplemented
        return self.magnitude < other.magnitude

    def __le__(self, other: object) -> bool:
        if not self._same_type(other):
            return NotImplemented
        return self.magnitude <= other.magnitude

    def __gt__(self, other: object) -> bool:
        if not self._same_type(other):
            return NotImplemented
        return self.magnitude > other.magnitude

    def __ge__(self, other: object) -> bool:
        if not self._same_type(other):
            return NotImplemented
        return self.magnitude >= other.magnitude

    def __add__(self, other):
        if not self._same_type(other):
            return NotImplemented
        return type(self)(self.magnitude + other.magnitude)

    def __sub__(self, other):
        if not self._same_type(other):
            return NotImplemented
        return type(self)(self.magnitude - other.magnitude)

    def __mul__(self, other):
        if not is_scalar(other):
            return NotImplemented
        return type(self)(self.magnitude * float(other))

    def __rmul__(self, other):
        if not is_scalar(other):
            return NotImplemented
        return type(self)(float(other) * self.magnitude)

    def __truediv__(self, other):
        if not is_scalar(other):
            return NotImplemented
        return type(self)(divide(self.magnitude, float(other)))

    def __neg__(self):
        return type(self)(-self.magnitude)

    def __pos__(self):
        return self

    def __abs__(self):
        return type(self)(abs(self.magnitude))
