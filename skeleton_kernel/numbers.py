"""Field helpers shared by the offset event constructions.

Values are either ``float`` (inexact, may overflow to ``inf``) or
``fractions.Fraction`` (exact, always finite).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Generic, Optional, TypeVar, Union

import numpy as np

from .config import get_kernel_config

FT = Union[float, Fraction]

T = TypeVar("T")


def to_field(value: object) -> FT:
    """Coerce ``value`` to a field number (``Fraction`` stays exact)."""

    if isinstance(value, Fraction):
        return value
    if isinstance(value, bool):
        raise TypeError("booleans are not coordinates")
    if isinstance(value, (int, np.integer)):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, (float, np.floating)):
        return float(value)
    raise TypeError(f"unsupported coordinate type: {type(value).__name__}")


def is_finite(value: FT) -> bool:
    if isinstance(value, Fraction):
        return True
    return math.isfinite(value)


def is_zero(value: FT) -> bool:
    return value == 0


def certified_is_zero(value: FT) -> bool:
    """``True`` only when ``value`` is known to be exactly zero."""

    return is_finite(value) and value == 0


def sign(value: FT) -> int:
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def inexact_sqrt(value: FT) -> FT:
    """Approximate square root of a non-negative field number.

    Floats use the hardware square root. Fractions are rounded to
    ``sqrt_precision_bits`` binary digits, which keeps huge exact values
    within reach where converting them to ``float`` would overflow.
    """

    if value < 0:
        raise ValueError("square root of a negative number")
    if not isinstance(value, Fraction):
        return math.sqrt(value)
    bits = get_kernel_config().sqrt_precision_bits
    scale = 1 << bits
    # sqrt(p/q) == sqrt(p*q)/q
    root = math.isqrt((value.numerator * value.denominator) << (2 * bits))
    return Fraction(root, scale * value.denominator)


@dataclass(frozen=True)
class Rational:
    """Offset time kept as an explicit ``num/den`` pair; ``den`` may be zero."""

    num: FT
    den: FT

    @property
    def is_defined(self) -> bool:
        return not is_zero(self.den)

    def quotient(self) -> Optional[FT]:
        if not self.is_defined:
            return None
        return self.num / self.den

    def sign(self) -> int:
        return sign(self.num) * sign(self.den)

    def __float__(self) -> float:
        if not self.is_defined:
            raise ZeroDivisionError("rational time has a zero denominator")
        return float(self.num / self.den)

    def __str__(self) -> str:
        return f"{self.num}/{self.den}"


class Uncertain(Generic[T]):
    """Result of a sign test that may be indeterminate."""

    __slots__ = ("_value",)

    _INDETERMINATE = object()

    def __init__(self, value: object = _INDETERMINATE) -> None:
        self._value = value

    @classmethod
    def indeterminate(cls) -> "Uncertain[T]":
        return cls()

    @property
    def is_certain(self) -> bool:
        return self._value is not Uncertain._INDETERMINATE

    def make_certain(self) -> T:
        if not self.is_certain:
            raise ValueError("uncertain value is indeterminate")
        return self._value  # type: ignore[return-value]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Uncertain):
            return NotImplemented
        return self._value is other._value or self._value == other._value

    def __hash__(self) -> int:
        return hash(("Uncertain", self._value if self.is_certain else None))

    def __repr__(self) -> str:
        if not self.is_certain:
            return "Uncertain(indeterminate)"
        return f"Uncertain({self._value!r})"


def is_indeterminate(value: Uncertain) -> bool:
    return not value.is_certain


def uncertain_and(*values: Uncertain[bool]) -> Uncertain[bool]:
    """Three-valued conjunction: any certain ``False`` decides the result."""

    pending = False
    for value in values:
        if not value.is_certain:
            pending = True
        elif not value.make_certain():
            return Uncertain(False)
    if pending:
        return Uncertain.indeterminate()
    return Uncertain(True)


__all__ = [
    "FT",
    "Rational",
    "Uncertain",
    "certified_is_zero",
    "inexact_sqrt",
    "is_finite",
    "is_indeterminate",
    "is_zero",
    "sign",
    "to_field",
    "uncertain_and",
]
