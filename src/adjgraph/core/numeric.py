"""
Arithmetic accumulators for path costs.

Path searches accumulate their distance through an ``ArithmeticNumber`` so
the same algorithm can count hops (``IntegerNumber``) or sum numeric edge
weights (``RealNumber`` or ``IntegerNumber``, depending on the weight type).

Example:
    >>> jumps = IntegerNumber(0)
    >>> jumps.increment()
    >>> jumps.sum_and_assign(IntegerNumber(2))
    >>> jumps == 3
    True
"""

from abc import ABC, abstractmethod
from functools import total_ordering
from numbers import Integral, Real
from typing import Any, Generic, TypeVar, Union

N = TypeVar("N", int, float)


@total_ordering
class ArithmeticNumber(ABC, Generic[N]):
    """
    Mutable numeric accumulator.

    Instances compare equal to, and order against, both plain numbers and
    other accumulators.
    """

    def __init__(self, value: N):
        self._value = self._coerce(value)

    @staticmethod
    @abstractmethod
    def _coerce(value: Any) -> N:
        """Convert a raw number into this accumulator's number type."""

    @property
    def value(self) -> N:
        """The wrapped number."""
        return self._value

    def sum(self, other: Union["ArithmeticNumber", N]) -> N:
        """Return this number plus ``other`` without modifying either."""
        return self._coerce(self._value + _raw(other))

    def subtract(self, other: Union["ArithmeticNumber", N]) -> N:
        """Return this number minus ``other`` without modifying either."""
        return self._coerce(self._value - _raw(other))

    def sum_and_assign(self, other: Union["ArithmeticNumber", N]) -> None:
        """Add ``other`` to this number in place."""
        self._value = self.sum(other)

    def increment(self) -> None:
        """Add one to this number."""
        self._value = self._coerce(self._value + 1)

    def decrement(self) -> None:
        """Subtract one from this number."""
        self._value = self._coerce(self._value - 1)

    def is_negative(self) -> bool:
        return self._value < 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ArithmeticNumber):
            return self._value == other.value
        if isinstance(other, Real):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, ArithmeticNumber):
            return self._value < other.value
        if isinstance(other, Real):
            return self._value < other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __int__(self) -> int:
        return int(self._value)

    def __float__(self) -> float:
        return float(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __str__(self) -> str:
        return str(self._value)


class IntegerNumber(ArithmeticNumber[int]):
    """Integer accumulator, used for hop counts and integral weights."""

    @staticmethod
    def _coerce(value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise TypeError(f"IntegerNumber requires an integral value, got {type(value).__name__}")
        return int(value)


class RealNumber(ArithmeticNumber[float]):
    """Floating point accumulator for real-valued weights."""

    @staticmethod
    def _coerce(value: Any) -> float:
        if isinstance(value, bool) or not isinstance(value, Real):
            raise TypeError(f"RealNumber requires a real value, got {type(value).__name__}")
        return float(value)


def accumulator_for(value: Any) -> ArithmeticNumber:
    """
    Wrap a raw weight in the matching accumulator.

    Args:
        value: An integral or real number, or an existing accumulator.

    Returns:
        ``IntegerNumber`` for integral values, ``RealNumber`` for other reals.

    Raises:
        TypeError: If the value is not numeric.
    """
    if isinstance(value, ArithmeticNumber):
        return value
    if isinstance(value, Integral) and not isinstance(value, bool):
        return IntegerNumber(value)
    if isinstance(value, Real) and not isinstance(value, bool):
        return RealNumber(value)
    raise TypeError(f"Weight must be numeric, got {type(value).__name__}")


def _raw(number: Union[ArithmeticNumber, int, float]) -> Union[int, float]:
    if isinstance(number, ArithmeticNumber):
        return number.value
    return number
