"""
Tests for the arithmetic accumulators.
"""

import pytest

from adjgraph.core.numeric import IntegerNumber, RealNumber, accumulator_for


def test_integer_accumulation():
    """Test in-place integer arithmetic."""
    number = IntegerNumber(0)
    number.increment()
    number.increment()
    number.decrement()
    number.sum_and_assign(IntegerNumber(4))
    assert number == 5
    assert number.value == 5
    assert not number.is_negative()


def test_pure_operations():
    """Test that sum and subtract do not modify the receiver."""
    number = RealNumber(1.5)
    assert number.sum(2) == 3.5
    assert number.subtract(RealNumber(0.5)) == 1.0
    assert number == 1.5


def test_ordering():
    """Test comparisons against numbers and other accumulators."""
    assert IntegerNumber(1) < IntegerNumber(2)
    assert RealNumber(2.5) > 2
    assert IntegerNumber(3) == RealNumber(3.0)
    assert IntegerNumber(-1).is_negative()
    assert sorted([IntegerNumber(3), IntegerNumber(1)]) == [1, 3]


def test_conversions():
    """Test conversions and representations."""
    assert int(RealNumber(2.9)) == 2
    assert float(IntegerNumber(2)) == 2.0
    assert repr(IntegerNumber(3)) == "IntegerNumber(3)"
    assert str(RealNumber(1.5)) == "1.5"


@pytest.mark.parametrize("value", [1.5, "1", True])
def test_integer_rejects_non_integral(value):
    """Test that IntegerNumber only accepts integral values."""
    with pytest.raises(TypeError, match="integral"):
        IntegerNumber(value)


def test_real_rejects_non_numeric():
    """Test that RealNumber only accepts real values."""
    with pytest.raises(TypeError):
        RealNumber("1.5")


def test_accumulator_for():
    """Test accumulator selection by value type."""
    assert isinstance(accumulator_for(3), IntegerNumber)
    assert isinstance(accumulator_for(3.0), RealNumber)
    existing = IntegerNumber(1)
    assert accumulator_for(existing) is existing
    with pytest.raises(TypeError, match="numeric"):
        accumulator_for("3")
