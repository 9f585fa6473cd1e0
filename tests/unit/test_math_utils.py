"""Unit tests for numeric helpers"""

from pfhr_gateway.utils.math_utils import clamp01, round_to, format_currency


def test_clamp01():
    assert clamp01(1.5) == 1.0
    assert clamp01(-0.5) == 0.0
    assert clamp01(0.75) == 0.75


def test_round_to_half_up():
    """Test ties round up (0.125 is exact in binary)"""
    assert round_to(0.125, 2) == 0.13
    assert round_to(41.666666, 2) == 41.67
    assert round_to(3.14159, 0) == 3.0
    assert round_to(82.0) == 82.0


def test_format_currency():
    assert format_currency(1800000) == "$18000.00"
    assert format_currency(60000.0) == "$600.00"
    assert format_currency(-100000) == "$-1000.00"
    assert format_currency(0) == "$0.00"
