"""Numeric and currency helpers shared by the scoring engine"""

import math


def clamp01(value: float) -> float:
    """Clamp a value into [0, 1]"""
    return max(0.0, min(1.0, value))


def round_to(value: float, decimals: int = 2) -> float:
    """
    Round half up to a fixed number of decimals.

    Ties go towards +infinity (2.345 -> 2.35), which for the non-negative
    scores produced here is the same as rounding half away from zero.
    """
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor


def format_currency(cents: float) -> str:
    """Format an amount in cents as dollars with 2 decimals, e.g. 1800000 -> $18000.00"""
    return f"${cents / 100:.2f}"
