"""Numeric helpers shared by the financial core"""

import math


def round_cents(value: float) -> float:
    """Round to 2 decimals, halves going up (0.125 -> 0.13, -0.125 -> -0.12)"""
    return math.floor(value * 100 + 0.5) / 100
