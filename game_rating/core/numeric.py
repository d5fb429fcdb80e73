"""
Integer conversions with explicit truncation toward zero.
"""

import math


def truncate_toward_zero(value: float) -> int:
    """
    Convert a float to an int by dropping its fractional part.

    16.7 becomes 16 and -16.7 becomes -16; nothing is rounded.
    """
    return math.trunc(value)


def truncating_div(dividend: int, divisor: int) -> int:
    """
    Integer division that truncates toward zero instead of flooring.

    Python's ``//`` floors, so ``-101 // 2 == -51``; this returns -50.

    Raises:
        ZeroDivisionError: If divisor is zero
    """
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        return -quotient
    return quotient
