"""
Integer helpers used to keep fractions in lowest terms.
"""

from __future__ import annotations


def greatest_common_divisor(a: int, b: int) -> int:
    """
    Greatest Common Divisor, always non-negative.

    gcd(0, 0) is 0.
    """
    a, b = abs(a), abs(b)
    while b != 0:
        a, b = b, a % b
    return a


def least_common_multiple(a: int, b: int) -> int:
    """
    Least Common Multiple, always non-negative.

    lcm(0, 0) is defined as 0; lcm(0, n) is 0 as well since gcd(0, n) == n.
    """
    if a == 0 and b == 0:
        return 0
    return abs(a * b) // greatest_common_divisor(a, b)


gcd = greatest_common_divisor
lcm = least_common_multiple
