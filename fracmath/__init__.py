"""
fracmath - exact fractions with mixed-number text notation

- Fraction: immutable value type kept in lowest terms
- parse_fraction: reads ``W_N/D`` and ``N/D`` text
- Expression / evaluate_line: single-operator expression driver
"""

from .core.errors import (
    DivisionByZeroError,
    ExpressionError,
    FractionError,
    FractionFormatError,
    InvalidArgumentError,
)
from .expression import Expression, evaluate_line
from .fraction import Fraction, parse_fraction
from .integer_math import gcd, greatest_common_divisor, lcm, least_common_multiple

__all__ = [
    "Fraction",
    "parse_fraction",
    "Expression",
    "evaluate_line",
    "greatest_common_divisor",
    "least_common_multiple",
    "gcd",
    "lcm",
    "FractionError",
    "InvalidArgumentError",
    "DivisionByZeroError",
    "FractionFormatError",
    "ExpressionError",
]
