"""
Exact fraction value type.

A Fraction is stored as a sign plus an absolute numerator and denominator in
lowest terms, so every value has exactly one representation. Text uses the
mixed-number notation ``W_N/D`` (e.g. ``2_3/8``) or the simple notation
``N/D`` (e.g. ``3/8``).
"""

from __future__ import annotations

import re
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from .core.errors import DivisionByZeroError, FractionFormatError, InvalidArgumentError
from .core.logging import get_logger
from .integer_math import greatest_common_divisor, least_common_multiple

logger = get_logger(__name__)

MIXED_SEPARATOR = "_"

# Optional sign and ASCII digits, no digit-group underscores
_WHOLE_NUMBER = re.compile(r"\s*[+-]?[0-9]+\s*")

_HASH_SEED = 17
_HASH_MULTIPLIER = 223


def _require_int(name: str, value: Any) -> int:
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"Fraction {name} must be an integer, got {type(value).__name__}",
            argument=name,
            value=value,
        )
    return value


class Fraction(BaseModel):
    """
    Fraction represents a rational number as sign * numerator/denominator.

    Construction always reduces to lowest terms, so equal values share one
    canonical (sign, numerator, denominator) triple:

        >>> Fraction(4, 8)
        Fraction(1, 2)
        >>> Fraction(3, -6)
        Fraction(-1, 2)
        >>> str(Fraction(19, 8))
        '2_3/8'

    Instances are immutable; arithmetic returns new fractions.
    """

    model_config = ConfigDict(frozen=True)

    sign: int = Field(description="Sign of the value, -1 or 1 (1 for zero)")
    numerator: int = Field(ge=0, description="Absolute numerator in lowest terms")
    denominator: int = Field(ge=1, description="Absolute denominator in lowest terms")
    proper_numerator: int = Field(
        ge=0, description="Numerator left after removing the whole-number part"
    )

    _reciprocal: Optional[Fraction] = PrivateAttr(default=None)

    def __init__(self, numerator: int = 0, denominator: int = 1):
        """
        Create a Fraction in lowest terms.

        Args:
            numerator: Any integer
            denominator: Any nonzero integer (default 1)

        Raises:
            InvalidArgumentError: If the denominator is zero or either
                argument is not an integer
        """
        numerator = _require_int("numerator", numerator)
        denominator = _require_int("denominator", denominator)
        if denominator == 0:
            raise InvalidArgumentError(
                "Fraction denominator cannot be zero", argument="denominator", value=0
            )

        sign = -1 if (numerator < 0) != (denominator < 0) else 1
        num, den = abs(numerator), abs(denominator)

        g = greatest_common_divisor(num, den)
        num //= g
        den //= g

        if num == 0:
            sign = 1

        if den == 1:
            proper = 0
        elif num < den:
            proper = num
        else:
            proper = num % den

        super().__init__(
            sign=sign, numerator=num, denominator=den, proper_numerator=proper
        )

    @classmethod
    def from_int(cls, value: int) -> Fraction:
        """Convert a whole number to value/1."""
        return cls(value, 1)

    @classmethod
    def parse(cls, text: str) -> Fraction:
        """Parse ``W_N/D`` or ``N/D`` text. See :func:`parse_fraction`."""
        return parse_fraction(text)

    @property
    def reciprocal(self) -> Fraction:
        """
        The multiplicative inverse, computed on first access and cached.

        Raises:
            DivisionByZeroError: If this fraction is zero
        """
        reciprocal = self._reciprocal
        if reciprocal is None:
            if self.numerator == 0:
                raise DivisionByZeroError("Zero has no reciprocal")
            # Concurrent first accesses may both compute; the results are equal.
            reciprocal = Fraction(self.sign * self.denominator, self.numerator)
            self._reciprocal = reciprocal
        return reciprocal

    @property
    def whole(self) -> int:
        """Absolute whole-number part."""
        return self.numerator // self.denominator

    def _signed_numerator(self, common_denominator: int) -> int:
        return self.sign * self.numerator * (common_denominator // self.denominator)

    # Arithmetic

    def add(self, other: Fraction) -> Fraction:
        """Return self + other."""
        common = least_common_multiple(self.denominator, other.denominator)
        return Fraction(
            self._signed_numerator(common) + other._signed_numerator(common), common
        )

    def subtract(self, other: Fraction) -> Fraction:
        """Return self - other."""
        common = least_common_multiple(self.denominator, other.denominator)
        return Fraction(
            self._signed_numerator(common) - other._signed_numerator(common), common
        )

    def multiply(self, other: Fraction) -> Fraction:
        """Return self * other."""
        return Fraction(
            self.sign * self.numerator * other.sign * other.numerator,
            self.denominator * other.denominator,
        )

    def divide(self, other: Fraction) -> Fraction:
        """
        Return self / other.

        Raises:
            DivisionByZeroError: If other is zero
        """
        return self.multiply(other.reciprocal)

    def to_int(self) -> int:
        """Truncate toward zero."""
        return self.sign * self.whole

    def __add__(self, other: Any) -> Fraction:
        if isinstance(other, Fraction):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: Any) -> Fraction:
        if isinstance(other, Fraction):
            return self.subtract(other)
        return NotImplemented

    def __mul__(self, other: Any) -> Fraction:
        if isinstance(other, Fraction):
            return self.multiply(other)
        return NotImplemented

    def __truediv__(self, other: Any) -> Fraction:
        if isinstance(other, Fraction):
            return self.divide(other)
        return NotImplemented

    def __int__(self) -> int:
        return self.to_int()

    # Comparison

    def equals(self, other: Any) -> bool:
        """
        Test for equality.

        Besides fractions, whole numbers and strings holding a whole number
        (e.g. ``"3"``, ``" -4 "``) compare by value. Anything else is simply
        unequal.

        Ints and strings that compare equal do not share the fraction's
        hash, so do not mix them with fractions as keys of one dict or set.
        """
        if isinstance(other, Fraction):
            return (
                self.sign == other.sign
                and self.numerator == other.numerator
                and self.denominator == other.denominator
            )
        if isinstance(other, bool):
            return False
        if isinstance(other, int):
            return self.equals(Fraction.from_int(other))
        if isinstance(other, str):
            if _WHOLE_NUMBER.fullmatch(other) is None:
                return False
            return self.equals(Fraction.from_int(int(other)))
        return False

    def compare_to(self, other: Fraction) -> int:
        """
        Compare with another fraction.

        Returns:
            -1 if self < other, 0 if equal, 1 if self > other
        """
        if not isinstance(other, Fraction):
            raise TypeError(
                f"Cannot compare Fraction with {type(other).__name__}"
            )
        common = least_common_multiple(self.denominator, other.denominator)
        left = self._signed_numerator(common)
        right = other._signed_numerator(common)
        return (left > right) - (left < right)

    def __eq__(self, other: Any) -> bool:
        return self.equals(other)

    def __hash__(self) -> int:
        """
        Polynomial hash (seed 17, multiplier 223) over sign, numerator and
        denominator.

        Consistent with equality between fractions only: ``Fraction(3) == 3``
        holds but ``hash(Fraction(3)) != hash(3)``.
        """
        hash_code = _HASH_SEED
        hash_code = hash_code * _HASH_MULTIPLIER + self.sign
        hash_code = hash_code * _HASH_MULTIPLIER + self.numerator
        hash_code = hash_code * _HASH_MULTIPLIER + self.denominator
        return hash_code

    def __lt__(self, other: Any) -> bool:
        if isinstance(other, Fraction):
            return self.compare_to(other) < 0
        return NotImplemented

    def __le__(self, other: Any) -> bool:
        if isinstance(other, Fraction):
            return self.compare_to(other) <= 0
        return NotImplemented

    def __gt__(self, other: Any) -> bool:
        if isinstance(other, Fraction):
            return self.compare_to(other) > 0
        return NotImplemented

    def __ge__(self, other: Any) -> bool:
        if isinstance(other, Fraction):
            return self.compare_to(other) >= 0
        return NotImplemented

    # Formatting

    def to_string(self) -> str:
        """
        Render as a whole number (``-3``), a simple fraction (``3/8``) or a
        mixed number (``2_3/8``).
        """
        sign = "-" if self.sign < 0 else ""
        whole = self.whole

        if self.proper_numerator == 0:
            return f"{sign}{whole}"
        if whole == 0:
            return f"{sign}{self.numerator}/{self.denominator}"
        return f"{sign}{whole}{MIXED_SEPARATOR}{self.proper_numerator}/{self.denominator}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Fraction({self.sign * self.numerator}, {self.denominator})"


def _read_int(text: str, piece: str, part: str) -> int:
    try:
        return int(piece)
    except ValueError as exc:
        raise FractionFormatError(text, f"cannot read {part} from {piece!r}") from exc


def _build(text: str, numerator: int, denominator: int) -> Fraction:
    try:
        return Fraction(numerator, denominator)
    except InvalidArgumentError as exc:
        raise FractionFormatError(text, "denominator is zero") from exc


def parse_fraction(text: str) -> Fraction:
    """
    Parse a fraction from text.

    Two shapes are recognised:

    - mixed number ``W_N/D``: the whole part ``W`` is read as an integer, and
      ``Fraction(N, D) + W`` is returned
    - simple fraction ``N/D``

    Only the first and last characters of the fractional part are read, so
    numerator and denominator are limited to a single digit each: ``12/16``
    parses as ``1/6``.

    Raises:
        FractionFormatError: If an integer cannot be read where one is
            expected, or the denominator is zero
    """
    if not isinstance(text, str):
        raise FractionFormatError(text, f"expected str, got {type(text).__name__}")

    if MIXED_SEPARATOR in text:
        pieces = text.split(MIXED_SEPARATOR)
        whole = _read_int(text, pieces[0], "whole part")
        remainder = pieces[1]
        numerator = _read_int(text, remainder[:1], "numerator")
        denominator = _read_int(text, remainder[-1:], "denominator")
        result = _build(text, numerator, denominator).add(Fraction.from_int(whole))
        logger.debug("Parsed mixed number %r as %r", text, result)
        return result

    numerator = _read_int(text, text[:1], "numerator")
    denominator = _read_int(text, text[-1:], "denominator")
    result = _build(text, numerator, denominator)
    logger.debug("Parsed fraction %r as %r", text, result)
    return result
