"""
Single-operator expression driver.

An input line is a whitespace-separated sequence of tokens such as
``? 2_3/8 + 9/8``: a leading ``?`` is ignored, ``+ - * /`` select the operator
and every other token is parsed as a fraction and pushed on an operand stack.
Evaluation pops the right operand, then the left one, and applies the
operator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from .core.errors import ExpressionError
from .core.logging import get_logger
from .fraction import Fraction, parse_fraction

logger = get_logger(__name__)

QUESTION_TOKEN = "?"

OPERATORS: Dict[str, Callable[[Fraction, Fraction], Fraction]] = {
    "+": Fraction.add,
    "-": Fraction.subtract,
    "*": Fraction.multiply,
    "/": Fraction.divide,
}


@dataclass
class Expression:
    """Operands and operator collected from one input line."""

    line: str
    operands: List[Fraction] = field(default_factory=list)
    operator: Optional[str] = None

    @classmethod
    def from_line(cls, line: str) -> Expression:
        """
        Tokenize a line.

        A later operator token replaces an earlier one.

        Raises:
            FractionFormatError: If an operand token is not a valid fraction
        """
        expression = cls(line=line)
        for token in line.split():
            if token == QUESTION_TOKEN:
                continue
            if token in OPERATORS:
                expression.operator = token
                continue
            expression.operands.append(parse_fraction(token))

        logger.debug(
            "Tokenized expression",
            extra={"extra_data": {
                "expression": line,
                "operands": [str(f) for f in expression.operands],
                "operator": expression.operator,
            }},
        )
        return expression

    def evaluate(self) -> Optional[Fraction]:
        """
        Apply the operator to the two most recently pushed operands.

        Returns:
            The result, or None if the line has no operator

        Raises:
            ExpressionError: If fewer than two operands are available
            DivisionByZeroError: If dividing by zero
        """
        if self.operator is None:
            return None

        stack = list(self.operands)
        if len(stack) < 2:
            raise ExpressionError(
                self.line,
                f"operator {self.operator!r} needs two operands, got {len(stack)}",
            )

        right = stack.pop()
        left = stack.pop()
        result = OPERATORS[self.operator](left, right)
        logger.debug("Evaluated %s %s %s = %s", left, self.operator, right, result)
        return result


def evaluate_line(line: str) -> Optional[Fraction]:
    """Tokenize and evaluate one input line."""
    return Expression.from_line(line).evaluate()
