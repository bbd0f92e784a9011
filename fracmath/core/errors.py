"""
Exceptions raised by fracmath.

Every error carries a human-readable message plus a ``details`` dict with the
offending values, and also derives from the builtin exception a caller would
naturally catch (ValueError, ZeroDivisionError).
"""

from typing import Any, Dict, Optional


class FractionError(Exception):
    """Base exception for fracmath errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidArgumentError(FractionError, ValueError):
    """Raised when a fraction is constructed from invalid components"""

    def __init__(self, message: str, argument: Optional[str] = None, value: Any = None):
        details = {"argument": argument, "value": value} if argument else {}
        super().__init__(message=message, details=details)


class DivisionByZeroError(FractionError, ZeroDivisionError):
    """Raised when dividing by, or inverting, a zero fraction"""

    def __init__(self, message: str = "Cannot divide by zero"):
        super().__init__(message=message)


class FractionFormatError(FractionError, ValueError):
    """Raised when text cannot be parsed as a fraction"""

    def __init__(self, text: Any, reason: str):
        super().__init__(
            message=f"Invalid fraction literal {text!r}: {reason}",
            details={"text": text, "reason": reason},
        )


class ExpressionError(FractionError, ValueError):
    """Raised when an input line cannot be evaluated"""

    def __init__(self, line: str, reason: str):
        super().__init__(
            message=f"Cannot evaluate {line!r}: {reason}",
            details={"line": line, "reason": reason},
        )
