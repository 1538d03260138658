"""
Errors Module

Exception hierarchy for expression evaluation.
Every error aborts the current expression only - the shell
catches it, prints it, and moves on to the next line.
"""


# =============================================================================
# Custom Exceptions
# =============================================================================

class CalcError(Exception):
    """Base exception for calculator errors."""

    kind = "Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class CalcSyntaxError(CalcError):
    """Raised for malformed input: bad parentheses, invalid tokens, empty expressions."""

    kind = "SyntaxError"


class CalcMathError(CalcError):
    """Raised for arithmetic domain errors (division by zero, log of x <= 0)."""

    kind = "MathError"


class CalcNameError(CalcError):
    """Raised when an operator or function name is not known."""

    kind = "NameError"
