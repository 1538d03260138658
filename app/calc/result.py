"""
Evaluation Result

What calculate() hands back to its caller.
It is either a value or an error, never both.
"""

from dataclasses import dataclass
from typing import Optional

from .errors import CalcError


@dataclass(frozen=True)
class EvalResult:
    """
    Result of evaluating one expression.

    It tells us:
    - Did it work? (success)
    - What came out? (value)
    - What went wrong? (error, if any)
    """
    success: bool
    value: Optional[float] = None
    error: Optional[CalcError] = None

    @property
    def kind(self) -> Optional[str]:
        """Error kind (SyntaxError, MathError, NameError), or None on success."""
        return self.error.kind if self.error else None

    @property
    def message(self) -> Optional[str]:
        return self.error.message if self.error else None

    def __str__(self) -> str:
        """String representation for logging/display."""
        if self.success:
            return repr(self.value)
        return f"Error: {self.error}"

    @classmethod
    def ok(cls, value: float) -> "EvalResult":
        """Create a successful result."""
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: CalcError) -> "EvalResult":
        """Create a failed result."""
        return cls(success=False, error=error)
