"""
Token Types

The lexer turns a line of text into a list of these.
A token only records what was typed; numbers are converted
to floats by the evaluator when they are used.
"""

from dataclasses import dataclass
from enum import Enum

from .errors import CalcSyntaxError


class TokenType(Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    IDENTIFIER = "identifier"
    LPAREN = "lparen"
    RPAREN = "rparen"
    SYMBOL = "symbol"  # anything else; rejected during evaluation


@dataclass(frozen=True)
class Token:
    """A single lexical unit."""
    type: TokenType
    text: str

    @property
    def number(self) -> float:
        """Float value of a NUMBER token."""
        try:
            return float(self.text)
        except ValueError:
            raise CalcSyntaxError(f"invalid token '{self.text}'") from None


# Single-character tokens other than numbers and names
OPERATOR_CHARS = frozenset("+-*/^")

CHAR_TYPES = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    **{ch: TokenType.OPERATOR for ch in OPERATOR_CHARS},
}
