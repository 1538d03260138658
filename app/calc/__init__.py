"""
calc - A Console Arithmetic Calculator

This package contains:
- lexer: Tokenizer and parenthesis balance check
- evaluator: Precedence-climbing expression evaluator
- operations: Operator, function and precedence tables
- shell: Prompt loops and argument mode
- config: Configuration loading
"""

from .errors import CalcError, CalcMathError, CalcNameError, CalcSyntaxError
from .evaluator import calculate, evaluate
from .lexer import check_parentheses, tokenize
from .result import EvalResult

__version__ = "0.1.0"
__all__ = [
    "CalcError",
    "CalcMathError",
    "CalcNameError",
    "CalcSyntaxError",
    "EvalResult",
    "calculate",
    "check_parentheses",
    "evaluate",
    "tokenize",
]
