"""
Operation and Function Tables

Pure numeric primitives used by the evaluator:
- binary operators (+ - * / ^)
- unary functions (sqrt, log/ln, sin, cos, tan)
- the operator precedence map

All arithmetic goes through numpy float64 so that overflow and
domain problems come back as inf/nan instead of Python exceptions.
"""

from types import MappingProxyType

import numpy as np

from .errors import CalcMathError, CalcNameError


PRECEDENCE = MappingProxyType({
    "+": 1, "-": 1,
    "*": 2, "/": 2,
    "^": 3,
})

RIGHT_ASSOCIATIVE = frozenset("^")


def _divide(a, b):
    if b == 0.0:
        raise CalcMathError("division by zero")
    return np.divide(a, b)


def _log(x):
    if x <= 0.0:
        raise CalcMathError("log domain error")
    return np.log(x)


BINARY_OPERATORS = MappingProxyType({
    "+": np.add,
    "-": np.subtract,
    "*": np.multiply,
    "/": _divide,
    "^": np.power,
})

FUNCTIONS = MappingProxyType({
    "sqrt": np.sqrt,
    "log": _log,
    "ln": _log,
    "sin": np.sin,
    "cos": np.cos,
    "tan": np.tan,
})


def apply_operation(a: float, b: float, op: str) -> float:
    """
    Apply a binary operator to (a, b).

    Raises:
        CalcMathError: division by zero
        CalcNameError: unknown operator symbol
    """
    func = BINARY_OPERATORS.get(op)
    if func is None:
        raise CalcNameError(f"unknown operator '{op}'")
    with np.errstate(all="ignore"):
        return float(func(np.float64(a), np.float64(b)))


def apply_function(name: str, x: float) -> float:
    """
    Apply a unary function by name.

    Raises:
        CalcMathError: log of a non-positive value
        CalcNameError: unknown function name
    """
    func = FUNCTIONS.get(name)
    if func is None:
        raise CalcNameError(f"unknown function '{name}'")
    with np.errstate(all="ignore"):
        return float(func(np.float64(x)))
