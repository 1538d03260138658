"""
Evaluator

Precedence-climbing evaluation over a token list.

Each call to evaluate_expression() owns its own operand and
operator stacks. Parentheses and function arguments are handled
by recursing; the recursive call stops at the matching ')' and
reports how far it got through the returned index.
"""

import logging
from typing import List, Tuple

from .errors import CalcError, CalcSyntaxError
from .lexer import check_parentheses, tokenize
from .operations import PRECEDENCE, RIGHT_ASSOCIATIVE, apply_function, apply_operation
from .result import EvalResult
from .tokens import Token, TokenType

logger = logging.getLogger(__name__)


def _reduce(operands: List[float], op: str) -> None:
    """Pop two operands, apply op, push the result."""
    if len(operands) < 2:
        raise CalcSyntaxError("malformed expression")
    right = operands.pop()
    left = operands.pop()
    operands.append(apply_operation(left, right, op))


def _should_reduce(new_op: str, pending: str) -> bool:
    if new_op in RIGHT_ASSOCIATIVE:
        return PRECEDENCE[new_op] < PRECEDENCE[pending]
    return PRECEDENCE[new_op] <= PRECEDENCE[pending]


def evaluate_expression(tokens: List[Token], pos: int = 0) -> Tuple[float, int]:
    """
    Evaluate tokens starting at pos up to the end or the first unmatched ')'.

    Args:
        tokens: Token list from the lexer
        pos: Index of the first token to consume

    Returns:
        (value, next_pos) - next_pos points past the consumed ')' if any

    Raises:
        CalcError: on any syntax, math or name error
    """
    operands: List[float] = []
    operators: List[str] = []
    end = len(tokens)

    while pos < end and tokens[pos].type is not TokenType.RPAREN:
        token = tokens[pos]

        if token.type is TokenType.IDENTIFIER:
            pos += 1
            if pos >= end or tokens[pos].type is not TokenType.LPAREN:
                raise CalcSyntaxError(f"expected '(' after {token.text}")
            argument, pos = evaluate_expression(tokens, pos + 1)
            operands.append(apply_function(token.text, argument))

        elif token.type is TokenType.LPAREN:
            value, pos = evaluate_expression(tokens, pos + 1)
            operands.append(value)

        elif token.type is TokenType.NUMBER:
            operands.append(token.number)
            pos += 1

        elif token.type is TokenType.OPERATOR:
            while operators and _should_reduce(token.text, operators[-1]):
                _reduce(operands, operators.pop())
            operators.append(token.text)
            pos += 1

        else:
            raise CalcSyntaxError(f"invalid token '{token.text}'")

    # Closing paren belongs to whoever opened it
    if pos < end:
        pos += 1

    while operators:
        _reduce(operands, operators.pop())

    if not operands:
        raise CalcSyntaxError("empty expression")
    if len(operands) > 1:
        raise CalcSyntaxError("malformed expression")
    return operands[0], pos


def evaluate(tokens: List[Token]) -> float:
    """Evaluate a complete token list."""
    if not check_parentheses("".join(token.text for token in tokens)):
        raise CalcSyntaxError("mismatched parentheses")
    value, _ = evaluate_expression(tokens, 0)
    return value


def calculate(text: str) -> EvalResult:
    """
    Evaluate one line of input.

    This is the main entry point: balance check, tokenize, evaluate.
    Errors are returned, not raised.

    Example:
        >>> calculate("sqrt(16) + 2*(3-1)").value
        8.0
    """
    try:
        if not check_parentheses(text):
            raise CalcSyntaxError("mismatched parentheses")
        value = evaluate(tokenize(text))
    except CalcError as e:
        logger.debug(
            f"Evaluation of {text!r} failed: {e.kind}: {e}",
            extra={"expression": text, "error_kind": e.kind},
        )
        return EvalResult.fail(e)

    logger.debug(f"Evaluated {text!r} = {value!r}", extra={"expression": text, "value": value})
    return EvalResult.ok(value)
