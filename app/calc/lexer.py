"""
Lexer

Splits an input line into tokens and checks parenthesis balance.

The lexer never raises - unknown characters become SYMBOL tokens
and are reported by the evaluator.
"""

from typing import List

from .tokens import CHAR_TYPES, OPERATOR_CHARS, Token, TokenType


def check_parentheses(text: str) -> bool:
    """
    Check that every ')' closes an earlier '(' and nothing is left open.

    Returns:
        True if the parentheses in text are balanced
    """
    balance = 0
    for ch in text:
        if ch == "(":
            balance += 1
        elif ch == ")":
            balance -= 1
            if balance < 0:
                return False
    return balance == 0


def _starts_signed_number(text: str, i: int) -> bool:
    """A '-' is a sign at the start of input, after '(' or right after an operator."""
    if i == 0:
        return True
    prev = text[i - 1]
    return prev == "(" or prev in OPERATOR_CHARS


def tokenize(text: str) -> List[Token]:
    """
    Convert a line of text into a list of tokens.

    Rules:
    - whitespace is skipped (it does not end a number)
    - a run of letters is one IDENTIFIER
    - digits and '.' build up a NUMBER
    - '-' starts a NUMBER only where it cannot be binary minus
    - every other character is a token on its own
    """
    tokens: List[Token] = []
    number = ""

    def flush() -> None:
        nonlocal number
        if number:
            # A lone sign with no digits behind it is just minus
            kind = TokenType.OPERATOR if number == "-" else TokenType.NUMBER
            tokens.append(Token(kind, number))
            number = ""

    i = 0
    while i < len(text):
        ch = text[i]

        if ch.isspace():
            i += 1
            continue

        if ch.isascii() and ch.isalpha():
            flush()
            start = i
            while i < len(text) and text[i].isascii() and text[i].isalpha():
                i += 1
            tokens.append(Token(TokenType.IDENTIFIER, text[start:i]))
            continue

        if (ch.isascii() and ch.isdigit()) or ch == "." or (ch == "-" and _starts_signed_number(text, i)):
            number += ch
        else:
            flush()
            tokens.append(Token(CHAR_TYPES.get(ch, TokenType.SYMBOL), ch))
        i += 1

    flush()
    return tokens
