"""Tokenizing, infix-to-postfix conversion and evaluation of arithmetic."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Sequence

OPERATORS = frozenset("+-*/")
SYMBOLS = frozenset("+-*/()")
_DIGITS = frozenset("0123456789")
_LEADING_DIGITS = re.compile(r"[0-9]+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class ExpressionError(ValueError):
    """Raised when an expression cannot be understood or evaluated."""


def precedence(op: str) -> int:
    """Return the binding strength of ``op``; 0 when it is not an operator."""
    if op in ("+", "-"):
        return 1
    if op in ("*", "/"):
        return 2
    return 0


def _is_number(token: str) -> bool:
    return token[:1] in _DIGITS


def tokenize(expr: str) -> list[str]:
    """Split ``expr`` into integer and operator/parenthesis tokens.

    Any other character only separates numbers.
    """
    tokens: list[str] = []
    digits: list[str] = []
    for char in expr:
        if char in _DIGITS:
            digits.append(char)
            continue
        if digits:
            tokens.append("".join(digits))
            digits.clear()
        if char in SYMBOLS:
            tokens.append(char)
    if digits:
        tokens.append("".join(digits))
    return tokens


def infix_to_postfix(tokens: Iterable[str]) -> list[str]:
    """Convert infix tokens to postfix order (shunting-yard)."""
    output: list[str] = []
    ops: list[str] = []
    for token in tokens:
        if _is_number(token):
            output.append(token)
        elif token == "(":
            ops.append(token)
        elif token == ")":
            while ops and ops[-1] != "(":
                output.append(ops.pop())
            if ops:
                ops.pop()
        else:
            while ops and precedence(ops[-1]) >= precedence(token):
                output.append(ops.pop())
            ops.append(token)
    output.extend(reversed(ops))
    return output


def _parse_int(token: str) -> int:
    match = _LEADING_DIGITS.match(token)
    if match is None:
        raise ExpressionError(f"not a number: {token!r}")
    value = int(match.group())
    if not _INT_MIN <= value <= _INT_MAX:
        raise ExpressionError(f"number out of range: {token}")
    return value


def _pop_operands(stack: list, token: str) -> tuple:
    if len(stack) < 2:
        raise ExpressionError(f"missing operand for {token!r}")
    right = stack.pop()
    left = stack.pop()
    return left, right


def _divide(left: float, right: float) -> float:
    try:
        return left / right
    except ZeroDivisionError:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)


def _evaluate(postfix: Sequence[str], number, operations) -> float | int:
    stack: list = []
    for token in postfix:
        if _is_number(token):
            stack.append(number(_parse_int(token)))
            continue
        left, right = _pop_operands(stack, token)
        operation = operations.get(token)
        if operation is None:
            raise ExpressionError(f"unknown operator: {token!r}")
        stack.append(operation(left, right))
    if not stack:
        raise ExpressionError("empty expression")
    return stack[-1]


def _truncating_divide(left: int, right: int) -> int:
    if right == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_FLOAT_OPERATIONS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _divide,
}

_INT_OPERATIONS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _truncating_divide,
}


def eval_postfix(postfix: Sequence[str]) -> float:
    """Evaluate postfix tokens in floating point.

    Division by zero yields an infinity or NaN, as IEEE arithmetic does.
    """
    return _evaluate(postfix, float, _FLOAT_OPERATIONS)


def eval_postfix_int(postfix: Sequence[str]) -> int:
    """Evaluate postfix tokens in integers, truncating division toward zero."""
    return _evaluate(postfix, int, _INT_OPERATIONS)


def evaluate(expr: str) -> float:
    """Tokenize, convert and evaluate an infix expression of digits."""
    return eval_postfix(infix_to_postfix(tokenize(expr)))