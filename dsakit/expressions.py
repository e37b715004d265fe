"""Postfix evaluation and infix-to-postfix conversion."""

from __future__ import annotations

import operator
from collections.abc import Callable


class ExpressionError(ValueError):
    """The expression is malformed or cannot be evaluated."""


def _truncating_div(left: int, right: int) -> int:
    if right == 0:
        raise ExpressionError("division by zero")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_ARITHMETIC: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}

_DIGIT_OPERATORS: dict[str, Callable[[int, int], int]] = {
    **_ARITHMETIC,
    "^": operator.xor,
}

_PRIORITY = {"(": 0, "+": 1, "-": 1, "*": 2, "/": 2}


def _apply(stack: list[int], op: Callable[[int, int], int], symbol: str) -> None:
    if len(stack) < 2:
        raise ExpressionError(f"not enough operands for {symbol!r}")
    right = stack.pop()
    left = stack.pop()
    stack.append(op(left, right))


def evaluate_digit_postfix(expression: str) -> int:
    """Evaluate postfix with single-digit operands.

    Operators are + - * / and ^ (bitwise exclusive or); division truncates
    towards zero. Other characters are ignored.
    """
    stack: list[int] = []
    for ch in expression:
        if "0" <= ch <= "9":
            stack.append(int(ch))
        elif ch in _DIGIT_OPERATORS:
            _apply(stack, _DIGIT_OPERATORS[ch], ch)
    if not stack:
        raise ExpressionError("empty expression")
    return stack[-1]


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Operands are letters or digits; operators are + - * / with parentheses.
    The result has its tokens separated by single spaces.
    """
    output: list[str] = []
    stack: list[str] = []
    for ch in expression:
        if ch.isspace():
            continue
        if ch.isalnum():
            output.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ExpressionError("unmatched ')'")
            stack.pop()
        elif ch in _PRIORITY:
            while stack and _PRIORITY[stack[-1]] >= _PRIORITY[ch]:
                output.append(stack.pop())
            stack.append(ch)
        else:
            raise ExpressionError(f"unsupported character {ch!r}")
    while stack:
        symbol = stack.pop()
        if symbol == "(":
            raise ExpressionError("unmatched '('")
        output.append(symbol)
    return " ".join(output)


def evaluate_postfix(expression: str) -> int:
    """Evaluate postfix with integer operands separated by spaces or commas.

    Operands may be negative; division truncates towards zero.
    """
    stack: list[int] = []
    for token in expression.replace(",", " ").split():
        if token in _ARITHMETIC:
            _apply(stack, _ARITHMETIC[token], token)
            continue
        try:
            stack.append(int(token))
        except ValueError:
            raise ExpressionError(f"invalid operand {token!r}") from None
    if not stack:
        raise ExpressionError("empty expression")
    return stack[-1]