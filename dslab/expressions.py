"""Infix to postfix/prefix conversion and evaluation of postfix/prefix expressions."""

from __future__ import annotations

import re
from typing import Callable, Iterable, Optional

_NUMBER_OR_OPERATOR = re.compile(r"(?P<num>[0-9]+)|(?P<op>\S)")
_PAREN_SWAP = str.maketrans("()", ")(")


def precedence(operator: str) -> int:
    """Binding strength of an operator; 0 for anything that is not one."""
    if operator == "^":
        return 3
    if operator in ("*", "/"):
        return 2
    if operator in ("+", "-"):
        return 1
    return 0


def _is_operand(char: str) -> bool:
    return char.isascii() and char.isalnum()


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Whitespace is ignored. Operators of equal precedence associate to the left.
    """
    output: list[str] = []
    stack: list[str] = []
    for char in expression:
        if char.isspace():
            continue
        if _is_operand(char):
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if stack:
                stack.pop()
        else:
            while stack and precedence(stack[-1]) >= precedence(char):
                output.append(stack.pop())
            stack.append(char)
    output.extend(reversed(stack))
    return "".join(output)


def infix_to_prefix(expression: str) -> str:
    """Convert an infix expression to prefix by the reverse-and-swap method."""
    mirrored = expression[::-1].translate(_PAREN_SWAP)
    return infix_to_postfix(mirrored)[::-1]


def _truncating_div(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _truncating_div,
}


def _lex(expression: str) -> list[tuple[Optional[int], str]]:
    return [
        (int(match["num"]), match["num"]) if match["num"] else (None, match["op"])
        for match in _NUMBER_OR_OPERATOR.finditer(expression)
    ]


def _evaluate(items: Iterable[tuple[Optional[int], str]], left_first: bool) -> int:
    stack: list[int] = []

    def pop() -> int:
        return stack.pop() if stack else 0

    for number, text in items:
        if number is not None:
            stack.append(number)
            continue
        first, second = pop(), pop()
        a, b = (first, second) if left_first else (second, first)
        operation = _OPERATIONS.get(text)
        if operation is not None:
            stack.append(operation(a, b))
    return pop()


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of non-negative integers.

    Numbers are separated by whitespace; division truncates toward zero.
    A missing operand counts as 0 and unknown operators drop their operands.
    """
    return _evaluate(_lex(expression), left_first=False)


def evaluate_prefix(expression: str) -> int:
    """Evaluate a prefix expression of non-negative integers.

    Numbers are separated by whitespace; division truncates toward zero.
    A missing operand counts as 0 and unknown operators drop their operands.
    """
    return _evaluate(reversed(_lex(expression)), left_first=True)