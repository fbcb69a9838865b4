"""Bracket matching and conversions between infix, postfix and prefix notation.

Operands are single ASCII letters or digits. Every other character in an
expression is taken as a binary operator.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

_OPENING = frozenset("([{")
_MATCHING_OPENER = {")": "(", "]": "[", "}": "{"}
_OPERATORS = frozenset("+-*/")


def _is_operand(char: str) -> bool:
    return char.isascii() and char.isalnum()


def is_balanced(text: str) -> bool:
    """Return whether every bracket in ``text`` is closed in the right order.

    Every character that is not an opening bracket closes the most recent
    open one; a closing bracket must match the kind it closes.
    """
    stack: list[str] = []
    for char in text:
        if char in _OPENING:
            stack.append(char)
            continue
        if not stack:
            return False
        top = stack.pop()
        expected = _MATCHING_OPENER.get(char)
        if expected is not None and top != expected:
            return False
    return not stack


def is_operator(char: str) -> bool:
    """Return whether ``char`` is one of ``+ - * /``."""
    return char in _OPERATORS


def precedence(operator: str) -> int:
    """Return the binding strength of ``operator``: 2 for ``* /``, 1 for ``+ -``, else 0."""
    if operator in ("+", "-"):
        return 1
    if operator in ("*", "/"):
        return 2
    return 0


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression to postfix, with left-associative operators.

    Raises ``ValueError`` for a closing parenthesis with no opening one.
    """
    stack: list[str] = []
    output: list[str] = []
    for char in expression:
        if _is_operand(char):
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unmatched ')' in expression")
            stack.pop()
        else:
            while stack and precedence(char) <= precedence(stack[-1]):
                output.append(stack.pop())
            stack.append(char)
    output.extend(reversed(stack))
    return "".join(output)


def _fold(symbols: Iterable[str], join: Callable[[str, str, str], str]) -> str:
    """Reduce operand/operator symbols with a stack.

    ``join`` receives the operator, the most recently pushed operand and the
    one below it.
    """
    stack: list[str] = []
    for char in symbols:
        if _is_operand(char):
            stack.append(char)
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {char!r} lacks two operands")
        first = stack.pop()
        second = stack.pop()
        stack.append(join(char, first, second))
    if not stack:
        raise ValueError("expression has no operands")
    return stack[-1]


def postfix_to_infix(expression: str) -> str:
    """Convert a postfix expression to a fully parenthesised infix one."""
    return _fold(expression, lambda op, first, second: f"({second}{op}{first})")


def postfix_to_prefix(expression: str) -> str:
    """Convert a postfix expression to prefix."""
    return _fold(expression, lambda op, first, second: f"{op}{second}{first}")


def prefix_to_infix(expression: str) -> str:
    """Convert a prefix expression to a fully parenthesised infix one."""
    return _fold(reversed(expression), lambda op, first, second: f"({first}{op}{second})")


def prefix_to_postfix(expression: str) -> str:
    """Convert a prefix expression to postfix."""
    return _fold(reversed(expression), lambda op, first, second: f"{first}{second}{op}")