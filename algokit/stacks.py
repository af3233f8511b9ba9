"""Stack-based expression tools: infix to postfix and redundant-bracket detection."""

from __future__ import annotations

_OPERATORS = frozenset("+-*/")


def precedence(symbol: str) -> int:
    """Binding strength of an operator; '(' is 0 and unknown symbols are -1."""
    if symbol == "(":
        return 0
    if symbol in ("+", "-"):
        return 1
    if symbol in ("*", "/"):
        return 2
    if symbol == "^":
        return 3
    return -1


def _is_operand(symbol: str) -> bool:
    return symbol.isascii() and symbol.isalnum()


def infix_to_postfix(expression: str) -> str:
    """Rewrite an infix expression of single-character operands in postfix form.

    Operators of equal precedence, including '^', associate to the left.
    """
    stack: list[str] = []
    result: list[str] = []
    for symbol in expression:
        if _is_operand(symbol):
            result.append(symbol)
        elif symbol == "(":
            stack.append(symbol)
        elif symbol == ")":
            while stack and stack[-1] != "(":
                result.append(stack.pop())
            if not stack:
                raise ValueError("unmatched ')' in expression")
            stack.pop()
        else:
            while stack and precedence(symbol) <= precedence(stack[-1]):
                result.append(stack.pop())
            stack.append(symbol)
    result.extend(reversed(stack))
    return "".join(result)


def has_redundant_parentheses(expression: str) -> bool:
    """Whether some pair of brackets encloses no operator of its own."""
    stack: list[str] = []
    redundant = False
    for symbol in expression:
        if symbol in _OPERATORS or symbol == "(":
            stack.append(symbol)
        elif symbol == ")":
            if stack and stack[-1] == "(":
                redundant = True
            while stack and stack[-1] in _OPERATORS:
                stack.pop()
            if not stack:
                raise ValueError("unmatched ')' in expression")
            stack.pop()
    return redundant