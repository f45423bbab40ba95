"""Pure helpers for recognising, validating and tokenizing assignment equations."""

from __future__ import annotations

import re

from . import constants

_IDENTIFIER_RE = re.compile(constants.IDENTIFIER_PATTERN)
_OPERATOR_RE = re.compile(constants.OPERATOR_PATTERN)
_TOKEN_SPLIT_RE = re.compile(constants.TOKEN_SPLIT_PATTERN)
_ASSIGN_TARGET_RE = re.compile(constants.ASSIGN_TARGET_PATTERN)


def strip_terminator(equation: str) -> str:
    """Trim whitespace and a single trailing semicolon."""
    equation = equation.strip()
    if equation.endswith(";"):
        equation = equation[:-1].strip()
    return equation


def bare_equals_positions(line: str) -> list[int]:
    """Offsets of assignment ``=`` signs outside string literals.

    An ``=`` that belongs to ``==``, ``!=``, ``<=``, ``>=`` or a compound
    operator such as ``+=`` is not bare.
    """
    positions: list[int] = []
    quote = ""
    escaped = False
    for i, char in enumerate(line):
        if quote:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == quote:
                quote = ""
            continue
        if char in constants.QUOTE_CHARS:
            quote = char
        elif char == "=":
            before = line[i - 1] if i > 0 else ""
            after = line[i + 1] if i + 1 < len(line) else ""
            if before not in constants.EQUALS_PREFIX_CHARS and after != "=":
                positions.append(i)
    return positions


def is_equation(line: str) -> bool:
    """True when *line* has the shape ``<word> = <rhs>``.

    Everything else (calls, comparisons, compound assignments) is an opaque
    statement.  An empty or malformed word before the ``=`` still counts, so
    ``1x = 5`` is routed to validation and rejected there.
    """
    positions = bare_equals_positions(line)
    if not positions:
        return False
    target = line[: positions[0]].strip()
    return target == "" or _ASSIGN_TARGET_RE.match(target) is not None


def is_valid_identifier(text: str) -> bool:
    return _IDENTIFIER_RE.match(text) is not None


def has_balanced_parentheses(text: str) -> bool:
    depth = 0
    for char in text:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


def split_equation(equation: str) -> tuple[str, str]:
    """Split a validated ``lhs = rhs`` into its trimmed sides."""
    left, right = strip_terminator(equation).split("=")
    return left.strip(), right.strip()


def is_valid_equation(equation: str) -> bool:
    """Return True for ``identifier = expression`` with a balanced right side.

    Exactly one ``=`` is allowed, so comparisons such as ``a == b`` are
    rejected along with empty right-hand sides.
    """
    equation = strip_terminator(equation)
    parts = [part.strip() for part in equation.split("=")]
    if len(parts) != 2:
        return False
    left, right = parts
    return (
        is_valid_identifier(left)
        and bool(right)
        and has_balanced_parentheses(right)
    )


def contains_operators(expression: str) -> bool:
    return _OPERATOR_RE.search(expression) is not None


def tokenize_expression(expression: str) -> list[str]:
    """Split on whitespace after padding every operator and parenthesis."""
    return _TOKEN_SPLIT_RE.sub(r" \1 ", expression).split()
