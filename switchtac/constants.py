"""Shared names: jump placeholder, end marker, name prefixes, operator sets."""

from __future__ import annotations

UNRESOLVED_TARGET = "__"

END_OF_SWITCH_TEXT = "# End of switch statement"

TEMP_PREFIX = "t"
LABEL_PREFIX = "L"

UNKNOWN_TYPE = "unknown"

MULTIPLICATIVE_OPERATORS: frozenset[str] = frozenset({"*", "/", "%"})
ADDITIVE_OPERATORS: frozenset[str] = frozenset({"+", "-"})
ARITHMETIC_OPERATORS: frozenset[str] = MULTIPLICATIVE_OPERATORS | ADDITIVE_OPERATORS

IDENTIFIER_PATTERN = r"^[a-zA-Z_][a-zA-Z0-9_]*$"
OPERATOR_PATTERN = r"[+\-*/%]"
TOKEN_SPLIT_PATTERN = r"([+\-*/%()])"
ASSIGN_TARGET_PATTERN = r"^[^\s()\[\]{}\"',;]+$"

QUOTE_CHARS = "\"'"
EQUALS_PREFIX_CHARS = "=!<>+-*/%&|^"
