"""Expression lowering: statement lines and ``lhs = rhs`` equations to quads."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .emitter import InstructionEmitter
from .equations import (
    contains_operators,
    is_equation,
    is_valid_equation,
    split_equation,
    strip_terminator,
    tokenize_expression,
)
from .ir import Opcode
from .symbols import SymbolRegistry
from . import constants

logger = logging.getLogger(__name__)


class ExpressionSyntaxError(ValueError):
    """Raised when a right-hand side cannot be parsed in grouping mode."""


# ── grouping-mode expression tree ────────────────────────────────


@dataclass(frozen=True)
class Operand:
    name: str


@dataclass(frozen=True)
class UnaryOp:
    operator: str
    operand: "Operand | UnaryOp | BinaryOp"


@dataclass(frozen=True)
class BinaryOp:
    operator: str
    left: "Operand | UnaryOp | BinaryOp"
    right: "Operand | UnaryOp | BinaryOp"


ExprNode = Operand | UnaryOp | BinaryOp


class GroupingParser:
    """Recursive-descent parser honouring parentheses and precedence.

    expr   := term (("+" | "-") term)*
    term   := factor (("*" | "/" | "%") factor)*
    factor := "(" expr ")" | ("+" | "-") factor | operand
    """

    def __init__(self, tokens: list[str]):
        self._tokens = tokens
        self._pos = 0

    def parse(self) -> ExprNode:
        node = self._expr()
        if self._pos != len(self._tokens):
            raise ExpressionSyntaxError(
                f"unexpected token '{self._tokens[self._pos]}' at position {self._pos}"
            )
        return node

    def _peek(self) -> str | None:
        return self._tokens[self._pos] if self._pos < len(self._tokens) else None

    def _advance(self) -> str:
        token = self._peek()
        if token is None:
            raise ExpressionSyntaxError("unexpected end of expression")
        self._pos += 1
        return token

    def _expr(self) -> ExprNode:
        node = self._term()
        while self._peek() in constants.ADDITIVE_OPERATORS:
            operator = self._advance()
            node = BinaryOp(operator, node, self._term())
        return node

    def _term(self) -> ExprNode:
        node = self._factor()
        while self._peek() in constants.MULTIPLICATIVE_OPERATORS:
            operator = self._advance()
            node = BinaryOp(operator, node, self._factor())
        return node

    def _factor(self) -> ExprNode:
        token = self._advance()
        if token == "(":
            node = self._expr()
            if self._advance() != ")":
                raise ExpressionSyntaxError("expected ')'")
            return node
        if token in constants.ADDITIVE_OPERATORS:
            return UnaryOp(token, self._factor())
        if token == ")" or token in constants.ARITHMETIC_OPERATORS:
            raise ExpressionSyntaxError(f"unexpected token '{token}'")
        return Operand(token)


# ── lowerer ──────────────────────────────────────────────────────


class ExpressionLowerer:
    """Lowers statement lines into quads through an :class:`InstructionEmitter`.

    By default the right-hand side is reduced flatly: every ``* / %`` first,
    then every ``+ -``, each class left-to-right, with parenthesis tokens
    carried along but never grouping.  ``group_parentheses=True`` switches to
    :class:`GroupingParser`, which yields identical quads for
    parenthesis-free input.
    """

    def __init__(
        self,
        emitter: InstructionEmitter,
        symbols: SymbolRegistry,
        group_parentheses: bool = False,
    ):
        self._emitter = emitter
        self._symbols = symbols
        self._group_parentheses = group_parentheses

    def lower_statements(self, lines: list[str]) -> list[int]:
        """Lower each line in order; return the indices of every emitted quad."""
        emitted: list[int] = []
        for line in lines:
            emitted.extend(self.lower_statement(line))
        return emitted

    def lower_statement(self, line: str) -> list[int]:
        line = str(line).strip()
        if not line:
            return []
        if is_equation(line):
            return self.lower_equation(line)
        index = self._emitter.emit(Opcode.OPAQUE, text=line)
        self._emitter.log(f"Generated statement at quad {index}: {line}")
        return [index]

    def lower_equation(self, equation: str) -> list[int]:
        equation = strip_terminator(equation)
        if not is_valid_equation(equation):
            self._emitter.log(f"Invalid equation format: {equation} - skipping")
            return []

        self._emitter.log(f"Processing equation: {equation}")
        left, right = split_equation(equation)
        start = self._emitter.current_address

        if not contains_operators(right):
            place = right
        elif self._group_parentheses:
            try:
                tree = GroupingParser(tokenize_expression(right)).parse()
            except ExpressionSyntaxError as exc:
                self._emitter.log(f"Invalid expression in {equation}: {exc} - skipping")
                return []
            place = self._emit_tree(tree)
        else:
            place = self._reduce_flat(tokenize_expression(right))

        index = self._emitter.emit(Opcode.COPY, result=left, operands=[place])
        self._emitter.log(f"Generated quad {index}: {left} = {place}")

        emitted = list(range(start, self._emitter.current_address))
        logger.debug("Lowered %r into quads %s", equation, emitted)
        return emitted

    # ── flat reduction ───────────────────────────────────────────

    def _reduce_flat(self, tokens: list[str]) -> str:
        tokens = self._reduce_class(tokens, constants.MULTIPLICATIVE_OPERATORS)
        tokens = self._reduce_class(tokens, constants.ADDITIVE_OPERATORS)
        return tokens[0]

    def _reduce_class(self, tokens: list[str], operators: frozenset[str]) -> list[str]:
        i = 1
        while i < len(tokens) - 1:
            if tokens[i] not in operators:
                i += 1
                continue
            temp = self._emit_binop(tokens[i], tokens[i - 1], tokens[i + 1])
            # temp now sits at i - 1, so the next candidate operator is at i
            tokens = [*tokens[: i - 1], temp, *tokens[i + 2 :]]
        return tokens

    # ── grouping mode ────────────────────────────────────────────

    def _emit_tree(self, node: ExprNode) -> str:
        if isinstance(node, Operand):
            return node.name
        if isinstance(node, UnaryOp):
            operand = self._emit_tree(node.operand)
            temp = self._symbols.fresh_temporary()
            index = self._emitter.emit(
                Opcode.UNOP, result=temp, operator=node.operator, operands=[operand]
            )
            self._emitter.log(
                f"Generated quad {index}: {temp} = {node.operator}{operand}"
            )
            return temp
        left = self._emit_tree(node.left)
        right = self._emit_tree(node.right)
        return self._emit_binop(node.operator, left, right)

    def _emit_binop(self, operator: str, left: str, right: str) -> str:
        temp = self._symbols.fresh_temporary()
        index = self._emitter.emit(
            Opcode.BINOP, result=temp, operator=operator, operands=[left, right]
        )
        self._emitter.log(f"Generated quad {index}: {temp} = {left} {operator} {right}")
        return temp
