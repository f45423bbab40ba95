"""Quadruples: structured three-address instructions with backpatchable jumps."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from . import constants


class Opcode(str, Enum):
    # Control flow
    GOTO = "GOTO"
    IF_GOTO = "IF_GOTO"
    # Value producers
    COPY = "COPY"
    BINOP = "BINOP"
    UNOP = "UNOP"
    # Passthrough
    OPAQUE = "OPAQUE"
    # Non-executable
    MARKER = "MARKER"


JUMP_OPCODES: frozenset[Opcode] = frozenset({Opcode.GOTO, Opcode.IF_GOTO})


class Quad(BaseModel):
    """One numbered instruction.

    ``target`` is only meaningful for jumps; ``None`` means the jump is still
    waiting to be backpatched and renders as ``goto __``.
    """

    index: int
    opcode: Opcode
    result: str | None = None
    operator: str | None = None
    operands: list[str] = []
    target: int | None = None
    text: str = ""

    def is_jump(self) -> bool:
        return self.opcode in JUMP_OPCODES

    def is_unresolved(self) -> bool:
        return self.is_jump() and self.target is None

    def _jump_target(self) -> str:
        if self.target is None:
            return constants.UNRESOLVED_TARGET
        return str(self.target)

    def instruction_text(self) -> str:
        if self.opcode == Opcode.GOTO:
            return f"goto {self._jump_target()}"
        if self.opcode == Opcode.IF_GOTO:
            left, right = self.operands
            return f"if {left} == {right} goto {self._jump_target()}"
        if self.opcode == Opcode.COPY:
            return f"{self.result} = {self.operands[0]}"
        if self.opcode == Opcode.BINOP:
            left, right = self.operands
            return f"{self.result} = {left} {self.operator} {right}"
        if self.opcode == Opcode.UNOP:
            return f"{self.result} = {self.operator}{self.operands[0]}"
        return self.text

    def __str__(self) -> str:
        return f"{self.index}: {self.instruction_text()}"
