"""Instruction emission: the quad sequence, backpatching and list merging."""

from __future__ import annotations

import logging

from .ir import Opcode, Quad

logger = logging.getLogger(__name__)


class InstructionEmitter:
    """Append-only quad sequence plus the per-translation trace log.

    Quad indices are dense and zero-based: ``current_address`` is always the
    index the next emitted quad will receive.  Jumps are emitted unresolved
    and later completed with :meth:`backpatch`.
    """

    def __init__(self):
        self._quads: list[Quad] = []
        self._logs: list[str] = []

    # ── trace ────────────────────────────────────────────────────

    def log(self, message: str) -> None:
        self._logs.append(message)
        logger.debug(message)

    @property
    def logs(self) -> list[str]:
        return list(self._logs)

    # ── emission ─────────────────────────────────────────────────

    @property
    def current_address(self) -> int:
        return len(self._quads)

    def emit(
        self,
        opcode: Opcode,
        *,
        result: str = "",
        operator: str = "",
        operands: list[str] = [],
        target: int | None = None,
        text: str = "",
    ) -> int:
        quad = Quad(
            index=self.current_address,
            opcode=opcode,
            result=result or None,
            operator=operator or None,
            operands=list(operands),
            target=target,
            text=text,
        )
        self._quads.append(quad)
        logger.debug("emit %s", quad)
        return quad.index

    def emit_jump(self) -> int:
        """Emit ``goto __`` and return its index."""
        return self.emit(Opcode.GOTO)

    # ── backpatching ─────────────────────────────────────────────

    def backpatch(self, quad_list: list[int] | None, target: int) -> None:
        for index in quad_list or []:
            if not 0 <= index < len(self._quads):
                continue
            quad = self._quads[index]
            if quad.is_unresolved():
                quad.target = target
                logger.debug("backpatch %d -> %d", index, target)

    @staticmethod
    def merge(first: list[int] | None, second: list[int] | None) -> list[int]:
        return [*(first or []), *(second or [])]

    @staticmethod
    def make_list(index: int) -> list[int]:
        return [index]

    # ── inspection ───────────────────────────────────────────────

    @property
    def quads(self) -> list[Quad]:
        return list(self._quads)

    def lines(self) -> list[str]:
        return [str(quad) for quad in self._quads]

    def unresolved(self) -> list[int]:
        return [quad.index for quad in self._quads if quad.is_unresolved()]
