"""Opcode and temporary counts over emitted quads."""

from __future__ import annotations

from collections import Counter

from .ir import Opcode, Quad


def count_opcodes(quads: list[Quad]) -> dict[str, int]:
    """Tally quads by opcode name, in first-seen order (``{}`` for no quads)."""
    return dict(Counter(quad.opcode.value for quad in quads))


def count_temporaries(quads: list[Quad]) -> int:
    """Number of quads that define a fresh temporary."""
    return sum(1 for quad in quads if quad.opcode in (Opcode.BINOP, Opcode.UNOP))
