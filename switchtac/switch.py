"""Switch translation: case/default lowering with backpatched next-lists.

Follows the classical translation scheme::

    S        → switch E N { caselist }
    N        → ε                        N.next = makelist(nextquad); gen(goto __)
    caselist → caselist case V : S      enter(Q, V.place, V.quad); merge next
    caselist → caselist default : M S   caselist.d = M.quad; merge next

Case bodies are laid out first, then the comparison cascade that N jumps to.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable

from .emitter import InstructionEmitter
from .ir import Opcode
from .lowering import ExpressionLowerer
from .run_types import DuplicateDefaultPolicy, TranslationConfig
from .symbols import SymbolRegistry
from . import constants

logger = logging.getLogger(__name__)


class _DefaultCase:
    """Sentinel marking the default entry of a case list."""

    def __repr__(self) -> str:
        return "DEFAULT"


DEFAULT = _DefaultCase()


class DuplicateDefaultCaseError(ValueError):
    """Raised under ``DuplicateDefaultPolicy.REJECT`` for a second default."""


def is_default(value: Any) -> bool:
    return value is None or value is DEFAULT


def format_case_value(value: Any) -> str:
    """Render a case value as it appears in a comparison quad."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class CaseEntry:
    """One input case: a value (or ``DEFAULT``) and its statement lines."""

    value: Any
    statements: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_default(self) -> bool:
        return is_default(self.value)

    @classmethod
    def coerce(cls, case: "CaseEntry | tuple[Any, Iterable[str]]") -> "CaseEntry":
        if isinstance(case, CaseEntry):
            return case
        value, statements = case
        if isinstance(statements, str):
            statements = [statements]
        return cls(value=value, statements=tuple(statements))


def check_default_policy(
    cases: list[CaseEntry], policy: DuplicateDefaultPolicy
) -> None:
    defaults = sum(1 for case in cases if case.is_default)
    if policy == DuplicateDefaultPolicy.REJECT and defaults > 1:
        raise DuplicateDefaultCaseError(
            f"{defaults} default cases supplied; at most one is allowed"
        )


class SwitchTranslator:
    """Drives one switch translation over a shared emitter and registry."""

    def __init__(
        self,
        emitter: InstructionEmitter,
        symbols: SymbolRegistry,
        config: TranslationConfig = TranslationConfig(),
    ):
        self._emitter = emitter
        self._symbols = symbols
        self._lowerer = ExpressionLowerer(
            emitter, symbols, group_parentheses=config.group_parentheses
        )
        self.case_table: list[tuple[str, int]] = []
        self.default_label: int | None = None

    def translate(self, expression: str, cases: list[CaseEntry]) -> list[int]:
        emitter = self._emitter
        emitter.log("=== Translating Switch Statement ===")
        emitter.log(f"Switch expression: {expression}")

        if expression not in self._symbols:
            self._symbols.declare(expression, constants.UNKNOWN_TYPE)
        place = self._symbols.lookup(expression).place
        emitter.log(f"Expression place: {place}")

        n_quad = emitter.emit_jump()
        n_next = emitter.make_list(n_quad)
        emitter.log(f"Generated N.next quad at {n_quad}: goto {constants.UNRESOLVED_TARGET}")

        caselist_next: list[int] = []
        for case in cases:
            if case.is_default:
                caselist_next = self._translate_default(case, caselist_next)
            else:
                caselist_next = self._translate_case(case, caselist_next)

        cascade_start = emitter.current_address
        emitter.backpatch(n_next, cascade_start)
        emitter.log(f"Backpatched N.next ({n_quad}) with {cascade_start}")

        emitter.log("=== Generating Comparison Code ===")
        for value, label in self.case_table:
            index = emitter.emit(Opcode.IF_GOTO, operands=[place, value], target=label)
            emitter.log(f"Generated comparison at quad {index}: if {place} == {value} goto {label}")

        if self.default_label is not None:
            index = emitter.emit(Opcode.GOTO, target=self.default_label)
            emitter.log(f"Generated goto default at quad {index}: goto {self.default_label}")

        exit_address = emitter.current_address
        emitter.backpatch(caselist_next, exit_address)
        if caselist_next:
            emitter.log(f"Backpatched switch next {caselist_next} with {exit_address}")
        pending = emitter.unresolved()
        if pending:
            logger.warning("Jumps left unresolved after translation: %s", pending)

        emitter.emit(Opcode.MARKER, text=constants.END_OF_SWITCH_TEXT)
        emitter.log(f"Generated end label at {exit_address}")

        logger.info(
            "Translated switch on %s: %d cases, %d quads",
            expression,
            len(cases),
            emitter.current_address,
        )
        return caselist_next

    def _translate_case(self, case: CaseEntry, caselist_next: list[int]) -> list[int]:
        value = format_case_value(case.value)
        self._emitter.log(f"=== Translating Case: {value} ===")
        label = self._emitter.current_address
        self._emitter.log(f"V.place = {value}, V.quad = {label}")

        self._lower_body(case)
        caselist_next = self._close_body(caselist_next, "case")

        self.case_table.append((value, label))
        self._emitter.log(f"Added to case queue: ({value}, {label})")
        return caselist_next

    def _translate_default(self, case: CaseEntry, caselist_next: list[int]) -> list[int]:
        self._emitter.log("=== Translating Default Case ===")
        m_quad = self._emitter.current_address
        if self.default_label is not None:
            self._emitter.log(
                f"Default label {self.default_label} overridden by later default at {m_quad}"
            )
        self.default_label = m_quad
        self._emitter.log(f"M.quad = {m_quad}, default label: {m_quad}")

        self._lower_body(case)
        return self._close_body(caselist_next, "default")

    def _lower_body(self, case: CaseEntry) -> None:
        self._emitter.log(
            f"Generating code at quad {self._emitter.current_address}"
            f" ({len(case.statements)} lines)"
        )
        self._lowerer.lower_statements(list(case.statements))

    def _close_body(self, caselist_next: list[int], kind: str) -> list[int]:
        goto_quad = self._emitter.emit_jump()
        self._emitter.log(
            f"Generated goto at the end of {kind} at quad {goto_quad}:"
            f" goto {constants.UNRESOLVED_TARGET}"
        )
        return self._emitter.merge(caselist_next, self._emitter.make_list(goto_quad))
