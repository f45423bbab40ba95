"""Composable API functions for switch translation.

Each function corresponds to a CLI workflow (code listing, trace, stats) but
is callable programmatically without argparse.  Every call builds its own
registry, emitter and translator, so calls never share counters.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from .document import SwitchDocument
from .emitter import InstructionEmitter
from .ir_stats import count_opcodes
from .run_types import TranslationConfig, TranslationResult
from .switch import CaseEntry, SwitchTranslator, check_default_policy
from .symbols import SymbolRegistry

logger = logging.getLogger(__name__)

CaseLike = CaseEntry | tuple[Any, Iterable[str]]


def translate_switch_case(
    expression: str,
    cases: Iterable[CaseLike],
    config: TranslationConfig | None = None,
) -> TranslationResult:
    """Translate a switch construct into numbered three-address code.

    Args:
        expression: The switch expression, used verbatim in comparisons.
        cases: Ordered ``(value, statements)`` pairs or ``CaseEntry`` objects;
            ``DEFAULT`` (or ``None``) as the value marks the default case.
        config: Translation options; defaults to ``TranslationConfig()``.

    Returns:
        A TranslationResult with code lines, trace logs and the quads.

    Raises:
        ValueError: If *expression* is empty.
        DuplicateDefaultCaseError: If several defaults are supplied under
            ``DuplicateDefaultPolicy.REJECT``.
    """
    config = config or TranslationConfig()
    if not expression or not str(expression).strip():
        raise ValueError("Switch expression must be a non-empty string")
    entries = [CaseEntry.coerce(case) for case in cases]
    check_default_policy(entries, config.duplicate_default)

    logger.info("Translating switch on %s (%d cases)", expression, len(entries))
    symbols = SymbolRegistry()
    emitter = InstructionEmitter()
    translator = SwitchTranslator(emitter, symbols, config)
    next_list = translator.translate(str(expression), entries)

    return TranslationResult(
        code=emitter.lines(),
        logs=emitter.logs,
        quads=emitter.quads,
        next_list=next_list,
    )


def translate_document(
    document: SwitchDocument,
    config: TranslationConfig | None = None,
) -> TranslationResult:
    """Translate a validated input document."""
    return translate_switch_case(document.expression, document.to_cases(), config)


def dump_code(
    expression: str,
    cases: Iterable[CaseLike],
    config: TranslationConfig | None = None,
) -> str:
    """Translate and return a human-readable listing, one quad per line."""
    result = translate_switch_case(expression, cases, config)
    return "\n".join(result.code)


def quad_stats(
    expression: str,
    cases: Iterable[CaseLike],
    config: TranslationConfig | None = None,
) -> dict[str, int]:
    """Translate and return opcode frequency counts."""
    result = translate_switch_case(expression, cases, config)
    return count_opcodes(result.quads)
