"""Translation configuration and result types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .ir import Quad
from .ir_stats import count_temporaries


class DuplicateDefaultPolicy(Enum):
    """What to do when more than one default case is supplied."""

    LAST_WINS = "last_wins"
    REJECT = "reject"


@dataclass(frozen=True)
class TranslationConfig:
    """Groups translation options."""

    group_parentheses: bool = False
    duplicate_default: DuplicateDefaultPolicy = DuplicateDefaultPolicy.LAST_WINS


@dataclass
class TranslationResult:
    """Everything one translation call produces.

    ``next_list`` is the switch statement's own forward-reference list; at top
    level it has already been backpatched to the end marker.
    """

    code: list[str] = field(default_factory=list)
    logs: list[str] = field(default_factory=list)
    quads: list[Quad] = field(default_factory=list)
    next_list: list[int] = field(default_factory=list)

    def report(self, include_logs: bool = False) -> str:
        lines = ["═══ Three-Address Code ═══"]
        lines.extend(f"  {line}" for line in self.code)
        lines.append(
            f"  ({len(self.quads)} quads, {count_temporaries(self.quads)} temporaries)"
        )
        if include_logs:
            lines.append("")
            lines.append("═══ Trace ═══")
            lines.extend(f"  {line}" for line in self.logs)
        return "\n".join(lines)
