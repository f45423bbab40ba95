"""Input document schema for case lists delivered by a form or a JSON file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, field_validator, model_validator

from .switch import DEFAULT, CaseEntry


class CaseInput(BaseModel):
    value: int | float | str | None = None
    default: bool = False
    statements: list[str] = []

    @field_validator("value", mode="before")
    @classmethod
    def _reject_bool(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("case value must be a string or a number, not a boolean")
        return value

    @model_validator(mode="after")
    def _value_xor_default(self) -> "CaseInput":
        if self.default and self.value is not None:
            raise ValueError("a default case must not carry a value")
        if not self.default and self.value is None:
            raise ValueError("a case needs a value or 'default': true")
        return self

    def to_case_entry(self) -> CaseEntry:
        value = DEFAULT if self.default else self.value
        return CaseEntry(value=value, statements=tuple(self.statements))


class SwitchDocument(BaseModel):
    expression: str
    cases: list[CaseInput] = []

    @field_validator("expression")
    @classmethod
    def _non_empty(cls, expression: str) -> str:
        if not expression.strip():
            raise ValueError("expression must be a non-empty string")
        return expression

    def to_cases(self) -> list[CaseEntry]:
        return [case.to_case_entry() for case in self.cases]


def parse_document(text: str) -> SwitchDocument:
    """Parse a JSON document; raises ``ValueError`` on malformed input."""
    data = json.loads(text)
    return SwitchDocument(**data)


def load_document(path: str | Path) -> SwitchDocument:
    return parse_document(Path(path).read_text(encoding="utf-8"))
