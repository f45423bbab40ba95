"""Per-translation symbol table and temporary/label minting."""

from __future__ import annotations

from dataclasses import dataclass

from . import constants


@dataclass
class SymbolEntry:
    name: str
    type_tag: str
    place: str


class SymbolRegistry:
    """Maps names to entries and hands out fresh temporaries and labels.

    Counters belong to the instance, so every translation starts at ``t0``.
    """

    def __init__(self):
        self._table: dict[str, SymbolEntry] = {}
        self._temp_counter: int = 0
        self._label_counter: int = 0

    def declare(self, name: str, type_tag: str) -> SymbolEntry:
        entry = SymbolEntry(name=name, type_tag=type_tag, place=name)
        self._table[name] = entry
        return entry

    def lookup(self, name: str) -> SymbolEntry | None:
        return self._table.get(name)

    def fresh_temporary(self) -> str:
        temp = f"{constants.TEMP_PREFIX}{self._temp_counter}"
        self._temp_counter += 1
        return temp

    def fresh_label(self) -> str:
        label = f"{constants.LABEL_PREFIX}{self._label_counter}"
        self._label_counter += 1
        return label

    def __contains__(self, name: str) -> bool:
        return name in self._table

    def __len__(self) -> int:
        return len(self._table)
