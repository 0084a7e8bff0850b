"""Stylesheet model: Declaration, Rule, and Stylesheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass

from textstyles.model.diagnostic import Diagnostic


@dataclass(frozen=True)
class Declaration:
    """A raw ``property: value`` pair; values are coerced later by the builder."""

    prop: str
    value: str
    line: int | None = None


@dataclass(frozen=True)
class Rule:
    """One block of declarations shared by one or more selector names."""

    selectors: tuple[str, ...]
    declarations: tuple[Declaration, ...]
    source: str = ""  # rule text as written, comments blanked

    def pairs(self) -> list[tuple[str, str]]:
        return [(d.prop, d.value) for d in self.declarations]


@dataclass(frozen=True)
class Stylesheet:
    """Rules in source order plus the findings about skipped or repaired declarations."""

    rules: tuple[Rule, ...]
    diagnostics: tuple[Diagnostic, ...] = ()
