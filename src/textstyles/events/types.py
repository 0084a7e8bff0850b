"""Event types emitted when the active style table changes."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StylesChanged:
    generation: int
    selectors: tuple[str, ...]


@dataclass(frozen=True)
class StylesheetRejected:
    generation: int
    error: str
