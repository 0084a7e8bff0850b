"""Diagnostic model: structured findings reported while reading a stylesheet."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about a stylesheet.

    Warnings mark declarations that were dropped or had to be repaired;
    notes are informational.

    Attributes:
        rule: Identifier for the check that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        selector: The selector list of the rule involved, if applicable.
        line: 1-based source line, if known.
    """

    rule: str
    severity: Severity
    message: str
    selector: str | None = None
    line: int | None = None

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.selector:
            location = f" [selector={self.selector}]"
        if self.line is not None:
            location += f" [line={self.line}]"
        return f"{self.severity.value}{location}: {self.message}"
