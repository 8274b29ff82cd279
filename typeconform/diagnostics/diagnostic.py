"""Diagnostics core types."""

from dataclasses import dataclass, replace
from typing import Literal

from typeconform.text import TextRange, TextSize

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the resolver and the declaration pipeline."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    def shifted(self, delta: TextSize) -> "Diagnostic":
        return replace(self, range=self.range.shift(delta))
