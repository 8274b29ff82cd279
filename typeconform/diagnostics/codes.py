"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


TYPE_EXPRESSION_MALFORMED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TYPE_EXPRESSION_MALFORMED",
    message="Unable to parse type expression.",
    hint="Check that every `[`, `Array<`, `Set<` and `Dictionary<` is closed and that dictionaries have a key and a value type.",
    severity="error",
    category="resolver",
)

MEMBER_SURFACE_BLOCKED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="MEMBER_SURFACE_BLOCKED",
    message="Verification surface was not generated for member.",
    hint="Fix the malformed type annotation reported for this member.",
    severity="warning",
    category="pipeline",
)
