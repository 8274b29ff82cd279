"""Diagnostics."""

from typeconform.diagnostics.codes import (
    MEMBER_SURFACE_BLOCKED,
    TYPE_EXPRESSION_MALFORMED,
    DiagnosticSpec,
)
from typeconform.diagnostics.diagnostic import Diagnostic, Severity
from typeconform.diagnostics.report import collect_diagnostics, has_errors, sort_diagnostics

__all__ = [
    "MEMBER_SURFACE_BLOCKED",
    "TYPE_EXPRESSION_MALFORMED",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "has_errors",
    "sort_diagnostics",
]
