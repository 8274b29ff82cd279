"""Resolution result carriers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import cast

from typeconform.conformance import Conformance
from typeconform.diagnostics import TYPE_EXPRESSION_MALFORMED, Diagnostic
from typeconform.text import TextRange, slice_text_range


class MalformedReason(StrEnum):
    EMPTY_EXPRESSION = "type expression is empty"
    UNEXPECTED_CHARACTER = "unexpected character"
    SEPARATOR_WITHOUT_TYPE = "separator has no preceding type"
    SEPARATOR_NOT_ALLOWED = "separator is not allowed here"
    EXTRA_SEPARATOR = "dictionary has more than one separator"
    EMPTY_CONTAINER = "container has no element type"
    UNBALANCED_CLOSER = "closing delimiter has no open container"
    MISMATCHED_CLOSER = "closing delimiter does not match its container"
    MISSING_SEPARATOR = "expected a separator between types"
    MISSING_DICTIONARY_VALUE = "dictionary is missing its value type"
    UNCLOSED_CONTAINER = "container is never closed"
    TRAILING_TEXT = "unexpected type text after container"
    OPTIONAL_WITHOUT_TYPE = "optional marker has no type to wrap"
    UNBALANCED_GENERIC = "generic argument list is never closed"


@dataclass(frozen=True, slots=True)
class MalformedTypeExpression:
    """Reportable failure to resolve a type expression.

    `range` is relative to `expression`; callers shift it into the
    coordinates of the declaration the expression came from.
    """

    expression: str
    reason: MalformedReason
    range: TextRange

    @property
    def fragment(self) -> str:
        return slice_text_range(self.expression, self.range)

    def to_diagnostic(self) -> Diagnostic:
        spec = TYPE_EXPRESSION_MALFORMED
        return Diagnostic(
            code=spec.code,
            message=f"{spec.message} In `{self.expression}`: {self.reason.value}.",
            range=self.range,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )

    def __str__(self) -> str:
        start, end = self.range.as_tuple()
        return f"Unable to parse type `{self.expression}`: {self.reason.value} at {start}..{end}"


class TypeExpressionError(ValueError):
    """Raised by `ResolveResult.unwrap` for a malformed type expression."""

    def __init__(self, error: MalformedTypeExpression) -> None:
        super().__init__(str(error))
        self.error = error


@dataclass(frozen=True, slots=True)
class ResolveResult:
    """Outcome of resolving a single type expression."""

    expression: str
    conformance: Conformance | None = None
    error: MalformedTypeExpression | None = None

    def __post_init__(self):
        if (self.conformance is None) == (self.error is None):
            raise ValueError("ResolveResult needs exactly one of conformance or error")

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @property
    def diagnostics(self) -> list[Diagnostic]:
        if self.error is None:
            return []
        return [self.error.to_diagnostic()]

    def unwrap(self) -> Conformance:
        if self.conformance is None:
            raise TypeExpressionError(cast(MalformedTypeExpression, self.error))
        return self.conformance
