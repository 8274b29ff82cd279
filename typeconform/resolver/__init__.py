"""Type-expression scanner and resolver."""

from typeconform.resolver.frames import (
    CONTAINER_OPENERS,
    ContainerKind,
    ContainerOpener,
    Frame,
    OpenFrame,
    ResolvedFrame,
)
from typeconform.resolver.result import (
    MalformedReason,
    MalformedTypeExpression,
    ResolveResult,
    TypeExpressionError,
)
from typeconform.resolver.scanner import TypeExpressionScanner, resolve, resolve_many

__all__ = [
    "CONTAINER_OPENERS",
    "ContainerKind",
    "ContainerOpener",
    "Frame",
    "MalformedReason",
    "MalformedTypeExpression",
    "OpenFrame",
    "ResolveResult",
    "ResolvedFrame",
    "TypeExpressionError",
    "TypeExpressionScanner",
    "resolve",
    "resolve_many",
]
