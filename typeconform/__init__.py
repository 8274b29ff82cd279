"""Comparison-capability classification of type expressions."""

from typeconform.classify import (
    AssociatedTypeDecl,
    ClassificationTable,
    NameClassifier,
    build_classification_table,
    build_classifier,
)
from typeconform.conformance import Conformance
from typeconform.resolver import MalformedTypeExpression, ResolveResult, TypeExpressionError, resolve, resolve_many

__version__ = "0.1.0"

__all__ = [
    "AssociatedTypeDecl",
    "ClassificationTable",
    "Conformance",
    "MalformedTypeExpression",
    "NameClassifier",
    "ResolveResult",
    "TypeExpressionError",
    "build_classification_table",
    "build_classifier",
    "resolve",
    "resolve_many",
]
