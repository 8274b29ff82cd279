"""Leaf type classification tables and associated-type inference."""

from typeconform.classify.associated import (
    AssociatedTypeDecl,
    associated_type_name_sets,
    infer_associated_conformance,
    infer_clause_conformance,
)
from typeconform.classify.builtins import BUILTIN_COMPARABLE_TYPES, BUILTIN_EQUATABLE_ONLY_TYPES
from typeconform.classify.table import (
    ClassificationTable,
    NameClassifier,
    build_classification_table,
    build_classifier,
)

__all__ = [
    "BUILTIN_COMPARABLE_TYPES",
    "BUILTIN_EQUATABLE_ONLY_TYPES",
    "AssociatedTypeDecl",
    "ClassificationTable",
    "NameClassifier",
    "associated_type_name_sets",
    "build_classification_table",
    "build_classifier",
    "infer_associated_conformance",
    "infer_clause_conformance",
]
