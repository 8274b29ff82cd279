"""Declaration-level classification pipeline."""

from typeconform.pipeline.entrypoints import build_declaration_classifier, classify_declaration
from typeconform.pipeline.model import (
    DeclarationSpec,
    MemberKind,
    MemberSpec,
    ParameterSpec,
    TypeAnnotation,
)
from typeconform.pipeline.results import (
    AnnotationClassification,
    DeclarationClassification,
    MemberClassification,
)

__all__ = [
    "AnnotationClassification",
    "DeclarationClassification",
    "DeclarationSpec",
    "MemberClassification",
    "MemberKind",
    "MemberSpec",
    "ParameterSpec",
    "TypeAnnotation",
    "build_declaration_classifier",
    "classify_declaration",
]
