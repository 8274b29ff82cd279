"""Declaration-level classification entrypoint."""

from __future__ import annotations

import logging

from typeconform.classify import NameClassifier, associated_type_name_sets, build_classifier
from typeconform.config import ClassifierOptions
from typeconform.diagnostics import MEMBER_SURFACE_BLOCKED, Diagnostic, collect_diagnostics, sort_diagnostics
from typeconform.matchers import parameter_form_sequences
from typeconform.pipeline.model import DeclarationSpec, MemberSpec, TypeAnnotation
from typeconform.pipeline.results import (
    AnnotationClassification,
    DeclarationClassification,
    MemberClassification,
)
from typeconform.resolver import resolve

logger = logging.getLogger(__name__)


def build_declaration_classifier(
    declaration: DeclarationSpec,
    options: ClassifierOptions | None = None,
) -> NameClassifier:
    """Classifier for one declaration: built-ins, its associated types, and `options`."""
    resolved_options = options or ClassifierOptions()
    associated_comparable, associated_equatable = associated_type_name_sets(declaration.associated_types)
    return build_classifier(
        associated_comparable=associated_comparable,
        associated_equatable=associated_equatable,
        additional_comparable=resolved_options.additional_comparable_types,
        additional_equatable=resolved_options.additional_equatable_types,
    )


def classify_declaration(
    declaration: DeclarationSpec,
    options: ClassifierOptions | None = None,
    *,
    classifier: NameClassifier | None = None,
) -> DeclarationClassification:
    """Resolve every member annotation of a declaration and plan its matcher forms."""
    if classifier is not None and options is not None:
        raise ValueError("Pass either classifier or options, not both")
    classify = classifier or build_declaration_classifier(declaration, options)

    members = tuple(_classify_member(member, classify) for member in declaration.members)
    diagnostics = collect_diagnostics(*(_member_diagnostics(member) for member in members))

    return DeclarationClassification(
        declaration=declaration,
        members=members,
        diagnostics=sort_diagnostics(diagnostics),
    )


def _classify_member(member: MemberSpec, classify: NameClassifier) -> MemberClassification:
    parameters = tuple(
        _classify_annotation(parameter.name, parameter.annotation, classify) for parameter in member.parameters
    )
    return_type = (
        _classify_annotation("return", member.return_type, classify) if member.return_type is not None else None
    )
    classification = MemberClassification(member=member, parameters=parameters, return_type=return_type)
    if classification.blocked:
        logger.debug("member `%s` has a malformed type annotation; no surface planned", member.name)
        return classification
    if member.kind != "function":
        return classification

    sequences = parameter_form_sequences(
        [(item.label, item.result.unwrap()) for item in parameters]
    )
    return MemberClassification(
        member=member,
        parameters=parameters,
        return_type=return_type,
        form_sequences=tuple(sequences),
    )


def _classify_annotation(
    label: str,
    annotation: TypeAnnotation,
    classify: NameClassifier,
) -> AnnotationClassification:
    return AnnotationClassification(label=label, annotation=annotation, result=resolve(annotation.text, classify))


def _member_diagnostics(classification: MemberClassification) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for item in classification.annotations:
        for diagnostic in item.result.diagnostics:
            diagnostics.append(diagnostic.shifted(item.annotation.range.start))
    if diagnostics:
        first = next(item for item in classification.annotations if not item.result.is_ok)
        spec = MEMBER_SURFACE_BLOCKED
        diagnostics.append(
            Diagnostic(
                code=spec.code,
                message=f"{spec.message} Member `{classification.member.name}` has a malformed type annotation.",
                range=first.annotation.range,
                severity=spec.severity,
                hint=spec.hint,
                category=spec.category,
            )
        )
    return diagnostics
