"""Pipeline result carriers."""

from __future__ import annotations

from dataclasses import dataclass

from typeconform.conformance import Conformance
from typeconform.diagnostics import Diagnostic, has_errors
from typeconform.matchers import ParameterForm
from typeconform.pipeline.model import DeclarationSpec, MemberSpec, TypeAnnotation
from typeconform.resolver import ResolveResult


@dataclass(frozen=True, slots=True)
class AnnotationClassification:
    """Resolution of one annotation; `label` is the parameter name or `return`."""

    label: str
    annotation: TypeAnnotation
    result: ResolveResult

    @property
    def conformance(self) -> Conformance | None:
        return self.result.conformance


@dataclass(frozen=True, slots=True)
class MemberClassification:
    member: MemberSpec
    parameters: tuple[AnnotationClassification, ...]
    return_type: AnnotationClassification | None
    form_sequences: tuple[tuple[ParameterForm, ...], ...] = ()

    @property
    def annotations(self) -> tuple[AnnotationClassification, ...]:
        if self.return_type is None:
            return self.parameters
        return (*self.parameters, self.return_type)

    @property
    def blocked(self) -> bool:
        return any(not item.result.is_ok for item in self.annotations)


@dataclass(frozen=True, slots=True)
class DeclarationClassification:
    declaration: DeclarationSpec
    members: tuple[MemberClassification, ...]
    diagnostics: list[Diagnostic]

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    @property
    def blocked_members(self) -> tuple[str, ...]:
        return tuple(member.member.name for member in self.members if member.blocked)

    def member(self, name: str) -> MemberClassification:
        for member in self.members:
            if member.member.name == name:
                return member
        raise KeyError(name)
