"""Verification-surface planning from parameter conformance.

A generated expectation can match a parameter with an explicit matcher
(wildcard or custom), an exact value, or a closed range. Which of those
are offered depends on what the parameter type supports.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from typeconform.conformance import Conformance


class MatcherForm(StrEnum):
    EXPLICIT_MATCHER = "explicit_matcher"
    RANGE = "range"
    EXACT = "exact"


class ParameterKind(StrEnum):
    COMPARABLE = "comparable"
    ONLY_EQUATABLE = "only_equatable"
    NOT_COMPARABLE = "not_comparable"


_FORMS_BY_CONFORMANCE: dict[Conformance, tuple[MatcherForm, ...]] = {
    Conformance.COMPARABLE_AND_EQUATABLE: (MatcherForm.EXPLICIT_MATCHER, MatcherForm.RANGE, MatcherForm.EXACT),
    Conformance.ONLY_EQUATABLE: (MatcherForm.EXPLICIT_MATCHER, MatcherForm.EXACT),
    Conformance.NEITHER: (MatcherForm.EXPLICIT_MATCHER,),
}

_KIND_BY_CONFORMANCE: dict[Conformance, ParameterKind] = {
    Conformance.COMPARABLE_AND_EQUATABLE: ParameterKind.COMPARABLE,
    Conformance.ONLY_EQUATABLE: ParameterKind.ONLY_EQUATABLE,
    Conformance.NEITHER: ParameterKind.NOT_COMPARABLE,
}


@dataclass(frozen=True, slots=True)
class ParameterForm:
    """One parameter's slot in a generated expectation signature."""

    name: str
    kind: ParameterKind
    form: MatcherForm


def matcher_forms(conformance: Conformance) -> tuple[MatcherForm, ...]:
    return _FORMS_BY_CONFORMANCE[conformance]


def parameter_kind(conformance: Conformance) -> ParameterKind:
    return _KIND_BY_CONFORMANCE[conformance]


def parameter_form_sequences(
    parameters: Sequence[tuple[str, Conformance]],
) -> list[tuple[ParameterForm, ...]]:
    """Every combination of matcher forms across a parameter list.

    The first parameter varies fastest. No parameters yields no sequences.
    """
    if not parameters:
        return []

    (name, conformance), rest = parameters[0], parameters[1:]
    kind = parameter_kind(conformance)
    heads = [ParameterForm(name=name, kind=kind, form=form) for form in matcher_forms(conformance)]
    if not rest:
        return [(head,) for head in heads]

    return [(head, *tail) for tail in parameter_form_sequences(rest) for head in heads]
