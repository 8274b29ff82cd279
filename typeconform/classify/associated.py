"""Conformance inferred from associated-type constraint clauses."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from typeconform.conformance import Conformance, strongest


@dataclass(frozen=True, slots=True)
class AssociatedTypeDecl:
    """An associated type and its inherited constraint clauses, as written."""

    name: str
    inherited: tuple[str, ...] = ()


def infer_clause_conformance(clause: str) -> Conformance:
    """Classify one inheritance clause, which may be a composition like `A & B`."""
    components = {component.strip() for component in clause.split("&")}
    if "Comparable" in components:
        return Conformance.COMPARABLE_AND_EQUATABLE
    if "Equatable" in components:
        return Conformance.ONLY_EQUATABLE
    return Conformance.NEITHER


def infer_associated_conformance(decl: AssociatedTypeDecl) -> Conformance:
    return strongest(*(infer_clause_conformance(clause) for clause in decl.inherited))


def associated_type_name_sets(
    decls: Iterable[AssociatedTypeDecl],
) -> tuple[frozenset[str], frozenset[str]]:
    """Split associated types into (comparable names, equatable-only names).

    Associated types with neither capability appear in neither set.
    """
    comparable: set[str] = set()
    equatable: set[str] = set()
    for decl in decls:
        conformance = infer_associated_conformance(decl)
        if conformance == Conformance.COMPARABLE_AND_EQUATABLE:
            comparable.add(decl.name.strip())
        elif conformance == Conformance.ONLY_EQUATABLE:
            equatable.add(decl.name.strip())
    return frozenset(comparable), frozenset(equatable)
