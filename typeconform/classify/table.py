"""Name -> conformance lookup table for leaf (non-container) types."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TypeAlias

from typeconform.classify.builtins import BUILTIN_COMPARABLE_TYPES, BUILTIN_EQUATABLE_ONLY_TYPES
from typeconform.conformance import Conformance

logger = logging.getLogger(__name__)

NameClassifier: TypeAlias = Callable[[str], Conformance]


@dataclass(frozen=True, slots=True)
class ClassificationTable:
    """Immutable union of the built-in and caller-supplied name sets.

    Lookup is exact and case-sensitive. A name present in both sets is
    comparable-and-equatable.
    """

    comparable_types: frozenset[str]
    equatable_types: frozenset[str]

    def classify(self, name: str) -> Conformance:
        if name in self.comparable_types:
            return Conformance.COMPARABLE_AND_EQUATABLE
        if name in self.equatable_types:
            return Conformance.ONLY_EQUATABLE
        return Conformance.NEITHER

    def __contains__(self, name: object) -> bool:
        return name in self.comparable_types or name in self.equatable_types


def build_classification_table(
    *,
    associated_comparable: Iterable[str] = (),
    associated_equatable: Iterable[str] = (),
    additional_comparable: Iterable[str] = (),
    additional_equatable: Iterable[str] = (),
) -> ClassificationTable:
    """Build the lookup table for one classification session."""
    comparable = BUILTIN_COMPARABLE_TYPES | _normalize_names(associated_comparable) | _normalize_names(
        additional_comparable
    )
    equatable = BUILTIN_EQUATABLE_ONLY_TYPES | _normalize_names(associated_equatable) | _normalize_names(
        additional_equatable
    )
    logger.debug(
        "built classification table with %d comparable and %d equatable names",
        len(comparable),
        len(equatable),
    )
    return ClassificationTable(comparable_types=comparable, equatable_types=equatable)


def build_classifier(
    *,
    associated_comparable: Iterable[str] = (),
    associated_equatable: Iterable[str] = (),
    additional_comparable: Iterable[str] = (),
    additional_equatable: Iterable[str] = (),
) -> NameClassifier:
    """Build a pure leaf-name classifier backed by a fresh `ClassificationTable`."""
    table = build_classification_table(
        associated_comparable=associated_comparable,
        associated_equatable=associated_equatable,
        additional_comparable=additional_comparable,
        additional_equatable=additional_equatable,
    )
    return table.classify


def _normalize_names(names: Iterable[str]) -> frozenset[str]:
    # Scanned leaf tokens never contain whitespace or `?`.
    return frozenset(normalized for name in names if (normalized := _leaf_token(name)))


def _leaf_token(name: str) -> str:
    return "".join(ch for ch in name if not ch.isspace() and ch != "?")
