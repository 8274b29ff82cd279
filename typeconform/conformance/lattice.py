"""Three-valued conformance and the container combination rules."""

from __future__ import annotations

from enum import IntEnum


class Conformance(IntEnum):
    """Comparison capability of a type, ordered from weakest to strongest."""

    NEITHER = 0
    ONLY_EQUATABLE = 1
    COMPARABLE_AND_EQUATABLE = 2

    @property
    def is_equatable(self) -> bool:
        return self >= Conformance.ONLY_EQUATABLE

    @property
    def is_comparable(self) -> bool:
        return self == Conformance.COMPARABLE_AND_EQUATABLE


def combine_sequence_element(element: Conformance) -> Conformance:
    """Conformance of an array or set with the given element conformance.

    Sequences are never ordered, so the best they can be is equatable.
    """
    if element.is_equatable:
        return Conformance.ONLY_EQUATABLE
    return Conformance.NEITHER


def combine_key_value(key: Conformance, value: Conformance) -> Conformance:
    """Conformance of a dictionary; equatable only when both sides are."""
    if key.is_equatable and value.is_equatable:
        return Conformance.ONLY_EQUATABLE
    return Conformance.NEITHER


def combine_optional(inner: Conformance) -> Conformance:
    # `T?` keeps the conformance of `T`.
    return inner


def strongest(*values: Conformance) -> Conformance:
    return max(values, default=Conformance.NEITHER)
