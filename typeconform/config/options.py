"""Caller-supplied classification options."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

OPTION_KEYS: Final[frozenset[str]] = frozenset({"additional_comparable_types", "additional_equatable_types"})


@dataclass(frozen=True, slots=True)
class ClassifierOptions:
    """Explicitly configured type names, on top of the built-in tables."""

    additional_comparable_types: tuple[str, ...] = ()
    additional_equatable_types: tuple[str, ...] = ()

    @staticmethod
    def from_mapping(mapping: Mapping[str, object]) -> "ClassifierOptions":
        unknown = sorted(set(mapping) - OPTION_KEYS)
        if unknown:
            raise ValueError(
                f"Unknown classifier option(s): {', '.join(unknown)}. "
                f"Valid options are: {', '.join(sorted(OPTION_KEYS))}"
            )
        return ClassifierOptions(
            additional_comparable_types=_type_list(mapping, "additional_comparable_types"),
            additional_equatable_types=_type_list(mapping, "additional_equatable_types"),
        )

    def merged(self, other: "ClassifierOptions") -> "ClassifierOptions":
        return ClassifierOptions(
            additional_comparable_types=(*self.additional_comparable_types, *other.additional_comparable_types),
            additional_equatable_types=(*self.additional_equatable_types, *other.additional_equatable_types),
        )


def _type_list(mapping: Mapping[str, object], key: str) -> tuple[str, ...]:
    raw = mapping.get(key, ())
    if isinstance(raw, str) or not isinstance(raw, (list, tuple)):
        raise ValueError(f"`{key}` must be a list of type names")
    names: list[str] = []
    for item in raw:
        if not isinstance(item, str):
            raise ValueError(f"`{key}` entries must be strings, got {type(item).__name__}")
        stripped = item.strip()
        if not stripped:
            raise ValueError(f"`{key}` entries must not be empty")
        names.append(stripped)
    return tuple(names)
