"""Pre-extracted declaration shapes consumed by the pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias

from typeconform.classify import AssociatedTypeDecl
from typeconform.text import TextRange, TextSize

MemberKind: TypeAlias = Literal["function", "property"]


@dataclass(frozen=True, slots=True)
class TypeAnnotation:
    """A type expression exactly as written, with its location in the declaration source."""

    text: str
    range: TextRange

    @staticmethod
    def at(text: str, offset: int) -> "TypeAnnotation":
        return TypeAnnotation(text=text, range=TextRange.at(TextSize.from_int(offset), TextSize.of(text)))

    @staticmethod
    def find(source: str, text: str, *, start: int = 0) -> "TypeAnnotation":
        """Locate `text` in `source` at or after `start`."""
        offset = source.find(text, start)
        if offset < 0:
            raise ValueError(f"Type annotation `{text}` not found in source")
        return TypeAnnotation.at(text, offset)


@dataclass(frozen=True, slots=True)
class ParameterSpec:
    name: str
    annotation: TypeAnnotation


@dataclass(frozen=True, slots=True)
class MemberSpec:
    """A function or property requirement.

    For properties `return_type` holds the property type.
    """

    name: str
    kind: MemberKind = "function"
    parameters: tuple[ParameterSpec, ...] = ()
    return_type: TypeAnnotation | None = None


@dataclass(frozen=True, slots=True)
class DeclarationSpec:
    name: str
    members: tuple[MemberSpec, ...] = ()
    associated_types: tuple[AssociatedTypeDecl, ...] = ()
