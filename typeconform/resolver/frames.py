"""Parse-stack frames for the type-expression scanner."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Final, TypeAlias

from typeconform.conformance import Conformance
from typeconform.text import TextRange


class ContainerKind(StrEnum):
    ARRAY = "array"
    SET = "set"
    DICTIONARY = "dictionary"
    # `[` before we know whether it opens `[T]` or `[K: V]`.
    UNDETERMINED = "undetermined"


@dataclass(frozen=True, slots=True)
class ContainerOpener:
    prefix: str
    kind: ContainerKind
    closer: str
    separators: frozenset[str] = frozenset()


CONTAINER_OPENERS: Final[tuple[ContainerOpener, ...]] = (
    ContainerOpener(prefix="Array<", kind=ContainerKind.ARRAY, closer=">"),
    ContainerOpener(prefix="Set<", kind=ContainerKind.SET, closer=">"),
    # `Dictionary<K: V>` is read like `Dictionary<K, V>`.
    ContainerOpener(prefix="Dictionary<", kind=ContainerKind.DICTIONARY, closer=">", separators=frozenset({",", ":"})),
    ContainerOpener(prefix="[", kind=ContainerKind.UNDETERMINED, closer="]", separators=frozenset({":"})),
)

CLOSERS: Final[frozenset[str]] = frozenset({"]", ">"})
SEPARATORS: Final[frozenset[str]] = frozenset({",", ":"})


@dataclass(frozen=True, slots=True)
class OpenFrame:
    """An opened container whose closing delimiter has not been reached yet."""

    kind: ContainerKind
    closer: str
    separators: frozenset[str]
    range: TextRange

    @staticmethod
    def from_opener(opener: ContainerOpener, range: TextRange) -> "OpenFrame":
        return OpenFrame(kind=opener.kind, closer=opener.closer, separators=opener.separators, range=range)

    def accepts_separator(self, separator: str) -> bool:
        return separator in self.separators

    def promoted(self) -> "OpenFrame":
        """The same frame, now known to open a dictionary."""
        return replace(self, kind=ContainerKind.DICTIONARY)

    @property
    def is_sequence(self) -> bool:
        # An undetermined bracket that is closed without a `:` is `[T]`.
        return self.kind in (ContainerKind.ARRAY, ContainerKind.SET, ContainerKind.UNDETERMINED)


@dataclass(frozen=True, slots=True)
class ResolvedFrame:
    """A finished operand: a container element, a dictionary value, or a dictionary key."""

    conformance: Conformance
    range: TextRange
    is_key: bool = False

    def as_key(self) -> "ResolvedFrame":
        return replace(self, is_key=True)


Frame: TypeAlias = OpenFrame | ResolvedFrame
