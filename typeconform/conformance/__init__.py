"""Comparison-capability lattice."""

from typeconform.conformance.lattice import (
    Conformance,
    combine_key_value,
    combine_optional,
    combine_sequence_element,
    strongest,
)

__all__ = [
    "Conformance",
    "combine_key_value",
    "combine_optional",
    "combine_sequence_element",
    "strongest",
]
