"""Built-in type names with known comparison capability."""

from typing import Final

BUILTIN_COMPARABLE_TYPES: Final[frozenset[str]] = frozenset(
    {
        "String",
        "Int",
        "Int8",
        "Int16",
        "Int32",
        "Int64",
        "UInt",
        "UInt8",
        "UInt16",
        "UInt32",
        "UInt64",
        "Float",
        "Double",
        "Character",
        "Date",
    }
)

BUILTIN_EQUATABLE_ONLY_TYPES: Final[frozenset[str]] = frozenset(
    {
        "Bool",
        "UUID",
        "URL",
        "Data",
        "URLComponents",
        "CGPoint",
        "CGSize",
        "CGRect",
        "CGVector",
    }
)
