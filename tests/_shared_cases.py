"""Centralized type-expression cases used across resolver tests."""

from __future__ import annotations

from dataclasses import dataclass

from typeconform.conformance import Conformance
from typeconform.resolver import MalformedReason

CE = Conformance.COMPARABLE_AND_EQUATABLE
EQ = Conformance.ONLY_EQUATABLE
NO = Conformance.NEITHER


@dataclass(frozen=True, slots=True)
class ConformanceCase:
    name: str
    expression: str
    expected: Conformance


@dataclass(frozen=True, slots=True)
class MalformedCase:
    name: str
    expression: str
    reason: MalformedReason
    range: tuple[int, int]


LEAF_CASES: tuple[ConformanceCase, ...] = (
    ConformanceCase(name="builtin_string", expression="String", expected=CE),
    ConformanceCase(name="builtin_int", expression="Int", expected=CE),
    ConformanceCase(name="builtin_double", expression="Double", expected=CE),
    ConformanceCase(name="builtin_date", expression="Date", expected=CE),
    ConformanceCase(name="builtin_bool", expression="Bool", expected=EQ),
    ConformanceCase(name="builtin_uuid", expression="UUID", expected=EQ),
    ConformanceCase(name="builtin_url", expression="URL", expected=EQ),
    ConformanceCase(name="builtin_data", expression="Data", expected=EQ),
    ConformanceCase(name="builtin_cgpoint", expression="CGPoint", expected=EQ),
    ConformanceCase(name="unknown_type", expression="CustomType", expected=NO),
    ConformanceCase(name="case_sensitive_lookup", expression="string", expected=NO),
    ConformanceCase(name="optional_string", expression="String?", expected=CE),
    ConformanceCase(name="optional_bool", expression="Bool?", expected=EQ),
    ConformanceCase(name="optional_unknown", expression="CustomType?", expected=NO),
    ConformanceCase(name="padded_leaf", expression=" String ", expected=CE),
    ConformanceCase(name="qualified_unknown", expression="Foundation.Date", expected=NO),
)

CONTAINER_CASES: tuple[ConformanceCase, ...] = (
    ConformanceCase(name="array_shorthand_comparable", expression="[String]", expected=EQ),
    ConformanceCase(name="array_shorthand_equatable", expression="[Bool]", expected=EQ),
    ConformanceCase(name="array_shorthand_unknown", expression="[CustomType]", expected=NO),
    ConformanceCase(name="array_shorthand_optional", expression="[String]?", expected=EQ),
    ConformanceCase(name="array_full_comparable", expression="Array<Int>", expected=EQ),
    ConformanceCase(name="array_full_unknown", expression="Array<CustomType>", expected=NO),
    ConformanceCase(name="array_full_optional", expression="Array<Bool>?", expected=EQ),
    ConformanceCase(name="set_comparable", expression="Set<String>", expected=EQ),
    ConformanceCase(name="set_unknown", expression="Set<CustomType>", expected=NO),
    ConformanceCase(name="set_optional", expression="Set<UUID>?", expected=EQ),
    ConformanceCase(name="array_of_optionals", expression="[Int?]", expected=EQ),
    ConformanceCase(name="dictionary_shorthand", expression="[String: Int]", expected=EQ),
    ConformanceCase(name="dictionary_shorthand_equatable_value", expression="[Int: Bool]", expected=EQ),
    ConformanceCase(name="dictionary_shorthand_unknown_key", expression="[CustomType: String]", expected=NO),
    ConformanceCase(name="dictionary_shorthand_unknown_value", expression="[String: CustomType]", expected=NO),
    ConformanceCase(name="dictionary_shorthand_optional", expression="[String: String]?", expected=EQ),
    ConformanceCase(name="dictionary_full", expression="Dictionary<String, Int>", expected=EQ),
    ConformanceCase(name="dictionary_full_unknown_key", expression="Dictionary<CustomType, Bool>", expected=NO),
    ConformanceCase(name="dictionary_full_unknown_value", expression="Dictionary<Int, CustomType>", expected=NO),
    ConformanceCase(name="dictionary_full_optional", expression="Dictionary<String, String>?", expected=EQ),
    ConformanceCase(name="dictionary_full_colon", expression="Dictionary<String: Int>", expected=EQ),
    ConformanceCase(name="dictionary_full_colon_unknown_value", expression="Dictionary<Int: CustomType>", expected=NO),
)

NESTED_CASES: tuple[ConformanceCase, ...] = (
    ConformanceCase(name="nested_arrays_shorthand", expression="[[String]]", expected=EQ),
    ConformanceCase(name="nested_arrays_shorthand_unknown", expression="[[CustomType]]", expected=NO),
    ConformanceCase(name="nested_arrays_full", expression="Array<Array<Int>>", expected=EQ),
    ConformanceCase(name="array_of_dictionaries_shorthand", expression="[[String: String]]", expected=EQ),
    ConformanceCase(name="array_of_dictionaries_unknown", expression="[[String: CustomType]]", expected=NO),
    ConformanceCase(name="array_of_arrays_of_dictionaries", expression="[[[String: String]]]", expected=EQ),
    ConformanceCase(name="dictionary_two_levels", expression="[[String: [String: String]]]", expected=EQ),
    ConformanceCase(name="dictionary_three_levels", expression="[String: [Int: [UUID: Bool]]]", expected=EQ),
    ConformanceCase(name="dictionary_three_levels_unknown", expression="[String: [Int: [UUID: Foo]]]", expected=NO),
    ConformanceCase(name="array_of_dictionaries_full", expression="Array<Dictionary<String, Int>>", expected=EQ),
    ConformanceCase(name="dictionary_of_arrays_shorthand", expression="[String: [Int]]", expected=EQ),
    ConformanceCase(name="dictionary_of_arrays_unknown", expression="[String: [CustomType]]", expected=NO),
    ConformanceCase(name="dictionary_of_arrays_full", expression="Dictionary<String, Array<String>>", expected=EQ),
    ConformanceCase(name="array_key_dictionary_shorthand", expression="[[Int]: String]", expected=EQ),
    ConformanceCase(
        name="dictionary_keyed_by_container_full",
        expression="Dictionary<Array<String>, Dictionary<String, Int>>",
        expected=EQ,
    ),
    ConformanceCase(name="deep_full_syntax", expression="Array<Dictionary<String, Array<String>>>", expected=EQ),
    ConformanceCase(
        name="deep_full_syntax_dictionary_outer",
        expression="Dictionary<String, Array<Dictionary<String, String>>>",
        expected=EQ,
    ),
    ConformanceCase(name="mixed_full_in_shorthand", expression="[Dictionary<String, String>]", expected=EQ),
    ConformanceCase(name="mixed_full_in_shorthand_unknown", expression="[Dictionary<String, Foo>]", expected=NO),
    ConformanceCase(name="mixed_shorthand_value_full", expression="[String: Array<String>]", expected=EQ),
    ConformanceCase(name="mixed_shorthand_in_full", expression="Set<[String: Int]>", expected=EQ),
    ConformanceCase(name="optional_inside_nesting", expression="[String: [Int]?]?", expected=EQ),
    ConformanceCase(name="padded_dictionary", expression="  [ String :  Int ]  ", expected=EQ),
    ConformanceCase(name="padded_full_dictionary", expression=" Dictionary< String ,Int > ", expected=EQ),
    ConformanceCase(name="opaque_generic_leaf", expression="Optional<String>", expected=NO),
    ConformanceCase(name="opaque_generic_inside_array", expression="[MyBox<Int>]", expected=NO),
    ConformanceCase(name="qualified_container_name_is_opaque", expression="Swift.Array<Int>", expected=NO),
)

MALFORMED_CASES: tuple[MalformedCase, ...] = (
    MalformedCase(name="unclosed_bracket", expression="[String", reason=MalformedReason.UNCLOSED_CONTAINER, range=(0, 7)),
    MalformedCase(
        name="unclosed_outer_bracket",
        expression="[[String: String]",
        reason=MalformedReason.UNCLOSED_CONTAINER,
        range=(0, 17),
    ),
    MalformedCase(name="empty", expression="", reason=MalformedReason.EMPTY_EXPRESSION, range=(0, 0)),
    MalformedCase(name="only_whitespace", expression="   ", reason=MalformedReason.EMPTY_EXPRESSION, range=(0, 3)),
    MalformedCase(name="stray_closer", expression="String]", reason=MalformedReason.UNBALANCED_CLOSER, range=(6, 7)),
    MalformedCase(name="empty_brackets", expression="[]", reason=MalformedReason.EMPTY_CONTAINER, range=(0, 2)),
    MalformedCase(name="empty_array_full", expression="Array<>", reason=MalformedReason.EMPTY_CONTAINER, range=(0, 7)),
    MalformedCase(
        name="dictionary_missing_value_shorthand",
        expression="[String:]",
        reason=MalformedReason.MISSING_DICTIONARY_VALUE,
        range=(8, 9),
    ),
    MalformedCase(
        name="dictionary_missing_value_full",
        expression="Dictionary<String>",
        reason=MalformedReason.MISSING_DICTIONARY_VALUE,
        range=(17, 18),
    ),
    MalformedCase(
        name="dictionary_three_arguments",
        expression="Dictionary<String, Int, Bool>",
        reason=MalformedReason.EXTRA_SEPARATOR,
        range=(22, 23),
    ),
    MalformedCase(
        name="dictionary_two_colons",
        expression="[String: Int: Bool]",
        reason=MalformedReason.EXTRA_SEPARATOR,
        range=(12, 13),
    ),
    MalformedCase(
        name="comma_in_array",
        expression="Array<String, Int>",
        reason=MalformedReason.SEPARATOR_NOT_ALLOWED,
        range=(12, 13),
    ),
    MalformedCase(
        name="comma_in_bracket",
        expression="[String, Int]",
        reason=MalformedReason.SEPARATOR_NOT_ALLOWED,
        range=(7, 8),
    ),
    MalformedCase(
        name="top_level_separator",
        expression="String, Int",
        reason=MalformedReason.SEPARATOR_NOT_ALLOWED,
        range=(6, 7),
    ),
    MalformedCase(
        name="missing_key",
        expression="[: Int]",
        reason=MalformedReason.SEPARATOR_WITHOUT_TYPE,
        range=(1, 2),
    ),
    MalformedCase(
        name="array_closed_with_bracket",
        expression="Array<String]",
        reason=MalformedReason.MISMATCHED_CLOSER,
        range=(0, 13),
    ),
    MalformedCase(
        name="bracket_closed_with_angle",
        expression="[String>",
        reason=MalformedReason.MISMATCHED_CLOSER,
        range=(0, 8),
    ),
    MalformedCase(
        name="text_after_container",
        expression="Array<String>Foo",
        reason=MalformedReason.TRAILING_TEXT,
        range=(13, 16),
    ),
    MalformedCase(
        name="adjacent_containers",
        expression="[Int][Int]",
        reason=MalformedReason.MISSING_SEPARATOR,
        range=(5, 10),
    ),
    MalformedCase(name="bare_optional", expression="?", reason=MalformedReason.OPTIONAL_WITHOUT_TYPE, range=(0, 1)),
    MalformedCase(
        name="unclosed_opaque_generic",
        expression="MyBox<Int",
        reason=MalformedReason.UNBALANCED_GENERIC,
        range=(0, 9),
    ),
    MalformedCase(
        name="bracket_inside_name",
        expression="Foo[Int]",
        reason=MalformedReason.UNEXPECTED_CHARACTER,
        range=(3, 4),
    ),
)


def case_id(case: ConformanceCase | MalformedCase) -> str:
    return case.name
