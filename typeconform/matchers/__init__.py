"""Matcher-form planning for generated verification surfaces."""

from typeconform.matchers.forms import (
    MatcherForm,
    ParameterForm,
    ParameterKind,
    matcher_forms,
    parameter_form_sequences,
    parameter_kind,
)

__all__ = [
    "MatcherForm",
    "ParameterForm",
    "ParameterKind",
    "matcher_forms",
    "parameter_form_sequences",
    "parameter_kind",
]
