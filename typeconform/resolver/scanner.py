"""Single forward scan resolving a type expression to a `Conformance`.

The scanner keeps a stack of open containers and resolved operands.
A `[` is pushed as an undetermined container; it becomes a dictionary
only when a `:` is met before its matching `]`, otherwise it closes as
an array. Leaf names are looked up through the supplied classifier and
combined bottom-up as containers close.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import NoReturn, cast

from typeconform.classify import NameClassifier
from typeconform.conformance import (
    Conformance,
    combine_key_value,
    combine_optional,
    combine_sequence_element,
)
from typeconform.resolver.frames import (
    CLOSERS,
    CONTAINER_OPENERS,
    SEPARATORS,
    ContainerKind,
    Frame,
    OpenFrame,
    ResolvedFrame,
)
from typeconform.resolver.result import MalformedReason, MalformedTypeExpression, ResolveResult
from typeconform.text import TextRange, TextSize

logger = logging.getLogger(__name__)


def resolve(expression: str, classify: NameClassifier) -> ResolveResult:
    """Resolve one type expression; malformed input is returned, never raised."""
    scanner = TypeExpressionScanner(expression, classify)
    try:
        conformance = scanner.scan()
    except _ScanFailure as failure:
        error = MalformedTypeExpression(expression=expression, reason=failure.reason, range=failure.range)
        logger.debug("%s", error)
        return ResolveResult(expression=expression, error=error)
    return ResolveResult(expression=expression, conformance=conformance)


def resolve_many(expressions: Iterable[str], classify: NameClassifier) -> list[ResolveResult]:
    return [resolve(expression, classify) for expression in expressions]


class _ScanFailure(Exception):
    def __init__(self, reason: MalformedReason, range: TextRange) -> None:
        super().__init__(reason.value)
        self.reason = reason
        self.range = range


class TypeExpressionScanner:
    """Scanner state for one expression. Not reusable across expressions."""

    def __init__(self, expression: str, classify: NameClassifier) -> None:
        self._text = expression
        self._classify = classify
        self._position = 0
        self._stack: list[Frame] = []
        self._token: list[str] = []
        self._token_start = 0
        self._token_end = 0
        self._token_optional = False
        self._generic_depth = 0
        self._generic_start = 0
        self._at_token_start = True

    @property
    def stack(self) -> tuple[Frame, ...]:
        return tuple(self._stack)

    def scan(self) -> Conformance:
        text = self._text
        while self._position < len(text):
            if self._at_token_start and self._open_container():
                continue

            ch = text[self._position]
            if self._generic_depth:
                self._scan_opaque_generic(ch)
            elif ch in CLOSERS:
                self._close_container(ch)
            elif ch in SEPARATORS:
                self._separate(ch)
            elif ch == "?":
                self._mark_optional()
            elif ch.isspace():
                pass
            elif ch == "<":
                self._open_opaque_generic()
            elif ch == "[":
                # Only reachable in the middle of a name, e.g. `Foo[Int]`.
                self._fail(MalformedReason.UNEXPECTED_CHARACTER, self._char_range())
            else:
                self._append(ch)
            self._position += 1

        return self._finish()

    def _open_container(self) -> bool:
        for opener in CONTAINER_OPENERS:
            if self._text.startswith(opener.prefix, self._position):
                end = self._position + len(opener.prefix)
                self._stack.append(OpenFrame.from_opener(opener, self._range(self._position, end)))
                self._position = end
                return True
        return False

    def _separate(self, separator: str) -> None:
        operand = self._take_operand()
        top = self._top()
        if operand is None:
            if isinstance(top, ResolvedFrame) and top.is_key:
                self._fail(MalformedReason.EXTRA_SEPARATOR, self._char_range())
            self._fail(MalformedReason.SEPARATOR_WITHOUT_TYPE, self._char_range())

        if isinstance(top, ResolvedFrame):
            reason = MalformedReason.EXTRA_SEPARATOR if top.is_key else MalformedReason.MISSING_SEPARATOR
            self._fail(reason, self._char_range())
        if top is None or not top.accepts_separator(separator):
            self._fail(MalformedReason.SEPARATOR_NOT_ALLOWED, self._char_range())

        if top.kind == ContainerKind.UNDETERMINED:
            self._stack[-1] = top.promoted()
        self._stack.append(operand.as_key())
        self._at_token_start = True

    def _close_container(self, closer: str) -> None:
        operand = self._take_operand()
        if operand is None:
            top = self._top()
            if top is None:
                self._fail(MalformedReason.UNBALANCED_CLOSER, self._char_range())
            if isinstance(top, ResolvedFrame) and top.is_key:
                self._fail(MalformedReason.MISSING_DICTIONARY_VALUE, self._char_range())
            self._fail(MalformedReason.EMPTY_CONTAINER, top.range.cover(self._char_range()))

        if not self._stack:
            self._fail(MalformedReason.UNBALANCED_CLOSER, self._char_range())
        below = self._stack.pop()

        if isinstance(below, ResolvedFrame):
            if not below.is_key:
                self._fail(MalformedReason.MISSING_SEPARATOR, operand.range)
            # A key frame always sits directly on its dictionary opener.
            opener = cast(OpenFrame, self._stack.pop())
            self._check_closer(opener, closer)
            conformance = combine_key_value(below.conformance, operand.conformance)
        else:
            opener = below
            self._check_closer(opener, closer)
            if not opener.is_sequence:
                self._fail(MalformedReason.MISSING_DICTIONARY_VALUE, self._char_range())
            conformance = combine_sequence_element(operand.conformance)

        self._stack.append(ResolvedFrame(conformance, opener.range.cover(self._char_range())))
        self._at_token_start = True

    def _check_closer(self, opener: OpenFrame, closer: str) -> None:
        if opener.closer != closer:
            self._fail(MalformedReason.MISMATCHED_CLOSER, opener.range.cover(self._char_range()))

    def _mark_optional(self) -> None:
        if self._token:
            self._token_optional = True
            return
        top = self._top()
        if isinstance(top, ResolvedFrame) and not top.is_key:
            self._stack[-1] = ResolvedFrame(
                combine_optional(top.conformance),
                top.range.cover(self._char_range()),
            )
            return
        self._fail(MalformedReason.OPTIONAL_WITHOUT_TYPE, self._char_range())

    def _open_opaque_generic(self) -> None:
        # `Name<...>` with a name that is not a known container keyword
        # is an opaque leaf, looked up with its arguments.
        if not self._token:
            self._fail(MalformedReason.UNEXPECTED_CHARACTER, self._char_range())
        self._generic_depth = 1
        self._generic_start = self._token_start
        self._append("<")

    def _scan_opaque_generic(self, ch: str) -> None:
        if ch.isspace() or ch == "?":
            return
        if ch == "<":
            self._generic_depth += 1
        elif ch == ">":
            self._generic_depth -= 1
        self._append(ch)

    def _append(self, ch: str) -> None:
        if not self._token:
            self._token_start = self._position
        self._token.append(ch)
        self._token_end = self._position + 1
        self._at_token_start = False

    def _take_operand(self) -> ResolvedFrame | None:
        if self._token:
            return self._finish_token()
        top = self._top()
        if isinstance(top, ResolvedFrame) and not top.is_key:
            self._stack.pop()
            return top
        return None

    def _finish_token(self) -> ResolvedFrame:
        conformance = self._classify("".join(self._token))
        if self._token_optional:
            conformance = combine_optional(conformance)
        frame = ResolvedFrame(conformance, self._range(self._token_start, self._token_end))
        self._token.clear()
        self._token_optional = False
        return frame

    def _finish(self) -> Conformance:
        end = len(self._text)
        if self._generic_depth:
            self._fail(MalformedReason.UNBALANCED_GENERIC, self._range(self._generic_start, end))

        if self._token:
            operand = self._finish_token()
            if not self._stack:
                return operand.conformance
            self._fail_if_unclosed()
            self._fail(MalformedReason.TRAILING_TEXT, operand.range)

        if not self._stack:
            self._fail(MalformedReason.EMPTY_EXPRESSION, self._range(0, end))
        self._fail_if_unclosed()

        if len(self._stack) > 1:
            self._fail(MalformedReason.MISSING_SEPARATOR, self._stack[1].range)
        return cast(ResolvedFrame, self._stack[0]).conformance

    def _fail_if_unclosed(self) -> None:
        for frame in reversed(self._stack):
            if isinstance(frame, OpenFrame):
                self._fail(
                    MalformedReason.UNCLOSED_CONTAINER,
                    self._range(frame.range.start.value, len(self._text)),
                )

    def _top(self) -> Frame | None:
        return self._stack[-1] if self._stack else None

    def _char_range(self) -> TextRange:
        return TextRange.at(TextSize.from_int(self._position), TextSize.from_int(1))

    def _range(self, start: int, end: int) -> TextRange:
        return TextRange.new(TextSize.from_int(start), TextSize.from_int(end))

    def _fail(self, reason: MalformedReason, range: TextRange) -> NoReturn:
        raise _ScanFailure(reason, range)
