"""Command-line classification of type expressions."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from tqdm import tqdm

from typeconform.classify import build_classifier
from typeconform.config import ClassifierOptions, load_classifier_options
from typeconform.resolver import ResolveResult, resolve


def _read_expressions(path: Path) -> list[str]:
    lines = path.read_text(encoding="utf-8").splitlines()
    return [line.strip() for line in lines if line.strip() and not line.lstrip().startswith("#")]


def _format_result(result: ResolveResult) -> str:
    if result.conformance is None:
        return f"{result.expression}\terror\t{result.error}"
    return f"{result.expression}\t{result.conformance.name.lower()}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typeconform",
        description="Classify type expressions as comparable, equatable-only or neither",
    )
    parser.add_argument("expressions", nargs="*", help="Type expressions, e.g. '[String: Int]'")
    parser.add_argument("--file", type=Path, help="Read one type expression per line from this file")
    parser.add_argument("--config", type=Path, help="TOML file with [tool.typeconform] options")
    parser.add_argument(
        "--comparable",
        action="append",
        default=[],
        metavar="TYPE",
        help="Extra comparable type name (repeatable)",
    )
    parser.add_argument(
        "--equatable",
        action="append",
        default=[],
        metavar="TYPE",
        help="Extra equatable-only type name (repeatable)",
    )
    parser.add_argument("--progress", action="store_true", help="Show a tqdm progress bar")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None, *, stdout: TextIO | None = None) -> int:
    args = build_parser().parse_args(argv)
    out = stdout or sys.stdout
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    expressions = list(args.expressions)
    if args.file is not None:
        expressions.extend(_read_expressions(args.file))
    if not expressions:
        raise SystemExit("No type expressions given")

    options = load_classifier_options(args.config) if args.config is not None else ClassifierOptions()
    options = options.merged(
        ClassifierOptions(
            additional_comparable_types=tuple(args.comparable),
            additional_equatable_types=tuple(args.equatable),
        )
    )
    classify = build_classifier(
        additional_comparable=options.additional_comparable_types,
        additional_equatable=options.additional_equatable_types,
    )

    iterator = tqdm(expressions, desc="resolve", unit="type") if args.progress else expressions
    failed = 0
    for expression in iterator:
        result = resolve(expression, classify)
        if not result.is_ok:
            failed += 1
        print(_format_result(result), file=out)
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
