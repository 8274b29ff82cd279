#!/usr/bin/env python3
"""Quick perf benchmark for type-expression resolution."""

from __future__ import annotations

import argparse
import cProfile
import io
import pstats
import statistics
import time
from pathlib import Path

from tqdm import tqdm

from typeconform.classify import NameClassifier, build_classifier
from typeconform.resolver import resolve

DEFAULT_EXPRESSIONS: tuple[str, ...] = (
    "String",
    "Bool?",
    "[CustomType]",
    "Dictionary<String, Int>",
    "[[String: String]]",
    "Array<Dictionary<String, Array<String>>>",
    "[String: [Int: [UUID]]]",
    "Set<MyModule.CustomID>?",
)


def _load_expressions(path: Path | None) -> list[str]:
    if path is None:
        return list(DEFAULT_EXPRESSIONS)
    lines = path.read_text(encoding="utf-8").splitlines()
    return [line.strip() for line in lines if line.strip()]


def _run_once(
    expressions: list[str],
    classify: NameClassifier,
    *,
    repeat: int,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int]:
    start = time.perf_counter()
    total = 0
    failures = 0
    iterator = tqdm(range(repeat), desc=label, unit="batch") if show_progress else range(repeat)
    for _ in iterator:
        for expression in expressions:
            total += 1
            if not resolve(expression, classify).is_ok:
                failures += 1
    return time.perf_counter() - start, total, failures


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark type-expression resolution throughput")
    parser.add_argument("--expressions", type=Path, help="File with one type expression per line")
    parser.add_argument("--repeat", type=int, default=10_000, help="Batches per run")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument("--no-progress", action="store_true", help="Disable tqdm progress bars")
    parser.add_argument("--profile", action="store_true", help="Run cProfile and print top hotspots")
    parser.add_argument("--profile-top", type=int, default=30, help="Number of cProfile rows to print")
    args = parser.parse_args()

    expressions = _load_expressions(args.expressions)
    if not expressions:
        raise SystemExit("No type expressions to resolve")
    classify = build_classifier()
    show_progress = not args.no_progress
    repeat = max(args.repeat, 1)

    def _benchmark() -> tuple[list[float], int, int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(
                expressions,
                classify,
                repeat=repeat,
                label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}",
                show_progress=show_progress,
            )
        timings: list[float] = []
        total = 0
        failures = 0
        for run_idx in range(max(args.runs, 1)):
            duration, total, failures = _run_once(
                expressions,
                classify,
                repeat=repeat,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, total, failures

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, total, failures = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        pstats.Stats(profiler, stream=stream).sort_stats("tottime").print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, total, failures = _benchmark()

    mean = statistics.mean(timings)
    print(f"Expressions per run: {total}")
    print(f"Malformed per run:   {failures}")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Expressions/s (mean): {total / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
