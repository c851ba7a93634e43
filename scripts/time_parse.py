#!/usr/bin/env python3
"""Quick perf benchmark for Glyph document parsing."""

from __future__ import annotations

import argparse
import cProfile
import io
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from glyphpy.parser import ParseMode, parse_glyph


def _collect_glyph_files(root: Path) -> list[Path]:
    return [path for path in sorted(root.rglob("*.gl")) if path.is_file()]


def _run_once(
    sources: list[str],
    *,
    label: str,
    mode: ParseMode,
    show_progress: bool,
) -> tuple[float, int, int]:
    start = time.perf_counter()
    parsed_ok = 0
    total_diagnostics = 0
    iterator = tqdm(sources, desc=label, unit="file") if show_progress else sources
    for text in iterator:
        parsed = parse_glyph(text, mode=mode)
        parsed_ok += int(parsed.ok)
        total_diagnostics += len(parsed.diagnostics)
    duration = time.perf_counter() - start
    return duration, parsed_ok, total_diagnostics


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark Glyph parsing throughput")
    parser.add_argument("--root", type=Path, required=True, help="Directory searched for *.gl files")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--mode",
        type=ParseMode,
        choices=list(ParseMode),
        default=ParseMode.STRICT,
        help="Parse mode (default: strict)",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument("--profile", action="store_true", help="Run cProfile and print top hotspots")
    parser.add_argument("--profile-top", type=int, default=30, help="Number of cProfile rows to print")
    parser.add_argument("--profile-sort", type=str, default="tottime", help="cProfile sort key")
    args = parser.parse_args()

    root: Path = args.root
    if not root.is_dir():
        raise SystemExit(f"Invalid --root: {root}")

    files = _collect_glyph_files(root)
    if not files:
        raise SystemExit(f"No .gl files found under {root}")
    sources = [path.read_text(encoding="utf-8") for path in files]
    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(
                sources,
                label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}",
                mode=args.mode,
                show_progress=show_progress,
            )

        timings: list[float] = []
        parsed_ok = 0
        diagnostics_count = 0
        for run_idx in range(max(args.runs, 1)):
            duration, parsed_ok, diagnostics_count = _run_once(
                sources,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                mode=args.mode,
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, parsed_ok, diagnostics_count

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, parsed_ok, diagnostics_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, parsed_ok, diagnostics_count = _benchmark()

    mean = statistics.mean(timings)
    print(f"Dataset: {root}")
    print(f"Files: {len(files)} ({parsed_ok} parsed cleanly)")
    print(f"Diagnostics: {diagnostics_count}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Files/s (mean): {len(files) / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
