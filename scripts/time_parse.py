#!/usr/bin/env python3
"""Quick perf benchmark for parsing (and optionally re-serializing) Gura files."""

from __future__ import annotations

import argparse
import cProfile
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from gurapy import GuraError, dump, parse_file


def _collect_gura_files(root: Path, limit: int) -> list[Path]:
    files = sorted(path for path in root.rglob("*.ura") if path.is_file())
    return files[:limit] if limit > 0 else files


def _parse_all(files: list[Path], *, label: str, show_progress: bool, round_trip: bool) -> tuple[float, int]:
    failures = 0
    start = time.perf_counter()
    for path in tqdm(files, desc=label, unit="file", disable=not show_progress):
        try:
            data = parse_file(path)
        except GuraError:
            failures += 1
            continue
        if round_trip:
            dump(data)
    return time.perf_counter() - start, failures


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark Gura parsing throughput")
    parser.add_argument("root", type=Path, help="Directory scanned recursively for .ura files")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument("--limit-files", type=int, default=0, help="Only parse the first N files (0 = all)")
    parser.add_argument("--round-trip", action="store_true", help="Also serialize every document with dump()")
    parser.add_argument("--no-progress", action="store_true", help="Disable tqdm progress bars")
    parser.add_argument("--profile", action="store_true", help="Print the 25 most expensive calls (cumulative)")
    args = parser.parse_args()

    files = _collect_gura_files(args.root, args.limit_files)
    if not files:
        raise SystemExit(f"No .ura files found under {args.root}")

    runs = max(args.runs, 1)
    warmups = max(args.warmups, 0)
    show_progress = not args.no_progress
    profiler = cProfile.Profile() if args.profile else None

    for index in range(warmups):
        _parse_all(files, label=f"warmup {index + 1}/{warmups}", show_progress=show_progress, round_trip=args.round_trip)

    timings: list[float] = []
    failures = 0
    if profiler is not None:
        profiler.enable()
    for index in range(runs):
        duration, failures = _parse_all(
            files,
            label=f"run {index + 1}/{runs}",
            show_progress=show_progress,
            round_trip=args.round_trip,
        )
        timings.append(duration)
    if profiler is not None:
        profiler.disable()
        pstats.Stats(profiler).sort_stats("cumulative").print_stats(25)

    mean = statistics.mean(timings)
    print(f"Files: {len(files)} ({failures} failed to parse)")
    print(f"Runs: {runs} (warmups={warmups}, round_trip={args.round_trip})")
    print(f"Best {min(timings):.4f}s / median {statistics.median(timings):.4f}s / worst {max(timings):.4f}s")
    print(f"Files/s (mean): {len(files) / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
