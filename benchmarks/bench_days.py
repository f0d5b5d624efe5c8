"""Time every puzzle part on the real inputs.

Run with something like:

    python benchmarks/bench_days.py            # all days with an input file
    python benchmarks/bench_days.py 9 20 22

Days without an input file in the input directory are skipped.
"""

from __future__ import annotations

import importlib
import sys
import time

from advent_of_code import config


def bench(day: int, part: int, repeat: int = 1) -> float:
    module = importlib.import_module(f"advent_of_code.day{day:02d}")
    solve = getattr(module, f"part{part}")
    path = config.input_path(day)
    start = time.perf_counter()
    for _ in range(repeat):
        solve(path)
    return (time.perf_counter() - start) / repeat


def main() -> None:
    days = [int(arg) for arg in sys.argv[1:]] or list(range(1, config.N_DAYS + 1))
    total = 0.0
    for day in days:
        if not config.input_path(day).exists():
            print(f"day {day:02d}  no input, skipping")
            continue
        for part in (1, 2):
            duration = bench(day, part)
            total += duration
            print(f"day {day:02d} part {part}  {duration:8.4f}s")
    print(f"{'total':16s}  {total:8.4f}s")


if __name__ == "__main__":  # pragma: no cover
    main()
