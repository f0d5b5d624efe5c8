"""Run puzzle solutions from the command line.

Usage:
    python -m advent_of_code 1 2 3          # selected days on their real inputs
    python -m advent_of_code all            # every day
    python -m advent_of_code 7 --input x.txt -v
"""

import argparse
import importlib
import sys
import time
from pathlib import Path
from typing import List, Optional

from loguru import logger

from advent_of_code import config
from advent_of_code.file_io import PuzzleInputError
from advent_of_code.logging_config import setup_logging


def format_answer(answer) -> str:
    if isinstance(answer, tuple):
        return ",".join(str(value) for value in answer)
    return str(answer)


def parse_days(values: List[str]) -> List[int]:
    if values == ["all"]:
        return list(range(1, config.N_DAYS + 1))
    days = []
    for value in values:
        try:
            day = int(value)
        except ValueError:
            raise argparse.ArgumentTypeError(f"not a day number: {value!r}") from None
        if not 1 <= day <= config.N_DAYS:
            raise argparse.ArgumentTypeError(f"day must be between 1 and {config.N_DAYS}, got {day}")
        days.append(day)
    return days


def solve_day(day: int, path: Path) -> None:
    module = importlib.import_module(f"advent_of_code.day{day:02d}")
    print(f"Day {day:02d}")
    for part in (1, 2):
        start = time.perf_counter()
        answer = getattr(module, f"part{part}")(path)
        elapsed = time.perf_counter() - start
        print(f"Answer to part {part}:")
        print(format_answer(answer))
        logger.info("Day {:02d} part {} took {:.3f}s", day, part, elapsed)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aoc2024", description="Advent of Code 2024 solutions")
    parser.add_argument("days", nargs="+", help="Day numbers to run, or 'all'")
    parser.add_argument("--input", type=Path, help="Input file (only with a single day)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--log-file", help="Also write logs to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        days = parse_days(args.days)
    except argparse.ArgumentTypeError as exc:
        parser.error(str(exc))
    if args.input is not None and len(days) != 1:
        parser.error("--input can only be used with a single day")

    verbose = args.verbose or config.DEBUG
    setup_logging("DEBUG" if verbose else "INFO", args.log_file)

    for day in days:
        path = args.input or config.input_path(day)
        try:
            solve_day(day, path)
        except (PuzzleInputError, ValueError, FileNotFoundError) as exc:
            print(f"Day {day:02d} failed on {path}: {exc}", file=sys.stderr)
            sys.exit(1)
    return 0


if __name__ == "__main__":
    sys.exit(main())
