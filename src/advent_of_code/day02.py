"""Day 2 - Red-Nosed Reports"""

from typing import List, Sequence

from advent_of_code.file_io import PathLike, rows_from_file


def is_safe_increase(difference: int) -> bool:
    return 1 <= difference <= 3


def is_safe_report(report: Sequence[int]) -> bool:
    """Levels must all increase or all decrease, by 1 to 3 at each step."""
    if len(report) < 2:
        return True
    differences = [b - a for a, b in zip(report, report[1:])]
    return all(is_safe_increase(d) for d in differences) or all(
        is_safe_increase(-d) for d in differences
    )


def is_safe_report_with_damper(report: Sequence[int]) -> bool:
    """Like `is_safe_report`, but a single bad level may be removed."""
    if len(report) < 3 or is_safe_report(report):
        return True
    return any(
        is_safe_report(list(report[:idx]) + list(report[idx + 1 :]))
        for idx in range(len(report))
    )


def load_reports(path: PathLike) -> List[List[int]]:
    return rows_from_file(path)


def part1(path: PathLike) -> int:
    return sum(1 for report in load_reports(path) if is_safe_report(report))


def part2(path: PathLike) -> int:
    return sum(1 for report in load_reports(path) if is_safe_report_with_damper(report))
