"""Day 7 - Bridge Repair"""

from typing import List, NamedTuple, Sequence

from advent_of_code.file_io import PathLike, PuzzleInputError, lines_from_file


class Equation(NamedTuple):
    target: int
    numbers: List[int]


def equation_possible(target: int, numbers: Sequence[int], concatenation_allowed: bool) -> bool:
    """Undo the operators right to left: the last number must have been added,
    multiplied or (optionally) concatenated onto the result of the rest."""
    if len(numbers) == 1:
        return target == numbers[0]

    *rest, number = numbers
    if target < number:
        return False

    if number != 0 and target % number == 0:
        if equation_possible(target // number, rest, concatenation_allowed):
            return True

    if equation_possible(target - number, rest, concatenation_allowed):
        return True

    if concatenation_allowed:
        divisor = 10 ** len(str(number))
        if (target - number) % divisor == 0:
            return equation_possible((target - number) // divisor, rest, concatenation_allowed)

    return False


def equations_from_file(path: PathLike) -> List[Equation]:
    equations = []
    for line in lines_from_file(path):
        if not line.strip():
            continue
        target, sep, numbers = line.partition(": ")
        try:
            if not sep:
                raise ValueError("missing ': '")
            equations.append(Equation(int(target), [int(n) for n in numbers.split()]))
        except ValueError as exc:
            raise PuzzleInputError(f"{path}: cannot parse equation {line!r}: {exc}") from exc
    return equations


def calibration_result(path: PathLike, concatenation_allowed: bool) -> int:
    return sum(
        equation.target
        for equation in equations_from_file(path)
        if equation_possible(equation.target, equation.numbers, concatenation_allowed)
    )


def part1(path: PathLike) -> int:
    return calibration_result(path, concatenation_allowed=False)


def part2(path: PathLike) -> int:
    return calibration_result(path, concatenation_allowed=True)
