"""Reading puzzle input files.

Every loader takes a path and returns plain Python containers. Content that does
not match the expected shape raises `PuzzleInputError` naming the file and the
offending text; a missing file raises `FileNotFoundError` untouched.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator, List, Tuple, TypeVar, TYPE_CHECKING

if TYPE_CHECKING:
    from advent_of_code.grid import Grid

T = TypeVar("T")

PathLike = str | Path


class PuzzleInputError(ValueError):
    """Raised when a puzzle input does not follow the puzzle's grammar."""


def _parse(cast: Callable[[str], T], word: str, path: PathLike) -> T:
    try:
        return cast(word)
    except ValueError as exc:
        raise PuzzleInputError(f"{path}: failed to parse {word!r}") from exc


def read_text(path: PathLike) -> str:
    with open(path, "r") as file:
        return file.read().rstrip("\n")


def lines_from_file(path: PathLike) -> Iterator[str]:
    with open(path, "r") as file:
        for line in file:
            yield line.rstrip("\r\n")


def strings_from_file(path: PathLike) -> List[str]:
    return list(lines_from_file(path))


def paragraphs_from_file(path: PathLike) -> List[List[str]]:
    """Split the file into blocks of lines separated by blank lines."""
    paragraphs: List[List[str]] = []
    current: List[str] = []
    for line in lines_from_file(path):
        if not line.strip():
            if current:
                paragraphs.append(current)
                current = []
            continue
        current.append(line)
    if current:
        paragraphs.append(current)
    return paragraphs


def two_columns_from_file(
    path: PathLike, cast: Callable[[str], T] = int
) -> Tuple[List[T], List[T]]:
    left: List[T] = []
    right: List[T] = []
    for line in lines_from_file(path):
        if not line.strip():
            continue
        words = line.split()
        if len(words) != 2:
            raise PuzzleInputError(
                f"{path}: each line must contain exactly two elements, got {line!r}"
            )
        left.append(_parse(cast, words[0], path))
        right.append(_parse(cast, words[1], path))
    return left, right


def rows_from_file(path: PathLike, cast: Callable[[str], T] = int) -> List[List[T]]:
    return [
        [_parse(cast, word, path) for word in line.split()]
        for line in lines_from_file(path)
        if line.strip()
    ]


def grid_from_file(path: PathLike, convert: Callable[[str], T] = str) -> "Grid[T]":
    from advent_of_code.grid import Grid

    lines = [line for line in lines_from_file(path) if line]
    return Grid.from_lines(lines, convert)
