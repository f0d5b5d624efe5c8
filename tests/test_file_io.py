"""Loaders in advent_of_code.file_io."""

from __future__ import annotations

import pytest

from advent_of_code.file_io import (
    PuzzleInputError,
    grid_from_file,
    paragraphs_from_file,
    read_text,
    rows_from_file,
    strings_from_file,
    two_columns_from_file,
)


def test_two_columns(data) -> None:
    left, right = two_columns_from_file(data("day01.txt"))
    assert left == [3, 4, 2, 1, 3, 3]
    assert right == [4, 3, 5, 3, 9, 3]


def test_two_columns_rejects_three_words(tmp_path) -> None:
    path = tmp_path / "bad.txt"
    path.write_text("1 2 3\n")
    with pytest.raises(PuzzleInputError):
        two_columns_from_file(path)


def test_two_columns_rejects_non_numbers(tmp_path) -> None:
    path = tmp_path / "bad.txt"
    path.write_text("1 x\n")
    with pytest.raises(PuzzleInputError):
        two_columns_from_file(path)


def test_rows(data) -> None:
    rows = rows_from_file(data("day02.txt"))
    assert len(rows) == 6
    assert rows[0] == [7, 6, 4, 2, 1]


def test_paragraphs(data) -> None:
    rules, updates = paragraphs_from_file(data("day05.txt"))
    assert len(rules) == 21
    assert updates[-1] == "97,13,75,29,47"


def test_read_text_strips_trailing_newline(data) -> None:
    assert read_text(data("day09.txt")) == "2333133121414131402"


def test_strings_without_line_endings(tmp_path) -> None:
    path = tmp_path / "crlf.txt"
    path.write_bytes(b"ab\r\ncd\r\n")
    assert strings_from_file(path) == ["ab", "cd"]


def test_grid_from_file(data) -> None:
    grid = grid_from_file(data("day10.txt"), int)
    assert (grid.cols, grid.rows) == (8, 8)
    assert grid.data[0][:3] == [8, 9, 0]


def test_missing_file_is_not_wrapped(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        strings_from_file(tmp_path / "nope.txt")
