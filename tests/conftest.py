from __future__ import annotations

import pathlib

import pytest

DATA_DIR = pathlib.Path(__file__).resolve().parent / "data"


@pytest.fixture
def data():
    """Path of an example input stored under tests/data."""

    def _data(name: str) -> pathlib.Path:
        return DATA_DIR / name

    return _data
