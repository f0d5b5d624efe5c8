"""
Configuration & Path Management
===============================
Central place for the input directory and global flags.

Exports:
    INPUT_DIR (Path): Directory holding the real puzzle inputs (`inputNN.txt`).
    DEBUG (bool): Default for verbose logging when the CLI is not given -v.
"""
import os
from pathlib import Path

PROJECT_ROOT: Path = Path(__file__).resolve().parents[2]

INPUT_DIR: Path = Path(os.environ.get("AOC_INPUT_DIR", PROJECT_ROOT / "input"))
DEBUG: bool = os.environ.get("AOC_DEBUG", "0") not in ("", "0", "false", "False")

N_DAYS: int = 25


def input_path(day: int, input_dir: Path | None = None) -> Path:
    """Path of the real input for `day`, e.g. input/input07.txt."""
    return (input_dir or INPUT_DIR) / f"input{day:02d}.txt"
