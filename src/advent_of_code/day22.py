"""Day 22 - Monkey Market

Buyers' secret numbers are evolved all at once as a numpy vector.
"""

from typing import Iterable, List

import numpy as np

from advent_of_code.file_io import PathLike, PuzzleInputError, strings_from_file

PRUNE_MASK = 0xFFFFFF  # 16777216 - 1
STEPS = 2000
WINDOW = 4
DIFF_BASE = 19  # price changes lie in -9..9


def next_secret(secrets: np.ndarray) -> np.ndarray:
    """One evolution step for every secret in the array."""
    secrets = secrets ^ ((secrets << 6) & PRUNE_MASK)
    secrets = secrets ^ (secrets >> 5)
    return secrets ^ ((secrets << 11) & PRUNE_MASK)


def secret_history(initial: Iterable[int], steps: int = STEPS) -> np.ndarray:
    """Array of shape (buyers, steps + 1): each row starts with the initial secret."""
    secrets = np.asarray(list(initial), dtype=np.int64)
    history = np.empty((secrets.size, steps + 1), dtype=np.int64)
    history[:, 0] = secrets
    for step in range(1, steps + 1):
        secrets = next_secret(secrets)
        history[:, step] = secrets
    return history


def load_secrets(path: PathLike) -> List[int]:
    secrets = []
    for line in strings_from_file(path):
        if not line.strip():
            continue
        try:
            secrets.append(int(line))
        except ValueError as exc:
            raise PuzzleInputError(f"{path}: not a secret number: {line!r}") from exc
    return secrets


def sum_of_final_secrets(initial: Iterable[int], steps: int = STEPS) -> int:
    secrets = np.asarray(list(initial), dtype=np.int64)
    for _ in range(steps):
        secrets = next_secret(secrets)
    return int(secrets.sum())


def most_bananas(initial: Iterable[int], steps: int = STEPS) -> int:
    """Best total over all 4-change sequences; each buyer sells at the first match."""
    prices = secret_history(initial, steps) % 10
    buyers = prices.shape[0]
    if prices.shape[1] <= WINDOW:
        return 0
    changes = np.diff(prices, axis=1) + 9

    n_windows = changes.shape[1] - WINDOW + 1
    keys = np.zeros((buyers, n_windows), dtype=np.int64)
    for offset in range(WINDOW):
        keys = keys * DIFF_BASE + changes[:, offset : offset + n_windows]
    sale_prices = prices[:, WINDOW:]

    n_keys = DIFF_BASE**WINDOW
    per_buyer = keys + np.arange(buyers, dtype=np.int64)[:, None] * n_keys
    unique_keys, first = np.unique(per_buyer.ravel(), return_index=True)
    totals = np.bincount(
        unique_keys % n_keys, weights=sale_prices.ravel()[first], minlength=n_keys
    )
    return int(totals.max())


def part1(path: PathLike) -> int:
    return sum_of_final_secrets(load_secrets(path))


def part2(path: PathLike) -> int:
    return most_bananas(load_secrets(path))
