"""Day 19 - Linen Layout"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Dict, Iterable, List, Tuple

from advent_of_code.file_io import PathLike, PuzzleInputError, paragraphs_from_file


class Stripe(Enum):
    WHITE = "w"
    BLUE = "u"
    BLACK = "b"
    RED = "r"
    GREEN = "g"

    @classmethod
    def from_char(cls, c: str) -> Stripe:
        try:
            return cls(c)
        except ValueError:
            raise ValueError(f"Invalid character {c!r} for parsing stripe.") from None


Pattern = Tuple[Stripe, ...]


def pattern_from_word(word: str) -> Pattern:
    return tuple(Stripe.from_char(c) for c in word.strip())


class PatternTrieNode:
    __slots__ = ("is_end_of_pattern", "children")

    def __init__(self, is_end_of_pattern: bool = False):
        self.is_end_of_pattern = is_end_of_pattern
        self.children: Dict[Stripe, PatternTrieNode] = {}


class PatternTrie:
    def __init__(self, patterns: Iterable[Pattern] = ()):
        # the empty pattern is always contained
        self.root = PatternTrieNode(is_end_of_pattern=True)
        self.ways_to_make = lru_cache(maxsize=None)(self._ways_to_make)
        for pattern in patterns:
            self.insert(pattern)

    def insert(self, pattern: Pattern) -> None:
        node = self.root
        for stripe in pattern:
            node = node.children.setdefault(stripe, PatternTrieNode())
        node.is_end_of_pattern = True
        self.ways_to_make.cache_clear()

    def contains(self, pattern: Pattern) -> bool:
        node = self.root
        for stripe in pattern:
            node = node.children.get(stripe)
            if node is None:
                return False
        return node.is_end_of_pattern

    def prefix_lengths(self, pattern: Pattern, start: int = 0) -> Iterable[int]:
        """Lengths of the non-empty stored patterns that `pattern[start:]` begins with."""
        node = self.root
        for length, stripe in enumerate(pattern[start:], start=1):
            node = node.children.get(stripe)
            if node is None:
                return
            if node.is_end_of_pattern:
                yield length

    def can_make(self, pattern: Pattern) -> bool:
        return self.ways_to_make(pattern) > 0

    def _ways_to_make(self, pattern: Pattern) -> int:
        """Number of ways to build `pattern` by concatenating stored patterns."""
        if not pattern:
            return 1
        return sum(
            self.ways_to_make(pattern[length:]) for length in self.prefix_lengths(pattern)
        )


def load_input(path: PathLike) -> Tuple[PatternTrie, List[Pattern]]:
    paragraphs = paragraphs_from_file(path)
    if len(paragraphs) != 2 or len(paragraphs[0]) != 1:
        raise PuzzleInputError(f"{path}: expected one line of towels, a blank line, then designs")
    towels = [pattern_from_word(word) for word in paragraphs[0][0].split(",")]
    designs = [pattern_from_word(line) for line in paragraphs[1]]
    return PatternTrie(towels), designs


def part1(path: PathLike) -> int:
    towel_trie, designs = load_input(path)
    return sum(1 for design in designs if towel_trie.can_make(design))


def part2(path: PathLike) -> int:
    towel_trie, designs = load_input(path)
    return sum(towel_trie.ways_to_make(design) for design in designs)
