"""Day 5 - Print Queue"""

from collections import defaultdict
from functools import cmp_to_key
from typing import Dict, List, Set, Tuple

from advent_of_code.file_io import PathLike, PuzzleInputError, paragraphs_from_file

# page -> pages that must come after it
RuleSet = Dict[int, Set[int]]
Update = List[int]


def middle_page(update: Update) -> int:
    return update[len(update) // 2]


def is_valid(update: Update, rules: RuleSet) -> bool:
    previous_pages: Set[int] = set()
    for page in update:
        if not previous_pages.isdisjoint(rules.get(page, ())):
            return False
        previous_pages.add(page)
    return True


def fix_update(update: Update, rules: RuleSet) -> Update:
    def compare(left: int, right: int) -> int:
        if right in rules.get(left, ()):
            return -1
        if left in rules.get(right, ()):
            return 1
        return 0

    return sorted(update, key=cmp_to_key(compare))


def read_in_file(path: PathLike) -> Tuple[RuleSet, List[Update]]:
    paragraphs = paragraphs_from_file(path)
    if len(paragraphs) != 2:
        raise PuzzleInputError(f"{path}: expected rules and updates separated by a blank line")
    rule_lines, update_lines = paragraphs

    rules: RuleSet = defaultdict(set)
    try:
        for line in rule_lines:
            key, value = line.split("|")
            rules[int(key)].add(int(value))
        updates = [[int(page) for page in line.split(",")] for line in update_lines]
    except ValueError as exc:
        raise PuzzleInputError(f"{path}: {exc}") from exc
    return dict(rules), updates


def part1(path: PathLike) -> int:
    rules, updates = read_in_file(path)
    return sum(middle_page(update) for update in updates if is_valid(update, rules))


def part2(path: PathLike) -> int:
    rules, updates = read_in_file(path)
    return sum(
        middle_page(fix_update(update, rules))
        for update in updates
        if not is_valid(update, rules)
    )
