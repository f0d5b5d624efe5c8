"""Day 9 - Disk Fragmenter

The disk map alternates file and free-space sizes: "12345" is one block of
file 0, two free, three blocks of file 1, four free, five blocks of file 2.
"""

from typing import Dict, List, Tuple

from sortedcontainers import SortedList

from advent_of_code.file_io import PathLike, PuzzleInputError, read_text


def partial_checksum(file_id: int, start_position: int, size: int) -> int:
    """Checksum of `size` blocks of `file_id` starting at `start_position`."""
    # sum(range(start, start + size)) in closed form
    return file_id * (size * (2 * start_position + size - 1) // 2)


def sizes_from_string(disk_map: str) -> List[int]:
    disk_map = disk_map.strip()
    if not disk_map.isdigit():
        raise PuzzleInputError(f"Disk map must only contain digits, got {disk_map[:20]!r}")
    return [int(c) for c in disk_map]


def block_compacted_checksum(sizes: List[int]) -> int:
    """Move single blocks from the end into the leftmost gaps.

    Two pointers walk in from both ends; the compacted disk is never built.
    """
    files = sizes[0::2]
    frees = sizes[1::2]
    if not files:
        return 0

    right = len(files) - 1
    right_remaining = files[right]
    position = 0
    checksum = 0

    for left in range(len(files)):
        if left > right:
            break
        # the right file may already have been partially moved
        size = right_remaining if left == right else files[left]
        checksum += partial_checksum(left, position, size)
        position += size
        if left == right:
            break

        free = frees[left] if left < len(frees) else 0
        while free > 0 and right > left:
            moved = min(free, right_remaining)
            checksum += partial_checksum(right, position, moved)
            position += moved
            free -= moved
            right_remaining -= moved
            if right_remaining == 0:
                right -= 1
                right_remaining = files[right]

    return checksum


def file_compacted_checksum(sizes: List[int]) -> int:
    """Move whole files, highest id first, into the leftmost gap that fits."""
    files: List[Tuple[int, int]] = []  # (start, size) per file id
    spans: List[Tuple[int, int]] = []  # (start, size) per free span

    position = 0
    for idx, size in enumerate(sizes):
        if idx % 2 == 0:
            files.append((position, size))
        elif size > 0:
            # only empty files lie between touching spans
            if spans and sum(spans[-1]) == position:
                span_start, span_size = spans.pop()
                spans.append((span_start, span_size + size))
            else:
                spans.append((position, size))
        position += size

    # gap size -> start positions of gaps of exactly that size
    max_gap = max((size for _, size in spans), default=0)
    gaps: Dict[int, SortedList] = {size: SortedList() for size in range(1, max_gap + 1)}
    for span_start, span_size in spans:
        gaps[span_size].add(span_start)

    checksum = 0
    for file_id in range(len(files) - 1, -1, -1):
        start, size = files[file_id]
        if size == 0:
            continue
        best_start, best_size = start, None
        for gap_size in range(size, max_gap + 1):
            candidates = gaps[gap_size]
            if candidates and candidates[0] < best_start:
                best_start, best_size = candidates[0], gap_size

        if best_size is not None:
            gaps[best_size].remove(best_start)
            leftover = best_size - size
            if leftover > 0:
                gaps[leftover].add(best_start + size)
            start = best_start

        checksum += partial_checksum(file_id, start, size)

    return checksum


def part1(path: PathLike) -> int:
    return block_compacted_checksum(sizes_from_string(read_text(path)))


def part2(path: PathLike) -> int:
    return file_compacted_checksum(sizes_from_string(read_text(path)))
