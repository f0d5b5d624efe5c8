"""Days 21 to 25 on the puzzle examples."""

from __future__ import annotations

import numpy as np
import pytest

from advent_of_code import day21, day22, day23, day24, day25
from advent_of_code.file_io import PuzzleInputError


def test_day21(data) -> None:
    assert day21.part1(data("day21.txt")) == 126384
    assert day21.part2(data("day21.txt")) == 154115708116294


def test_day21_single_keypad() -> None:
    door = day21.Keypad.numeric(controller=day21.Keypad.directional())
    assert door.min_for_sequence("023A") == "<A^A>AvA"


@pytest.mark.parametrize("code, length", [
    ("029A", 68),
    ("980A", 60),
    ("179A", 68),
    ("456A", 64),
    ("379A", 64),
])
def test_day21_two_robots(code: str, length: int) -> None:
    door = day21.Keypad.robot_chain(2)
    assert len(door.min_for_sequence(code)) == length
    assert door.min_len_for_sequence(code) == length


def test_day21_avoids_the_gap() -> None:
    numeric = day21.Keypad.numeric()
    assert numeric.key_sequences(("A", "1")) == {"^<<A"}
    assert numeric.key_sequences(("1", "A")) == {">>vA"}
    directional = day21.Keypad.directional()
    assert directional.key_sequences(("<", "^")) == {">^A"}


def test_day21_unknown_key() -> None:
    with pytest.raises(ValueError):
        day21.Keypad.numeric().key_sequences(("A", "B"))


def test_day21_numeric_part() -> None:
    assert day21.numeric_part("029A") == 29
    with pytest.raises(PuzzleInputError):
        day21.numeric_part("A")


def test_day22(data) -> None:
    assert day22.part1(data("day22a.txt")) == 37327623
    assert day22.part2(data("day22b.txt")) == 23


def test_day22_secret_sequence() -> None:
    history = day22.secret_history([123], steps=10)
    assert history[0].tolist() == [
        123, 15887950, 16495136, 527345, 704524, 1553684,
        12683156, 11100544, 12249484, 7753432, 5908254,
    ]


def test_day22_vectorised_step() -> None:
    secrets = day22.next_secret(np.array([123, 15887950], dtype=np.int64))
    assert secrets.tolist() == [15887950, 16495136]


def test_day22_short_history() -> None:
    assert day22.most_bananas([123], steps=9) == 6


def test_day23(data) -> None:
    assert day23.part1(data("day23.txt")) == 7
    assert day23.part2(data("day23.txt")) == "co,de,ka,ta"


def test_day23_threeways(data) -> None:
    graph = day23.ComputerGraph.from_file(data("day23.txt"))
    assert ("co", "de", "ta") in graph.find_threeway_games("t")
    assert len(graph.find_threeway_games("")) == 12


def test_day23_bad_names(tmp_path) -> None:
    path = tmp_path / "lan.txt"
    path.write_text("abc-de\n")
    with pytest.raises(PuzzleInputError):
        day23.ComputerGraph.from_file(path)


def test_day24(data) -> None:
    assert day24.part1(data("day24.txt")) == 4


def adder_gates(bits: int, swaps: list[tuple[str, str]]) -> list[str]:
    gates = []
    for i in range(bits):
        x, y = day24.wire("x", i), day24.wire("y", i)
        if i == 0:
            gates += [f"{x} XOR {y} -> z00", f"{x} AND {y} -> cr01"]
            continue
        carry_out = day24.wire("z", bits) if i == bits - 1 else f"cr{i + 1:02}"
        gates += [
            f"{x} XOR {y} -> xr{i:02}",
            f"{x} AND {y} -> an{i:02}",
            f"xr{i:02} XOR cr{i:02} -> z{i:02}",
            f"xr{i:02} AND cr{i:02} -> pc{i:02}",
            f"an{i:02} OR pc{i:02} -> {carry_out}",
        ]
    rename = {}
    for a, b in swaps:
        rename[a], rename[b] = b, a
    swapped = []
    for gate in gates:
        expression, out = gate.split(" -> ")
        swapped.append(f"{expression} -> {rename.get(out, out)}")
    return swapped


def adder_device(bits: int, swaps: list[tuple[str, str]]) -> day24.Device:
    values = [f"{name}{i:02}: 0" for name in "xy" for i in range(bits)]
    return day24.Device.from_paragraphs(values, adder_gates(bits, swaps))


SWAPS = [("z05", "cr06"), ("xr10", "an10"), ("z15", "pc15"), ("z25", "an25")]


def test_day24_correct_adder_adds() -> None:
    device = adder_device(30, [])
    assert day24.find_swapped_wires(device) == []
    device.set_x_y(123456789, 987654321)
    assert device.x() == 123456789
    assert device.y() == 987654321
    assert device.z() == 123456789 + 987654321
    adders = device.decompose_into_adders()
    assert [adder.s_out for adder in adders] == [day24.wire("z", i) for i in range(30)]
    assert adders[-1].c_out == "z30"


def test_day24_swap_unknown_gate() -> None:
    device = adder_device(4, [])
    with pytest.raises(day24.IncompleteDeviceError):
        device.swap_gates("z00", "nope")


def test_day24_finds_swapped_wires() -> None:
    device = adder_device(30, SWAPS)
    expected = sorted(name for pair in SWAPS for name in pair)
    assert day24.find_swapped_wires(device) == expected

    device.set_x_y(2**29 - 1, 1)
    assert device.z() != 2**29

    for a, b in SWAPS:
        device.swap_gates(a, b)
    device.set_x_y(2**29 - 1, 1)
    assert device.z() == 2**29


def test_day24_part2(tmp_path) -> None:
    values = [f"{name}{i:02}: 0" for name in "xy" for i in range(30)]
    path = tmp_path / "device.txt"
    path.write_text("\n".join(values) + "\n\n" + "\n".join(adder_gates(30, SWAPS)) + "\n")
    assert day24.part2(path) == "an10,an25,cr06,pc15,xr10,z05,z15,z25"


def test_day24_mermaid_diagram() -> None:
    diagram = day24.mermaid_diagram(adder_device(3, []))
    assert diagram.startswith("flowchart TB")
    assert "subgraph adder02" in diagram
    assert "x01-->xr01[XOR:xr01]" in diagram


def test_day24_circular_gates() -> None:
    device = day24.Device.from_paragraphs(
        ["x00: 1"], ["x00 AND b -> a", "a OR x00 -> b", "a XOR x00 -> z00"]
    )
    with pytest.raises(day24.CircularGateError):
        device.z()
    assert not device.is_valid()


def test_day24_missing_wire() -> None:
    device = day24.Device.from_paragraphs(["x00: 1"], ["x00 AND y00 -> z00"])
    with pytest.raises(day24.IncompleteDeviceError):
        device.z()


def test_day24_bad_gate() -> None:
    with pytest.raises(PuzzleInputError):
        day24.Device.from_paragraphs(["x00: 1"], ["x00 NAND y00 -> z00"])


def test_day25(data) -> None:
    assert day25.part1(data("day25.txt")) == 3
    assert day25.part2(data("day25.txt")) == "Deliver the chronicle!"


def test_day25_pin_heights(data) -> None:
    locks, keys = day25.locks_and_keys(data("day25.txt"))
    assert locks.tolist() == [[0, 5, 3, 4, 3], [1, 2, 0, 5, 3]]
    assert keys.tolist() == [[5, 0, 2, 1, 3], [4, 3, 4, 0, 2], [3, 0, 2, 0, 1]]


def test_day25_bad_block(tmp_path) -> None:
    path = tmp_path / "locks.txt"
    path.write_text("#.#.#\n.....\n")
    with pytest.raises(PuzzleInputError):
        day25.part1(path)
