"""Day 24 - Crossed Wires

The device is a network of boolean gates that is meant to be a ripple-carry
adder z = x + y. Each full adder for bit i looks like

    bit_xor   = x_i XOR y_i
    bit_and   = x_i AND y_i
    pre_carry = carry_i AND bit_xor
    carry_i+1 = bit_and OR pre_carry
    z_i       = bit_xor XOR carry_i

with a half adder for bit 0 and the last carry driving the highest z wire.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Iterable, List, Set, Tuple

from loguru import logger

from advent_of_code.file_io import PathLike, PuzzleInputError, paragraphs_from_file

MISSING_NODE = "_"


class DeviceError(ValueError):
    pass


class CircularGateError(DeviceError):
    pass


class IncompleteDeviceError(DeviceError):
    pass


class GateType(Enum):
    AND = "AND"
    OR = "OR"
    XOR = "XOR"

    def apply(self, a: bool, b: bool) -> bool:
        if self is GateType.AND:
            return a and b
        if self is GateType.OR:
            return a or b
        return a != b


@dataclass(frozen=True)
class Gate:
    a: str
    b: str
    op: GateType

    @property
    def inputs(self) -> FrozenSet[str]:
        return frozenset((self.a, self.b))

    def key(self) -> Tuple[FrozenSet[str], GateType]:
        """Identity of the gate regardless of input order."""
        return self.inputs, self.op

    def __str__(self) -> str:
        return f"{self.a} {self.op.value} {self.b}"


@dataclass
class Adder:
    x_in: str
    y_in: str
    c_in: str
    bit_xor: str
    bit_and: str
    pre_c_out: str
    c_out: str
    s_out: str


def wire(prefix: str, bit: int) -> str:
    return f"{prefix}{bit:02}"


def _is_input(name: str) -> bool:
    return name[0] in "xy"


def _parse_bool(text: str) -> bool:
    if text == "0":
        return False
    if text == "1":
        return True
    raise PuzzleInputError(f"Wire values must be 0 or 1, got {text!r}")


class Device:
    def __init__(self, initial_values: Dict[str, bool], gate_map: Dict[str, Gate]):
        self.initial_values = dict(initial_values)
        self.known_values = dict(initial_values)
        self.gate_map = gate_map
        self.input_bits = sum(1 for name in initial_values if name.startswith("x"))

    @classmethod
    def from_paragraphs(cls, values: Iterable[str], gates: Iterable[str]) -> Device:
        initial_values = {}
        for line in values:
            name, sep, value = line.partition(": ")
            if not sep:
                raise PuzzleInputError(f"Known values should look like 'abc: 0/1', got {line!r}")
            initial_values[name] = _parse_bool(value.strip())

        gate_map: Dict[str, Gate] = {}
        for line in gates:
            words = line.split()
            if len(words) != 5 or words[3] != "->":
                raise PuzzleInputError(f"Line {line!r} is not a gate")
            a, op, b, _, out = words
            try:
                gate_type = GateType(op)
            except ValueError as exc:
                raise PuzzleInputError(f"Unknown gate type {op!r}") from exc
            if out in gate_map:
                raise PuzzleInputError(f"Wire {out} is driven by two gates")
            gate_map[out] = Gate(a, b, gate_type)
        return cls(initial_values, gate_map)

    @classmethod
    def from_file(cls, path: PathLike) -> Device:
        paragraphs = paragraphs_from_file(path)
        if len(paragraphs) != 2:
            raise PuzzleInputError(f"{path}: expected wire values and gates separated by a blank line")
        return cls.from_paragraphs(*paragraphs)

    def compute(self, name: str) -> bool:
        return self._compute(name, set())

    def _compute(self, name: str, pending: Set[str]) -> bool:
        if name in self.known_values:
            return self.known_values[name]
        if name in pending:
            raise CircularGateError(f"Wire {name} depends on itself")
        try:
            gate = self.gate_map[name]
        except KeyError:
            raise IncompleteDeviceError(f"Wire {name} has no value and no gate") from None

        pending.add(name)
        value = gate.op.apply(self._compute(gate.a, pending), self._compute(gate.b, pending))
        pending.discard(name)
        self.known_values[name] = value
        return value

    def _assemble(self, prefix: str) -> int:
        number = 0
        bit = 0
        while (name := wire(prefix, bit)) in self.known_values:
            if self.known_values[name]:
                number |= 1 << bit
            bit += 1
        return number

    def x(self) -> int:
        return self._assemble("x")

    def y(self) -> int:
        return self._assemble("y")

    def z(self) -> int:
        for name in self.gate_map:
            if name.startswith("z"):
                self.compute(name)
        return self._assemble("z")

    def is_valid(self) -> bool:
        try:
            self.z()
        except DeviceError:
            return False
        return True

    def set_x_y(self, x: int, y: int) -> None:
        self.known_values = {}
        for bit in range(self.input_bits):
            self.known_values[wire("x", bit)] = bool(x >> bit & 1)
            self.known_values[wire("y", bit)] = bool(y >> bit & 1)

    def swap_gates(self, name1: str, name2: str) -> None:
        for name in (name1, name2):
            if name not in self.gate_map:
                raise IncompleteDeviceError(f"No gate for {name} found")
        self.gate_map[name1], self.gate_map[name2] = self.gate_map[name2], self.gate_map[name1]
        self.known_values = {
            name: value for name, value in self.known_values.items() if _is_input(name)
        }

    @property
    def highest_z(self) -> str:
        return wire("z", self.input_bits)

    def decompose_into_adders(self) -> List[Adder]:
        """Match the gates against the textbook adder, bit by bit.

        A gate that cannot be found (because one of its inputs is already wrong)
        shows up as MISSING_NODE.
        """
        by_key: Dict[Tuple[FrozenSet[str], GateType], str] = {}
        for name, gate in self.gate_map.items():
            if gate.key() in by_key:
                raise PuzzleInputError(f"Gate {name} duplicates {by_key[gate.key()]}")
            by_key[gate.key()] = name

        def lookup(a: str, b: str, op: GateType) -> str:
            return by_key.get((frozenset((a, b)), op), MISSING_NODE)

        bits = self.input_bits
        bit_xor = [lookup(wire("x", i), wire("y", i), GateType.XOR) for i in range(bits)]
        bit_and = [lookup(wire("x", i), wire("y", i), GateType.AND) for i in range(bits)]

        pre_carry = [MISSING_NODE, MISSING_NODE]
        carry = [MISSING_NODE, bit_and[0]]
        for bit in range(2, bits + 1):
            pre_carry.append(lookup(carry[bit - 1], bit_xor[bit - 1], GateType.AND))
            carry.append(lookup(bit_and[bit - 1], pre_carry[bit], GateType.OR))

        outputs = [bit_xor[0]]
        outputs += [lookup(bit_xor[i], carry[i], GateType.XOR) for i in range(1, bits)]

        return [
            Adder(
                x_in=wire("x", i),
                y_in=wire("y", i),
                c_in=carry[i],
                bit_xor=bit_xor[i],
                bit_and=bit_and[i],
                pre_c_out=pre_carry[i + 1],
                c_out=carry[i + 1],
                s_out=outputs[i],
            )
            for i in range(bits)
        ]


def mermaid_diagram(device: Device) -> str:
    """Mermaid flowchart with one subgraph per full adder."""
    subgraphs = []
    for idx, adder in enumerate(device.decompose_into_adders()):
        subgraphs.append(
            "\n".join(
                [
                    f"    subgraph adder{idx:02}",
                    f"        {adder.x_in}[X]",
                    f"        {adder.y_in}[Y]",
                    f"        {adder.bit_xor}[XOR]",
                    f"        {adder.bit_and}[AND]",
                    f"        {adder.pre_c_out}[AND]",
                    f"        {adder.c_out}[C]",
                    f"        {adder.s_out}_[S]",
                    "    end",
                ]
            )
        )
    connectors = []
    for name, gate in sorted(device.gate_map.items()):
        connectors.append(f"    {gate.a}-->{name}[{gate.op.value}:{name}]")
        connectors.append(f"    {gate.b}-->{name}")
    return "\n".join(["flowchart TB", *subgraphs, *connectors])


def find_swapped_wires(device: Device) -> List[str]:
    """Wires whose gate breaks the ripple-carry wiring rules."""
    consumers: Dict[str, Set[GateType]] = {}
    for gate in device.gate_map.values():
        for name in gate.inputs:
            consumers.setdefault(name, set()).add(gate.op)

    first_bit = {wire("x", 0), wire("y", 0)}
    suspicious = set()
    for name, gate in device.gate_map.items():
        from_inputs = all(_is_input(source) for source in gate.inputs)
        feeds = consumers.get(name, set())
        if name.startswith("z") and name != device.highest_z and gate.op is not GateType.XOR:
            suspicious.add(name)
        elif name == device.highest_z and gate.op is not GateType.OR:
            suspicious.add(name)
        elif gate.op is GateType.XOR and not from_inputs and not name.startswith("z"):
            suspicious.add(name)
        elif gate.op is GateType.XOR and from_inputs and gate.inputs != first_bit:
            if GateType.XOR not in feeds:
                suspicious.add(name)
        elif gate.op is GateType.AND and gate.inputs != first_bit:
            if GateType.OR not in feeds:
                suspicious.add(name)
    return sorted(suspicious)


def part1(path: PathLike) -> int:
    return Device.from_file(path).z()


def part2(path: PathLike) -> str:
    device = Device.from_file(path)
    logger.opt(lazy=True).debug("Device diagram:\n{}", lambda: mermaid_diagram(device))
    return ",".join(find_swapped_wires(device))
