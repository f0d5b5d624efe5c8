"""Day 17 - Chronospatial Computer

A 3-bit machine with three unbounded registers. Every instruction is an
opcode followed by one operand; the instruction pointer advances by two
unless a jump happens.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional, Sequence

from advent_of_code.file_io import PathLike, PuzzleInputError, read_text


class Opcode(IntEnum):
    ADV = 0
    BXL = 1
    BST = 2
    JNZ = 3
    BXC = 4
    OUT = 5
    BDV = 6
    CDV = 7


HALT = object()


def parse_program_string(program_string: str) -> List[int]:
    try:
        program = [int(s) for s in program_string.split(",")]
    except ValueError as exc:
        raise PuzzleInputError(f"Error parsing program input {program_string!r}") from exc
    if any(not 0 <= value < 8 for value in program):
        raise PuzzleInputError(f"Program values must be 3-bit: {program_string!r}")
    return program


def _register(data_string: str, name: str) -> int:
    match = re.search(rf"Register {name}: (\d+)", data_string)
    if match is None:
        raise PuzzleInputError(f"Register {name} could not be parsed.")
    return int(match.group(1))


@dataclass
class ProgramState:
    program: List[int]
    a: int = 0
    b: int = 0
    c: int = 0
    instruction_ptr: int = 0
    outputs: List[int] = field(default_factory=list)

    @classmethod
    def from_string(cls, data_string: str) -> ProgramState:
        match = re.search(r"Program: (.*)", data_string)
        if match is None:
            raise PuzzleInputError("Program could not be parsed.")
        return cls(
            program=parse_program_string(match.group(1).strip()),
            a=_register(data_string, "A"),
            b=_register(data_string, "B"),
            c=_register(data_string, "C"),
        )

    def combo(self, operand: int) -> int:
        if operand < 4:
            return operand
        if operand == 4:
            return self.a
        if operand == 5:
            return self.b
        if operand == 6:
            return self.c
        raise ValueError("Combo value 7 is reserved - invalid program.")

    def step(self):
        """Execute one instruction; returns an output value, None, or HALT."""
        if self.instruction_ptr > len(self.program) - 2:
            return HALT

        opcode = Opcode(self.program[self.instruction_ptr])
        operand = self.program[self.instruction_ptr + 1]
        self.instruction_ptr += 2

        if opcode is Opcode.ADV:
            self.a >>= self.combo(operand)
        elif opcode is Opcode.BXL:
            self.b ^= operand
        elif opcode is Opcode.BST:
            self.b = self.combo(operand) % 8
        elif opcode is Opcode.JNZ:
            if self.a != 0:
                self.instruction_ptr = operand
        elif opcode is Opcode.BXC:
            self.b ^= self.c
        elif opcode is Opcode.OUT:
            value = self.combo(operand) % 8
            self.outputs.append(value)
            return value
        elif opcode is Opcode.BDV:
            self.b = self.a >> self.combo(operand)
        elif opcode is Opcode.CDV:
            self.c = self.a >> self.combo(operand)
        return None

    def run(self) -> str:
        while self.step() is not HALT:
            pass
        return ",".join(str(out) for out in self.outputs)

    def first_output(self) -> Optional[int]:
        while (result := self.step()) is not HALT:
            if result is not None:
                return result
        return None


def reverse_engineer_a(
    program: Sequence[int], intended_output: Sequence[int], fixed_a: int = 0
) -> Optional[int]:
    """Lowest A producing `intended_output`, found three bits at a time.

    Relies on the program shifting A right by three bits per output, so the
    last output only depends on the highest three bits of A.
    """
    if not intended_output:
        return fixed_a
    last_out = intended_output[-1]

    for low_bits in range(8):
        new_a = (fixed_a << 3) + low_bits
        if new_a == 0:
            # would never terminate the outer loop of the program
            continue
        if ProgramState(list(program), a=new_a).first_output() == last_out:
            total_a = reverse_engineer_a(program, intended_output[:-1], new_a)
            if total_a is not None:
                return total_a
    return None


def load_program(path: PathLike) -> ProgramState:
    return ProgramState.from_string(read_text(path))


def part1(path: PathLike) -> str:
    return load_program(path).run()


def part2(path: PathLike) -> Optional[int]:
    program = load_program(path).program
    return reverse_engineer_a(program, program)
