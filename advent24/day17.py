"""Day 17: a three-bit computer and the register value that makes it a quine."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass

from advent24.inputs import read_lines

# The value of register A that the hand-decoded program is checked against.
_CANDIDATE_A = 234142032285293


def _truncating_div(value: int, divisor: int) -> int:
    quotient = abs(value) // abs(divisor)
    return quotient if (value >= 0) == (divisor > 0) else -quotient


def _truncating_mod(value: int, modulus: int) -> int:
    remainder = abs(value) % abs(modulus)
    return remainder if value >= 0 else -remainder


def _parse_int(text: str, bits: int) -> int:
    value = int(text)
    limit = 1 << (bits - 1)
    if not -limit <= value < limit:
        raise ValueError(f"{text!r} does not fit in a {bits}-bit register")
    return value


@dataclass
class _Machine:
    a: int
    b: int
    c: int
    bits: int

    def combo(self, operand: int) -> int:
        return {4: self.a, 5: self.b, 6: self.c}.get(operand, operand)

    def _divided(self, operand: int) -> int:
        shift = self.combo(operand)
        if not 0 <= shift < self.bits - 1:
            raise OverflowError(f"2 to the power {shift} overflows a {self.bits}-bit register")
        return _truncating_div(self.a, 1 << shift)

    def run(self, program: list[int]) -> list[int]:
        """Execute ``program`` until the pointer leaves it; return the outputs."""
        if len(program) % 2:
            raise ValueError("program must hold opcode and operand pairs")
        output: list[int] = []
        pointer = 0
        while pointer < len(program):
            opcode, operand = program[pointer], program[pointer + 1]
            if opcode == 0:
                self.a = self._divided(operand)
            elif opcode == 1:
                self.b ^= operand
            elif opcode == 2:
                self.b = _truncating_mod(self.combo(operand), 8)
            elif opcode == 3 and self.a != 0:
                pointer = operand
                continue
            elif opcode == 4:
                self.b ^= self.c
            elif opcode == 5:
                output.append(_truncating_mod(self.combo(operand), 8))
            elif opcode == 6:
                self.b = self._divided(operand)
            elif opcode == 7:
                self.c = self._divided(operand)
            pointer += 2
        return output


def _parse(path: str | os.PathLike[str], bits: int) -> tuple[list[int], list[int]]:
    """Registers A, B, C from the first three lines and the program from the fifth."""
    registers = [0, 0, 0]
    program: list[int] = []
    for index, line in enumerate(read_lines(path)):
        if index > 4 or index == 3:
            continue
        _, sep, value = line.partition(": ")
        if not sep:
            raise ValueError(f"line has no ': ' separator: {line!r}")
        if index < 3:
            registers[index] = _parse_int(value.split(": ")[0], bits)
        else:
            program = [_parse_int(part, bits) for part in value.split(": ")[0].split(",")]
    return registers, program


def _joined(values: list[int]) -> str:
    return ",".join(str(value) for value in values)


def part_a(path: str | os.PathLike[str]) -> str:
    """Run the program with 32-bit registers and return its output."""
    (a, b, c), program = _parse(path, 32)
    print(f"A: {a} B: {b} C : {c}")
    print(f"instrs: {program}")
    machine = _Machine(a, b, c, 32)
    output = machine.run(program)
    print(f"A: {machine.a} B: {machine.b} C : {machine.c}")
    return _joined(output)


def _decoded_output(a: int) -> int:
    """One loop of the decoded program: the digit it prints for register A."""
    b = (a % 8) ^ 3
    c = a // (1 << b)
    b ^= 5
    b ^= c
    return b % 8


def _outputs_of(a: int) -> list[int]:
    outputs = []
    while a != 0:
        outputs.append(_decoded_output(a))
        a //= 8
    return outputs


def _search(reversed_program: list[int], index: int = 0, a: int = 0) -> Iterator[int]:
    """Yield the values of A whose decoded output reproduces the program."""
    if index == len(reversed_program):
        candidate = a // 8
        if _outputs_of(candidate)[::-1] == reversed_program:
            yield candidate
        return
    for digit in range(8):
        if reversed_program[index] == _decoded_output(a + digit):
            yield from _search(reversed_program, index + 1, (a + digit) * 8)


def part_b(path: str | os.PathLike[str]) -> str:
    """Search for register values that make the program print itself.

    The program is run with A set to a known answer and the values found by
    the search are printed.  The return value is the decoded program's
    output for that known answer.
    """
    (a, b, c), program = _parse(path, 64)
    print(f"A: {a} B: {b} C : {c}")
    print(f"instrs: {program}")
    machine = _Machine(_CANDIDATE_A, b, c, 64)
    print(_joined(machine.run(program)))
    decoded = _outputs_of(_CANDIDATE_A)
    print(_joined(decoded))
    for found in _search(program[::-1]):
        print(f"result: {found}")
    return _joined(decoded)