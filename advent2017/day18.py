"""Duet: programs exchanging values over queues."""

from __future__ import annotations

import argparse
import queue
import re
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Union

_SIGNED = re.compile(r"[+-]?[0-9]+")
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1

DEFAULT_TIMEOUT = 1.0


class InstructionParseError(ValueError):
    """Raised when an instruction cannot be parsed."""


@dataclass(frozen=True)
class Register:
    """The value held in a named register."""

    name: str


@dataclass(frozen=True)
class Number:
    """A literal value."""

    value: int


Value = Union[Register, Number]


@dataclass(frozen=True)
class Snd:
    value: Value


@dataclass(frozen=True)
class Set:
    register: str
    value: Value


@dataclass(frozen=True)
class Add:
    register: str
    value: Value


@dataclass(frozen=True)
class Mul:
    register: str
    value: Value


@dataclass(frozen=True)
class Mod:
    register: str
    value: Value


@dataclass(frozen=True)
class Rcv:
    register: str


@dataclass(frozen=True)
class Jgz:
    value: Value
    offset: Value


Instruction = Union[Snd, Set, Add, Mul, Mod, Rcv, Jgz]

_BINARY = {"set": Set, "add": Add, "mul": Mul, "mod": Mod}


def parse_value(text: str) -> Value:
    """A number if the text is one, otherwise the register named by its first character."""
    if _SIGNED.fullmatch(text):
        number = int(text)
        if _I64_MIN <= number <= _I64_MAX:
            return Number(number)
    if not text:
        raise InstructionParseError("empty value")
    return Register(text[0])


def _register_name(text: str) -> str:
    if not text:
        raise InstructionParseError("empty register name")
    return text[0]


def parse_instruction(text: str) -> Instruction:
    """Parse a line such as ``set a 5`` or ``jgz a -1``."""
    parts = text.split()
    if not parts:
        raise InstructionParseError("empty instruction")
    name, args = parts[0], parts[1:]

    def arg(index: int) -> str:
        if index >= len(args):
            raise InstructionParseError(f"missing argument: {text!r}")
        return args[index]

    if name == "snd":
        return Snd(parse_value(arg(0)))
    if name in _BINARY:
        register, value = arg(0), arg(1)
        return _BINARY[name](_register_name(register), parse_value(value))
    if name == "rcv":
        return Rcv(_register_name(arg(0)))
    if name == "jgz":
        value, offset = arg(0), arg(1)
        return Jgz(parse_value(value), parse_value(offset))
    raise InstructionParseError(f"unknown instruction: {text!r}")


def _remainder(a: int, b: int) -> int:
    """Remainder that takes the sign of the dividend."""
    r = abs(a) % abs(b)
    return -r if a < 0 else r


class Program:
    """One running copy of the instructions, with its own registers and inbox."""

    def __init__(
        self, pid: int, instructions: Sequence[Instruction], timeout: float = DEFAULT_TIMEOUT
    ) -> None:
        self.pid = pid
        self.instructions = list(instructions)
        self.timeout = timeout
        self.registers: dict[str, int] = {"p": pid}
        self.pc = 0
        self.inbox: queue.Queue[int] = queue.Queue()
        self.peers: dict[int, queue.Queue[int]] = {}

    def value_of(self, value: Value) -> int:
        """The number a value stands for in this program."""
        match value:
            case Register(name):
                return self.registers.get(name, 0)
            case Number(number):
                return number
        raise TypeError(f"not a value: {value!r}")

    def execute(self) -> int:
        """Run until the program ends or waits too long; return the number of values sent."""
        if not self.instructions:
            raise ValueError("no instructions to execute")

        registers = self.registers
        values_sent = 0

        while True:
            jumped = False

            match self.instructions[self.pc]:
                case Snd(value):
                    v = self.value_of(value)
                    for pid, inbox in self.peers.items():
                        if pid != self.pid:
                            inbox.put(v)
                    values_sent += 1
                case Set(name, value):
                    registers[name] = self.value_of(value)
                case Add(name, value):
                    registers[name] = registers.get(name, 0) + self.value_of(value)
                case Mul(name, value):
                    registers[name] = registers.get(name, 0) * self.value_of(value)
                case Mod(name, value):
                    registers[name] = _remainder(registers.get(name, 0), self.value_of(value))
                case Rcv(name):
                    try:
                        registers[name] = self.inbox.get(timeout=self.timeout)
                    except queue.Empty:
                        return values_sent
                case Jgz(value, offset):
                    v = self.value_of(value)
                    o = self.value_of(offset)
                    if v > 0:
                        self.pc += o
                        jumped = True

            if not jumped:
                self.pc += 1

            if not 0 <= self.pc < len(self.instructions):
                return values_sent


class Vm:
    """Runs several programs at once, each able to send to all the others."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.timeout = timeout
        self.programs: list[Program] = []

    def init_program(self, instructions: Sequence[Instruction]) -> None:
        """Add a program whose pid is its position, linked to all earlier ones."""
        program = Program(len(self.programs), instructions, self.timeout)
        for other in self.programs:
            other.peers[program.pid] = program.inbox
            program.peers[other.pid] = other.inbox
        self.programs.append(program)

    def execute(self) -> int:
        """Run all programs concurrently; return the values sent by the last one."""
        if not self.programs:
            return 0
        with ThreadPoolExecutor(max_workers=len(self.programs)) as pool:
            futures = [pool.submit(program.execute) for program in self.programs]
            results = [future.result() for future in futures]
        return results[-1]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run the duet.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)

    instructions = [
        parse_instruction(line) for line in args.input.read_text().splitlines()
    ]

    vm = Vm()
    vm.init_program(instructions)
    vm.init_program(instructions)

    print(f"Values sent by PID 1: {vm.execute()}")


if __name__ == "__main__":
    main()