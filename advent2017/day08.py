"""Register instructions with conditions."""

from __future__ import annotations

import argparse
import operator
import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

_SIGNED = re.compile(r"[+-]?[0-9]+")
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


class InstructionParseError(ValueError):
    """Raised when an instruction cannot be parsed."""


class Operation(Enum):
    """What an instruction does to its register."""

    INC = "inc"
    DEC = "dec"

    def apply(self, value: int, amount: int) -> int:
        return value + amount if self is Operation.INC else value - amount


_COMPARATORS: dict[str, Callable[[int, int], bool]] = {
    "<": operator.lt,
    ">": operator.gt,
    "<=": operator.le,
    ">=": operator.ge,
    "==": operator.eq,
    "!=": operator.ne,
}


class Comparison(Enum):
    """The comparison in an instruction's condition."""

    LT = "<"
    GT = ">"
    LE = "<="
    GE = ">="
    EQ = "=="
    NE = "!="

    def holds(self, left: int, right: int) -> bool:
        return _COMPARATORS[self.value](left, right)


def _parse_int(token: str) -> int:
    if not _SIGNED.fullmatch(token):
        raise InstructionParseError(f"invalid number: {token!r}")
    value = int(token)
    if not _I32_MIN <= value <= _I32_MAX:
        raise InstructionParseError(f"number out of range: {token!r}")
    return value


@dataclass(frozen=True)
class Instruction:
    """Change ``register`` by ``amount`` if ``conditional_register`` compares true."""

    register: str
    operation: Operation
    amount: int
    conditional_register: str
    comparison: Comparison
    threshold: int

    @classmethod
    def parse(cls, text: str) -> Instruction:
        """Parse a line such as ``b inc 5 if a > 1``."""
        parts = text.split()
        if len(parts) < 7:
            raise InstructionParseError(f"incomplete instruction: {text!r}")
        register, oper, amount, _if, conditional, comparison, threshold = parts[:7]

        amount_value = _parse_int(amount)
        try:
            operation = Operation(oper)
        except ValueError:
            raise InstructionParseError(f"unknown operation: {oper!r}") from None

        threshold_value = _parse_int(threshold)
        try:
            comparison_kind = Comparison(comparison)
        except ValueError:
            raise InstructionParseError(f"unknown comparison: {comparison!r}") from None

        return cls(
            register,
            operation,
            amount_value,
            conditional,
            comparison_kind,
            threshold_value,
        )


class Processor:
    """Runs instructions over a set of registers that start at zero."""

    def __init__(self) -> None:
        self._registers: dict[str, int] = {}
        self._largest_value_overall = 0

    def _condition_holds(self, instruction: Instruction) -> bool:
        current = self._registers.setdefault(instruction.conditional_register, 0)
        return instruction.comparison.holds(current, instruction.threshold)

    def execute(self, instruction: Instruction) -> None:
        """Run one instruction."""
        if not self._condition_holds(instruction):
            return
        current = self._registers.get(instruction.register, 0)
        updated = instruction.operation.apply(current, instruction.amount)
        self._registers[instruction.register] = updated
        self._largest_value_overall = max(self._largest_value_overall, updated)

    def value(self, register: str) -> int:
        """Current value of a register."""
        return self._registers.get(register, 0)

    def largest_value(self) -> int:
        """Largest value currently held by any register, or 0 if there are none."""
        return max(self._registers.values(), default=0)

    def largest_value_overall(self) -> int:
        """Largest value any register has held, never below 0."""
        return self._largest_value_overall


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run register instructions.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)

    processor = Processor()
    for line in args.input.read_text().splitlines():
        try:
            instruction = Instruction.parse(line)
        except InstructionParseError:
            continue
        processor.execute(instruction)

    print(f"Largest register value: {processor.largest_value()}")
    print(f"Largest register value ever held: {processor.largest_value_overall()}")


if __name__ == "__main__":
    main()