"""Recursive circus: find the bottom program and the weight that balances the tower."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass
from pathlib import Path

_UNSIGNED = re.compile(r"\+?[0-9]+")
_U32_MAX = 2**32 - 1


class ProgramParseError(ValueError):
    """Raised when a program description cannot be parsed."""


def _parse_weight(token: str) -> int:
    digits = token.strip("()")
    if _UNSIGNED.fullmatch(digits):
        value = int(digits)
        if value <= _U32_MAX:
            return value
    return 0


@dataclass(frozen=True)
class Program:
    """A program in the tower, with its own weight and the names of the programs it holds."""

    name: str
    weight: int
    children: tuple[str, ...] = ()

    @classmethod
    def parse(cls, text: str) -> Program:
        """Parse a line such as ``abcd (10) -> eeee, xyzw``."""
        parts = text.split()
        if len(parts) < 2:
            raise ProgramParseError(f"invalid program description: {text!r}")
        name, weight, *rest = parts
        children = tuple(part.strip(",") for part in rest[1:])
        return cls(name, _parse_weight(weight), children)

    def __str__(self) -> str:
        return self.name

    def subtower_weight(self, tower: Tower) -> int:
        """Weight of this program together with everything it holds."""
        return self.weight + sum(
            tower.child(name).subtower_weight(tower) for name in self.children
        )

    def balanced_weight(self, tower: Tower) -> int:
        """Weight the one wrong program above this one needs, or 0 if all is balanced."""
        if not self.children:
            return 0

        weights = [
            (child, child.subtower_weight(tower))
            for child in map(tower.child, self.children)
        ]
        lightest = min(weights, key=lambda item: item[1])
        # The last of the heaviest subtowers is the one considered unbalanced.
        heaviest = max(reversed(weights), key=lambda item: item[1])

        if lightest[1] == heaviest[1]:
            return 0

        deeper = heaviest[0].balanced_weight(tower)
        if deeper > 0:
            return deeper

        return heaviest[0].weight - (heaviest[1] - lightest[1])


class Tower:
    """A collection of programs stacked on one another."""

    def __init__(self) -> None:
        self._programs: dict[str, Program] = {}

    def add(self, program: Program) -> None:
        """Add a program, replacing any earlier one of the same name."""
        self._programs[program.name] = program

    def get(self, name: str) -> Program | None:
        """The program of the given name, or None."""
        return self._programs.get(name)

    def child(self, name: str) -> Program:
        """The program of the given name; raises KeyError if it is missing."""
        try:
            return self._programs[name]
        except KeyError:
            raise KeyError(f"unknown program: {name}") from None

    def head(self) -> Program | None:
        """The program at the bottom, which no other program holds."""
        held = {name for program in self._programs.values() for name in program.children}
        return next(
            (program for program in self._programs.values() if program.name not in held),
            None,
        )

    def balanced_weight(self) -> int:
        """Weight that balances the tower, or 0 if there is nothing to correct."""
        head = self.head()
        return head.balanced_weight(self) if head is not None else 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Inspect a tower of programs.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)

    tower = Tower()
    for line in args.input.read_text().splitlines():
        try:
            tower.add(Program.parse(line))
        except ProgramParseError:
            continue

    head = tower.head()
    if head is not None:
        print(f"Head of tower: {head}")
    else:
        print("No head found")

    print(f"Balanced weight: {tower.balanced_weight()}")


if __name__ == "__main__":
    main()