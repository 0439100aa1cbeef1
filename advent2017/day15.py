"""Dueling generators."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from dataclasses import dataclass
from itertools import islice
from pathlib import Path

DIVISOR = 2147483647
GENERATOR_A_FACTOR = 16807
GENERATOR_B_FACTOR = 48271
GENERATOR_A_MULTIPLES_OF = 4
GENERATOR_B_MULTIPLES_OF = 8


@dataclass(frozen=True)
class Generator:
    """A generator of values; each iteration starts again from ``previous``."""

    factor: int
    previous: int
    multiples_of: int = 1

    def __iter__(self) -> Iterator[int]:
        value = self.previous
        factor = self.factor
        multiples_of = self.multiples_of
        while True:
            value = value * factor % DIVISOR
            if value % multiples_of == 0:
                yield value


class Judge:
    """Compares the lowest 16 bits of the values of two generators."""

    def __init__(self, generator_a_previous: int, generator_b_previous: int) -> None:
        self.generator_a = Generator(
            GENERATOR_A_FACTOR, generator_a_previous, GENERATOR_A_MULTIPLES_OF
        )
        self.generator_b = Generator(
            GENERATOR_B_FACTOR, generator_b_previous, GENERATOR_B_MULTIPLES_OF
        )

    def count_matches(self, rounds: int) -> int:
        """Number of pairs among the first ``rounds`` whose low 16 bits agree."""
        pairs = islice(zip(self.generator_a, self.generator_b), rounds)
        return sum(1 for a, b in pairs if (a ^ b) & 0xFFFF == 0)


def _starting_value(line: str) -> int:
    parts = line.split()
    if not parts:
        raise ValueError("starting value not present")
    return int(parts[-1])


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Judge the dueling generators.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)

    lines = args.input.read_text().splitlines()
    if len(lines) < 2:
        raise ValueError("error reading file")

    judge = Judge(_starting_value(lines[0]), _starting_value(lines[1]))

    print(f"Matches found: {judge.count_matches(5_000_000)}")


if __name__ == "__main__":
    main()