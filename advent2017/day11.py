"""Hex grid distances."""

from __future__ import annotations

import argparse
from enum import Enum
from pathlib import Path


class DirectionParseError(ValueError):
    """Raised when a direction cannot be parsed."""


class Direction(Enum):
    """The six directions on a hex grid, with their cube-coordinate steps."""

    N = "n"
    NE = "ne"
    SE = "se"
    S = "s"
    SW = "sw"
    NW = "nw"

    @classmethod
    def parse(cls, text: str) -> Direction:
        """Parse a direction such as ``ne``, ignoring surrounding whitespace."""
        try:
            return cls(text.strip())
        except ValueError:
            raise DirectionParseError(f"invalid direction: {text!r}") from None

    @property
    def delta(self) -> tuple[int, int, int]:
        return _DELTAS[self]


_DELTAS = {
    Direction.N: (0, 1, -1),
    Direction.NE: (1, 0, -1),
    Direction.SE: (1, -1, 0),
    Direction.S: (0, -1, 1),
    Direction.SW: (-1, 0, 1),
    Direction.NW: (-1, 1, 0),
}


class HexCoords:
    """A position on a hex grid in cube coordinates, tracking its furthest distance."""

    def __init__(self) -> None:
        self.x = 0
        self.y = 0
        self.z = 0
        self._max_distance = 0

    def take_step(self, step: Direction) -> None:
        """Move one step in the given direction."""
        dx, dy, dz = step.delta
        self.x += dx
        self.y += dy
        self.z += dz
        self._max_distance = max(self._max_distance, self.distance_from_origin())

    def distance_from_origin(self) -> int:
        """Fewest steps needed to get back to the origin."""
        return max(abs(self.x), abs(self.y), abs(self.z))

    def max_distance_from_origin(self) -> int:
        """The furthest this position has ever been from the origin."""
        return self._max_distance


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Follow steps on a hex grid.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)

    directions = [Direction.parse(part) for part in args.input.read_text().split(",")]

    coords = HexCoords()
    for direction in directions:
        coords.take_step(direction)

    print(f"Distance from origin: {coords.distance_from_origin()}")
    print(f"Max distance from origin: {coords.max_distance_from_origin()}")


if __name__ == "__main__":
    main()