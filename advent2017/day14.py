"""Disk defragmentation: a grid of knot-hash bits."""

from __future__ import annotations

import argparse
from pathlib import Path

from .day10 import dense_hash

GRID_SIZE = 128


class Grid:
    """A 128 by 128 grid of used and free squares derived from a key."""

    def __init__(self, key: str) -> None:
        self.rows: list[list[bool]] = [
            [
                bit == "1"
                for byte in dense_hash(f"{key}-{row}")
                for bit in format(byte, "08b")
            ]
            for row in range(GRID_SIZE)
        ]

    def used_squares(self) -> int:
        """Number of used squares."""
        return sum(sum(row) for row in self.rows)

    def regions(self) -> int:
        """Number of groups of used squares joined horizontally or vertically."""
        remaining = {
            (x, y)
            for y, row in enumerate(self.rows)
            for x, used in enumerate(row)
            if used
        }
        regions = 0
        while remaining:
            regions += 1
            stack = [remaining.pop()]
            while stack:
                x, y = stack.pop()
                for neighbour in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
                    if neighbour in remaining:
                        remaining.remove(neighbour)
                        stack.append(neighbour)
        return regions


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Inspect the disk grid.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)

    grid = Grid(args.input.read_text().strip())

    print(f"Used squares: {grid.used_squares()}")
    print(f"Regions: {grid.regions()}")


if __name__ == "__main__":
    main()