"""A series of tubes: follow a routing diagram and collect letters."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

_STRUCTURE = " -|+"

Position = tuple[int, int]


@dataclass(frozen=True)
class Tile:
    """One square of the diagram."""

    char: str = " "

    @property
    def is_empty(self) -> bool:
        return self.char == " "

    @property
    def is_horizontal(self) -> bool:
        return self.char == "-"

    @property
    def is_vertical(self) -> bool:
        return self.char == "|"

    @property
    def is_turn(self) -> bool:
        return self.char == "+"

    @property
    def letter(self) -> str | None:
        """The letter on this tile, or None for path and empty tiles."""
        return None if self.char in _STRUCTURE else self.char

    @property
    def is_horizontal_or_letter(self) -> bool:
        return self.is_horizontal or self.letter is not None

    @property
    def is_vertical_or_letter(self) -> bool:
        return self.is_vertical or self.letter is not None


_EMPTY = Tile(" ")


def tile_from_char(char: str) -> Tile:
    """The tile a character of the diagram stands for."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return Tile(char)


class Direction(Enum):
    """Direction of travel, as a step in x and y with y growing downwards."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)

    @property
    def is_vertical(self) -> bool:
        return self in (Direction.UP, Direction.DOWN)

    def move(self, position: Position) -> Position:
        dx, dy = self.value
        return position[0] + dx, position[1] + dy


class Map:
    """A routing diagram built row by row."""

    def __init__(self) -> None:
        self._rows: list[list[Tile]] = []

    def add_row(self, tiles: Iterable[Tile]) -> None:
        """Append a row of tiles at the bottom."""
        self._rows.append(list(tiles))

    def _tile_at(self, position: Position) -> Tile:
        x, y = position
        if x < 0 or y < 0 or y >= len(self._rows) or x >= len(self._rows[y]):
            return _EMPTY
        return self._rows[y][x]

    def find_path(self) -> tuple[str, int]:
        """Follow the path from the top; return the letters seen and the steps taken."""
        if not self._rows:
            raise ValueError("empty map")
        start = next(
            (x for x, tile in enumerate(self._rows[0]) if tile.is_vertical), None
        )
        if start is None:
            raise ValueError("no entry point on the first row")

        position: Position = (start, 0)
        direction = Direction.DOWN
        letters: list[str] = []
        steps = 0

        while True:
            position = direction.move(position)
            steps += 1
            tile = self._tile_at(position)

            if tile.is_empty:
                break
            if tile.is_horizontal:
                ahead = self._tile_at(direction.move(position))
                if direction.is_vertical and not ahead.is_vertical_or_letter:
                    break
            elif tile.is_vertical:
                ahead = self._tile_at(direction.move(position))
                if direction.is_horizontal and not ahead.is_horizontal_or_letter:
                    break
            elif tile.is_turn:
                if direction.is_horizontal:
                    turns = (
                        d
                        for d in (Direction.UP, Direction.DOWN)
                        if self._tile_at(d.move(position)).is_vertical_or_letter
                    )
                else:
                    turns = (
                        d
                        for d in (Direction.LEFT, Direction.RIGHT)
                        if self._tile_at(d.move(position)).is_horizontal_or_letter
                    )
                turn = next(turns, None)
                if turn is None:
                    break
                direction = turn
            else:
                letters.append(tile.char)

        return "".join(letters), steps


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Follow the routing diagram.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)

    diagram = Map()
    for line in args.input.read_text().splitlines():
        diagram.add_row(tile_from_char(c) for c in line)

    letters, steps = diagram.find_path()

    print(f"Letters along the path: {letters}")
    print(f"Steps needed: {steps}")


if __name__ == "__main__":
    main()