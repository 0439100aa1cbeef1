"""Spiral memory."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from itertools import count, islice

INPUT = 361527

# Direction of travel along the four sides of each ring: up, left, down, right.
_SIDE_STEPS = ((0, -1), (-1, 0), (0, 1), (1, 0))

_NEIGHBOUR_OFFSETS = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)


def spiral_positions() -> Iterator[tuple[int, int]]:
    """Yield the coordinates of the squares of the spiral, starting at the origin."""
    x, y = 0, 0
    yield x, y
    for level in count(1):
        x += 1
        yield x, y
        for index in range(1, 8 * level):
            dx, dy = _SIDE_STEPS[index // (2 * level)]
            x += dx
            y += dy
            yield x, y


def spiral_values() -> Iterator[int]:
    """Yield the stress-test values: each square holds the sum of its filled neighbours."""
    values: dict[tuple[int, int], int] = {}
    for x, y in spiral_positions():
        if (x, y) == (0, 0):
            value = 1
        else:
            value = sum(values.get((x + dx, y + dy), 0) for dx, dy in _NEIGHBOUR_OFFSETS)
        values[(x, y)] = value
        yield value


def distance(square: int) -> int:
    """Manhattan distance from the given square number to the centre."""
    if square < 1:
        raise ValueError("square numbers start at 1")
    x, y = next(islice(spiral_positions(), square - 1, None))
    return abs(x) + abs(y)


def value_greater_than(value: int) -> int:
    """First stress-test value larger than the given one."""
    return next(v for v in spiral_values() if v > value)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Explore spiral memory.")
    parser.add_argument("square", nargs="?", default=INPUT, type=int)
    args = parser.parse_args(argv)

    print(f"Distance: {distance(args.square)}")
    print(f"Greater value: {value_greater_than(args.square)}")


if __name__ == "__main__":
    main()