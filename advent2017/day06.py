"""Memory reallocation."""

from __future__ import annotations

import argparse
from collections.abc import MutableSequence
from pathlib import Path


def max_steps_and_cycle_length(blocks: MutableSequence[int]) -> tuple[int, int]:
    """Redistribute blocks until a configuration repeats.

    Returns the number of redistributions done and the length of the loop.
    The banks are updated in place and hold the repeated configuration at the end.
    """
    if not blocks:
        raise ValueError("no blocks given")

    size = len(blocks)
    seen: dict[tuple[int, ...], int] = {}
    steps = 0

    while (state := tuple(blocks)) not in seen:
        seen[state] = steps
        steps += 1

        count = max(blocks)
        index = blocks.index(count)
        blocks[index] = 0
        for offset in range(1, count + 1):
            blocks[(index + offset) % size] += 1

    return steps, steps - seen[tuple(blocks)]


def _parse_number(token: str) -> int:
    return int(token) if token.isascii() and token.isdigit() else 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Reallocate memory banks.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)

    blocks = [_parse_number(token) for token in args.input.read_text().split()]
    steps, cycle_length = max_steps_and_cycle_length(blocks)

    print(f"Max steps: {steps}")
    print(f"Cycle length: {cycle_length}")


if __name__ == "__main__":
    main()