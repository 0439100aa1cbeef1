"""A maze of twisty trampolines."""

from __future__ import annotations

import argparse
from collections.abc import Callable, MutableSequence
from pathlib import Path


def _run(offsets: MutableSequence[int], adjust: Callable[[int], int]) -> int:
    index = 0
    steps = 0
    while 0 <= index < len(offsets):
        steps += 1
        offset = offsets[index]
        offsets[index] = offset + adjust(offset)
        index += offset
    return steps


def number_of_steps(offsets: MutableSequence[int]) -> int:
    """Steps until the jumps leave the list; each used offset grows by one.

    The offsets are updated in place.
    """
    return _run(offsets, lambda _offset: 1)


def number_of_steps_with_decrease(offsets: MutableSequence[int]) -> int:
    """Like number_of_steps, but offsets of three or more shrink by one instead.

    The offsets are updated in place.
    """
    return _run(offsets, lambda offset: -1 if offset >= 3 else 1)


def _parse_offset(line: str) -> int:
    try:
        return int(line)
    except ValueError:
        return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Follow the jump offsets.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)

    offsets = [_parse_offset(line) for line in args.input.read_text().splitlines()]

    print(f"Number of steps: {number_of_steps(list(offsets))}")
    print(
        f"Number of steps with decrease: {number_of_steps_with_decrease(list(offsets))}"
    )


if __name__ == "__main__":
    main()