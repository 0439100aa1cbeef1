"""Knot hash."""

from __future__ import annotations

import argparse
from functools import reduce
from operator import xor
from pathlib import Path

LIST_SIZE = 256
ROUNDS = 64
LENGTHS_SUFFIX = (17, 31, 73, 47, 23)
BLOCK_SIZE = 16


def dense_hash(data: bytes | str) -> bytes:
    """The 16-byte dense knot hash of the given data."""
    if isinstance(data, str):
        data = data.encode()
    lengths = [*data, *LENGTHS_SUFFIX]

    numbers = list(range(LIST_SIZE))
    position = 0
    skip_size = 0

    for _ in range(ROUNDS):
        for length in lengths:
            indices = [(position + i) % LIST_SIZE for i in range(length)]
            segment = [numbers[i] for i in indices]
            for i, value in zip(indices, reversed(segment)):
                numbers[i] = value
            position = (position + length + skip_size) % LIST_SIZE
            skip_size += 1

    return bytes(
        reduce(xor, numbers[start : start + BLOCK_SIZE])
        for start in range(0, LIST_SIZE, BLOCK_SIZE)
    )


def knot_hash(data: bytes | str) -> str:
    """The knot hash of the given data as 32 lower-case hexadecimal digits."""
    return dense_hash(data).hex()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Compute a knot hash.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)

    print(f"Hash: {knot_hash(args.input.read_text().strip())}")


if __name__ == "__main__":
    main()