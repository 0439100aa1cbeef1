"""Spreadsheet checksums."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from itertools import combinations
from pathlib import Path


def calculate_checksum(rows: Iterable[Sequence[int]]) -> int:
    """Sum of the difference between the largest and smallest value of each row."""
    return sum(max(row) - min(row) if row else 0 for row in rows)


def _even_division(row: Sequence[int]) -> int:
    for a, b in combinations(row, 2):
        if a % b == 0:
            return a // b
        if b % a == 0:
            return b // a
    return 0


def calculate_second_checksum(rows: Iterable[Sequence[int]]) -> int:
    """Sum of the results of the one even division found in each row."""
    return sum(_even_division(row) for row in rows)


def _parse_number(token: str) -> int:
    digits = token[1:] if token.startswith("+") else token
    return int(digits) if digits.isascii() and digits.isdigit() else 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Compute spreadsheet checksums.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)

    rows = [
        [_parse_number(token) for token in line.split()]
        for line in args.input.read_text().splitlines()
    ]

    print(f"Checksum: {calculate_checksum(rows)}")
    print(f"Second checksum: {calculate_second_checksum(rows)}")


if __name__ == "__main__":
    main()