"""Inverse captcha: sum digits that match another digit in a circular sequence."""

from __future__ import annotations

import argparse
import string
from pathlib import Path


def _digit_value(char: str) -> int:
    return int(char) if char in string.digits else 0


def _matching_sum(captcha: str, shift: int) -> int:
    if not captcha:
        return 0
    shift %= len(captcha)
    rotated = captcha[shift:] + captcha[:shift]
    return sum(_digit_value(a) for a, b in zip(captcha, rotated) if a == b)


def solve_captcha(captcha: str) -> int:
    """Sum the digits that equal the next digit, wrapping around at the end."""
    return _matching_sum(captcha, 1)


def solve_second_captcha(captcha: str) -> int:
    """Sum the digits that equal the digit halfway around the sequence."""
    return _matching_sum(captcha, len(captcha) // 2)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve the inverse captcha.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)

    captcha = args.input.read_text().strip()

    print(f"First captcha solution: {solve_captcha(captcha)}")
    print(f"Second captcha solution: {solve_second_captcha(captcha)}")


if __name__ == "__main__":
    main()