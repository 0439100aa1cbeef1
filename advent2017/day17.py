"""Spinlock: a circular buffer filled by stepping forward."""

from __future__ import annotations

import argparse
from pathlib import Path


class Spinlock:
    """A circular buffer that steps a fixed amount before each insertion."""

    def __init__(self, steps: int) -> None:
        self.steps = steps
        self._buffer = [0]
        self._position = 0

    def spin(self, times: int) -> list[int]:
        """Insert the values 1 to ``times`` and return a copy of the buffer."""
        for value in range(1, times + 1):
            self._position = (self._position + self.steps) % len(self._buffer) + 1
            self._buffer.insert(self._position, value)
        return list(self._buffer)

    def value_after_latest(self, spins: int) -> int:
        """Spin, then return the value following the last one inserted."""
        self.spin(spins)
        try:
            latest = self._buffer.index(spins)
        except ValueError:
            latest = 0
        return self._buffer[(latest + 1) % len(self._buffer)]

    def value_after_zero(self, spins: int) -> int:
        """Value that would follow 0 after the given number of insertions."""
        position = 0
        value = 0
        for i in range(1, spins + 1):
            position = (position + self.steps) % i + 1
            if position == 1:
                value = i
        return value


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run the spinlock.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)

    spinlock = Spinlock(int(args.input.read_text().strip()))

    print(f"Value after latest: {spinlock.value_after_latest(2017)}")
    print(f"Value after zero: {spinlock.value_after_zero(50_000_000)}")


if __name__ == "__main__":
    main()