"""Permutation promenade: programs dancing in a line."""

from __future__ import annotations

import argparse
import re
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Union

_UNSIGNED = re.compile(r"\+?[0-9]+")
_USIZE_MAX = 2**64 - 1
_FIRST_PROGRAM = ord("a")


class DanceMoveParseError(ValueError):
    """Raised when a dance move cannot be parsed."""


@dataclass(frozen=True)
class Spin:
    """Move ``size`` programs from the end of the line to the front."""

    size: int


@dataclass(frozen=True)
class Exchange:
    """Swap the programs at two positions."""

    a: int
    b: int


@dataclass(frozen=True)
class Partner:
    """Swap the two programs of the given names."""

    a: str
    b: str


DanceMove = Union[Spin, Exchange, Partner]


def _parse_index(token: str) -> int:
    if _UNSIGNED.fullmatch(token):
        value = int(token)
        if value <= _USIZE_MAX:
            return value
    raise DanceMoveParseError(f"invalid position: {token!r}")


def _parse_name(token: str) -> str:
    if len(token) != 1:
        raise DanceMoveParseError(f"invalid program name: {token!r}")
    return token


def _pair(text: str) -> tuple[str, str]:
    parts = text.split("/")
    if len(parts) < 2:
        raise DanceMoveParseError(f"missing second argument: {text!r}")
    return parts[0], parts[1]


def parse_dance_move(text: str) -> DanceMove:
    """Parse a move such as ``s1``, ``x3/4`` or ``pe/b``."""
    text = text.strip()
    kind, rest = text[:1], text[1:]

    if kind == "s":
        return Spin(_parse_index(rest))
    if kind == "x":
        a, b = _pair(rest)
        return Exchange(_parse_index(a), _parse_index(b))
    if kind == "p":
        a, b = _pair(rest)
        return Partner(_parse_name(a), _parse_name(b))
    raise DanceMoveParseError(f"unknown dance move: {text!r}")


class Dance:
    """A line of programs named from ``a`` onwards."""

    def __init__(self, count: int) -> None:
        if not 0 <= count <= 255 - _FIRST_PROGRAM:
            raise ValueError(f"invalid number of programs: {count}")
        self._programs = [chr(_FIRST_PROGRAM + i) for i in range(count)]

    def _check_position(self, index: int) -> None:
        if not 0 <= index < len(self._programs):
            raise IndexError(f"no program at position {index}")

    def _position_of(self, name: str) -> int:
        try:
            return self._programs.index(name)
        except ValueError:
            raise ValueError(f"no program named {name!r}") from None

    def step(self, dance_move: DanceMove) -> None:
        """Perform one dance move."""
        programs = self._programs
        match dance_move:
            case Spin(size):
                if size > len(programs):
                    raise ValueError(f"cannot spin {size} of {len(programs)} programs")
                cut = len(programs) - size
                self._programs = programs[cut:] + programs[:cut]
            case Exchange(a, b):
                self._check_position(a)
                self._check_position(b)
                programs[a], programs[b] = programs[b], programs[a]
            case Partner(a, b):
                i, j = self._position_of(a), self._position_of(b)
                programs[i], programs[j] = programs[j], programs[i]
            case _:
                raise TypeError(f"not a dance move: {dance_move!r}")

    def order(self) -> str:
        """The current order of the programs."""
        return "".join(self._programs)

    def order_after(self, dance_moves: Sequence[DanceMove], rounds: int) -> str:
        """Order after dancing the moves the given number of times.

        The dance stops early once the order repeats, using the cycle found.
        """
        history: list[str] = []

        for i in range(rounds):
            for dance_move in dance_moves:
                self.step(dance_move)

            order = self.order()
            if history and history[0] == order:
                return history[(rounds - 1) % i]
            history.append(order)

        return self.order()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Dance the programs.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)

    dance_moves = [parse_dance_move(part) for part in args.input.read_text().split(",")]
    dance = Dance(16)

    print(f"Final order: {dance.order_after(dance_moves, 1_000_000_000)}")


if __name__ == "__main__":
    main()