"""Particle swarm."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass
from itertools import chain, dropwhile, islice, repeat
from pathlib import Path

_SIGNED = re.compile(r"[+-]?[0-9]+")
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1

Vector = tuple[int, int, int]


class ParticleParseError(ValueError):
    """Raised when a particle description cannot be parsed."""


def _is_padding(char: str) -> bool:
    return not (char.isnumeric() or char == "-")


def _trim(text: str) -> str:
    head = "".join(dropwhile(_is_padding, text))
    return "".join(dropwhile(_is_padding, reversed(head)))[::-1]


def _parse_int(token: str) -> int:
    if not _SIGNED.fullmatch(token):
        raise ParticleParseError(f"invalid number: {token!r}")
    value = int(token)
    if not _I64_MIN <= value <= _I64_MAX:
        raise ParticleParseError(f"number out of range: {token!r}")
    return value


def _parse_vector(text: str) -> Vector:
    parts = islice(chain(_trim(text).split(","), repeat("")), 3)
    x, y, z = (_parse_int(part) for part in parts)
    return x, y, z


@dataclass(frozen=True)
class Particle:
    """A particle with position, velocity and acceleration."""

    position: Vector
    velocity: Vector
    acceleration: Vector

    @classmethod
    def parse(cls, text: str) -> Particle:
        """Parse a line such as ``p=<3,0,0>, v=<2,0,0>, a=<-1,0,0>``."""
        components = text.split()
        if len(components) < 3:
            raise ParticleParseError(f"incomplete particle: {text!r}")
        position, velocity, acceleration = (_parse_vector(c) for c in components[:3])
        return cls(position, velocity, acceleration)

    def position_at(self, time: int) -> Vector:
        """Position after the given number of ticks."""
        steps = time * (time + 1) // 2
        x, y, z = (
            p + v * time + steps * a
            for p, v, a in zip(self.position, self.velocity, self.acceleration)
        )
        return x, y, z


def _distance_from_origin(position: Vector) -> int:
    return sum(abs(c) for c in position)


class ParticleSystem:
    """A collection of particles."""

    def __init__(self) -> None:
        self.particles: list[Particle] = []

    def add_particle(self, particle: Particle) -> None:
        """Add a particle; its index is its position in insertion order."""
        self.particles.append(particle)

    def closest_to_origin(self) -> int:
        """Index of the particle that stays closest to the origin in the long run."""
        if not self.particles:
            raise ValueError("no particles")
        return min(
            range(len(self.particles)),
            key=lambda i: _distance_from_origin(self.particles[i].position_at(10_000)),
        )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Simulate the particle swarm.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)

    system = ParticleSystem()
    for line in args.input.read_text().splitlines():
        system.add_particle(Particle.parse(line))

    print(f"Particle eventually closest to origin: {system.closest_to_origin()}")


if __name__ == "__main__":
    main()