"""Stream processing: score groups and count garbage."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path


@dataclass
class StreamData:
    """Total group score and number of garbage characters of a stream."""

    score: int = 0
    garbage: int = 0


def parse_stream(stream: str) -> StreamData:
    """Score the groups of a stream and count the non-cancelled garbage characters.

    Parsing stops at the first closing brace outside of any group.
    """
    data = StreamData()
    chars = iter(stream)
    depth = 0
    in_garbage = False

    for char in chars:
        if char == "!":
            next(chars, None)
        elif in_garbage:
            if char == ">":
                in_garbage = False
            else:
                data.garbage += 1
        elif char == "{":
            depth += 1
            data.score += depth
        elif char == "}":
            if depth == 0:
                break
            depth -= 1
        elif char == "<":
            in_garbage = True

    return data


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Process a character stream.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)

    lines = args.input.read_text().splitlines()
    if not lines:
        raise ValueError("no stream given")

    data = parse_stream(lines[0])

    print(f"Total score: {data.score}")
    print(f"Garbage amount: {data.garbage}")


if __name__ == "__main__":
    main()