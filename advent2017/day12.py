"""Digital plumber: connected groups of programs."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable
from pathlib import Path

_UNSIGNED = re.compile(r"\+?[0-9]+")
_U32_MAX = 2**32 - 1


def _parse_index(token: str, message: str) -> int:
    if _UNSIGNED.fullmatch(token):
        value = int(token)
        if value <= _U32_MAX:
            return value
    raise ValueError(f"{message}: {token!r}")


class Graph:
    """An undirected graph of programs joined by pipes."""

    def __init__(self) -> None:
        self._nodes: dict[int, set[int]] = {}

    def parse_node(self, text: str) -> None:
        """Add the links of a line such as ``2 <-> 0, 3, 4``."""
        parts = text.split()
        if not parts:
            raise ValueError("invalid node definition")
        index = _parse_index(parts[0], "invalid node index")
        neighbours = [
            _parse_index(part.strip(","), "invalid neighbour data") for part in parts[2:]
        ]
        self.add_node(index, neighbours)

    def add_node(self, index: int, neighbours: Iterable[int]) -> None:
        """Link a node with each of its neighbours, both ways."""
        for neighbour in neighbours:
            self._link(index, neighbour)

    def _link(self, a: int, b: int) -> None:
        links_a = self._nodes.setdefault(a, set())
        links_b = self._nodes.setdefault(b, set())
        if a != b:
            links_a.add(b)
            links_b.add(a)

    def _visit_from(self, start: int, visited: set[int]) -> None:
        stack = [start]
        while stack:
            node = stack.pop()
            if node in visited:
                continue
            visited.add(node)
            try:
                stack.extend(self._nodes[node])
            except KeyError:
                raise KeyError(f"unknown node: {node}") from None

    def nodes_in_group(self, group: int) -> list[int]:
        """All nodes reachable from the given one, in ascending order."""
        visited: set[int] = set()
        self._visit_from(group, visited)
        return sorted(visited)

    def groups(self) -> list[int]:
        """One representative node for each connected group."""
        representatives: list[int] = []
        visited: set[int] = set()
        for node in self._nodes:
            if node in visited:
                continue
            representatives.append(node)
            self._visit_from(node, visited)
        return representatives


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Find connected groups of programs.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)

    graph = Graph()
    for line in args.input.read_text().splitlines():
        graph.parse_node(line)

    print(f"Nodes in group 0: {len(graph.nodes_in_group(0))}")
    print(f"Groups in the graph: {len(graph.groups())}")


if __name__ == "__main__":
    main()