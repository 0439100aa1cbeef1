"""Packet scanners: a firewall of scanning layers."""

from __future__ import annotations

import argparse
import re
from itertools import count
from pathlib import Path

_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_unsigned(token: str) -> int:
    return int(token) if _UNSIGNED.fullmatch(token) else 0


class Firewall:
    """Layers at increasing depths, each with a scanner moving over its range."""

    def __init__(self) -> None:
        self._layers: list[int | None] = []

    def add_layer(self, depth: int, scan_range: int) -> None:
        """Add a layer, leaving empty depths up to it.

        A depth below the current size is ignored and the layer goes at the end.
        """
        if scan_range < 2:
            raise ValueError(f"scanner range must be at least 2, got {scan_range}")
        if len(self._layers) < depth:
            self._layers.extend([None] * (depth - len(self._layers)))
        self._layers.append(scan_range)

    def parse_layer(self, text: str) -> None:
        """Add a layer from a line such as ``4: 4``."""
        parts = text.split()
        if len(parts) < 2:
            raise ValueError(f"invalid layer definition: {text!r}")
        self.add_layer(_parse_unsigned(parts[0].strip(":")), _parse_unsigned(parts[1]))

    @staticmethod
    def _scanner_hit(scan_range: int, time: int) -> bool:
        return time % ((scan_range - 1) * 2) == 0

    def trip_severity(self) -> int:
        """Sum of depth times range over the layers whose scanner catches the packet."""
        return sum(
            depth * scan_range
            for depth, scan_range in enumerate(self._layers)
            if scan_range is not None and self._scanner_hit(scan_range, depth)
        )

    def _is_trip_safe(self, delay: int) -> bool:
        return not any(
            scan_range is not None and self._scanner_hit(scan_range, delay + depth)
            for depth, scan_range in enumerate(self._layers)
        )

    def safe_trip_delay(self) -> int:
        """Smallest delay for which no scanner catches the packet."""
        return next(delay for delay in count() if self._is_trip_safe(delay))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Cross the firewall.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)

    firewall = Firewall()
    for line in args.input.read_text().splitlines():
        firewall.parse_layer(line)

    print(f"Severity of trip: {firewall.trip_severity()}")
    print(f"Delay needed for safe trip: {firewall.safe_trip_delay()}")


if __name__ == "__main__":
    main()