"""Boat races: read the race times and record distances."""

from __future__ import annotations

import argparse
from pathlib import Path


def race_lines(text: str) -> tuple[str, str]:
    """Return the times line and the distances line, line endings kept."""
    lines = text.splitlines(keepends=True)
    if len(lines) < 2:
        raise ValueError("expected a times line and a distances line")
    return lines[0], lines[1]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Show the race times and distances.")
    parser.add_argument("input", nargs="?", default="inp.txt", type=Path)
    args = parser.parse_args(argv)
    times, distances = race_lines(args.input.read_text())
    print(times)
    print(distances)
    return 0