"""Calorie counting: the food carried by each elf."""

from __future__ import annotations

import argparse
import heapq
import re
from pathlib import Path

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(line: str) -> int:
    """Read the integer at the start of a line; 0 when there is none."""
    match = _LEADING_INT.match(line)
    return int(match.group(1)) if match else 0


def elf_totals(text: str) -> list[int]:
    """Return the calories carried by each elf, in input order.

    Elves are separated by empty lines.
    """
    totals = []
    current = 0
    for line in text.splitlines():
        if line == "":
            totals.append(current)
            current = 0
        else:
            current += _leading_int(line)
    totals.append(current)
    return totals


def top_calories(text: str, count: int = 1) -> int:
    """Return the calories carried by the ``count`` best-stocked elves together."""
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")
    # Ranking starts from zeros, so negative totals never count.
    padded = [*elf_totals(text), *([0] * count)]
    return sum(heapq.nlargest(count, padded))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count the calories carried by elves.")
    parser.add_argument("input", nargs="?", default="inp.txt", type=Path)
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(top_calories(text, 1 if args.part == 1 else 3))
    return 0