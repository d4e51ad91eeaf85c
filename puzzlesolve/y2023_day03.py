"""Engine schematic: numbers next to symbols."""

from __future__ import annotations

import argparse
import re
import string
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

_NUMBER = re.compile(r"\d+")


def _is_part_symbol(char: str) -> bool:
    return char != "." and char in string.punctuation


def _is_gear_symbol(char: str) -> bool:
    return char == "*"


@dataclass(frozen=True)
class PartNumber:
    """A number in the schematic with its position and width."""

    value: int
    x: int
    y: int
    length: int


@dataclass
class Schematic:
    """Numbers and symbol positions read from a schematic."""

    numbers: list[PartNumber] = field(default_factory=list)
    symbols: list[tuple[int, int]] = field(default_factory=list)
    width: int = 0

    def adjacent_symbol(self, number: PartNumber) -> tuple[int, int] | None:
        """Return the first symbol touching ``number``, or None.

        Rows above and below are searched first, column by column, then
        the cells directly left and right.
        """
        x_end = number.x + number.length
        x_from = max(number.x - 1, 0)
        x_to = min(x_end + 1, self.width)
        rows = (number.y - 1, number.y + 1)
        for x in range(x_from, x_to):
            for sx, sy in self.symbols:
                if sx == x and sy in rows:
                    return sx, sy
        for sx, sy in self.symbols:
            if sy == number.y and sx in (number.x - 1, x_end):
                return sx, sy
        return None


def parse_schematic(text: str, symbol: Callable[[str], bool] | None = None) -> Schematic:
    """Read numbers and symbols; ``symbol`` decides which characters are symbols."""
    is_symbol = symbol or _is_part_symbol
    schematic = Schematic()
    for y, line in enumerate(text.splitlines()):
        schematic.width = max(schematic.width, len(line))
        schematic.numbers.extend(
            PartNumber(int(m.group()), m.start(), y, m.end() - m.start())
            for m in _NUMBER.finditer(line)
        )
        schematic.symbols.extend(
            (x, y) for x, char in enumerate(line) if not char.isdigit() and is_symbol(char)
        )
    return schematic


def part_number_sum(text: str) -> int:
    """Sum the numbers that touch any symbol other than '.'."""
    schematic = parse_schematic(text)
    return sum(
        number.value
        for number in schematic.numbers
        if schematic.adjacent_symbol(number) is not None
    )


def gear_ratio_sum(text: str) -> int:
    """Sum products of differing numbers that share a '*' symbol.

    Each number is paired at most once by its own scan, and numbers with
    the same value are never paired.
    """
    schematic = parse_schematic(text, _is_gear_symbol)
    numbers = schematic.numbers
    links = [schematic.adjacent_symbol(number) for number in numbers]
    done = [False] * len(numbers)
    total = 0
    for i, (number, link) in enumerate(zip(numbers, links)):
        if link is None:
            continue
        paired = done[i]
        for j, (other, other_link) in enumerate(zip(numbers, links)):
            if (
                other_link == link
                and not paired
                and not done[j]
                and number.value != other.value
            ):
                total += number.value * other.value
                paired = True
                done[j] = True
    return total


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Read an engine schematic.")
    parser.add_argument("input", nargs="?", default="inp.txt", type=Path)
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    result = part_number_sum(text) if args.part == 1 else gear_ratio_sum(text)
    print(f"Sum {result}")
    return 0