"""Calibration values hidden in lines of text."""

from __future__ import annotations

import argparse
import string
from collections.abc import Iterator
from pathlib import Path

_NAMES = ("one", "two", "three", "four", "five", "six", "seven", "eight", "nine")


def _digits(line: str, spelled: bool) -> Iterator[int]:
    """Yield each digit in the line, overlapping spelled names included."""
    for pos, char in enumerate(line):
        if spelled:
            for value, name in enumerate(_NAMES, start=1):
                if line.startswith(name, pos):
                    yield value
                    break
        if char in string.digits:
            yield int(char)


def calibration_value(line: str, spelled: bool = False) -> int:
    """Combine the first and last digit of a line into a two-digit number.

    With ``spelled`` the names ``one`` to ``nine`` count as digits, a zero
    never counts as the first digit and a line without digits is worth 0.
    """
    digits = list(_digits(line, spelled))
    if not spelled:
        if not digits:
            raise ValueError(f"no digit in line: {line!r}")
        return digits[0] * 10 + digits[-1]
    first = next((digit for digit in digits if digit), 0)
    last = digits[-1] if digits else 0
    return first * 10 + last


def total_calibration(text: str, spelled: bool = False) -> int:
    """Sum the calibration values of all non-empty lines."""
    return sum(calibration_value(line, spelled) for line in text.splitlines() if line)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sum calibration values.")
    parser.add_argument("input", nargs="?", default="inp.txt", type=Path)
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    if args.part == 1:
        print(total_calibration(text))
    else:
        print(f"sum: {total_calibration(text, spelled=True)}")
    return 0