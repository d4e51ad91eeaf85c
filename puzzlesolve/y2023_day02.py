"""Games of coloured cubes drawn from a bag."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass, field
from pathlib import Path

MAX_RED = 12
MAX_GREEN = 13
MAX_BLUE = 14

_COLOURS = {"r": "red", "g": "green", "b": "blue"}
_HEADER = re.compile(r"\s*Game\s+(\d+)\s*")


@dataclass
class Game:
    """A game: its id and the cubes shown in each draw."""

    id: int
    draws: list[dict[str, int]] = field(default_factory=list)

    def is_possible(self, red: int = MAX_RED, green: int = MAX_GREEN, blue: int = MAX_BLUE) -> bool:
        """Whether every draw fits in a bag holding the given cubes."""
        limits = {"red": red, "green": green, "blue": blue}
        return all(
            count <= limits[colour] for draw in self.draws for colour, count in draw.items()
        )

    def power(self) -> int:
        """Product of the fewest red, green and blue cubes the game needs."""
        needed = {"red": 0, "green": 0, "blue": 0}
        for draw in self.draws:
            for colour, count in draw.items():
                needed[colour] = max(needed[colour], count)
        return needed["red"] * needed["green"] * needed["blue"]


def _parse_draw(text: str) -> dict[str, int]:
    draw: dict[str, int] = {}
    for item in text.split(","):
        item = item.strip()
        if not item:
            continue
        count_text, _, name = item.partition(" ")
        try:
            count = int(count_text)
        except ValueError:
            raise ValueError(f"malformed cube count: {item!r}") from None
        colour = _COLOURS.get(name.strip()[:1])
        if colour is not None:
            draw[colour] = count
    return draw


def parse_game(line: str) -> Game:
    """Parse a line such as ``Game 1: 3 blue, 4 red; 1 red, 2 green``."""
    header, sep, body = line.partition(":")
    if not sep:
        raise ValueError(f"missing ':' in game line: {line!r}")
    match = _HEADER.fullmatch(header)
    if match is None:
        raise ValueError(f"malformed game header: {header!r}")
    return Game(int(match.group(1)), [_parse_draw(part) for part in body.split(";")])


def _games(text: str) -> list[Game]:
    return [parse_game(line) for line in text.splitlines() if line.strip()]


def sum_possible_ids(text: str) -> int:
    """Sum the ids of games possible with the default bag."""
    return sum(game.id for game in _games(text) if game.is_possible())


def sum_powers(text: str) -> int:
    """Sum the power of every game."""
    return sum(game.power() for game in _games(text))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check games of coloured cubes.")
    parser.add_argument("input", nargs="?", default="inp.txt", type=Path)
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    result = sum_possible_ids(text) if args.part == 1 else sum_powers(text)
    print(f"Sum: {result}")
    return 0