"""Scratchcards: winning numbers and the copies they earn."""

from __future__ import annotations

import argparse
from collections import Counter
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Card:
    """A scratchcard: its winning numbers and the numbers on it."""

    winning: tuple[int, ...]
    numbers: tuple[int, ...]

    def matches(self) -> int:
        """Count each of the card's numbers once for every winning number it equals."""
        winning = Counter(self.winning)
        return sum(winning[number] for number in self.numbers)

    def points(self) -> int:
        """One point for the first match, doubled for each further match."""
        count = self.matches()
        return 1 << (count - 1) if count else 0


def _numbers(text: str, line: str) -> tuple[int, ...]:
    try:
        return tuple(int(token) for token in text.split())
    except ValueError:
        raise ValueError(f"malformed number in card: {line!r}") from None


def parse_card(line: str) -> Card:
    """Parse a line such as ``Card 1: 41 48 83 | 83 86 6``."""
    _, sep, body = line.partition(":")
    if not sep:
        raise ValueError(f"missing ':' in card line: {line!r}")
    winning_text, sep, numbers_text = body.partition("|")
    if not sep:
        raise ValueError(f"missing '|' in card line: {line!r}")
    return Card(_numbers(winning_text, line), _numbers(numbers_text, line))


def _cards(text: str) -> list[Card]:
    return [parse_card(line) for line in text.splitlines() if line.strip()]


def total_points(text: str) -> int:
    """Sum the points of every card."""
    return sum(card.points() for card in _cards(text))


def total_cards(text: str) -> int:
    """Count the cards held once every won copy has been handed out.

    A card with ``n`` matches wins one copy of each of the next ``n``
    cards per copy of itself; copies past the last card are lost.
    """
    cards = _cards(text)
    copies = [1] * len(cards)
    for index, card in enumerate(cards):
        last = min(index + 1 + card.matches(), len(cards))
        for following in range(index + 1, last):
            copies[following] += copies[index]
    return sum(copies)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Score scratchcards.")
    parser.add_argument("input", nargs="?", default="inp.txt", type=Path)
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(total_points(text) if args.part == 1 else total_cards(text))
    return 0