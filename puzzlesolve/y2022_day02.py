"""Rock, paper, scissors tournament scoring."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from enum import IntEnum
from pathlib import Path


class Shape(IntEnum):
    """A hand shape; its value is the score for playing it."""

    ROCK = 1
    PAPER = 2
    SCISSORS = 3


class Outcome(IntEnum):
    """A round's result; its value is the score for it."""

    LOSE = 0
    DRAW = 3
    WIN = 6


_SHAPES = {
    "A": Shape.ROCK,
    "X": Shape.ROCK,
    "B": Shape.PAPER,
    "Y": Shape.PAPER,
    "C": Shape.SCISSORS,
    "Z": Shape.SCISSORS,
}

_OPPONENT_LETTERS = frozenset("ABC")

_OUTCOMES = {"X": Outcome.LOSE, "Y": Outcome.DRAW, "Z": Outcome.WIN}


def parse_shape(letter: str) -> Shape:
    """Map ``A``/``X``, ``B``/``Y`` and ``C``/``Z`` to a shape."""
    try:
        return _SHAPES[letter]
    except KeyError:
        raise ValueError(f"invalid shape letter: {letter!r}") from None


def parse_outcome(letter: str) -> Outcome:
    """Map ``X``, ``Y`` and ``Z`` to lose, draw and win."""
    try:
        return _OUTCOMES[letter]
    except KeyError:
        raise ValueError(f"invalid outcome letter: {letter!r}") from None


def play(opponent: Shape, me: Shape) -> Outcome:
    """Return the result of a round from my side."""
    if opponent == me:
        return Outcome.DRAW
    if opponent is Shape.ROCK and me is Shape.SCISSORS:
        return Outcome.LOSE
    if me is Shape.ROCK and opponent is Shape.SCISSORS:
        return Outcome.WIN
    return Outcome.WIN if me > opponent else Outcome.LOSE


def choose_shape(opponent: Shape, outcome: Outcome) -> Shape:
    """Return the shape that gives ``outcome`` against ``opponent``."""
    if outcome is Outcome.LOSE:
        return Shape.SCISSORS if opponent is Shape.ROCK else Shape(opponent - 1)
    if outcome is Outcome.DRAW:
        return opponent
    return Shape.ROCK if opponent is Shape.SCISSORS else Shape(opponent + 1)


def _rounds(text: str) -> Iterator[tuple[str, str]]:
    for line in text.splitlines():
        if not line.strip():
            continue
        parts = line.split()
        if len(parts) != 2 or any(len(part) != 1 for part in parts):
            raise ValueError(f"malformed round: {line!r}")
        yield parts[0], parts[1]


def score_as_shapes(text: str) -> int:
    """Score a strategy guide whose second column is my shape."""
    total = 0
    for opponent_letter, my_letter in _rounds(text):
        me = parse_shape(my_letter)
        total += play(parse_shape(opponent_letter), me) + me
    return total


def score_as_outcomes(text: str) -> int:
    """Score a strategy guide whose second column is the wanted outcome."""
    total = 0
    for opponent_letter, outcome_letter in _rounds(text):
        if opponent_letter not in _OPPONENT_LETTERS:
            raise ValueError(f"invalid shape letter: {opponent_letter!r}")
        outcome = parse_outcome(outcome_letter)
        total += choose_shape(parse_shape(opponent_letter), outcome) + outcome
    return total


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Score a rock, paper, scissors guide.")
    parser.add_argument("input", nargs="?", default="inp.txt", type=Path)
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    score = score_as_shapes(text) if args.part == 1 else score_as_outcomes(text)
    print(score)
    return 0