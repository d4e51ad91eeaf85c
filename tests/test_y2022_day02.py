import itertools

import pytest

from puzzlesolve.y2022_day02 import (
    Outcome,
    Shape,
    choose_shape,
    main,
    parse_outcome,
    parse_shape,
    play,
    score_as_outcomes,
    score_as_shapes,
)

EXAMPLE = "A Y\nB X\nC Z\n"


@pytest.mark.parametrize(
    "letter, shape",
    [
        ("A", Shape.ROCK),
        ("X", Shape.ROCK),
        ("B", Shape.PAPER),
        ("Y", Shape.PAPER),
        ("C", Shape.SCISSORS),
        ("Z", Shape.SCISSORS),
    ],
)
def test_parse_shape(letter, shape):
    assert parse_shape(letter) is shape


@pytest.mark.parametrize(
    "letter, outcome",
    [("X", Outcome.LOSE), ("Y", Outcome.DRAW), ("Z", Outcome.WIN)],
)
def test_parse_outcome(letter, outcome):
    assert parse_outcome(letter) is outcome


@pytest.mark.parametrize("letter", ["D", "a", ""])
def test_parse_shape_rejects(letter):
    with pytest.raises(ValueError):
        parse_shape(letter)


def test_parse_outcome_rejects_opponent_letter():
    with pytest.raises(ValueError):
        parse_outcome("A")


@pytest.mark.parametrize(
    "opponent, me, outcome",
    [
        (Shape.ROCK, Shape.ROCK, Outcome.DRAW),
        (Shape.ROCK, Shape.PAPER, Outcome.WIN),
        (Shape.ROCK, Shape.SCISSORS, Outcome.LOSE),
        (Shape.SCISSORS, Shape.ROCK, Outcome.WIN),
        (Shape.PAPER, Shape.ROCK, Outcome.LOSE),
        (Shape.SCISSORS, Shape.PAPER, Outcome.LOSE),
    ],
)
def test_play(opponent, me, outcome):
    assert play(opponent, me) is outcome


@pytest.mark.parametrize("opponent, outcome", itertools.product(Shape, Outcome))
def test_choose_shape_reaches_outcome(opponent, outcome):
    assert play(opponent, choose_shape(opponent, outcome)) is outcome


@pytest.mark.parametrize("opponent, me", itertools.product(Shape, Shape))
def test_play_is_antisymmetric(opponent, me):
    mine = play(opponent, me)
    theirs = play(me, opponent)
    assert mine + theirs == Outcome.WIN + Outcome.LOSE


def test_score_as_shapes_example():
    assert score_as_shapes(EXAMPLE) == 15


def test_score_as_outcomes_example():
    assert score_as_outcomes(EXAMPLE) == 12


def test_blank_lines_are_skipped():
    assert score_as_shapes("\nA Y\n\nB X\n\nC Z\n") == score_as_shapes(EXAMPLE)


def test_score_is_sum_of_rounds():
    rounds = EXAMPLE.splitlines()
    assert score_as_outcomes(EXAMPLE) == sum(score_as_outcomes(r) for r in rounds)


def test_outcomes_reject_second_column_letter_for_opponent():
    with pytest.raises(ValueError):
        score_as_outcomes("X Y\n")


def test_malformed_round_rejected():
    with pytest.raises(ValueError):
        score_as_shapes("A\n")


def test_main_prints_result(tmp_path, capsys):
    path = tmp_path / "inp.txt"
    path.write_text(EXAMPLE)
    assert main([str(path), "--part", "2"]) == 0
    assert capsys.readouterr().out == f"{score_as_outcomes(EXAMPLE)}\n"