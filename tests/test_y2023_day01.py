import pytest

from puzzlesolve.y2023_day01 import calibration_value, main, total_calibration

PLAIN = "1abc2\npqr3stu8vwx\na1b2c3d4e5f\ntreb7uchet\n"

SPELLED = (
    "two1nine\n"
    "eightwothree\n"
    "abcone2threexyz\n"
    "xtwone3four\n"
    "4nineeightseven2\n"
    "zoneight234\n"
    "7pqrstsixteen\n"
)


def test_first_and_last_digit():
    assert calibration_value("1abc2") == 12


def test_single_digit_used_twice():
    assert calibration_value("treb7uchet") == 77


def test_plain_example_total():
    assert total_calibration(PLAIN) == 142


def test_spelled_example_total():
    assert total_calibration(SPELLED, spelled=True) == 281


def test_spelled_names_may_overlap():
    assert calibration_value("eightwo", spelled=True) == 82


def test_plain_ignores_names():
    assert calibration_value("one2three4five") == calibration_value("24")


def test_spelled_matches_plain_without_names():
    for line in PLAIN.splitlines():
        assert calibration_value(line, spelled=True) == calibration_value(line)


def test_total_is_sum_of_lines():
    expected = sum(calibration_value(line, spelled=True) for line in SPELLED.splitlines())
    assert total_calibration(SPELLED, spelled=True) == expected


def test_blank_lines_ignored():
    assert total_calibration("\n" + PLAIN + "\n\n") == total_calibration(PLAIN)


def test_plain_without_digits_raises():
    with pytest.raises(ValueError):
        calibration_value("abc")


def test_spelled_without_digits_is_zero():
    assert calibration_value("abc", spelled=True) == 0


def test_main_part_two_output(tmp_path, capsys):
    path = tmp_path / "inp.txt"
    path.write_text(SPELLED)
    assert main([str(path), "--part", "2"]) == 0
    assert capsys.readouterr().out == f"sum: {total_calibration(SPELLED, spelled=True)}\n"


def test_main_part_one_output(tmp_path, capsys):
    path = tmp_path / "inp.txt"
    path.write_text(PLAIN)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == f"{total_calibration(PLAIN)}\n"