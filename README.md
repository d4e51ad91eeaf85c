# puzzlesolve

Solvers for a collection of daily programming puzzles. You can use them
as a library or from the command line.

| Module                     | Puzzle                                        |
|----------------------------|-----------------------------------------------|
| `puzzlesolve.y2022_day01`  | Calorie counting: largest elf totals          |
| `puzzlesolve.y2022_day02`  | Rock, paper, scissors strategy guide          |
| `puzzlesolve.y2023_day01`  | Calibration values (digits, spelled digits)   |
| `puzzlesolve.y2023_day02`  | Cube game: possible games and powers          |
| `puzzlesolve.y2023_day03`  | Engine schematic: part numbers, gear ratios   |
| `puzzlesolve.y2023_day04`  | Scratchcards: points and card copies          |
| `puzzlesolve.y2023_day05`  | Seed almanac: lowest location                 |
| `puzzlesolve.y2023_day06`  | Boat race input: times and distances lines    |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Each puzzle has its own command. A command takes the path of the puzzle
input as an optional argument. If you give no path, it reads `inp.txt` in
the current directory. Every command except the day 6 one also takes
`--part 1` (the default) or `--part 2`:

```
puzzlesolve-2022-day01 [INPUT] [--part {1,2}]   # top elf, or top three elves together
puzzlesolve-2022-day02 [INPUT] [--part {1,2}]   # second column as shape, or as outcome
puzzlesolve-2023-day01 [INPUT] [--part {1,2}]   # digits only, or spelled digits too
puzzlesolve-2023-day02 [INPUT] [--part {1,2}]   # sum of possible ids, or sum of powers
puzzlesolve-2023-day03 [INPUT] [--part {1,2}]   # part number sum, or gear ratio sum
puzzlesolve-2023-day04 [INPUT] [--part {1,2}]   # total points, or total cards
puzzlesolve-2023-day05 [INPUT] [--part {1,2}]   # single seeds, or seed ranges
puzzlesolve-2023-day06 [INPUT]                  # print the times and distances lines
```

The answer is printed on standard output. Some commands print a label in
front of it:

- `Sum: N` for 2023 day 2
- `Sum N` for 2023 day 3
- `min: N` for 2023 day 5
- `sum: N` for part 2 of 2023 day 1

## Library use

Every solver takes the puzzle input as a string:

```python
from puzzlesolve.y2022_day01 import top_calories

text = "1000\n2000\n3000\n\n4000\n\n5000\n6000\n\n7000\n8000\n9000\n\n10000\n"
top_calories(text, 1)   # 24000
top_calories(text, 3)   # 45000
```

```python
from puzzlesolve.y2022_day02 import score_as_shapes, score_as_outcomes

guide = "A Y\nB X\nC Z\n"
score_as_shapes(guide)    # 15
score_as_outcomes(guide)  # 12
```

```python
from puzzlesolve.y2023_day02 import parse_game

game = parse_game("Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green")
game.is_possible(12, 13, 14)  # True
game.power()                  # 48
```

The other entry points are:

- 2022 day 1: `elf_totals`
- 2022 day 2: `parse_shape`, `parse_outcome`, `play`, `choose_shape`, and the `Shape` and `Outcome` enums
- 2023 day 1: `calibration_value`, `total_calibration`
- 2023 day 2: `sum_possible_ids`, `sum_powers`
- 2023 day 3: `parse_schematic`, `Schematic.adjacent_symbol`, `part_number_sum`, `gear_ratio_sum`
- 2023 day 4: `parse_card`, `Card.matches`, `Card.points`, `total_points`, `total_cards`
- 2023 day 5: `parse_almanac`, `Almanac.location`, `lowest_location`, `lowest_location_for_ranges`
- 2023 day 6: `race_lines`

Malformed input raises `ValueError`. Examples are an unknown letter in a
strategy guide, a game line without `:`, or a card without `|`.

## What the package does not do

For the 2023 day 6 boat races, the package only reads the input.
`race_lines` returns the times line and the distances line, and the
command prints them. Nothing counts the ways to win a race.