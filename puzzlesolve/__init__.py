"""Solvers for daily programming puzzles from 2022 and 2023, one module per day."""

__version__ = "0.1.0"

__all__ = [
    "y2022_day01",
    "y2022_day02",
    "y2023_day01",
    "y2023_day02",
    "y2023_day03",
    "y2023_day04",
    "y2023_day05",
    "y2023_day06",
]