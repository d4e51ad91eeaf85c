"""Seed almanac: chained range maps from seeds to locations."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path

Range = tuple[int, int, int]


@dataclass
class Almanac:
    """Seeds and the stages of range maps they pass through.

    Each range is ``(destination, source, length)``; within a stage the
    first range holding a value maps it.
    """

    seeds: list[int] = field(default_factory=list)
    stages: list[list[Range]] = field(default_factory=list)

    def location(self, seed: int) -> int:
        """Follow ``seed`` through every stage."""
        value = seed
        for stage in self.stages:
            for destination, source, length in stage:
                if source <= value < source + length:
                    value = destination + (value - source)
                    break
        return value

    def _map_intervals(self, intervals: list[tuple[int, int]]) -> list[tuple[int, int]]:
        """Follow half-open intervals through every stage."""
        for stage in self.stages:
            pending = intervals
            mapped: list[tuple[int, int]] = []
            for destination, source, length in stage:
                source_end = source + length
                remaining: list[tuple[int, int]] = []
                for start, end in pending:
                    low, high = max(start, source), min(end, source_end)
                    if low < high:
                        shift = destination - source
                        mapped.append((low + shift, high + shift))
                        if start < low:
                            remaining.append((start, low))
                        if high < end:
                            remaining.append((high, end))
                    else:
                        remaining.append((start, end))
                pending = remaining
            intervals = mapped + pending
        return intervals


def parse_almanac(text: str) -> Almanac:
    """Read the seed line and the blank-line separated map stages."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty almanac")
    _, sep, seeds_text = lines[0].partition(":")
    if not sep:
        raise ValueError(f"missing ':' in seed line: {lines[0]!r}")
    try:
        seeds = [int(token) for token in seeds_text.split()]
    except ValueError:
        raise ValueError(f"malformed seed line: {lines[0]!r}") from None

    stages: list[list[Range]] = []
    current: list[Range] = []
    for line in lines[1:]:
        if not line:
            if current:
                stages.append(current)
                current = []
            continue
        if not line[0].isdigit():
            continue
        parts = line.split()
        if len(parts) < 3:
            raise ValueError(f"malformed map line: {line!r}")
        try:
            destination, source, length = (int(part) for part in parts[:3])
        except ValueError:
            raise ValueError(f"malformed map line: {line!r}") from None
        current.append((destination, source, length))
    if current:
        stages.append(current)
    return Almanac(seeds, stages)


def lowest_location(text: str) -> int:
    """Lowest location reached by any listed seed."""
    almanac = parse_almanac(text)
    if not almanac.seeds:
        raise ValueError("no seeds listed")
    return min(almanac.location(seed) for seed in almanac.seeds)


def lowest_location_for_ranges(text: str) -> int:
    """Lowest location when the seeds are read as (start, length) pairs.

    A trailing start without a length is ignored.
    """
    almanac = parse_almanac(text)
    pairs = zip(almanac.seeds[0::2], almanac.seeds[1::2])
    intervals = [(start, start + length) for start, length in pairs if length > 0]
    if not intervals:
        raise ValueError("no seed ranges listed")
    return min(start for start, _ in almanac._map_intervals(intervals))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find the lowest seed location.")
    parser.add_argument("input", nargs="?", default="inp.txt", type=Path)
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    result = lowest_location(text) if args.part == 1 else lowest_location_for_ranges(text)
    print(f"min: {result}")
    return 0