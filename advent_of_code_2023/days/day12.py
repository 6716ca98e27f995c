# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path

from advent_of_code_2023.io import read_lines
from advent_of_code_2023.models import ParseError
from advent_of_code_2023.settings import puzzle_parameters

OPERATIONAL = "."
DAMAGED = "#"
UNKNOWN = "?"


@dataclass(frozen=True)
class Record:
    springs: str
    groups: tuple[int, ...]

    def unfold(self, copies: int) -> "Record":
        return Record(UNKNOWN.join([self.springs] * copies), self.groups * copies)

    @classmethod
    def from_string(cls, text: str) -> "Record":
        try:
            springs, groups_str = text.split(" ")
        except ValueError:
            raise ParseError(f"Unable to separate springs and groups in '{text}'")
        for c in springs:
            if c not in (OPERATIONAL, DAMAGED, UNKNOWN):
                raise ParseError(f"Unknown spring condition '{c}'", char=c)
        try:
            groups = tuple(int(n) for n in groups_str.split(","))
        except ValueError:
            raise ParseError(f"Invalid damaged groups '{groups_str}'")
        return cls(springs, groups)


def count_arrangements(record: Record) -> int:
    """
    Counts the ways unknown springs can be filled in to match the damaged groups.

    The table maps (group index, length of the current damaged run) to the
    number of ways to get there after the springs processed so far. Only
    reachable keys are kept, so each row stays small.
    """
    groups = record.groups
    table: dict[tuple[int, int], int] = {(0, 0): 1}

    for spring in record.springs:
        next_table: dict[tuple[int, int], int] = defaultdict(int)
        for (group, run), ways in table.items():
            if spring in (DAMAGED, UNKNOWN):
                if group < len(groups) and run < groups[group]:
                    next_table[(group, run + 1)] += ways
            if spring in (OPERATIONAL, UNKNOWN):
                if run == 0:
                    next_table[(group, 0)] += ways
                elif run == groups[group]:
                    next_table[(group + 1, 0)] += ways
        table = next_table

    finished = table.get((len(groups), 0), 0)
    if groups:
        finished += table.get((len(groups) - 1, groups[-1]), 0)
    return finished


def part_a(records: list[Record]) -> int:
    return sum(count_arrangements(r) for r in records)


def part_b(records: list[Record], unfold: int = 5) -> int:
    return sum(count_arrangements(r.unfold(unfold)) for r in records)


def main(path: str | Path, config_file: str | Path | None = None) -> tuple[int, int | None]:
    params = puzzle_parameters(12, config_file)
    records = [Record.from_string(line) for line in read_lines(path)]
    return part_a(records), part_b(records, unfold=params.get("unfold", 5))
