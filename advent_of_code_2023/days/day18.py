# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

import re
from dataclasses import dataclass
from pathlib import Path

from advent_of_code_2023.io import read_lines
from advent_of_code_2023.models import Coordinate, Direction, ParseError

INSTRUCTION_PATTERN = re.compile(r"^([URDL]) (\d+) \(#([0-9a-fA-F]{6})\)$")

# Last hex digit of the colour code
HEX_DIRECTIONS = [Direction.EAST, Direction.SOUTH, Direction.WEST, Direction.NORTH]


@dataclass(frozen=True)
class DigInstruction:
    direction: Direction
    distance: int

    @classmethod
    def from_string(cls, text: str) -> "DigInstruction":
        match = INSTRUCTION_PATTERN.match(text.strip())
        if match is None:
            raise ParseError(f"Invalid dig instruction: '{text}'")
        return cls(Direction.from_letter(match.group(1)), int(match.group(2)))

    @classmethod
    def from_colour(cls, text: str) -> "DigInstruction":
        match = INSTRUCTION_PATTERN.match(text.strip())
        if match is None:
            raise ParseError(f"Invalid dig instruction: '{text}'")
        code = match.group(3)
        digit = int(code[5], 16)
        if digit >= len(HEX_DIRECTIONS):
            raise ParseError(f"Colour code '#{code}' does not encode a direction", char=code[5])
        return cls(HEX_DIRECTIONS[digit], int(code[:5], 16))


def lagoon_volume(plan: list[DigInstruction]) -> int:
    """
    Number of cubic meters dug out: the trench itself plus everything it encloses.

    The shoelace formula gives the area of the polygon through the centres of
    the trench cells. Adding half the perimeter plus one covers the outer half
    of every boundary cell.
    """
    position = Coordinate(0, 0)
    doubled_area = 0
    perimeter = 0
    for step in plan:
        following = position.translate(step.direction, step.distance)
        doubled_area += position.x * following.y - following.x * position.y
        perimeter += step.distance
        position = following

    if position != Coordinate(0, 0):
        raise ValueError(f"Dig plan does not return to its origin, ends at {position}")

    return (abs(doubled_area) + perimeter) // 2 + 1


def part_a(lines: list[str]) -> int:
    return lagoon_volume([DigInstruction.from_string(line) for line in lines])


def part_b(lines: list[str]) -> int:
    return lagoon_volume([DigInstruction.from_colour(line) for line in lines])


def main(path: str | Path, config_file: str | Path | None = None) -> tuple[int, int | None]:
    lines = read_lines(path)
    return part_a(lines), part_b(lines)
