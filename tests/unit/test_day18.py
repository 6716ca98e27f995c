# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

import pytest

from advent_of_code_2023.days.day18 import DigInstruction, lagoon_volume, part_a, part_b
from advent_of_code_2023.models import Direction, ParseError

EXAMPLE = [
    "R 6 (#70c710)",
    "D 5 (#0dc571)",
    "L 2 (#5713f0)",
    "D 2 (#d2c081)",
    "R 2 (#59c680)",
    "D 2 (#411b91)",
    "L 5 (#8ceee2)",
    "U 2 (#caa173)",
    "L 1 (#1b58a2)",
    "U 2 (#caa171)",
    "R 2 (#7807d2)",
    "U 3 (#a77fa3)",
    "L 2 (#015232)",
    "U 2 (#7a21e3)",
]


def test_parse_instruction() -> None:
    assert DigInstruction.from_string("R 6 (#70c710)") == DigInstruction(Direction.EAST, 6)
    assert DigInstruction.from_colour("R 6 (#70c710)") == DigInstruction(Direction.EAST, 461937)
    assert DigInstruction.from_colour("U 2 (#caa173)") == DigInstruction(Direction.NORTH, 829975)


@pytest.mark.parametrize("text", ["X 6 (#70c710)", "R six (#70c710)", "R 6 #70c710", "R 6 (#70c71)"])
def test_invalid_instruction(text: str) -> None:
    with pytest.raises(ParseError):
        DigInstruction.from_string(text)


def test_colour_without_direction() -> None:
    with pytest.raises(ParseError):
        DigInstruction.from_colour("R 6 (#70c714)")


def test_unit_square() -> None:
    plan = [DigInstruction(d, 1) for d in (Direction.EAST, Direction.SOUTH, Direction.WEST, Direction.NORTH)]
    assert lagoon_volume(plan) == 4


def test_open_plan() -> None:
    with pytest.raises(ValueError):
        lagoon_volume([DigInstruction(Direction.EAST, 3)])


def test_part_a() -> None:
    assert part_a(EXAMPLE) == 62


def test_part_b() -> None:
    assert part_b(EXAMPLE) == 952408144115
