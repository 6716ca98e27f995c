# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from enum import Enum
from pathlib import Path

from advent_of_code_2023.io import read_input
from advent_of_code_2023.models import Coordinate, Direction, GridModel, ParseError
from advent_of_code_2023.search import connected_region


class Pipe(str, Enum):
    NORTH_SOUTH = "|"
    WEST_EAST = "-"
    NORTH_EAST = "L"
    NORTH_WEST = "J"
    SOUTH_WEST = "7"
    SOUTH_EAST = "F"
    START = "S"

    @property
    def openings(self) -> frozenset[Direction]:
        mapping = {
            Pipe.NORTH_SOUTH: frozenset({Direction.NORTH, Direction.SOUTH}),
            Pipe.WEST_EAST: frozenset({Direction.WEST, Direction.EAST}),
            Pipe.NORTH_EAST: frozenset({Direction.NORTH, Direction.EAST}),
            Pipe.NORTH_WEST: frozenset({Direction.NORTH, Direction.WEST}),
            Pipe.SOUTH_WEST: frozenset({Direction.SOUTH, Direction.WEST}),
            Pipe.SOUTH_EAST: frozenset({Direction.SOUTH, Direction.EAST}),
            Pipe.START: frozenset(),
        }
        return mapping[self]

    def exit(self, moving: Direction) -> Direction | None:
        """Direction we leave the pipe in when entering it while moving in `moving`."""
        entry = moving.opposite
        if entry not in self.openings:
            return None
        (other,) = self.openings - {entry}
        return other


PIPE_ALPHABET = {pipe.value: pipe for pipe in Pipe}


def parse_pipes(text: str) -> tuple[Coordinate, GridModel[Pipe]]:
    """Parse the maze and replace the start marker with the only pipe that fits its neighbors."""
    grid = GridModel.from_string(text, PIPE_ALPHABET)
    start = grid.find(lambda p: p is Pipe.START)
    if start is None:
        raise ParseError("No starting position found")

    for candidate in Pipe:
        if candidate is Pipe.START:
            continue
        fits = True
        for direction in candidate.openings:
            neighbor = grid.get(start.translate(direction))
            if neighbor is None or neighbor.exit(direction) is None:
                fits = False
                break
        if fits:
            grid.cells[start] = candidate
            return start, grid

    raise ParseError("Failed to determine pipe type for the starting position")


def find_loop(start: Coordinate, grid: GridModel[Pipe]) -> list[Coordinate] | None:
    pipe = grid.get(start)
    if pipe is None or not pipe.openings:
        return None

    moving = min(pipe.openings)
    position = start
    path: list[Coordinate] = []
    while True:
        path.append(position)
        position = position.translate(moving)
        if position == start:
            return path

        pipe = grid.get(position)
        if pipe is None:
            return None
        exit_direction = pipe.exit(moving)
        if exit_direction is None:
            return None
        moving = exit_direction


def count_enclosed(loop: list[Coordinate], grid: GridModel[Pipe]) -> int:
    """
    Counts cells enclosed by the loop.

    The grid is scaled up by two with a one cell margin so that the gaps
    between adjacent but unconnected pipes become real cells. Everything the
    outside can flood into is not enclosed.
    """
    scaled: GridModel[Pipe] = GridModel(width=2 * grid.width + 1, height=2 * grid.height + 1)

    boundary = {Coordinate(2 * c.x + 1, 2 * c.y + 1) for c in loop}
    for a, b in zip(loop, loop[1:] + loop[:1]):
        boundary.add(Coordinate(a.x + b.x + 1, a.y + b.y + 1))

    outside = connected_region(scaled, Coordinate(0, 0), boundary)
    on_loop = set(loop)

    enclosed = 0
    for coord in grid.coordinates():
        if coord in on_loop:
            continue
        if Coordinate(2 * coord.x + 1, 2 * coord.y + 1) not in outside:
            enclosed += 1
    return enclosed


def part_a(start: Coordinate, grid: GridModel[Pipe]) -> int:
    loop = find_loop(start, grid)
    if loop is None:
        raise ValueError("Unable to find loop")
    return len(loop) // 2


def part_b(start: Coordinate, grid: GridModel[Pipe]) -> int:
    loop = find_loop(start, grid)
    if loop is None:
        raise ValueError("Unable to find loop")
    return count_enclosed(loop, grid)


def main(path: str | Path, config_file: str | Path | None = None) -> tuple[int, int | None]:
    start, grid = parse_pipes(read_input(path))
    return part_a(start, grid), part_b(start, grid)
