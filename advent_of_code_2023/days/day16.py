# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from enum import Enum
from pathlib import Path
from typing import Callable, Iterator

from advent_of_code_2023.io import read_input
from advent_of_code_2023.models import Coordinate, Direction, GridModel
from advent_of_code_2023.search import SearchState, flood_fill


class Mirror(str, Enum):
    SPLIT_VERTICAL = "|"
    SPLIT_HORIZONTAL = "-"
    BACKSLASH = "\\"
    SLASH = "/"

    def deflect(self, moving: Direction) -> tuple[Direction, ...]:
        vertical = moving in (Direction.NORTH, Direction.SOUTH)
        if self is Mirror.SPLIT_VERTICAL:
            return (moving,) if vertical else (Direction.NORTH, Direction.SOUTH)
        if self is Mirror.SPLIT_HORIZONTAL:
            return (Direction.WEST, Direction.EAST) if vertical else (moving,)
        if self is Mirror.BACKSLASH:
            return (moving.turn_left,) if vertical else (moving.turn_right,)
        return (moving.turn_right,) if vertical else (moving.turn_left,)


def parse_contraption(text: str) -> GridModel[Mirror]:
    return GridModel.from_string(text, {m.value: m for m in Mirror})


def beam_neighbors(grid: GridModel[Mirror]) -> Callable[[SearchState], Iterator[SearchState]]:
    def neighbors(beam: SearchState) -> Iterator[SearchState]:
        assert beam.direction is not None
        mirror = grid.get(beam.position)
        directions = (beam.direction,) if mirror is None else mirror.deflect(beam.direction)
        for direction in directions:
            position = beam.position.translate(direction)
            if grid.in_bounds(position):
                yield SearchState(position, direction)

    return neighbors


def energized_tiles(grid: GridModel[Mirror], seed: SearchState) -> int:
    # The same tile can be crossed in several directions, count it once
    visited = flood_fill([seed], beam_neighbors(grid))
    return len({beam.position for beam in visited})


def edge_seeds(grid: GridModel[Mirror]) -> Iterator[SearchState]:
    for x in range(grid.width):
        yield SearchState(Coordinate(x, 0), Direction.SOUTH)
        yield SearchState(Coordinate(x, grid.height - 1), Direction.NORTH)
    for y in range(grid.height):
        yield SearchState(Coordinate(0, y), Direction.EAST)
        yield SearchState(Coordinate(grid.width - 1, y), Direction.WEST)


def part_a(grid: GridModel[Mirror]) -> int:
    return energized_tiles(grid, SearchState(Coordinate(0, 0), Direction.EAST))


def part_b(grid: GridModel[Mirror]) -> int:
    return max(energized_tiles(grid, seed) for seed in edge_seeds(grid))


def main(path: str | Path, config_file: str | Path | None = None) -> tuple[int, int | None]:
    grid = parse_contraption(read_input(path))
    return part_a(grid), part_b(grid)
