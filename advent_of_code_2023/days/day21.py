# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from enum import Enum
from pathlib import Path

from advent_of_code_2023.io import read_input
from advent_of_code_2023.models import Coordinate, GridModel, ParseError
from advent_of_code_2023.search import count_reachable, flood_fill, grid_neighbors
from advent_of_code_2023.settings import puzzle_parameters


class Tile(str, Enum):
    ROCK = "#"
    START = "S"


def parse_garden(text: str) -> tuple[Coordinate, GridModel[Tile]]:
    grid = GridModel.from_string(text, {tile.value: tile for tile in Tile})
    starts = grid.find_all(lambda t: t is Tile.START)
    if not starts:
        raise ParseError("No starting position found")
    if len(starts) > 1:
        raise ParseError("Start is defined twice")
    del grid.cells[starts[0]]
    return starts[0], grid


def reachable_plots(start: Coordinate, grid: GridModel[Tile], steps: int, infinite: bool = False) -> int:
    """
    Number of garden plots the elf can stand on after exactly `steps` steps.
    With `infinite` the garden repeats in every direction.
    """
    garden = GridModel(width=grid.width, height=grid.height, cells=grid.cells, wrap=infinite)
    neighbors = grid_neighbors(garden, passable=lambda c: garden.get(c) is not Tile.ROCK)
    return count_reachable(flood_fill([start], neighbors, step_limit=steps), steps)


def part_a(start: Coordinate, grid: GridModel[Tile], steps: int = 64) -> int:
    return reachable_plots(start, grid, steps)


def main(path: str | Path, config_file: str | Path | None = None) -> tuple[int, int | None]:
    params = puzzle_parameters(21, config_file)
    start, grid = parse_garden(read_input(path))
    return part_a(start, grid, steps=params.get("steps", 64)), None
