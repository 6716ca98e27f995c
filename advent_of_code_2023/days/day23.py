# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from pathlib import Path
from typing import Callable, Iterator

from advent_of_code_2023.io import read_input
from advent_of_code_2023.models import Coordinate, Direction, GridModel
from advent_of_code_2023.search import build_junction_graph, grid_neighbors, longest_simple_path

FOREST = "#"

# Slope cells hold the Direction they force, forest cells hold the FOREST marker
TRAIL_ALPHABET: dict[str, Direction | str] = {d.value: d for d in Direction}
TRAIL_ALPHABET[FOREST] = FOREST


def parse_trails(text: str) -> GridModel[Direction | str]:
    return GridModel.from_string(text, TRAIL_ALPHABET)


def endpoints(trails: GridModel[Direction | str]) -> tuple[Coordinate, Coordinate]:
    return Coordinate(1, 0), Coordinate(trails.width - 2, trails.height - 1)


def walk_neighbors(
    trails: GridModel[Direction | str], slippery: bool
) -> Callable[[Coordinate], Iterator[Coordinate]]:
    def neighbors(coord: Coordinate) -> Iterator[Coordinate]:
        for direction, n in coord.neighbors():
            if not trails.in_bounds(n):
                continue
            tile = trails.get(n)
            if tile == FOREST:
                continue
            # A slope can only be entered going downhill
            if slippery and isinstance(tile, Direction) and tile != direction:
                continue
            yield n

    return neighbors


def longest_hike(trails: GridModel[Direction | str], slippery: bool) -> int | None:
    source, target = endpoints(trails)
    open_ground = grid_neighbors(trails, passable=lambda c: trails.get(c) != FOREST)

    junctions = {c for c in trails.coordinates() if trails.get(c) != FOREST and len(list(open_ground(c))) > 2}
    graph = build_junction_graph(junctions | {source, target}, walk_neighbors(trails, slippery))
    return longest_simple_path(graph, source, target)


def part_a(trails: GridModel[Direction | str]) -> int:
    length = longest_hike(trails, slippery=True)
    if length is None:
        raise ValueError("No hike reaches the exit")
    return length


def part_b(trails: GridModel[Direction | str]) -> int:
    length = longest_hike(trails, slippery=False)
    if length is None:
        raise ValueError("No hike reaches the exit")
    return length


def main(path: str | Path, config_file: str | Path | None = None) -> tuple[int, int | None]:
    trails = parse_trails(read_input(path))
    return part_a(trails), part_b(trails)
