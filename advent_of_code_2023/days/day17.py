# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from pathlib import Path
from typing import Iterator

from advent_of_code_2023.io import read_input
from advent_of_code_2023.models import Coordinate, Direction, GridModel
from advent_of_code_2023.search import PathSearch, SearchState, SearchStatus, manhattan_distance
from advent_of_code_2023.settings import puzzle_parameters

# Every block loses at least 1, which keeps the Manhattan heuristic admissible
HEAT_LOSS_ALPHABET = {str(d): d for d in range(1, 10)}


def parse_city(text: str) -> GridModel[int]:
    return GridModel.from_string(text, HEAT_LOSS_ALPHABET, background=None)


def cheapest_path(city: GridModel[int], min_straight: int, max_straight: int) -> int | None:
    """
    Least heat loss from the top-left block to the bottom-right one.

    The crucible must move at least `min_straight` blocks in a line before it
    may turn or stop, never more than `max_straight`, and never reverses.
    The run length is part of the search state.
    """
    source = Coordinate(0, 0)
    target = Coordinate(city.width - 1, city.height - 1)

    def neighbors(state: SearchState) -> Iterator[SearchState]:
        assert state.direction is not None
        run = state.extra
        for direction in (state.direction, state.direction.turn_left, state.direction.turn_right):
            straight = direction == state.direction
            if straight and run >= max_straight:
                continue
            if not straight and run < min_straight:
                continue
            position = state.position.translate(direction)
            if not city.in_bounds(position):
                continue
            yield SearchState(position, direction, run + 1 if straight else 1)

    def heat_loss(_: SearchState, next_state: SearchState) -> int:
        return city.get(next_state.position) or 0

    def is_goal(state: SearchState) -> bool:
        return state.position == target and state.extra >= min_straight

    search = PathSearch(
        city,
        neighbors,
        cost_fn=heat_loss,
        heuristic=lambda state: manhattan_distance(state.position, target),
    )
    start_states = [SearchState(source, Direction.EAST, 0), SearchState(source, Direction.SOUTH, 0)]
    result = search.run(start_states, is_goal)
    return result.cost if result.status == SearchStatus.FOUND else None


def part_a(city: GridModel[int], min_straight: int = 1, max_straight: int = 3) -> int:
    cost = cheapest_path(city, min_straight, max_straight)
    if cost is None:
        raise ValueError("No path through the city")
    return cost


def part_b(city: GridModel[int], min_straight: int = 4, max_straight: int = 10) -> int:
    cost = cheapest_path(city, min_straight, max_straight)
    if cost is None:
        raise ValueError("No path through the city")
    return cost


def main(path: str | Path, config_file: str | Path | None = None) -> tuple[int, int | None]:
    params = puzzle_parameters(17, config_file)
    city = parse_city(read_input(path))
    a = part_a(city, params.get("min_straight_a", 1), params.get("max_straight_a", 3))
    b = part_b(city, params.get("min_straight_b", 4), params.get("max_straight_b", 10))
    return a, b
