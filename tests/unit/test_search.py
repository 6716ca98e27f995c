# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from typing import Callable, Iterator

import pytest

from advent_of_code_2023.models import Coordinate, GridModel
from advent_of_code_2023.search import (
    PathSearch,
    PriorityEntry,
    SearchState,
    SearchStatus,
    grid_neighbors,
    manhattan_distance,
    search,
)

MAZE = "....#\n.##.#\n.#...\n.#.#.\n...#.\n"


def maze() -> GridModel[str]:
    return GridModel.from_string(MAZE, {"#": "#"})


def open_cells(grid: GridModel[str]) -> Callable[[Coordinate], Iterator[Coordinate]]:
    return grid_neighbors(grid, passable=lambda c: grid.get(c) is None)


def test_breadth_first_distance() -> None:
    grid = maze()
    result = PathSearch(grid, open_cells(grid)).run([Coordinate(0, 0)], lambda c: c == Coordinate(4, 4))
    assert result.status == SearchStatus.FOUND
    assert result.cost == 8
    assert result.goal_state == Coordinate(4, 4)


def test_start_is_goal() -> None:
    grid = maze()
    assert search(grid, [Coordinate(0, 0)], lambda c: c == Coordinate(0, 0), open_cells(grid)) == 0


def test_unreachable_goal() -> None:
    grid = GridModel.from_string("..#..\n..#..\n", {"#": "#"})
    result = PathSearch(grid, open_cells(grid)).run([Coordinate(0, 0)], lambda c: c == Coordinate(4, 0))
    assert result.status == SearchStatus.EXHAUSTED
    assert result.cost is None
    assert result.states_expanded == 4


def test_uniform_cost_matches_breadth_first() -> None:
    grid = maze()
    goal = Coordinate(4, 4)
    bfs = search(grid, [Coordinate(0, 0)], lambda c: c == goal, open_cells(grid))
    weighted = search(grid, [Coordinate(0, 0)], lambda c: c == goal, open_cells(grid), cost_fn=lambda a, b: 1)
    assert bfs == weighted == 8


def test_weighted_prefers_cheap_detour() -> None:
    # Going straight across the 9 costs more than walking around it
    grid = GridModel.from_string("191\n111\n", {str(d): d for d in range(10)}, background=None)
    goal = Coordinate(2, 0)
    cost = search(
        grid,
        [Coordinate(0, 0)],
        lambda c: c == goal,
        grid_neighbors(grid),
        cost_fn=lambda a, b: grid.get(b) or 0,
    )
    assert cost == 4


def test_heuristic_does_not_change_cost() -> None:
    grid = GridModel.from_string("1111\n1991\n1111\n", {str(d): d for d in range(10)}, background=None)
    goal = Coordinate(3, 2)
    kwargs = dict(cost_fn=lambda a, b: grid.get(b) or 0)
    plain = search(grid, [Coordinate(0, 0)], lambda c: c == goal, grid_neighbors(grid), **kwargs)
    guided = search(
        grid,
        [Coordinate(0, 0)],
        lambda c: c == goal,
        grid_neighbors(grid),
        heuristic=lambda c: manhattan_distance(c, goal),
        **kwargs,
    )
    assert plain == guided == 5


def test_multiple_start_states() -> None:
    grid = GridModel(width=10, height=1)
    starts = [Coordinate(0, 0), Coordinate(8, 0)]
    assert search(grid, starts, lambda c: c == Coordinate(9, 0), grid_neighbors(grid)) == 1


def test_negative_cost_rejected() -> None:
    grid = GridModel(width=3, height=1)
    with pytest.raises(ValueError):
        search(grid, [Coordinate(0, 0)], lambda c: c == Coordinate(2, 0), grid_neighbors(grid), cost_fn=lambda a, b: -1)


def test_search_state_identity() -> None:
    a = SearchState(Coordinate(1, 1), None, 2)
    b = SearchState(Coordinate(1, 1), None, 3)
    assert a != b
    assert len({a, b, SearchState(Coordinate(1, 1), None, 2)}) == 2


def test_priority_entry_ordering() -> None:
    first = PriorityEntry(5, 0, 3, SearchState(Coordinate(0, 0)))
    second = PriorityEntry(5, 1, 1, SearchState(Coordinate(1, 0)))
    third = PriorityEntry(4, 2, 4, SearchState(Coordinate(2, 0)))
    assert sorted([second, first, third]) == [third, first, second]
