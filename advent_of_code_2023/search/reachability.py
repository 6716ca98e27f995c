from collections import deque
from typing import Any, Iterable

from advent_of_code_2023.models import Coordinate, GridModel
from advent_of_code_2023.search.definitions import NeighborsFn
from advent_of_code_2023.search.utils import grid_neighbors


def flood_fill(seeds: Iterable[Any], neighbors_fn: NeighborsFn, step_limit: int | None = None) -> dict[Any, int]:
    """
    Breadth-first flood fill from one or more seeds.
    Returns the number of steps needed to reach every reachable state,
    stopping expansion at `step_limit` when one is given.
    """
    distances: dict[Any, int] = {}
    frontier: deque[Any] = deque()
    for seed in seeds:
        if seed not in distances:
            distances[seed] = 0
            frontier.append(seed)

    while frontier:
        state = frontier.popleft()
        steps = distances[state]
        if step_limit is not None and steps >= step_limit:
            continue
        for next_state in neighbors_fn(state):
            if next_state in distances:
                continue
            distances[next_state] = steps + 1
            frontier.append(next_state)

    return distances


def count_reachable(distances: dict[Any, int], step_limit: int) -> int:
    """
    Counts the states a walker can end on after exactly `step_limit` steps.
    Stepping back and forth means any state reached in fewer steps of the
    same parity counts too.
    """
    return sum(1 for steps in distances.values() if steps <= step_limit and steps % 2 == step_limit % 2)


def connected_region(model: GridModel[Any], seed: Coordinate, boundary: set[Coordinate]) -> set[Coordinate]:
    """All in-bounds cells reachable from seed without crossing a boundary cell."""
    if seed in boundary or not model.in_bounds(seed):
        return set()
    neighbors = grid_neighbors(model, passable=lambda c: c not in boundary)
    return set(flood_fill([seed], neighbors))
