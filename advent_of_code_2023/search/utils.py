from typing import Any, Callable, Iterator

from advent_of_code_2023.models import Coordinate, GridModel


def manhattan_distance(a: Coordinate, b: Coordinate) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


def grid_neighbors(
    model: GridModel[Any],
    passable: Callable[[Coordinate], bool] | None = None,
) -> Callable[[Coordinate], Iterator[Coordinate]]:
    """
    Builds a 4-directional neighbor function over plain coordinates.
    Out-of-bounds neighbors are dropped unless the model wraps, in which
    case the unbounded coordinate is returned as is.
    """

    def neighbors(coord: Coordinate) -> Iterator[Coordinate]:
        for _, n in coord.neighbors():
            if not model.in_bounds(n):
                continue
            if passable is not None and not passable(n):
                continue
            yield n

    return neighbors
