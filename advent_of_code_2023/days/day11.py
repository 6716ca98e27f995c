import itertools
from pathlib import Path

from advent_of_code_2023.io import read_input
from advent_of_code_2023.models import Coordinate, GridModel
from advent_of_code_2023.settings import puzzle_parameters

GALAXY = "#"


def parse_galaxies(text: str) -> GridModel[str]:
    return GridModel.from_string(text, {GALAXY: GALAXY})


def expand_void(image: GridModel[str], factor: int) -> set[Coordinate]:
    """Moves every galaxy so that each empty row and column takes up `factor` rows or columns."""
    if factor <= 0:
        raise ValueError("Void expansion factor must be greater than 0")

    galaxies = list(image.cells)
    occupied_columns = {c.x for c in galaxies}
    occupied_rows = {c.y for c in galaxies}
    void_columns = [x for x in range(image.width) if x not in occupied_columns]
    void_rows = [y for y in range(image.height) if y not in occupied_rows]

    expanded = set()
    for galaxy in galaxies:
        columns_before = sum(1 for x in void_columns if x < galaxy.x)
        rows_before = sum(1 for y in void_rows if y < galaxy.y)
        expanded.add(
            Coordinate(
                galaxy.x + columns_before * (factor - 1),
                galaxy.y + rows_before * (factor - 1),
            )
        )
    return expanded


def sum_pairwise_distances(image: GridModel[str], factor: int) -> int:
    galaxies = expand_void(image, factor)
    return sum(a.manhattan(b) for a, b in itertools.combinations(galaxies, 2))


def part_a(image: GridModel[str], expansion: int = 2) -> int:
    return sum_pairwise_distances(image, expansion)


def part_b(image: GridModel[str], expansion: int = 1_000_000) -> int:
    return sum_pairwise_distances(image, expansion)


def main(path: str | Path, config_file: str | Path | None = None) -> tuple[int, int | None]:
    params = puzzle_parameters(11, config_file)
    image = parse_galaxies(read_input(path))
    return part_a(image, params.get("expansion_a", 2)), part_b(image, params.get("expansion_b", 1_000_000))
