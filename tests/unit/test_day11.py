import pytest

from advent_of_code_2023.days.day11 import expand_void, parse_galaxies, part_a, sum_pairwise_distances

EXAMPLE = (
    "...#......\n"
    ".......#..\n"
    "#.........\n"
    "..........\n"
    "......#...\n"
    ".#........\n"
    ".........#\n"
    "..........\n"
    ".......#..\n"
    "#...#.....\n"
)

EXAMPLE_EXPANDED = (
    "....#........\n"
    ".........#...\n"
    "#............\n"
    ".............\n"
    ".............\n"
    "........#....\n"
    ".#...........\n"
    "............#\n"
    ".............\n"
    ".............\n"
    ".........#...\n"
    "#....#.......\n"
)


def test_expand_void() -> None:
    expanded = expand_void(parse_galaxies(EXAMPLE), 2)
    assert expanded == set(parse_galaxies(EXAMPLE_EXPANDED).cells)


def test_factor_one_keeps_positions() -> None:
    image = parse_galaxies(EXAMPLE)
    assert expand_void(image, 1) == set(image.cells)


def test_invalid_factor() -> None:
    with pytest.raises(ValueError):
        expand_void(parse_galaxies(EXAMPLE), 0)


@pytest.mark.parametrize("factor,expected", [(2, 374), (10, 1030), (100, 8410)])
def test_sum_distances(factor: int, expected: int) -> None:
    assert sum_pairwise_distances(parse_galaxies(EXAMPLE), factor) == expected


def test_part_a() -> None:
    assert part_a(parse_galaxies(EXAMPLE)) == 374
