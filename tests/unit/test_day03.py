from advent_of_code_2023.days.day03 import find_numbers, parse_schematic, part_a, part_b
from advent_of_code_2023.models import Coordinate

EXAMPLE = (
    "467..114..\n"
    "...*......\n"
    "..35..633.\n"
    "......#...\n"
    "617*......\n"
    ".....+.58.\n"
    "..592.....\n"
    "......755.\n"
    "...$.*....\n"
    ".664.598..\n"
)


def test_find_numbers() -> None:
    numbers = find_numbers(parse_schematic(EXAMPLE))
    assert [n.value for n in numbers] == [467, 114, 35, 633, 617, 58, 592, 755, 664, 598]
    assert numbers[0].start == Coordinate(0, 0)
    assert numbers[0].length == 3


def test_number_at_end_of_row() -> None:
    numbers = find_numbers(parse_schematic("..12\n*...\n"))
    assert [n.value for n in numbers] == [12]


def test_part_a() -> None:
    assert part_a(parse_schematic(EXAMPLE)) == 4361


def test_part_b() -> None:
    assert part_b(parse_schematic(EXAMPLE)) == 467835
