import string
from dataclasses import dataclass
from pathlib import Path

from advent_of_code_2023.io import read_input
from advent_of_code_2023.models import Coordinate, GridModel

GEAR = "*"

SCHEMATIC_ALPHABET = {c: c for c in string.digits + string.punctuation if c != "."}


@dataclass(frozen=True)
class PartNumber:
    value: int
    start: Coordinate
    length: int

    def cells(self) -> list[Coordinate]:
        return [Coordinate(self.start.x + i, self.start.y) for i in range(self.length)]

    def border(self) -> set[Coordinate]:
        own = set(self.cells())
        return {n for c in own for n in c.neighbors8() if n not in own}


def parse_schematic(text: str) -> GridModel[str]:
    return GridModel.from_string(text, SCHEMATIC_ALPHABET)


def find_numbers(schematic: GridModel[str]) -> list[PartNumber]:
    numbers = []
    for y in range(schematic.height):
        digits = ""
        for x in range(schematic.width + 1):
            value = schematic.get(Coordinate(x, y))
            if value is not None and value.isdigit():
                digits += value
            elif digits:
                # x is one past the run, including the column past the right edge
                numbers.append(PartNumber(int(digits), Coordinate(x - len(digits), y), len(digits)))
                digits = ""
    return numbers


def is_symbol(value: str | None) -> bool:
    return value is not None and not value.isdigit()


def part_a(schematic: GridModel[str]) -> int:
    return sum(
        number.value
        for number in find_numbers(schematic)
        if any(is_symbol(schematic.get(c)) for c in number.border())
    )


def part_b(schematic: GridModel[str]) -> int:
    adjacent: dict[Coordinate, list[int]] = {c: [] for c in schematic.find_all(lambda v: v == GEAR)}
    for number in find_numbers(schematic):
        for c in number.border():
            if c in adjacent:
                adjacent[c].append(number.value)
    return sum(values[0] * values[1] for values in adjacent.values() if len(values) == 2)


def main(path: str | Path, config_file: str | Path | None = None) -> tuple[int, int | None]:
    schematic = parse_schematic(read_input(path))
    return part_a(schematic), part_b(schematic)
