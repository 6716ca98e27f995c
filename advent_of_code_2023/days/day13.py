from pathlib import Path

from advent_of_code_2023.io import read_input
from advent_of_code_2023.models import Coordinate, GridModel
from advent_of_code_2023.settings import puzzle_parameters

ROCK = "#"


def parse_notes(text: str) -> list[GridModel[str]]:
    blocks = [block for block in text.split("\n\n") if block.strip()]
    return [GridModel.from_string(block, {ROCK: ROCK}) for block in blocks]


def _row_differences(note: GridModel[str], a: int, b: int) -> int:
    return sum(1 for x in range(note.width) if (Coordinate(x, a) in note.cells) != (Coordinate(x, b) in note.cells))


def _column_differences(note: GridModel[str], a: int, b: int) -> int:
    return sum(
        1 for y in range(note.height) if (Coordinate(a, y) in note.cells) != (Coordinate(b, y) in note.cells)
    )


def find_reflection(note: GridModel[str], smudges: int = 0) -> int | None:
    """
    Summary value of the reflection line with exactly `smudges` mismatched cells:
    100 times the rows above a horizontal line, or the columns left of a vertical one.
    """
    for y in range(note.height - 1):
        pairs = min(y + 1, note.height - y - 1)
        if sum(_row_differences(note, y - d, y + 1 + d) for d in range(pairs)) == smudges:
            return 100 * (y + 1)

    for x in range(note.width - 1):
        pairs = min(x + 1, note.width - x - 1)
        if sum(_column_differences(note, x - d, x + 1 + d) for d in range(pairs)) == smudges:
            return x + 1

    return None


def summarize(notes: list[GridModel[str]], smudges: int) -> int:
    total = 0
    for i, note in enumerate(notes):
        value = find_reflection(note, smudges)
        if value is None:
            raise ValueError(f"No mirror found in note {i + 1}")
        total += value
    return total


def part_a(notes: list[GridModel[str]]) -> int:
    return summarize(notes, 0)


def part_b(notes: list[GridModel[str]], smudges: int = 1) -> int:
    return summarize(notes, smudges)


def main(path: str | Path, config_file: str | Path | None = None) -> tuple[int, int | None]:
    params = puzzle_parameters(13, config_file)
    notes = parse_notes(read_input(path))
    return part_a(notes), part_b(notes, smudges=params.get("smudges_b", 1))
