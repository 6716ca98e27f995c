# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Optional, Tuple, TypeVar

T = TypeVar("T")


class ParseError(ValueError):
    def __init__(self, message: str, char: str | None = None, line: int | None = None, column: int | None = None):
        super().__init__(message)
        self.char = char
        self.line = line
        self.column = column


class Direction(str, Enum):
    NORTH = "^"
    EAST = ">"
    SOUTH = "v"
    WEST = "<"

    @property
    def delta(self) -> Tuple[int, int]:
        mapping = {
            Direction.NORTH: (0, -1),
            Direction.EAST: (1, 0),
            Direction.SOUTH: (0, 1),
            Direction.WEST: (-1, 0),
        }
        return mapping[self]

    @property
    def opposite(self) -> "Direction":
        mapping = {
            Direction.NORTH: Direction.SOUTH,
            Direction.EAST: Direction.WEST,
            Direction.SOUTH: Direction.NORTH,
            Direction.WEST: Direction.EAST,
        }
        return mapping[self]

    @property
    def turn_left(self) -> "Direction":
        mapping = {
            Direction.NORTH: Direction.WEST,
            Direction.WEST: Direction.SOUTH,
            Direction.SOUTH: Direction.EAST,
            Direction.EAST: Direction.NORTH,
        }
        return mapping[self]

    @property
    def turn_right(self) -> "Direction":
        return self.turn_left.opposite

    @classmethod
    def from_letter(cls, letter: str) -> "Direction":
        mapping = {"U": cls.NORTH, "R": cls.EAST, "D": cls.SOUTH, "L": cls.WEST}
        if letter not in mapping:
            raise ParseError(f"Unknown direction letter: '{letter}'", char=letter)
        return mapping[letter]


@dataclass(frozen=True, order=True)
class Coordinate:
    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x},{self.y})"

    def translate(self, direction: Direction, steps: int = 1) -> "Coordinate":
        dx, dy = direction.delta
        return Coordinate(self.x + dx * steps, self.y + dy * steps)

    def neighbors(self) -> Iterator[tuple[Direction, "Coordinate"]]:
        for direction in Direction:
            yield direction, self.translate(direction)

    def neighbors8(self) -> Iterator["Coordinate"]:
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx or dy:
                    yield Coordinate(self.x + dx, self.y + dy)

    def manhattan(self, other: "Coordinate") -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)


@dataclass
class GridModel(Generic[T]):
    """
    Sparse grid of cell contents keyed by coordinate.
    Coordinates missing from `cells` but inside the bounds are background.
    With `wrap` set the grid tiles infinitely: lookups are reduced modulo the
    bounds while callers keep the unbounded coordinate.
    """

    width: int
    height: int
    cells: dict[Coordinate, T] = field(default_factory=dict)
    wrap: bool = False

    def __post_init__(self) -> None:
        for coord in self.cells:
            if not (0 <= coord.x < self.width and 0 <= coord.y < self.height):
                raise ValueError(f"Cell {coord} lies outside a {self.width}x{self.height} grid")

    def wrapped(self, coord: Coordinate) -> Coordinate:
        if self.width == 0 or self.height == 0:
            raise ValueError("Cannot wrap coordinates on an empty grid")
        return Coordinate(coord.x % self.width, coord.y % self.height)

    def in_bounds(self, coord: Coordinate) -> bool:
        if self.wrap:
            return True
        return 0 <= coord.x < self.width and 0 <= coord.y < self.height

    def get(self, coord: Coordinate) -> Optional[T]:
        if self.wrap:
            if self.width == 0 or self.height == 0:
                return None
            coord = self.wrapped(coord)
        return self.cells.get(coord)

    def find(self, predicate: Callable[[T], bool]) -> Optional[Coordinate]:
        # Row-major order so the result is deterministic
        for coord in sorted(self.cells, key=lambda c: (c.y, c.x)):
            if predicate(self.cells[coord]):
                return coord
        return None

    def find_all(self, predicate: Callable[[T], bool]) -> list[Coordinate]:
        return sorted((c for c, v in self.cells.items() if predicate(v)), key=lambda c: (c.y, c.x))

    def coordinates(self) -> Iterator[Coordinate]:
        for y in range(self.height):
            for x in range(self.width):
                yield Coordinate(x, y)

    def to_string(self, symbols: Mapping[T, str], background: str = ".") -> str:
        lines = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                value = self.cells.get(Coordinate(x, y))
                row.append(background if value is None else symbols[value])
            lines.append("".join(row))
        return "\n".join(lines) + "\n"

    @classmethod
    def from_string(
        cls,
        text: str,
        alphabet: Mapping[str, T],
        background: str | None = ".",
        wrap: bool = False,
    ) -> "GridModel[T]":
        cells: dict[Coordinate, T] = {}
        width = 0
        height = 0
        for y, line in enumerate(text.splitlines()):
            for x, char in enumerate(line):
                if char == background:
                    pass
                elif char in alphabet:
                    cells[Coordinate(x, y)] = alphabet[char]
                else:
                    raise ParseError(
                        f"Unknown tile '{char}' at line {y + 1}, column {x + 1}",
                        char=char,
                        line=y + 1,
                        column=x + 1,
                    )
                width = max(width, x + 1)
            height = y + 1
        return cls(width=width, height=height, cells=cells, wrap=wrap)
