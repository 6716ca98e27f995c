# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Iterator

from advent_of_code_2023.io import read_lines
from advent_of_code_2023.models import Coordinate, ParseError
from advent_of_code_2023.search import flood_fill


@dataclass(frozen=True)
class Brick:
    """A box of sand cubes: a footprint on the ground plane spanning heights bottom to top."""

    corner: Coordinate
    far_corner: Coordinate
    bottom: int
    top: int

    def footprint(self) -> Iterator[Coordinate]:
        for y in range(self.corner.y, self.far_corner.y + 1):
            for x in range(self.corner.x, self.far_corner.x + 1):
                yield Coordinate(x, y)

    def dropped_to(self, bottom: int) -> "Brick":
        return replace(self, bottom=bottom, top=bottom + self.top - self.bottom)

    @classmethod
    def from_string(cls, text: str) -> "Brick":
        try:
            ends = [[int(v) for v in end.split(",")] for end in text.strip().split("~")]
        except ValueError:
            raise ParseError(f"Invalid brick: '{text}'")
        if len(ends) != 2 or any(len(end) != 3 for end in ends):
            raise ParseError(f"Invalid brick: '{text}'")
        (x1, y1, z1), (x2, y2, z2) = ends
        if min(z1, z2) < 1:
            raise ParseError(f"Brick '{text}' reaches into the ground")
        return cls(
            Coordinate(min(x1, x2), min(y1, y2)),
            Coordinate(max(x1, x2), max(y1, y2)),
            min(z1, z2),
            max(z1, z2),
        )


@dataclass
class Stack:
    """Settled bricks with the support relation between them, indexed by position in `bricks`."""

    bricks: list[Brick] = field(default_factory=list)
    supporters: list[set[int]] = field(default_factory=list)
    supported: list[set[int]] = field(default_factory=list)

    def is_removable(self, index: int) -> bool:
        return all(len(self.supporters[above]) > 1 for above in self.supported[index])

    def chain_reaction(self, index: int) -> int:
        """Number of other bricks that fall when the brick at `index` is taken out."""
        fallen: set[int] = set()

        def falling(brick: int) -> Iterator[int]:
            fallen.add(brick)
            for above in self.supported[brick]:
                if self.supporters[above] <= fallen:
                    yield above

        return len(flood_fill([index], falling)) - 1


def settle(bricks: list[Brick]) -> Stack:
    """
    Lets the bricks fall in order of their lowest cube until they rest on
    the ground at height 1 or on top of another brick.
    """
    stack = Stack()
    # Highest settled cube over each ground cell and the brick it belongs to
    heights: dict[Coordinate, tuple[int, int]] = {}
    for brick in sorted(bricks, key=lambda b: (b.bottom, b.top)):
        below = [heights[c] for c in brick.footprint() if c in heights]
        rest = max((top for top, _ in below), default=0) + 1
        index = len(stack.bricks)
        settled = brick.dropped_to(rest)
        supporters = {i for top, i in below if top == rest - 1}

        stack.bricks.append(settled)
        stack.supporters.append(supporters)
        stack.supported.append(set())
        for i in supporters:
            stack.supported[i].add(index)
        for c in settled.footprint():
            heights[c] = (settled.top, index)
    return stack


def parse_bricks(lines: list[str]) -> list[Brick]:
    return [Brick.from_string(line) for line in lines]


def part_a(stack: Stack) -> int:
    return sum(1 for i in range(len(stack.bricks)) if stack.is_removable(i))


def part_b(stack: Stack) -> int:
    return sum(stack.chain_reaction(i) for i in range(len(stack.bricks)))


def main(path: str | Path, config_file: str | Path | None = None) -> tuple[int, int | None]:
    stack = settle(parse_bricks(read_lines(path)))
    return part_a(stack), part_b(stack)
