# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from advent_of_code_2023.io import read_input
from advent_of_code_2023.models import Coordinate, Direction, GridModel
from advent_of_code_2023.settings import puzzle_parameters
from advent_of_code_2023.simulation import CycleDetectingSimulator

Rocks = frozenset[Coordinate]

SPIN_ORDER = (Direction.NORTH, Direction.WEST, Direction.SOUTH, Direction.EAST)


class Rock(str, Enum):
    ROUND = "O"
    CUBE = "#"


@dataclass(frozen=True)
class Platform:
    width: int
    height: int
    cubes: frozenset[Coordinate]

    def tilt(self, rounds: Rocks, direction: Direction) -> Rocks:
        """Slide every round rock as far as it goes in the given direction."""
        vertical = direction in (Direction.NORTH, Direction.SOUTH)
        lanes = self.width if vertical else self.height
        length = self.height if vertical else self.width
        towards_origin = direction in (Direction.NORTH, Direction.WEST)
        positions = list(range(length)) if towards_origin else list(range(length - 1, -1, -1))

        moved: set[Coordinate] = set()
        for lane in range(lanes):
            free = 0
            for i, pos in enumerate(positions):
                coord = Coordinate(lane, pos) if vertical else Coordinate(pos, lane)
                if coord in self.cubes:
                    free = i + 1
                elif coord in rounds:
                    target = positions[free]
                    moved.add(Coordinate(lane, target) if vertical else Coordinate(target, lane))
                    free += 1
        return frozenset(moved)

    def spin(self, rounds: Rocks) -> Rocks:
        for direction in SPIN_ORDER:
            rounds = self.tilt(rounds, direction)
        return rounds

    def load(self, rounds: Rocks) -> int:
        return sum(self.height - c.y for c in rounds)


def parse_platform(text: str) -> tuple[Platform, Rocks]:
    grid = GridModel.from_string(text, {rock.value: rock for rock in Rock})
    platform = Platform(
        width=grid.width,
        height=grid.height,
        cubes=frozenset(grid.find_all(lambda r: r is Rock.CUBE)),
    )
    return platform, frozenset(grid.find_all(lambda r: r is Rock.ROUND))


def part_a(platform: Platform, rounds: Rocks) -> int:
    return platform.load(platform.tilt(rounds, Direction.NORTH))


def part_b(platform: Platform, rounds: Rocks, spin_cycles: int = 1_000_000_000) -> int:
    result = CycleDetectingSimulator(platform.spin).run(rounds, spin_cycles)
    if result.state is None:
        raise ValueError("Platform never settled into a repeating pattern")
    return platform.load(result.state)


def main(path: str | Path, config_file: str | Path | None = None) -> tuple[int, int | None]:
    params = puzzle_parameters(14, config_file)
    platform, rounds = parse_platform(read_input(path))
    return part_a(platform, rounds), part_b(platform, rounds, spin_cycles=params.get("spin_cycles", 1_000_000_000))
