# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from advent_of_code_2023.days.day14 import Rock, parse_platform
from advent_of_code_2023.models import GridModel

PLATFORM = """O....#....
O.OO#....#
.....##...
OO.#O....O
.O.....O#.
O.#..O.#.#
..O..#O..O
.......O..
#....###..
#OO..#....
"""


def main() -> None:
    platform, rounds = parse_platform(PLATFORM)
    symbols = {rock: rock.value for rock in Rock}

    for cycle in range(4):
        cells = {c: Rock.CUBE for c in platform.cubes}
        cells.update({c: Rock.ROUND for c in rounds})
        grid = GridModel(width=platform.width, height=platform.height, cells=cells)

        print(f"After {cycle} spin cycles (load {platform.load(rounds)}):")
        print(grid.to_string(symbols))
        rounds = platform.spin(rounds)


if __name__ == "__main__":
    main()
