# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from pathlib import Path
from typing import Callable

from . import day03, day08, day10, day11, day12, day13, day14, day16, day17, day18, day20, day21, day22, day23

Answer = int | str
DayMain = Callable[[str | Path, str | Path | None], tuple[Answer, Answer | None]]

FIRST_DAY = 1
LAST_DAY = 25

DAYS: dict[int, DayMain] = {
    3: day03.main,
    8: day08.main,
    10: day10.main,
    11: day11.main,
    12: day12.main,
    13: day13.main,
    14: day14.main,
    16: day16.main,
    17: day17.main,
    18: day18.main,
    20: day20.main,
    21: day21.main,
    22: day22.main,
    23: day23.main,
}

__all__ = ["DAYS", "DayMain", "Answer", "FIRST_DAY", "LAST_DAY"]
