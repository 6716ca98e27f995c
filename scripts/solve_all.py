# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

import time

from advent_of_code_2023.days import DAYS
from advent_of_code_2023.io import default_input_path
from advent_of_code_2023.settings import load_config


def main() -> None:
    configs = load_config()

    print(f"{'Day':<4} | {'Title':<26} | {'A':<16} | {'B':<16} | {'Time (s)':<10}")
    print("-" * 84)
    total_time = 0.0
    for day in sorted(DAYS):
        title = configs[day].title if day in configs else ""
        input_path = default_input_path(day)
        if not input_path.exists():
            print(f"{day:<4} | {title:<26} | {'(no input)':<16} | {'':<16} |")
            continue

        start = time.perf_counter()
        a, b = DAYS[day](input_path, None)
        duration = time.perf_counter() - start
        total_time += duration

        b_str = "" if b is None else str(b)
        print(f"{day:<4} | {title:<26} | {str(a):<16} | {b_str:<16} | {duration:<10.4f}")
    print("-" * 84)
    print(f"{'Total':<71} | {total_time:<10.4f}")


if __name__ == "__main__":
    main()
