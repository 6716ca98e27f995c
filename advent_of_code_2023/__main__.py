# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

import argparse
import sys

from advent_of_code_2023.days import DAYS, FIRST_DAY, LAST_DAY, Answer
from advent_of_code_2023.io import default_input_path


def format_answer(label: str, answer: Answer) -> str:
    # Continuation lines line up with the first one after the label
    return f"{label}: " + str(answer).replace("\n", "\n" + " " * (len(label) + 2))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="advent_of_code_2023", description="Solve an Advent of Code 2023 puzzle")
    parser.add_argument("day", type=int, help="Day of the puzzle (1-25)")
    parser.add_argument("input", nargs="?", help="Puzzle input file (default: data/day<DAY>.txt)")
    parser.add_argument("--config", help="YAML file with puzzle parameters")
    args = parser.parse_args(argv)

    if args.day not in DAYS:
        if FIRST_DAY <= args.day <= LAST_DAY:
            print("No implementation for this day yet")
        else:
            print(f"Day {args.day} is not a valid day for advent of code")
        sys.exit(1)

    input_path = args.input if args.input is not None else default_input_path(args.day)
    try:
        a, b = DAYS[args.day](input_path, args.config)
    except FileNotFoundError as e:
        print(f"Error: {e.filename} not found")
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(format_answer("A", a))
    if b is not None:
        print(format_answer("B", b))


if __name__ == "__main__":
    main()
