import math
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from advent_of_code_2023.io import read_input
from advent_of_code_2023.models import ParseError
from advent_of_code_2023.settings import puzzle_parameters

NODE_PATTERN = re.compile(r"^(\w+) = \((\w+), (\w+)\)$")

START = "AAA"
END = "ZZZ"


@dataclass(frozen=True)
class DesertMap:
    instructions: str
    network: dict[str, tuple[str, str]]

    def turn(self, node: str, step: int) -> str:
        left, right = self.network[node]
        return left if self.instructions[step % len(self.instructions)] == "L" else right


def parse_map(text: str) -> DesertMap:
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines:
        raise ParseError("Empty map")
    instructions = lines[0]
    for i, char in enumerate(instructions):
        if char not in "LR":
            raise ParseError(f"Unknown instruction '{char}'", char=char, line=1, column=i + 1)

    network: dict[str, tuple[str, str]] = {}
    for line in lines[1:]:
        match = NODE_PATTERN.match(line)
        if match is None:
            raise ParseError(f"Invalid node: '{line}'")
        name, left, right = match.groups()
        if name in network:
            raise ParseError(f"Node '{name}' is defined twice")
        network[name] = (left, right)

    for name, targets in network.items():
        for target in targets:
            if target not in network:
                raise ParseError(f"Node '{name}' leads to undefined node '{target}'")
    return DesertMap(instructions, network)


def follow_steps(
    desert_map: DesertMap,
    source: str,
    is_target: Callable[[str], bool],
    start_step: int = 0,
) -> tuple[int, str] | None:
    """
    Walks from `source` until a target node is reached after at least one step.
    Returns the number of steps and the node reached, or None once the walk
    repeats a (node, instruction position) pair without meeting a target.
    """
    seen: set[tuple[str, int]] = set()
    node = source
    steps = 0
    while True:
        position = (start_step + steps) % len(desert_map.instructions)
        if (node, position) in seen:
            return None
        seen.add((node, position))
        node = desert_map.turn(node, start_step + steps)
        steps += 1
        if is_target(node):
            return steps, node


def align_cycles(ghosts: list[tuple[int, int]]) -> int:
    """
    First time every ghost stands on a target at once, given for each the
    steps to its first target and the period it returns to one after that.
    """
    time, period = 0, 1
    for offset, cycle in ghosts:
        if time < offset:
            time += -(-(offset - time) // period) * period
        for _ in range(cycle):
            if (time - offset) % cycle == 0:
                break
            time += period
        else:
            raise ValueError(f"Cycle of length {cycle} from offset {offset} never lines up with period {period}")
        period = math.lcm(period, cycle)
    return time


def is_ghost_target(node: str) -> bool:
    return node.endswith("Z")


def part_a(desert_map: DesertMap, start: str = START, end: str = END) -> int:
    if start not in desert_map.network:
        raise ValueError(f"Map has no node '{start}'")
    walk = follow_steps(desert_map, start, lambda node: node == end)
    if walk is None:
        raise ValueError(f"Node '{end}' cannot be reached from '{start}'")
    return walk[0]


def part_b(desert_map: DesertMap) -> int:
    ghosts = []
    for start in sorted(n for n in desert_map.network if n.endswith("A")):
        first = follow_steps(desert_map, start, is_ghost_target)
        if first is None:
            raise ValueError(f"Ghost starting at '{start}' never reaches a node ending in Z")
        offset, node = first
        cycle = follow_steps(desert_map, node, is_ghost_target, start_step=offset)
        if cycle is None:
            raise ValueError(f"Ghost starting at '{start}' does not return to a node ending in Z")
        ghosts.append((offset, cycle[0]))
    if not ghosts:
        raise ValueError("Map has no node ending in A")
    return align_cycles(ghosts)


def main(path: str | Path, config_file: str | Path | None = None) -> tuple[int, int | None]:
    params = puzzle_parameters(8, config_file)
    desert_map = parse_map(read_input(path))
    return part_a(desert_map, params.get("start_node", START), params.get("end_node", END)), part_b(desert_map)
