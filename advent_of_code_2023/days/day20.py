# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

import math
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from advent_of_code_2023.io import read_lines
from advent_of_code_2023.models import ParseError
from advent_of_code_2023.settings import puzzle_parameters
from advent_of_code_2023.simulation import DEFAULT_MAX_STEPS, CycleDetectingSimulator, SimulationStatus

BUTTON = "button"
BROADCASTER = "broadcaster"


class ModuleKind(str, Enum):
    FLIP_FLOP = "%"
    CONJUNCTION = "&"
    BROADCAST = ""


@dataclass(frozen=True)
class Pulse:
    source: str
    high: bool
    destination: str


@dataclass(frozen=True)
class NetworkState:
    """Mutable part of the network: flip-flops that are on and conjunction inputs that remember a high pulse."""

    flip_flops_on: frozenset[str] = frozenset()
    high_inputs: frozenset[tuple[str, str]] = frozenset()


@dataclass
class Network:
    kinds: dict[str, ModuleKind] = field(default_factory=dict)
    outputs: dict[str, list[str]] = field(default_factory=dict)
    inputs: dict[str, list[str]] = field(default_factory=dict)

    def conjunctions(self) -> list[str]:
        return [name for name, kind in self.kinds.items() if kind is ModuleKind.CONJUNCTION]

    def press(self, state: NetworkState) -> tuple[NetworkState, list[Pulse]]:
        """
        Pushes the button once and processes pulses in the order they are sent.

        Returns the state once the network has settled and every pulse sent,
        including the pulse from the button and pulses to modules without a definition.
        """
        flip_flops_on = set(state.flip_flops_on)
        high_inputs = set(state.high_inputs)
        sent = []
        queue = deque([Pulse(BUTTON, False, BROADCASTER)])

        while queue:
            pulse = queue.popleft()
            sent.append(pulse)
            name = pulse.destination
            kind = self.kinds.get(name)
            if kind is None:
                continue

            if kind is ModuleKind.FLIP_FLOP:
                if pulse.high:
                    continue
                if name in flip_flops_on:
                    flip_flops_on.remove(name)
                    output_high = False
                else:
                    flip_flops_on.add(name)
                    output_high = True
            elif kind is ModuleKind.CONJUNCTION:
                if pulse.high:
                    high_inputs.add((name, pulse.source))
                else:
                    high_inputs.discard((name, pulse.source))
                output_high = not all((name, i) in high_inputs for i in self.inputs.get(name, []))
            else:
                output_high = pulse.high

            for output in self.outputs[name]:
                queue.append(Pulse(name, output_high, output))

        return NetworkState(frozenset(flip_flops_on), frozenset(high_inputs)), sent

    @classmethod
    def from_lines(cls, lines: list[str]) -> "Network":
        network = cls()
        for line in lines:
            try:
                head, tail = line.split(" -> ")
            except ValueError:
                raise ParseError(f"Invalid module specification: '{line}'")

            if head.startswith(ModuleKind.FLIP_FLOP.value):
                kind, name = ModuleKind.FLIP_FLOP, head[1:]
            elif head.startswith(ModuleKind.CONJUNCTION.value):
                kind, name = ModuleKind.CONJUNCTION, head[1:]
            elif head == BROADCASTER:
                kind, name = ModuleKind.BROADCAST, head
            else:
                raise ParseError(f"Invalid module: '{head}'")

            if name in network.kinds:
                raise ParseError(f"Module '{name}' is defined twice")
            network.kinds[name] = kind
            network.outputs[name] = [o.strip() for o in tail.split(",")]

        if BROADCASTER not in network.kinds:
            raise ParseError("No broadcaster module found")

        for name, outputs in network.outputs.items():
            for output in outputs:
                network.inputs.setdefault(output, []).append(name)
        return network


PressOutcome = tuple[NetworkState, int, int]


def pulse_counts(network: Network, presses: int, max_steps: int = DEFAULT_MAX_STEPS) -> tuple[int, int]:
    """Total low and high pulses sent over `presses` button presses."""

    def step(outcome: PressOutcome) -> PressOutcome:
        state, pulses = network.press(outcome[0])
        high = sum(1 for p in pulses if p.high)
        return state, len(pulses) - high, high

    result = CycleDetectingSimulator(step, max_steps=max_steps).run((NetworkState(), 0, 0), presses)
    if result.status == SimulationStatus.NO_CYCLE:
        raise ValueError(f"Network never settled into a repeating pattern within {max_steps} presses")
    counts = [(low, high) for _, low, high in result.history]
    if presses < len(counts):
        return _totals(counts[1 : presses + 1])

    # Presses from cycle_start on repeat the cycle, earlier presses happen once
    assert result.cycle_start is not None and result.cycle_length is not None
    start, length = result.cycle_start, result.cycle_length
    full, remainder = divmod(presses - start + 1, length)
    lead_low, lead_high = _totals(counts[1:start])
    cycle_low, cycle_high = _totals(counts[start : start + length])
    rest_low, rest_high = _totals(counts[start : start + remainder])
    return lead_low + full * cycle_low + rest_low, lead_high + full * cycle_high + rest_high


def _totals(counts: list[tuple[int, int]]) -> tuple[int, int]:
    return sum(low for low, _ in counts), sum(high for _, high in counts)


def part_a(network: Network, presses: int = 1000) -> int:
    low, high = pulse_counts(network, presses)
    return low * high


def part_b(network: Network, max_presses: int = DEFAULT_MAX_STEPS) -> int | None:
    """
    Presses until the machine output would first receive a low pulse.

    The network splits into independent counters, each ending in a conjunction
    that fans out to more than two modules. Every counter sends its first low
    pulse on a fixed period, and the output fires once all periods line up.
    """
    counters = [name for name in network.conjunctions() if len(network.outputs[name]) > 2]
    if not counters:
        return None

    periods: dict[str, int] = {}
    state = NetworkState()
    for press in range(1, max_presses + 1):
        state, pulses = network.press(state)
        for pulse in pulses:
            if pulse.source in counters and not pulse.high and pulse.source not in periods:
                periods[pulse.source] = press
        if len(periods) == len(counters):
            return math.lcm(*periods.values())

    raise ValueError(f"Counters {sorted(set(counters) - set(periods))} did not fire within {max_presses} presses")


def main(path: str | Path, config_file: str | Path | None = None) -> tuple[int, int | None]:
    params = puzzle_parameters(20, config_file)
    network = Network.from_lines(read_lines(path))
    return part_a(network, presses=params.get("button_presses", 1000)), part_b(network)
