# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Generic, Hashable, Optional, TypeVar

S = TypeVar("S", bound=Hashable)

DEFAULT_MAX_STEPS = 100_000


class SimulationStatus(Enum):
    REACHED_TARGET = "REACHED_TARGET"
    PROJECTED = "PROJECTED"
    NO_CYCLE = "NO_CYCLE"


@dataclass
class SimulationResult(Generic[S]):
    """
    Outcome of a simulation run.

    `history[k]` is the state after k steps, starting with the initial state.
    Once a cycle is known every later step maps back into the history.
    """

    status: SimulationStatus
    target: int
    history: list[S] = field(default_factory=list)
    cycle_start: int | None = None
    cycle_length: int | None = None

    @property
    def state(self) -> Optional[S]:
        if self.status == SimulationStatus.NO_CYCLE:
            return None
        return self.state_at(self.target)

    @property
    def steps_simulated(self) -> int:
        return len(self.history) - 1

    def state_at(self, step: int) -> S:
        if step < 0:
            raise IndexError(f"Step {step} is negative")
        if step < len(self.history):
            return self.history[step]
        if self.cycle_start is None or self.cycle_length is None:
            raise IndexError(f"Step {step} lies beyond the {self.steps_simulated} simulated steps")
        return self.history[self.cycle_start + (step - self.cycle_start) % self.cycle_length]


class CycleDetectingSimulator(Generic[S]):
    """
    Applies a deterministic step function until the target step is reached or
    a state repeats. A repeat fixes the period, so the target state can be read
    back from the history without simulating any further.
    """

    def __init__(self, step_fn: Callable[[S], S], max_steps: int = DEFAULT_MAX_STEPS):
        self.step_fn = step_fn
        self.max_steps = max_steps

    def run(self, initial: S, target: int) -> SimulationResult[S]:
        if target < 0:
            raise ValueError(f"Target step must not be negative, got {target}")

        history: list[S] = [initial]
        seen: dict[S, int] = {initial: 0}
        state = initial

        while True:
            step = len(history) - 1
            if step == target:
                return SimulationResult(SimulationStatus.REACHED_TARGET, target, history)
            if step >= self.max_steps:
                return SimulationResult(SimulationStatus.NO_CYCLE, target, history)

            state = self.step_fn(state)
            if state in seen:
                offset = seen[state]
                return SimulationResult(
                    SimulationStatus.PROJECTED,
                    target,
                    history,
                    cycle_start=offset,
                    cycle_length=len(history) - offset,
                )

            seen[state] = len(history)
            history.append(state)


def run_until_target(
    initial: S,
    step_fn: Callable[[S], S],
    target: int,
    max_steps: int = DEFAULT_MAX_STEPS,
) -> Optional[S]:
    """Returns the state after `target` steps, or None if no cycle shows up within `max_steps`."""
    return CycleDetectingSimulator(step_fn, max_steps=max_steps).run(initial, target).state
