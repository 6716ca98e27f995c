# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

import heapq
import itertools
from collections import deque
from typing import Any, Iterable

from advent_of_code_2023.models import GridModel
from advent_of_code_2023.search.definitions import (
    CostFn,
    GoalFn,
    HeuristicFn,
    NeighborsFn,
    PriorityEntry,
    SearchResult,
    SearchStatus,
)


class PathSearch:
    """
    Shortest path search over a grid.

    Without a cost function every move costs 1 and the search is a plain
    breadth-first traversal. With one, states are expanded in order of
    accumulated cost plus heuristic estimate. The heuristic must never
    overestimate the remaining cost.
    """

    def __init__(
        self,
        model: GridModel[Any],
        neighbors_fn: NeighborsFn,
        cost_fn: CostFn | None = None,
        heuristic: HeuristicFn | None = None,
    ):
        self.model = model
        self.neighbors_fn = neighbors_fn
        self.cost_fn = cost_fn
        self.heuristic = heuristic

    @property
    def uniform(self) -> bool:
        return self.cost_fn is None

    def run(self, start_states: Iterable[Any], is_goal: GoalFn) -> SearchResult:
        if self.uniform:
            return self._breadth_first(start_states, is_goal)
        return self._best_first(start_states, is_goal)

    def _breadth_first(self, start_states: Iterable[Any], is_goal: GoalFn) -> SearchResult:
        frontier: deque[tuple[Any, int]] = deque()
        visited: set[Any] = set()
        for state in start_states:
            if state not in visited:
                visited.add(state)
                frontier.append((state, 0))

        expanded = 0
        while frontier:
            state, depth = frontier.popleft()
            if is_goal(state):
                return SearchResult(SearchStatus.FOUND, cost=depth, goal_state=state, states_expanded=expanded)
            expanded += 1

            for next_state in self.neighbors_fn(state):
                if next_state in visited:
                    continue
                visited.add(next_state)
                frontier.append((next_state, depth + 1))

        return SearchResult(SearchStatus.EXHAUSTED, states_expanded=expanded)

    def _best_first(self, start_states: Iterable[Any], is_goal: GoalFn) -> SearchResult:
        assert self.cost_fn is not None
        sequence = itertools.count()
        frontier: list[PriorityEntry] = []
        best_cost: dict[Any, int] = {}
        finalized: set[Any] = set()

        for state in start_states:
            if state not in best_cost:
                best_cost[state] = 0
                heapq.heappush(frontier, PriorityEntry(self._estimate(state), next(sequence), 0, state))

        expanded = 0
        while frontier:
            entry = heapq.heappop(frontier)
            state = entry.state
            if state in finalized:
                continue
            finalized.add(state)

            if is_goal(state):
                return SearchResult(
                    SearchStatus.FOUND,
                    cost=entry.accumulated_cost,
                    goal_state=state,
                    states_expanded=expanded,
                )
            expanded += 1

            for next_state in self.neighbors_fn(state):
                if next_state in finalized:
                    continue
                step_cost = self.cost_fn(state, next_state)
                if step_cost < 0:
                    raise ValueError(f"Negative move cost {step_cost} from {state} to {next_state}")
                cost = entry.accumulated_cost + step_cost
                # Re-insert only when this is an improvement
                if cost >= best_cost.get(next_state, cost + 1):
                    continue
                best_cost[next_state] = cost
                heapq.heappush(
                    frontier,
                    PriorityEntry(cost + self._estimate(next_state), next(sequence), cost, next_state),
                )

        return SearchResult(SearchStatus.EXHAUSTED, states_expanded=expanded)

    def _estimate(self, state: Any) -> int:
        if self.heuristic is None:
            return 0
        return self.heuristic(state)


def search(
    model: GridModel[Any],
    start_states: Iterable[Any],
    is_goal: GoalFn,
    neighbors_fn: NeighborsFn,
    cost_fn: CostFn | None = None,
    heuristic: HeuristicFn | None = None,
) -> int | None:
    """Returns the cost of the cheapest path to a goal state, or None if no goal is reachable."""
    result = PathSearch(model, neighbors_fn, cost_fn=cost_fn, heuristic=heuristic).run(start_states, is_goal)
    return result.cost if result.status == SearchStatus.FOUND else None
