from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Hashable, Iterable, Optional

from advent_of_code_2023.models import Coordinate, Direction


class SearchStatus(Enum):
    FOUND = "FOUND"
    EXHAUSTED = "EXHAUSTED"


@dataclass(frozen=True)
class SearchState:
    """
    Everything a search has to tell apart to avoid revisiting equivalent configurations.
    Visited sets are keyed on the whole state, never on the position alone.
    """

    position: Coordinate
    direction: Optional[Direction] = None
    extra: Hashable = None


@dataclass(order=True)
class PriorityEntry:
    estimated_total_cost: int
    sequence: int
    accumulated_cost: int = field(compare=False)
    state: SearchState = field(compare=False)


@dataclass
class SearchResult:
    status: SearchStatus
    cost: int | None = None
    goal_state: SearchState | None = None
    states_expanded: int = 0


NeighborsFn = Callable[[Any], Iterable[Any]]
CostFn = Callable[[Any, Any], int]
HeuristicFn = Callable[[Any], int]
GoalFn = Callable[[Any], bool]
