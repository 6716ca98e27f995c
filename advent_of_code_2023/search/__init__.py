# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from .definitions import PriorityEntry, SearchResult, SearchState, SearchStatus
from .graph import build_junction_graph, longest_simple_path
from .reachability import connected_region, count_reachable, flood_fill
from .search import PathSearch, search
from .utils import grid_neighbors, manhattan_distance

__all__ = [
    "PathSearch",
    "search",
    "SearchState",
    "SearchStatus",
    "SearchResult",
    "PriorityEntry",
    "flood_fill",
    "count_reachable",
    "connected_region",
    "build_junction_graph",
    "longest_simple_path",
    "grid_neighbors",
    "manhattan_distance",
]
