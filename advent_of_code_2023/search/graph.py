# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from typing import Callable, Hashable, Iterable

WeightedGraph = dict[Hashable, dict[Hashable, int]]


def build_junction_graph(
    nodes: Iterable[Hashable],
    neighbors_fn: Callable[[Hashable], Iterable[Hashable]],
) -> WeightedGraph:
    """
    Compresses corridors between the given nodes into weighted edges.

    From every node each neighbor is followed along its corridor, a chain of
    cells with exactly one way forward, until another node is hit. Corridors
    that dead-end or loop back are dropped. Edges are directed, so one-way
    moves in `neighbors_fn` carry over to the graph. When several corridors
    join the same pair of nodes the longest one is kept.
    """
    node_set = set(nodes)
    graph: WeightedGraph = {node: {} for node in node_set}

    for node in node_set:
        for first in neighbors_fn(node):
            previous, current, length = node, first, 1
            corridor = {node}
            dead_end = False
            while current not in node_set:
                forward = [n for n in neighbors_fn(current) if n != previous]
                if len(forward) != 1 or current in corridor:
                    dead_end = True
                    break
                corridor.add(current)
                previous, current = current, forward[0]
                length += 1
            if dead_end or current == node:
                continue
            graph[node][current] = max(graph[node].get(current, 0), length)

    return graph


def longest_simple_path(graph: WeightedGraph, source: Hashable, target: Hashable) -> int | None:
    """
    Maximum total weight of a path from source to target that visits no node twice.
    Exhaustive, so only suitable for small compressed graphs.
    """
    if source not in graph or target not in graph:
        return None

    index = {node: i for i, node in enumerate(graph)}
    edges = [[(index[n], w) for n, w in graph[node].items()] for node in graph]
    target_index = index[target]

    best: int | None = None
    # Explicit stack of (node, visited bitmask, cost)
    stack = [(index[source], 1 << index[source], 0)]
    while stack:
        node, visited, cost = stack.pop()
        if node == target_index:
            if best is None or cost > best:
                best = cost
            continue
        for neighbor, weight in edges[node]:
            bit = 1 << neighbor
            if visited & bit:
                continue
            stack.append((neighbor, visited | bit, cost + weight))

    return best
