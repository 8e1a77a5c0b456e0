"""Shortest paths and edge-weight assignment on undirected graphs."""

from __future__ import annotations

import heapq
import math
from typing import List, Sequence, Tuple, Union

UNKNOWN_WEIGHT = -1
MAX_WEIGHT = 2 * 10**9

Adjacency = List[List[Tuple[int, int]]]


def shortest_distance(
    n: int,
    source: int,
    destination: int,
    adjacency: Sequence[Sequence[Tuple[int, int]]],
) -> Union[int, float]:
    """Return the shortest distance between two nodes, or ``math.inf``.

    ``adjacency[node]`` holds ``(cost, neighbour)`` pairs.
    """
    distance: List[Union[int, float]] = [math.inf] * n
    distance[source] = 0
    queue: List[Tuple[int, int]] = [(0, source)]
    while queue:
        cost, node = heapq.heappop(queue)
        if node == destination:
            break
        if cost > distance[node]:
            continue
        for edge_cost, neighbour in adjacency[node]:
            candidate = cost + edge_cost
            if candidate < distance[neighbour]:
                distance[neighbour] = candidate
                heapq.heappush(queue, (candidate, neighbour))
    return distance[destination]


def _link(adjacency: Adjacency, u: int, v: int, weight: int) -> None:
    adjacency[u].append((weight, v))
    adjacency[v].append((weight, u))


def modified_graph_edges(
    n: int,
    edges: Sequence[Sequence[int]],
    source: int,
    destination: int,
    target: int,
) -> List[List[int]]:
    """Assign weights to the ``-1`` edges so the shortest path equals ``target``.

    Returns the edges as new ``[u, v, weight]`` lists, or an empty list when
    no assignment works. The input is left unchanged.
    """
    result = [[u, v, w] for u, v, w in edges]
    adjacency: Adjacency = [[] for _ in range(n)]
    for u, v, w in result:
        if w != UNKNOWN_WEIGHT:
            _link(adjacency, u, v, w)

    current = shortest_distance(n, source, destination, adjacency)
    if current < target:
        return []
    reached = current == target

    for edge in result:
        if edge[2] != UNKNOWN_WEIGHT:
            continue
        edge[2] = MAX_WEIGHT if reached else 1
        _link(adjacency, edge[0], edge[1], edge[2])
        if not reached:
            distance = shortest_distance(n, source, destination, adjacency)
            if distance <= target:
                reached = True
                edge[2] += target - distance

    return result if reached else []