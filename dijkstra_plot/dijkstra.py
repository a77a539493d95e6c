"""Single-source shortest paths over a graph."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass

from dijkstra_plot.graph import Graph, GraphType, Node

UNREACHABLE = 2**32 - 1
"""Cost given to nodes that cannot be reached from the start node."""


@dataclass
class DijkstraEntry:
    """Settled cost of a node and the node it is reached from."""

    owner: Node
    prev: Node | None
    cost: int


def shortest_paths(graph: Graph, start: Node) -> list[DijkstraEntry]:
    """Run Dijkstra's algorithm from ``start``.

    Returns one entry per node in the order the nodes were settled.
    Undirected edges are followed in both directions, directed ones only
    from source to destination. Unreachable nodes get ``UNREACHABLE``.
    """
    costs: dict[Node, int] = {}
    prevs: dict[Node, Node | None] = {}
    counter = itertools.count()
    queue: list[tuple[int, int, Node]] = []

    for node in graph.nodes:
        cost = 0 if node == start else UNREACHABLE
        costs[node] = cost
        prevs[node] = None
        heapq.heappush(queue, (cost, next(counter), node))

    visited: set[Node] = {start}
    settled: set[Node] = set()
    result: list[DijkstraEntry] = []

    while queue:
        cost, _, node = heapq.heappop(queue)
        if node in settled or cost != costs[node]:
            continue
        settled.add(node)
        visited.add(node)
        result.append(DijkstraEntry(node, prevs[node], cost))

        if cost == UNREACHABLE:
            continue

        for edge in graph.edges:
            if edge.source == node:
                neighbour = edge.dest
            elif edge.etype is GraphType.UNDIRECTED and edge.dest == node:
                neighbour = edge.source
            else:
                continue

            if neighbour in visited or neighbour not in costs:
                continue

            dist = cost + edge.weight
            if dist < costs[neighbour]:
                costs[neighbour] = dist
                prevs[neighbour] = node
                heapq.heappush(queue, (dist, next(counter), neighbour))

    return result