"""Force-directed placement of graph nodes in the plane."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

from dijkstra_plot.graph import Graph, Node

DT = 0.1
"""Time step of one iteration."""
ITERATIONS = 500
"""Upper bound on iterations (one more is performed, as in an inclusive range)."""
THRESHOLD = 0.4
"""Total displacement below which the layout is considered settled."""
K = 0.6
"""Repulsion constant."""
A = 0.1
"""Attraction constant."""

Vector = tuple[float, float]


@dataclass(order=True)
class NodePos:
    """Position and velocity of a node; compared by node number only."""

    no: int
    pos: Vector = field(default=(0.0, 0.0), compare=False)
    vel: Vector = field(default=(0.0, 0.0), compare=False)


def _amount(vec: Vector) -> float:
    return math.hypot(vec[0], vec[1])


def _norm(vec: Vector) -> Vector:
    length = _amount(vec)
    if length == 0.0:
        return (0.0, 0.0)
    return (vec[0] / length, vec[1] / length)


def _repulsion(dist: Vector) -> Vector:
    length = _amount(dist)
    scalar = -K / length**3 if length else -math.inf
    nx, ny = _norm(dist)
    return (nx * scalar, ny * scalar)


def _attraction(dist: Vector) -> Vector:
    return (dist[0] * A, dist[1] * A)


def _weight(graph: Graph, src: int, dst: int) -> int:
    for edge in graph.edges:
        if (edge.source.no == src and edge.dest.no == dst) or (
            edge.dest.no == src and edge.source.no == src
        ):
            return edge.weight
    return 1


def _initial_positions(graph: Graph, start: Node, rng) -> list[NodePos]:
    positions = []
    for node in graph.nodes:
        if node == start:
            positions.append(NodePos(start.no))
        else:
            positions.append(NodePos(node.no, (rng.uniform(0.0, 1.0), rng.uniform(0.0, 1.0))))
    positions.sort()
    return positions


def layout(graph: Graph, start: Node, rng=None) -> list[NodePos]:
    """Place the nodes of ``graph`` by balancing repulsion and attraction.

    ``start`` begins at the origin, every other node at a random point of
    the unit square drawn from ``rng`` (a ``random.Random``-like object).
    The result is sorted by node number.
    """
    if rng is None:
        rng = random.Random()
    positions = _initial_positions(graph, start, rng)
    count = graph.node_len()

    for _ in range(ITERATIONS + 1):
        total_displacement = 0.0
        for i, current in enumerate(positions[:count]):
            vx, vy = current.pos
            dvx = dvy = 0.0
            for j, other in enumerate(positions[:count]):
                if i == j:
                    continue
                weight = float(_weight(graph, i, j))
                dist = (other.pos[0] - vx, other.pos[1] - vy)
                rx, ry = _repulsion(dist)
                ax, ay = _attraction(dist)
                dvx += weight * (ax + rx)
                dvy += weight * (ay + ry)
            new_pos = (vx + dvx * DT, vy + dvy * DT)
            current.pos = new_pos
            total_displacement += _amount((new_pos[0] - vx, new_pos[1] - vy))
        if total_displacement < THRESHOLD:
            break

    return positions