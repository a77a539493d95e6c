"""Writing a laid-out graph and its shortest paths as plot data."""

from __future__ import annotations

import math
import struct
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal
from os import PathLike

from dijkstra_plot.dijkstra import DijkstraEntry
from dijkstra_plot.graph import Edge, Graph, Node
from dijkstra_plot.positioning import NodePos


@dataclass(frozen=True)
class _NodePlot:
    no: int
    x: float
    y: float
    id: str
    marked: bool


@dataclass(frozen=True)
class _EdgePlot:
    source: int
    dest: int
    weight: int
    marked: bool


def _to_single(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _format_coord(value: float) -> str:
    """Format a coordinate as the shortest single-precision decimal, without exponent."""
    single = _to_single(value)
    if math.isnan(single):
        return "NaN"
    if math.isinf(single):
        return "inf" if single > 0 else "-inf"
    for precision in range(1, 10):
        text = f"{single:.{precision}g}"
        if _to_single(float(text)) == single:
            break
    return format(Decimal(text), "f")


def _flag(marked: bool) -> str:
    return "1" if marked else "0"


def _node_marked(node: Node, paths: Sequence[DijkstraEntry] | None) -> bool:
    return paths is not None and any(entry.owner == node for entry in paths)


def _edge_marked(edge: Edge, paths: Sequence[DijkstraEntry] | None) -> bool:
    if paths is None:
        return False
    return any(
        entry.prev is not None
        and (
            (entry.owner == edge.source and entry.prev == edge.dest)
            or (entry.owner == edge.dest and entry.prev == edge.source)
        )
        for entry in paths
    )


def format_plot(
    graph: Graph,
    positions: Sequence[NodePos],
    paths: Sequence[DijkstraEntry] | None = None,
) -> str:
    """Render nodes, a blank line, then edges as whitespace-separated plot data.

    Node lines are ``no x y id marked``; edge lines are
    ``x1 y1 x2 y2 weight marked``. ``positions`` must hold one entry for
    every node number.
    """
    ordered = sorted(positions)
    nodes_plot = [
        _NodePlot(node.no, pos.pos[0], pos.pos[1], node.id, _node_marked(node, paths))
        for node, pos in zip(graph.nodes, ordered[: graph.node_len()])
    ]
    if len(nodes_plot) < graph.node_len():
        raise IndexError("fewer positions than nodes")

    edges_plot = [
        _EdgePlot(edge.source.no, edge.dest.no, edge.weight, _edge_marked(edge, paths))
        for edge in graph.edges
    ]

    lines = [
        f"{node.no} {_format_coord(node.x)} {_format_coord(node.y)} {node.id} {_flag(node.marked)}"
        for node in nodes_plot
    ]
    lines.append("")
    for edge in edges_plot:
        src = nodes_plot[edge.source]
        dst = nodes_plot[edge.dest]
        lines.append(
            f"{_format_coord(src.x)} {_format_coord(src.y)} "
            f"{_format_coord(dst.x)} {_format_coord(dst.y)} "
            f"{edge.weight} {_flag(edge.marked)}"
        )
    return "".join(line + "\n" for line in lines)


def write_plot(
    path: str | PathLike[str],
    graph: Graph,
    positions: Sequence[NodePos],
    paths: Sequence[DijkstraEntry] | None = None,
) -> None:
    """Write :func:`format_plot` output to ``path``."""
    content = format_plot(graph, positions, paths)
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(content)