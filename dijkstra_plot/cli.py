"""Command line entry: read a GraphML graph, find shortest paths, write plot data."""

from __future__ import annotations

import os
import re
import sys
import xml.etree.ElementTree as ET
from collections.abc import Sequence
from dataclasses import dataclass, field

from dijkstra_plot.dijkstra import shortest_paths
from dijkstra_plot.graph import Edge, Graph, GraphType, Node
from dijkstra_plot.output import write_plot
from dijkstra_plot.positioning import layout

NS = "http://graphml.graphdrawing.org/xmlns"
"""Namespace the ``graph`` element must be in."""

_MAX_WEIGHT = 2**32 - 1
_WEIGHT_PATTERN = re.compile(r"\+?[0-9]+")


@dataclass
class Options:
    """Runtime parameters given on the command line."""

    input: str | None = None
    output: str | None = None
    start: str | None = None
    dest: str | None = None


@dataclass
class LoadResult:
    """Graph elements read from a document, with every problem found."""

    graph_id: str
    nodes: list[Node] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


_PREFIXES = {
    "-input=": "input",
    "-output=": "output",
    "-start=": "start",
    "-dest=": "dest",
}


def parse_args(argv: Sequence[str]) -> Options:
    """Read ``-input=``, ``-output=``, ``-start=`` and ``-dest=`` options; ignore others."""
    options = Options()
    for arg in argv:
        for prefix, name in _PREFIXES.items():
            if arg.startswith(prefix):
                setattr(options, name, arg[len(prefix):])
                break
    return options


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1] if tag.startswith("{") else tag


def _parse_weight(text: str | None) -> int | None:
    if text is None or not _WEIGHT_PATTERN.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _MAX_WEIGHT else None


def _find_node(nodes: list[Node], node_id: str | None) -> Node | None:
    if node_id is None:
        return None
    return next((node for node in nodes if node.id == node_id), None)


def load_graph(xml_text: str) -> LoadResult:
    """Read nodes and edges from GraphML text.

    Raises ``ValueError`` if the text is not XML or holds no ``graph``
    element. Invalid nodes and edges are skipped and reported in ``errors``.
    """
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as exc:
        raise ValueError(f"Failed to parse XML: {exc}") from exc

    graph = root.find(f"{{{NS}}}graph")
    if graph is None:
        raise ValueError("No graph element")

    errors: list[str] = []
    graph_id = graph.get("id")
    if graph_id is None:
        errors.append("Missing graph id")
        graph_id = "unknown"

    nodes: list[Node] = []
    node_elements = [child for child in graph if _local_name(child.tag) == "node"]
    for index, element in enumerate(node_elements):
        node_id = element.get("id")
        if node_id is None:
            errors.append(f"Missing node id: {index}")
        else:
            nodes.append(Node(node_id, [], index))

    edges: list[Edge] = []
    edge_elements = [child for child in graph if _local_name(child.tag) == "edge"]
    for index, element in enumerate(edge_elements):
        invalid = False

        edge_id = element.get("id")
        if edge_id is None:
            errors.append(f"Missing edge id: {index}")
            invalid = True

        etype: GraphType | None
        try:
            etype = GraphType.parse(element.get("directed"))  # type: ignore[arg-type]
        except (ValueError, TypeError):
            etype = None
            errors.append(f"Invalid edge directed: {index}")
            invalid = True

        source = _find_node(nodes, element.get("source"))
        if source is None:
            errors.append(f"Missing/invalid source id: {index}")
            invalid = True

        target = _find_node(nodes, element.get("target"))
        if target is None:
            errors.append(f"Missing/invalid target id: {index}")
            invalid = True

        weight = _parse_weight(element.get("weight"))
        if weight is None:
            errors.append(f"Missing/invalid weight id: {index}")
            invalid = True

        if invalid:
            continue
        edges.append(Edge(edge_id, weight, etype, source, target))

    return LoadResult(graph_id, nodes, edges, errors)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program; return the process exit status."""
    options = parse_args(sys.argv[1:] if argv is None else argv)

    if options.input is None:
        print("Missing -input= parameter", file=sys.stderr)
        return 1
    if options.output is None:
        print("Missing -output= parameter", file=sys.stderr)
        return 1

    print(f"Current dir: {os.getcwd()}")
    print(f"Trying to read: '{options.input}'")

    try:
        with open(options.input, encoding="utf-8") as handle:
            xml_text = handle.read()
    except OSError as exc:
        print(f"Something went wrong reading the file: {exc}", file=sys.stderr)
        return 1

    try:
        loaded = load_graph(xml_text)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    print(f"Errors: {chr(10).join(loaded.errors)}")

    start = _find_node(loaded.nodes, options.start)
    if start is None:
        print("Missing start node", file=sys.stderr)
        return 1

    graph = Graph(loaded.graph_id, list(loaded.nodes), list(loaded.edges), [])
    paths = shortest_paths(graph, start)
    positions = layout(graph, start)

    try:
        write_plot(options.output, graph, positions, paths)
    except OSError:
        print(f"Unable to create output file {options.output}")
        return 1

    print("Graph success!")
    return 0


if __name__ == "__main__":
    sys.exit(main())