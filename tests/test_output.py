import pytest

from dijkstra_plot.dijkstra import DijkstraEntry, shortest_paths
from dijkstra_plot.graph import Edge, Graph, GraphType, Node
from dijkstra_plot.output import format_plot, write_plot
from dijkstra_plot.positioning import NodePos


@pytest.fixture
def triangle():
    a, b, c = Node("A", no=0), Node("B", no=1), Node("C", no=2)
    edges = [
        Edge("e0", 5, GraphType.UNDIRECTED, a, b),
        Edge("e1", 7, GraphType.DIRECTED, b, c),
        Edge("e2", 20, GraphType.UNDIRECTED, a, c),
    ]
    return Graph("g", [a, b, c], edges)


@pytest.fixture
def positions():
    # Deliberately unsorted: output must order them by node number.
    return [
        NodePos(2, (0.5, -1.5)),
        NodePos(0, (0.0, 0.0)),
        NodePos(1, (1.0, 2.0)),
    ]


def test_without_paths_nothing_is_marked(triangle, positions):
    lines = format_plot(triangle, positions).splitlines()
    assert lines[:3] == ["0 0 0 A 0", "1 1 2 B 0", "2 0.5 -1.5 C 0"]
    assert lines[3] == ""
    assert lines[4:] == [
        "0 0 1 2 5 0",
        "1 2 0.5 -1.5 7 0",
        "0 0 0.5 -1.5 20 0",
    ]


def test_shortest_path_edges_are_marked(triangle, positions):
    start = triangle.nodes[0]
    paths = shortest_paths(triangle, start)
    lines = format_plot(triangle, positions, paths).splitlines()
    assert all(line.endswith(" 1") for line in lines[:3])
    edge_flags = [line.split()[-1] for line in lines[4:]]
    assert edge_flags == ["1", "1", "0"]


def test_reversed_edge_is_marked(triangle, positions):
    a, b, _ = triangle.nodes
    paths = [DijkstraEntry(a, b, 5)]
    lines = format_plot(triangle, positions, paths).splitlines()
    assert lines[4].split()[-1] == "1"
    assert lines[0].split()[-1] == "1"
    assert lines[1].split()[-1] == "0"


def test_single_precision_formatting(triangle):
    positions = [NodePos(0, (0.1, 1.0)), NodePos(1, (-0.25, 3.0)), NodePos(2, (0.0, 0.0))]
    lines = format_plot(triangle, positions).splitlines()
    assert lines[0] == "0 0.1 1 A 0"
    assert lines[1] == "1 -0.25 3 B 0"


def test_line_counts_match_graph(triangle, positions):
    text = format_plot(triangle, positions)
    assert text.endswith("\n")
    assert text.count("\n") == triangle.node_len() + 1 + triangle.edge_len()


def test_too_few_positions_raise(triangle):
    with pytest.raises(IndexError):
        format_plot(triangle, [NodePos(0)])


def test_write_plot_round_trip(tmp_path, triangle, positions):
    target = tmp_path / "graph.dat"
    write_plot(target, triangle, positions)
    assert target.read_text(encoding="utf-8") == format_plot(triangle, positions)


def test_write_plot_unwritable_path(tmp_path, triangle, positions):
    with pytest.raises(OSError):
        write_plot(tmp_path / "missing" / "graph.dat", triangle, positions)