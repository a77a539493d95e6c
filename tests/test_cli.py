import pytest

from dijkstra_plot.cli import NS, Options, load_graph, main, parse_args
from dijkstra_plot.graph import GraphType

VALID = f"""<?xml version="1.0"?>
<graphml xmlns="{NS}">
  <graph id="G">
    <node id="A"/>
    <node id="B"/>
    <node id="C"/>
    <edge id="e0" source="A" target="B" directed="false" weight="4"/>
    <edge id="e1" source="B" target="C" directed="true" weight="2"/>
  </graph>
</graphml>
"""

BROKEN = f"""<graphml xmlns="{NS}">
  <graph>
    <node id="A"/>
    <node/>
    <edge source="A" target="X" directed="maybe" weight="-3"/>
    <edge id="ok" source="A" target="A" directed="true" weight="+8"/>
  </graph>
</graphml>
"""


def test_parse_args_reads_all_options():
    options = parse_args(["-input=g.xml", "-output=g.dat", "-start=A", "-dest=C", "junk"])
    assert options == Options(input="g.xml", output="g.dat", start="A", dest="C")


def test_parse_args_defaults_to_none():
    assert parse_args(["prog"]) == Options()


def test_load_valid_graph():
    result = load_graph(VALID)
    assert result.graph_id == "G"
    assert [node.id for node in result.nodes] == ["A", "B", "C"]
    assert [node.no for node in result.nodes] == [0, 1, 2]
    assert result.errors == []
    first, second = result.edges
    assert (first.source.id, first.dest.id, first.weight) == ("A", "B", 4)
    assert first.etype is GraphType.UNDIRECTED
    assert second.etype is GraphType.DIRECTED


def test_load_collects_errors():
    result = load_graph(BROKEN)
    assert result.graph_id == "unknown"
    assert [node.id for node in result.nodes] == ["A"]
    assert result.errors == [
        "Missing graph id",
        "Missing node id: 1",
        "Missing edge id: 0",
        "Invalid edge directed: 0",
        "Missing/invalid target id: 0",
        "Missing/invalid weight id: 0",
    ]
    assert [(edge.id, edge.weight) for edge in result.edges] == [("ok", 8)]


def test_load_without_namespace_has_no_graph():
    with pytest.raises(ValueError, match="No graph element"):
        load_graph('<graphml><graph id="G"/></graphml>')


def test_load_rejects_malformed_xml():
    with pytest.raises(ValueError):
        load_graph("<graphml>")


def test_main_writes_plot(tmp_path, capsys):
    source = tmp_path / "graph.xml"
    source.write_text(VALID, encoding="utf-8")
    target = tmp_path / "graph.dat"
    status = main([f"-input={source}", f"-output={target}", "-start=A", "-dest=C"])
    assert status == 0
    assert "Graph success!" in capsys.readouterr().out
    lines = target.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 3 + 1 + 2
    assert [line.split()[3] for line in lines[:3]] == ["A", "B", "C"]
    assert lines[3] == ""
    assert [line.split()[-2:] for line in lines[4:]] == [["4", "1"], ["2", "1"]]


def test_main_unknown_start(tmp_path):
    source = tmp_path / "graph.xml"
    source.write_text(VALID, encoding="utf-8")
    target = tmp_path / "graph.dat"
    assert main([f"-input={source}", f"-output={target}", "-start=Z"]) == 1
    assert not target.exists()


def test_main_missing_input_file(tmp_path):
    assert main([f"-input={tmp_path / 'none.xml'}", "-output=x", "-start=A"]) == 1