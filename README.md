# dijkstra-plot

This package reads a graph from a GraphML file. It uses Dijkstra's algorithm to find the cheapest path from a start node to every other node. It then places the nodes with a force-directed layout and writes a plain-text data file for a plotting tool such as gnuplot to draw. The file marks the nodes and edges that lie on the shortest paths.

## Installation

```
pip install .
```

To run the test suite with `pytest`, install with `pip install .[test]`.

## Command line

```
dijkstra-plot -input=graph.xml -output=graph.dat -start=A
```

- `-input=` is the GraphML file to read. It is required.
- `-output=` is the data file to write. It is required.
- `-start=` is the id of the start node. It is required, and it must name a node in the graph.
- `-dest=` is accepted but has no effect. The paths from the start node to every node are always computed.

Arguments that do not start with one of these prefixes are ignored.

The command prints the current directory, the file it reads, and the problems it found in the graph (`Errors: ...`). On success it prints `Graph success!` and exits with status 0. It exits with status 1 in these cases:

- an option is missing;
- the file cannot be read;
- the file is not XML;
- the file has no `graph` element in the `http://graphml.graphdrawing.org/xmlns` namespace;
- the start node is not found;
- the output file cannot be written.

### Input

Every `<node>` element needs an `id`.

Every `<edge>` element needs these attributes:

- `id`;
- `source` and `target`, each naming an existing node;
- `directed`, either `true` or `false`;
- `weight`, an integer from 0 to 4294967295.

Nodes and edges with missing or invalid attributes are reported and skipped. A graph without an `id` is reported and given the id `unknown`.

```xml
<graphml xmlns="http://graphml.graphdrawing.org/xmlns">
  <graph id="G">
    <node id="A"/>
    <node id="B"/>
    <node id="C"/>
    <edge id="e1" source="A" target="B" weight="2" directed="false"/>
    <edge id="e2" source="B" target="C" weight="3" directed="true"/>
  </graph>
</graphml>
```

Undirected edges are followed both ways. Directed edges are followed only from source to target.

### Output

The data file has two blocks separated by one empty line.

The first block has one line per node, ordered by node number:

```
<no> <x> <y> <id> <marked>
```

The second block has one line per edge, giving the coordinates of its two end nodes:

```
<src_x> <src_y> <dst_x> <dst_y> <weight> <marked>
```

Coordinates are written in single precision without an exponent.

The `marked` value is `1` or `0`:

- A node is marked when it appears in the shortest-path result. The command computes paths for the whole graph, so every node is marked.
- An edge is marked when it joins a node to that node's predecessor on its shortest path.

The layout starts from random positions, so the coordinates change from run to run.

## Library use

- `dijkstra_plot.graph` holds the model:
  - the `Graph`, `Node`, `Edge` and `Key` classes;
  - the `GraphType` and `KeyType` enums;
  - `add_key`, `delete_key`, `key_position` and `key_position_by_attrname` for the keys of any graph object. The last two raise `KeyNotFoundError`.
- `dijkstra_plot.cli.load_graph(xml_text)` returns a `LoadResult` with the graph id, nodes, edges and error messages. `parse_args(argv)` returns the `Options`.
- `dijkstra_plot.dijkstra.shortest_paths(graph, start)` returns one `DijkstraEntry` (`owner`, `prev`, `cost`) per node, in the order the nodes were settled. Unreachable nodes get the cost `UNREACHABLE`.
- `dijkstra_plot.positioning.layout(graph, start, rng=None)` returns `NodePos` entries sorted by node number. The start node begins at the origin. Pass a `random.Random` to get reproducible positions.
- `dijkstra_plot.output.format_plot(graph, positions, paths=None)` returns the data file text. `write_plot(path, ...)` writes it to a file.
- `dijkstra_plot.graphml.parse_graphml(text)` and `read_graphml(path)` read the top-level `key` and `node` elements of a GraphML document into a `GraphMLDocument`. Node values override key defaults. Unlike `load_graph`, these two functions do not look inside a `graph` element, and they read no edges.

```python
import random

from dijkstra_plot.cli import load_graph
from dijkstra_plot.dijkstra import shortest_paths
from dijkstra_plot.graph import Graph
from dijkstra_plot.output import format_plot
from dijkstra_plot.positioning import layout

loaded = load_graph(open("graph.xml", encoding="utf-8").read())
graph = Graph(loaded.graph_id, loaded.nodes, loaded.edges)
start = graph.nodes[0]
paths = shortest_paths(graph, start)
print(format_plot(graph, layout(graph, start, random.Random(1)), paths))
```

## What it does not do

- It does not draw anything. It only writes the data file for a separate plotting tool.
- It does not compute a path to a single destination. `-dest=` is ignored.
- It does not read GraphML `key`/`data` attributes into the graph that the command uses.