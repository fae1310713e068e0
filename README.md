# ssspgraph

Single-source shortest paths on undirected graphs with the Bellman-Ford
algorithm, in three flavours:

- **serial** (`ssspgraph.serial`): load an edge list and relax every edge
  until the distances stop changing.
- **partitioned** (`ssspgraph.partitioned`): load a METIS graph and a METIS
  partition file, give every partition its local edges plus the ghost edges
  that cross into or out of it, and advance all partitions in lockstep rounds
  that start from the element-wise minimum of their distance arrays.
- **striped** (`ssspgraph.striped`): deal the edges of an edge list out
  round-robin to a number of ranks; each round every rank relaxes the
  outgoing edges of its own block of vertex indices and the minimum of the
  results becomes the shared distance array.

Node identifiers may be arbitrary integers; they are numbered densely in
order of first appearance (`ssspgraph.mapping.NodeMapper`). Distances are
returned as lists indexed by that numbering, with `math.inf` for unreachable
nodes, shown as `INFINITY` in reports.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Input formats

**Edge lists** hold one edge per line, `src dest`, optionally followed by a
weight. Blank lines, lines starting with `#` and lines whose first two
fields are not integers are skipped. Every edge is undirected. The serial
runner gives every edge weight 1 and ignores a third column; the striped
runner uses the third column as the weight when present.

```
# a small graph
1 2
2 3
3 4
```

**METIS graph files** start with a header `nvtxs nedges`, then one line per
vertex. The integers on a vertex line are read in pairs, `neighbor weight`;
a trailing neighbor without a weight gets weight 1. Neighbors are 1-based in
the file and 0-based in memory, so vertices are numbered `0 .. nvtxs-1`. A
header with fewer than two integers, or fewer vertex lines than `nvtxs`,
raises `MetisFormatError`.

**Partition files** list one partition number per vertex, in vertex order;
reading stops at the first token that is not an integer. A partition number
not below the number of partitions raises `PartitionError`.

## Command line

```
ssspgraph [-v] serial GRAPH_FILE [SOURCE]
ssspgraph [-v] partitioned GRAPH_FILE PARTITION_FILE [SOURCE] [-n PROCS]
ssspgraph [-v] striped GRAPH_FILE [SOURCE] [-n PROCS] [--max-iterations N]
```

`SOURCE` defaults to `1`. `-n/--procs` sets the number of partitions or
ranks (default 1). `--max-iterations` caps the striped rounds (default 100;
the vertex count also caps it). `-v/--verbose` logs progress messages.

Each command prints load and run times, the distances of the first 20 nodes
and statistics: maximum distance, reachable nodes and the average distance
to reachable nodes. It exits with status 1 when a file cannot be opened, the
source node is not in the graph, a negative weight cycle is found, or the
METIS input is invalid.

```
ssspgraph --help
```

## Library use

```python
from ssspgraph.serial import load_graph
from ssspgraph.report import distance_stats, format_sample, format_stats

graph = load_graph("graph.txt")
distances = graph.bellman_ford(1)

print("\n".join(format_sample(distances, graph.node_id, 20)))
print(format_stats(distance_stats(distances), graph.vertex_count()))
```

`Graph.bellman_ford` raises `SourceNotFoundError` when the source node is not
in the graph and `NegativeCycleError` when an edge can still be relaxed after
the main rounds.

Graphs can be built edge by edge:

```python
from ssspgraph.serial import Graph

graph = Graph()
graph.add_edge(10, 20, 3)
graph.add_edge(20, 30, 1)
distances = graph.bellman_ford(10)   # [0, 3, 4]
```

Partitioned runs:

```python
from ssspgraph.metis import read_metis_graph, read_partition_file
from ssspgraph.partitioned import build_partitions, partitioned_bellman_ford

parts = 4
graph = read_metis_graph("graph.metis")
assignments = read_partition_file("graph.metis.part.4", parts)
partitions = build_partitions(assignments, graph, parts)
run = partitioned_bellman_ford(partitions, 1)
print(run.distances, run.iterations, run.converged, run.source_owner)
```

Striped runs:

```python
from ssspgraph.striped import StripedGraph

graph = StripedGraph(num_procs=4)
graph.load_file("graph.txt")
distances = graph.bellman_ford(1, max_iterations=100)
```

## Limits

The partitions and ranks are simulated one after another in a single Python
process; nothing runs across processes, threads or machines. Graphs are held
entirely in memory.