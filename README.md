# grafo

Reads a weighted undirected graph from a plain text description and reports
its basic properties: the number of vertices, edges and connected
components, whether it is bipartite, the weighted diameter of each
component, and its cut vertices and cut edges (bridges).

## Input format

The first significant line is the graph's name. Every following line is
either a vertex name on its own or an edge:

```
xxx -- yyy ppp
```

where `xxx` and `yyy` are vertex names and `ppp` is an optional
non-negative integer weight (default 1). Lines starting with `/` and empty
lines are skipped. Vertices named in an edge need not be listed separately.
On a vertex line only the first word is taken as the name. If the same edge
appears twice, the first weight is kept.

```
// graph name
triangle_with_vertex

// three weighted edges
one -- two 12
two -- four 24
four -- one 41

// an isolated vertex
three
```

## Command line

The `grafo` command takes no arguments; it reads a graph from standard
input and prints its report:

```
grafo < triangle.txt
```

prints

```
grafo: triangle_with_vertex
4 vertices
3 arestas
2 componentes
não bipartido
diâmetros: 0 36
vértices de corte: 
arestas de corte: 
```

Diameters use shortest weighted distances, so the triangle's diameter is
36 (`four` to `one` through `two`), not the direct edge weight 41.
If the input holds no graph name or a malformed line, the command prints
the error to standard error and exits with status 1.

## Library

```python
from grafo.graph import Graph, GraphFormatError, read_graph
from grafo.analysis import (
    components, n_components, is_bipartite, diameters, cut_vertices, cut_edges,
)
from grafo.cli import report

with open("triangle.txt") as stream:
    graph = read_graph(stream)

graph.name              # "triangle_with_vertex"
graph.n_vertices()      # 4
graph.n_edges()         # 3
components(graph)       # [["one", "two", "four"], ["three"]]
n_components(graph)     # 2
is_bipartite(graph)     # False
diameters(graph)        # [0, 36]
cut_vertices(graph)     # []
cut_edges(graph)        # []
print(report(graph), end="")
```

`read_graph` accepts an open text stream or any iterable of lines, and
raises `GraphFormatError` (a `ValueError`) when there is no graph name, a
line holds no vertex name, or an edge weight is negative. `parse_line`
parses a single vertex or edge line.

Graphs can also be built directly:

```python
g = Graph("path")
g.add_edge("a", "b")        # weight 1
g.add_edge("b", "c", 5)
g.add_vertex("d")
g.neighbors("b")            # {"a": 1, "c": 5}
g.vertex_names()            # ["a", "b", "c", "d"]
cut_vertices(g)             # ["b"]
cut_edges(g)                # [("a", "b"), ("b", "c")]
```

`add_edge` raises `ValueError` for a negative weight, and `neighbors`
raises `KeyError` for an unknown vertex. A `Graph` also supports `len()`,
`in` and iteration over its vertex names.

Cut vertices are returned in alphabetical order; each cut edge is a pair of
names in alphabetical order, and the edges are sorted by their
space-joined text. Diameters come in non-decreasing order.

## Tests

```
pip install -e .[test]
pytest
```