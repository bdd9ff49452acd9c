"""Command that reads a graph from standard input and reports its properties."""

from __future__ import annotations

import argparse
import sys

from grafo.analysis import (
    cut_edges,
    cut_vertices,
    diameters,
    is_bipartite,
    n_components,
)
from grafo.graph import Graph, GraphFormatError, read_graph


def report(graph: Graph) -> str:
    """Return the text report for ``graph``, one property per line."""
    bipartite = "" if is_bipartite(graph) else "não "
    lines = [
        f"grafo: {graph.name}",
        f"{graph.n_vertices()} vertices",
        f"{graph.n_edges()} arestas",
        f"{n_components(graph)} componentes",
        f"{bipartite}bipartido",
        "diâmetros: " + " ".join(str(d) for d in diameters(graph)),
        "vértices de corte: " + " ".join(cut_vertices(graph)),
        "arestas de corte: " + " ".join(" ".join(edge) for edge in cut_edges(graph)),
    ]
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Read a graph from standard input and print its report."""
    parser = argparse.ArgumentParser(
        prog="grafo",
        description="Read a graph from standard input and print its properties.",
    )
    parser.parse_args(argv)

    try:
        graph = read_graph(sys.stdin)
    except GraphFormatError as error:
        print(f"grafo: {error}", file=sys.stderr)
        return 1

    sys.stdout.write(report(graph))
    return 0


if __name__ == "__main__":
    sys.exit(main())