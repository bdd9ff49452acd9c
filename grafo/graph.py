"""Undirected weighted graph and a reader for its line-oriented text format.

A graph file holds the graph's name on its first significant line, followed
by one vertex or edge per line.  Lines starting with ``/`` and empty lines
are ignored.  An edge line reads ``xxx -- yyy ppp`` where the weight ``ppp``
is an optional non-negative integer (default 1); any other line names a
vertex by its first word.
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, TextIO

DEFAULT_WEIGHT = 1

_LEADING_INT = re.compile(r"[+-]?\d+")


class GraphFormatError(ValueError):
    """Raised when graph text cannot be read."""


class Graph:
    """An undirected graph whose edges carry non-negative integer weights.

    Vertices keep the order in which they were first seen, and each vertex
    keeps its neighbours in the order their edges were added.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._adjacency: dict[str, dict[str, int]] = {}

    def add_vertex(self, name: str) -> bool:
        """Add a vertex; return True if it was not already present."""
        if name in self._adjacency:
            return False
        self._adjacency[name] = {}
        return True

    def add_edge(self, a: str, b: str, weight: int = DEFAULT_WEIGHT) -> None:
        """Join ``a`` and ``b``, adding either vertex if missing.

        An edge that already exists keeps its original weight.
        """
        if weight < 0:
            raise ValueError(f"edge weight must be non-negative, got {weight}")
        self.add_vertex(a)
        self.add_vertex(b)
        self._adjacency[a].setdefault(b, weight)
        self._adjacency[b].setdefault(a, weight)

    def neighbors(self, name: str) -> dict[str, int]:
        """Return the neighbours of ``name`` mapped to their edge weights."""
        try:
            return dict(self._adjacency[name])
        except KeyError:
            raise KeyError(f"no vertex named {name!r}") from None

    def vertex_names(self) -> list[str]:
        """Return vertex names in insertion order."""
        return list(self._adjacency)

    def n_vertices(self) -> int:
        """Return the number of vertices."""
        return len(self._adjacency)

    def n_edges(self) -> int:
        """Return the number of distinct edges, self-loops included."""
        seen: set[frozenset[str]] = set()
        for vertex, adjacent in self._adjacency.items():
            for other in adjacent:
                seen.add(frozenset((vertex, other)))
        return len(seen)

    def __contains__(self, name: object) -> bool:
        return name in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[str]:
        return iter(self._adjacency)

    def __repr__(self) -> str:
        return (
            f"Graph(name={self.name!r}, vertices={self.n_vertices()}, "
            f"edges={self.n_edges()})"
        )


def _next_word(text: str) -> tuple[str, str]:
    """Split off the first whitespace-delimited word of ``text``."""
    text = text.lstrip()
    parts = text.split(None, 1)
    if not parts:
        return "", ""
    return parts[0], parts[1] if len(parts) > 1 else ""


def parse_line(line: str) -> tuple[str, str | None, int | None]:
    """Parse one vertex or edge line.

    Returns ``(vertex, None, None)`` for a vertex line and
    ``(a, b, weight)`` for an edge line.
    """
    first, rest = _next_word(line)
    if not first:
        raise GraphFormatError(f"line holds no vertex name: {line!r}")

    rest = rest.lstrip()
    if not rest.startswith("--"):
        return first, None, None

    second, rest = _next_word(rest[2:])
    if not second:
        return first, None, None

    match = _LEADING_INT.match(rest.lstrip())
    weight = int(match.group()) if match else DEFAULT_WEIGHT
    if weight < 0:
        raise GraphFormatError(f"negative edge weight in line: {line!r}")
    return first, second, weight


def _significant_lines(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        if not line or line.startswith("/") or line.startswith("\n"):
            continue
        yield line


def read_graph(stream: TextIO | Iterable[str]) -> Graph:
    """Read a graph from an open text stream or an iterable of lines."""
    lines = _significant_lines(stream)
    try:
        header = next(lines)
    except StopIteration:
        raise GraphFormatError("input holds no graph name") from None

    graph = Graph(header.rstrip("\n"))
    for line in lines:
        a, b, weight = parse_line(line)
        if b is None:
            graph.add_vertex(a)
        else:
            graph.add_edge(a, b, weight)
    return graph