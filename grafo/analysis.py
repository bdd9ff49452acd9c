"""Structural properties of a :class:`~grafo.graph.Graph`.

Connected components, bipartiteness, weighted component diameters, cut
vertices (articulation points) and cut edges (bridges).
"""

from __future__ import annotations

import heapq
from collections import deque

from grafo.graph import Graph


def components(graph: Graph) -> list[list[str]]:
    """Return the connected components of ``graph``.

    Components are ordered by their first vertex in insertion order, and the
    vertices of each component keep insertion order too.
    """
    label: dict[str, int] = {}
    count = 0
    for root in graph:
        if root in label:
            continue
        label[root] = count
        queue = deque([root])
        while queue:
            vertex = queue.popleft()
            for other in graph.neighbors(vertex):
                if other not in label:
                    label[other] = count
                    queue.append(other)
        count += 1

    groups: list[list[str]] = [[] for _ in range(count)]
    for vertex in graph:
        groups[label[vertex]].append(vertex)
    return groups


def n_components(graph: Graph) -> int:
    """Return the number of connected components of ``graph``."""
    return len(components(graph))


def is_bipartite(graph: Graph) -> bool:
    """Return True if the vertices of ``graph`` can be two-coloured.

    A self-loop makes a graph non-bipartite.
    """
    level: dict[str, int] = {}
    for root in graph:
        if root in level:
            continue
        level[root] = 0
        queue = deque([root])
        while queue:
            vertex = queue.popleft()
            for other in graph.neighbors(vertex):
                if other not in level:
                    level[other] = level[vertex] + 1
                    queue.append(other)
                elif level[other] % 2 == level[vertex] % 2:
                    return False
    return True


def _distances(graph: Graph, source: str) -> dict[str, int]:
    """Shortest weighted distances from ``source`` to every reachable vertex."""
    dist = {source: 0}
    heap = [(0, source)]
    while heap:
        d, vertex = heapq.heappop(heap)
        if d > dist[vertex]:
            continue
        for other, weight in graph.neighbors(vertex).items():
            candidate = d + weight
            if candidate < dist.get(other, candidate + 1):
                dist[other] = candidate
                heapq.heappush(heap, (candidate, other))
    return dist


def diameters(graph: Graph) -> list[int]:
    """Return the weighted diameter of each component in non-decreasing order."""
    result = []
    for members in components(graph):
        diameter = 0
        for source in members:
            diameter = max(diameter, max(_distances(graph, source).values()))
        result.append(diameter)
    return sorted(result)


def _cuts(graph: Graph) -> tuple[set[str], set[tuple[str, str]]]:
    """Find articulation points and bridges with an iterative depth-first search."""
    level: dict[str, int] = {}
    low: dict[str, int] = {}
    parent: dict[str, str | None] = {}
    active: set[str] = set()
    cut_vertex: set[str] = set()
    bridge: set[tuple[str, str]] = set()

    for root in graph:
        if root in level:
            continue
        level[root] = low[root] = 0
        parent[root] = None
        active.add(root)
        root_children = 0
        stack = [(root, iter(graph.neighbors(root)))]

        while stack:
            vertex, pending = stack[-1]
            advanced = False
            for other in pending:
                if other not in level:
                    parent[other] = vertex
                    level[other] = low[other] = level[vertex] + 1
                    active.add(other)
                    if vertex == root:
                        root_children += 1
                    stack.append((other, iter(graph.neighbors(other))))
                    advanced = True
                    break
                if other in active and other != parent[vertex]:
                    low[vertex] = min(low[vertex], level[other])
            if advanced:
                continue

            stack.pop()
            active.discard(vertex)
            above = parent[vertex]
            if above is None:
                continue
            if parent[above] is not None and level[above] <= low[vertex]:
                cut_vertex.add(above)
            if level[above] < low[vertex]:
                bridge.add((above, vertex) if above < vertex else (vertex, above))
            low[above] = min(low[above], low[vertex])

        if root_children > 1:
            cut_vertex.add(root)

    return cut_vertex, bridge


def cut_vertices(graph: Graph) -> list[str]:
    """Return the names of the cut vertices of ``graph`` in alphabetical order."""
    found, _ = _cuts(graph)
    return sorted(found)


def cut_edges(graph: Graph) -> list[tuple[str, str]]:
    """Return the cut edges of ``graph``.

    Each edge is a pair of names in alphabetical order; the edges are sorted
    by their space-joined text.
    """
    _, found = _cuts(graph)
    return sorted(found, key=" ".join)