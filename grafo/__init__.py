"""Weighted undirected graphs: a text reader, components, bipartiteness, diameters, cuts and a report command."""

__version__ = "0.1.0"
__all__ = ["graph", "analysis", "cli"]