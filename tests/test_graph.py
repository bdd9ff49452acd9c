import io

import pytest

from grafo.graph import Graph, GraphFormatError, parse_line, read_graph

EXAMPLE = """\
// o nome do grafo
triângulo_com_vértice

// uma lista com três arestas e seus pesos
um -- dois 12
dois -- quatro 24
quatro -- um 41

// um vértice isolado
três
"""


def test_read_example_graph():
    g = read_graph(io.StringIO(EXAMPLE))
    assert g.name == "triângulo_com_vértice"
    assert g.vertex_names() == ["um", "dois", "quatro", "três"]
    assert g.n_vertices() == 4
    assert g.n_edges() == 3


def test_read_example_weights():
    g = read_graph(io.StringIO(EXAMPLE))
    assert g.neighbors("um") == {"dois": 12, "quatro": 41}
    assert g.neighbors("quatro") == {"dois": 24, "um": 41}
    assert g.neighbors("três") == {}


def test_read_accepts_list_of_lines():
    g = read_graph(["name\n", "a -- b\n"])
    assert g.name == "name"
    assert g.neighbors("a") == {"b": 1}


def test_read_empty_input_raises():
    with pytest.raises(GraphFormatError):
        read_graph(io.StringIO("// only a comment\n\n"))


def test_read_blank_whitespace_line_raises():
    with pytest.raises(GraphFormatError):
        read_graph(io.StringIO("g\n   \n"))


def test_parse_vertex_line():
    assert parse_line("alpha\n") == ("alpha", None, None)


def test_parse_edge_default_weight():
    assert parse_line("x -- y\n") == ("x", "y", 1)


def test_parse_edge_with_weight():
    assert parse_line("x -- y 7\n") == ("x", "y", 7)


def test_parse_edge_without_spaces_around_dashes():
    assert parse_line("x --y") == ("x", "y", 1)


def test_parse_joined_token_is_vertex():
    assert parse_line("x--y\n") == ("x--y", None, None)


def test_parse_dangling_dashes_is_vertex():
    assert parse_line("x --\n") == ("x", None, None)


def test_parse_non_numeric_weight_uses_default():
    assert parse_line("x -- y z") == ("x", "y", 1)


@pytest.mark.parametrize("line", ["", "\n", "   \t\n"])
def test_parse_empty_raises(line):
    with pytest.raises(GraphFormatError):
        parse_line(line)


def test_parse_negative_weight_raises():
    with pytest.raises(GraphFormatError):
        parse_line("a -- b -3")


def test_add_vertex_reports_novelty():
    g = Graph("g")
    assert g.add_vertex("a") is True
    assert g.add_vertex("a") is False
    assert g.n_vertices() == 1


def test_edges_are_symmetric():
    g = Graph("g")
    g.add_edge("a", "b", 5)
    g.add_edge("b", "c", 2)
    for v in g.vertex_names():
        for w, weight in g.neighbors(v).items():
            assert g.neighbors(w)[v] == weight


def test_duplicate_edge_keeps_first_weight():
    g = Graph("g")
    g.add_edge("a", "b", 5)
    g.add_edge("b", "a", 9)
    assert g.neighbors("a") == {"b": 5}
    assert g.n_edges() == 1


def test_self_loop_counts_once():
    g = Graph("g")
    g.add_edge("a", "a", 3)
    assert g.n_edges() == 1
    assert g.neighbors("a") == {"a": 3}


def test_neighbors_unknown_vertex_raises():
    with pytest.raises(KeyError):
        Graph("g").neighbors("missing")


def test_neighbors_returns_copy():
    g = Graph("g")
    g.add_edge("a", "b")
    g.neighbors("a")["c"] = 1
    assert g.neighbors("a") == {"b": 1}


def test_negative_weight_rejected():
    with pytest.raises(ValueError):
        Graph("g").add_edge("a", "b", -1)


def test_vertex_order_and_containment():
    g = read_graph(["g\n", "c\n", "a -- b\n", "c -- a\n"])
    assert g.vertex_names() == ["c", "a", "b"]
    assert "b" in g
    assert "z" not in g
    assert len(g) == g.n_vertices()
    assert list(g) == g.vertex_names()