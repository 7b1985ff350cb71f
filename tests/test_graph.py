import networkx as nx
import pytest

from graph import EdgeNotFoundError, Graph, VertexNotFoundError
from tests.conftest import random_graphs


def edge_set(graph):
    return {frozenset(edge) for edge in graph.edges()}


def test_add_edge_is_idempotent():
    graph = Graph.from_edges(3, [(0, 1), (1, 0), (0, 1)])
    assert graph.edge_count() == 1
    assert graph.contains_edge(0, 1)
    assert graph.contains_edge(1, 0)


def test_add_edge_adds_missing_endpoints():
    graph = Graph()
    graph.add_edge(3, 7)
    assert graph.has_vertex(3)
    assert graph.has_vertex(7)
    assert graph.vertex_count() == 2


def test_self_loop_is_rejected():
    graph = Graph(range(2))
    with pytest.raises(ValueError):
        graph.add_edge(1, 1)


def test_remove_vertex_drops_incident_edges(triangle_pendant):
    triangle_pendant.remove_vertex(2)
    assert triangle_pendant.vertex_count() == 3
    assert triangle_pendant.edge_count() == 1
    assert triangle_pendant.neighbors(0) == {1}
    assert triangle_pendant.degree(3) == 0
    assert not triangle_pendant.has_vertex(2)


def test_remove_absent_vertex_raises(triangle_pendant):
    with pytest.raises(VertexNotFoundError):
        triangle_pendant.remove_vertex(10)
    # Still a KeyError for callers that only know about dicts
    with pytest.raises(KeyError):
        triangle_pendant.degree(10)


def test_remove_edge(triangle_pendant):
    triangle_pendant.remove_edge(2, 3)
    assert triangle_pendant.edge_count() == 3
    assert triangle_pendant.degree(3) == 0
    with pytest.raises(EdgeNotFoundError):
        triangle_pendant.remove_edge(2, 3)


def test_neighbors_returns_a_copy(triangle_pendant):
    neighbors = triangle_pendant.neighbors(2)
    neighbors.add(42)
    assert triangle_pendant.neighbors(2) == {0, 1, 3}


def test_edges_lists_each_edge_once(triangle_pendant):
    edges = triangle_pendant.edges()
    assert len(edges) == triangle_pendant.edge_count()
    assert edge_set(triangle_pendant) == {frozenset(e) for e in [(0, 1), (1, 2), (0, 2), (2, 3)]}


def test_vertex_with_max_degree():
    edges = [(i, i + 1) for i in range(9)] + [(0, 9), (0, 8), (0, 7)]
    graph = Graph.from_edges(10, edges)
    assert graph.vertex_with_max_degree() == (0, 4)


def test_vertex_with_max_degree_ties_go_to_smallest_id():
    graph = Graph()
    for u, v in [(6, 5), (5, 4), (4, 3)]:
        graph.add_edge(u, v)
    assert graph.vertex_with_max_degree() == (4, 2)
    assert graph.vertex_with_max_degree(excluded={4}) == (5, 2)


def test_vertex_with_max_degree_on_empty_graph():
    assert Graph().vertex_with_max_degree() == (None, 0)


def test_copy_is_independent(triangle_pendant):
    clone = triangle_pendant.copy()
    assert clone == triangle_pendant
    clone.remove_vertex(2)
    assert triangle_pendant.vertex_count() == 4
    assert triangle_pendant.edge_count() == 4
    assert triangle_pendant.neighbors(0) == {1, 2}


def test_complement():
    graph = Graph.from_edges(4, [(0, 1), (0, 2), (2, 3)])
    complement = graph.complement()
    assert complement.vertex_count() == 4
    assert complement.edge_count() == 3
    assert edge_set(complement) == {frozenset(e) for e in [(1, 3), (1, 2), (0, 3)]}


def test_complement_keeps_isolated_vertices():
    complement = Graph(range(3)).complement()
    assert complement.edge_count() == 3
    assert complement.complement().edge_count() == 0


@pytest.mark.parametrize("graph", random_graphs(10, 9, 0.4))
def test_complement_twice_gives_back_the_graph(graph):
    complement = graph.complement()
    assert complement.edge_count() + graph.edge_count() == 9 * 8 // 2
    assert complement.complement() == graph


def test_density():
    assert Graph.from_edges(4, [(0, 1), (1, 2), (2, 3)]).density() == pytest.approx(0.5)
    assert Graph(range(1)).density() == 0.0


def test_networkx_round_trip():
    nx_graph = nx.petersen_graph()
    graph = Graph.from_networkx(nx_graph)
    assert graph.vertex_count() == 10
    assert graph.edge_count() == 15
    assert nx.is_isomorphic(graph.to_networkx(), nx_graph)
