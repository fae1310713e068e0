import math

import pytest

from ssspgraph.serial import Graph, NegativeCycleError, SourceNotFoundError, load_graph


def _build(edges):
    graph = Graph()
    for src, dest, weight in edges:
        graph.add_edge(src, dest, weight)
    return graph


def _check_shortest(graph, dist, edges, source):
    index = {graph.node_id(i): i for i in range(graph.vertex_count())}
    assert dist[index[source]] == 0
    for a, b, w in edges:
        da, db = dist[index[a]], dist[index[b]]
        assert db <= da + w
        assert da <= db + w
    for node, i in index.items():
        if node == source or math.isinf(dist[i]):
            continue
        assert any(
            (a == node and dist[index[b]] + w == dist[i])
            or (b == node and dist[index[a]] + w == dist[i])
            for a, b, w in edges
        )


def test_counts():
    edges = [(1, 2, 1), (2, 3, 1), (3, 1, 1), (7, 8, 1)]
    graph = _build(edges)
    assert graph.vertex_count() == 5
    assert graph.edge_count() == 2 * len(edges)


def test_path_graph_distances():
    graph = _build([(1, 2, 1), (2, 3, 1)])
    assert graph.bellman_ford(1) == [0, 1, 2]


def test_weighted_shortest_paths():
    edges = [(1, 2, 10), (2, 3, 1), (1, 3, 2), (3, 4, 4), (2, 4, 1)]
    graph = _build(edges)
    dist = graph.bellman_ford(1)
    _check_shortest(graph, dist, edges, 1)


def test_unreachable_component_is_infinite():
    edges = [(1, 2, 1), (5, 6, 1)]
    graph = _build(edges)
    dist = graph.bellman_ford(1)
    assert math.isinf(dist[2]) and math.isinf(dist[3])
    _check_shortest(graph, dist, edges, 1)


def test_node_ids_follow_insertion():
    graph = _build([(30, 10, 1), (20, 30, 1)])
    assert [graph.node_id(i) for i in range(graph.vertex_count())] == [30, 10, 20]


def test_missing_source():
    graph = _build([(1, 2, 1)])
    with pytest.raises(SourceNotFoundError):
        graph.bellman_ford(99)


def test_negative_edge_is_a_cycle():
    graph = _build([(1, 2, -1)])
    with pytest.raises(NegativeCycleError):
        graph.bellman_ford(1)


def test_self_loop_single_vertex():
    graph = _build([(4, 4, 1)])
    assert graph.bellman_ford(4) == [0]


def test_load_graph_from_file(tmp_path):
    path = tmp_path / "g.txt"
    path.write_text("# comment\n# more\n1 2\n2 3 9\n\n3 4\n", encoding="utf-8")
    graph = load_graph(path)
    assert graph.vertex_count() == 4
    assert graph.edge_count() == 6
    edges = [(1, 2, 1), (2, 3, 1), (3, 4, 1)]
    _check_shortest(graph, graph.bellman_ford(1), edges, 1)


def test_load_graph_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_graph(tmp_path / "nope.txt")