"""
Unit tests for SimpleDijkstraEngine using AdjacencyListGraph.
"""

import random

import pytest

import dijkstra_engine
from adjacency_list_graph import AdjacencyListGraph
from dijkstra_engine import SimpleDijkstraEngine, dijkstra, dijkstra_all, reconstruct_node_path
from errors import InvalidGraphError, OutOfRangeError
from priority_queue import MinPriorityQueue


def _random_graph(seed: int, n: int = 12, edge_count: int = 30) -> AdjacencyListGraph:
    rng = random.Random(seed)
    g = AdjacencyListGraph(n)
    for _ in range(edge_count):
        g.add_edge(rng.randrange(n), rng.randrange(n), rng.randint(0, 9))
    return g


def test_dijkstra_prefers_cheaper_indirect_path():
    # 0 -> 1 (2), 1 -> 2 (2), 0 -> 2 (5)
    g = AdjacencyListGraph.from_edges(3, [(0, 1, 2), (1, 2, 2), (0, 2, 5)])

    assert dijkstra(g, 0) == [0, 2, 4]


def test_dijkstra_unreachable_node_is_none():
    g = AdjacencyListGraph(3)
    g.add_edge(0, 1, 2.0)

    dist = SimpleDijkstraEngine().shortest_path_costs(g, 0)

    assert dist == [0, 2.0, None]


def test_stale_duplicates_are_discarded():
    """Node 1 is pushed at 10 then at 2; the stale entry must not overwrite anything."""
    g = AdjacencyListGraph.from_edges(4, [(0, 1, 10), (0, 2, 1), (2, 1, 1), (1, 3, 1)])

    assert dijkstra(g, 0) == [0, 2, 1, 3]


def test_zero_weight_edges():
    g = AdjacencyListGraph.from_edges(3, [(0, 1, 0), (1, 2, 0)])

    assert dijkstra(g, 0) == [0, 0, 0]


@pytest.mark.parametrize("start", [0, 1, 2])
def test_negative_weight_rejected_for_every_start(start):
    g = AdjacencyListGraph.from_edges(3, [(0, 1, 2), (2, 1, -1)])

    with pytest.raises(InvalidGraphError) as excinfo:
        dijkstra(g, start)
    assert (excinfo.value.src, excinfo.value.dst, excinfo.value.weight) == (2, 1, -1)


def test_negative_weight_rejected_before_any_relaxation(monkeypatch):
    pushes = []

    class RecordingQueue(MinPriorityQueue):
        def push(self, item, priority):
            pushes.append((item, priority))
            super().push(item, priority)

    monkeypatch.setattr(dijkstra_engine, "MinPriorityQueue", RecordingQueue)
    # The negative edge is unreachable from 0 and still rejected.
    g = AdjacencyListGraph.from_edges(4, [(0, 1, 1), (2, 3, -5)])

    with pytest.raises(InvalidGraphError):
        dijkstra(g, 0)
    assert pushes == []


@pytest.mark.parametrize("start", [5, 3, -1])
def test_start_out_of_range(start):
    g = AdjacencyListGraph.from_edges(3, [(0, 1, 2), (1, 2, 2)])

    with pytest.raises(OutOfRangeError):
        dijkstra(g, start)


@pytest.mark.parametrize("seed", range(5))
def test_relaxation_invariant_and_optimality_certificate(seed):
    g = _random_graph(seed)
    dist = dijkstra(g, 0)

    for u, v, w in g.edges():
        if dist[u] is None:
            continue
        assert dist[v] is not None
        assert dist[v] <= dist[u] + w

    for v in g.nodes():
        if v == 0 or dist[v] is None:
            continue
        incoming = [(u, w) for u, x, w in g.edges() if x == v and dist[u] is not None]
        assert any(dist[u] + w == dist[v] for u, w in incoming)


@pytest.mark.parametrize("seed", range(3))
def test_predecessors_rebuild_shortest_paths(seed):
    g = _random_graph(seed)
    dist, prev = SimpleDijkstraEngine().shortest_paths(g, 0)

    assert prev[0] is None
    for target in g.nodes():
        path = reconstruct_node_path(prev, 0, target)
        if dist[target] is None:
            assert path is None
            continue
        assert path[0] == 0 and path[-1] == target
        cost = 0
        for u, v in zip(path, path[1:]):
            cost += min(w for x, w in g.outgoing(u) if x == v)
        assert cost == dist[target]


def test_reconstruct_node_path_simple():
    g = AdjacencyListGraph.from_edges(4, [(0, 1, 2), (1, 2, 2), (0, 2, 5)])
    _, prev = SimpleDijkstraEngine().shortest_paths(g, 0)

    assert reconstruct_node_path(prev, 0, 2) == [0, 1, 2]
    assert reconstruct_node_path(prev, 0, 0) == [0]
    assert reconstruct_node_path(prev, 0, 3) is None


def test_all_pairs_directed_graph_need_not_be_symmetric():
    g = AdjacencyListGraph.from_edges(3, [(0, 1, 1), (1, 2, 4)])

    matrix = dijkstra_all(g)

    assert matrix == [
        [0, 1, 5],
        [None, 0, 4],
        [None, None, 0],
    ]


@pytest.mark.parametrize("seed", range(3))
def test_all_pairs_undirected_graph_is_symmetric(seed):
    rng = random.Random(seed)
    n = 8
    edges = [(rng.randrange(n), rng.randrange(n), rng.randint(0, 9)) for _ in range(12)]
    g = AdjacencyListGraph.from_edges(n, edges, undirected=True)

    matrix = dijkstra_all(g)

    assert len(matrix) == n
    for i in range(n):
        assert matrix[i][i] == 0
        for j in range(n):
            assert matrix[i][j] == matrix[j][i]


def test_all_pairs_rows_match_single_source():
    g = _random_graph(11)
    engine = SimpleDijkstraEngine()

    matrix = engine.all_pairs_costs(g)

    for origin in g.nodes():
        assert matrix[origin] == engine.shortest_path_costs(g, origin)


def test_all_pairs_rejects_negative_weight():
    g = AdjacencyListGraph.from_edges(2, [(0, 1, -3)])

    with pytest.raises(InvalidGraphError):
        dijkstra_all(g)


def test_repeated_runs_are_identical():
    g = _random_graph(3)

    assert dijkstra(g, 0) == dijkstra(g, 0)
    assert dijkstra_all(g) == dijkstra_all(g)


def test_empty_graph_all_pairs():
    assert dijkstra_all(AdjacencyListGraph(0)) == []


def test_nan_weight_rejected():
    g = AdjacencyListGraph.from_edges(3, [(0, 1, 1.0), (1, 2, float("nan"))])

    with pytest.raises(InvalidGraphError) as excinfo:
        dijkstra(g, 0)
    assert (excinfo.value.src, excinfo.value.dst) == (1, 2)
