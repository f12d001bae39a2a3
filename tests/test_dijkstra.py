"""Tests for the Dijkstra path finder."""

from __future__ import annotations

import itertools
import math
import random

import pytest

from roadtrip.domain.errors import UnknownVertexError
from roadtrip.domain.models import NO_ROUTE, NoPathFound, Path, PathStep
from roadtrip.graph.dijkstra import (
    SearchResult,
    dijkstra,
    reconstruct_path,
    shortest_distance,
    shortest_path,
)
from roadtrip.graph.store import FrozenGraph, GraphStore


def build_graph(vertices, edges) -> FrozenGraph:
    store = GraphStore()
    for v in vertices:
        store.add_vertex(v)
    for a, b, w in edges:
        store.add_edge(a, b, w)
    return store.seal()


@pytest.fixture
def triangle() -> FrozenGraph:
    return build_graph(
        ["A", "B", "C", "D"],
        [("A", "B", 5.0), ("B", "C", 3.0), ("A", "C", 10.0)],
    )


def test_via_route_beats_direct_edge(triangle):
    result = shortest_path(triangle, "A", "C")

    assert isinstance(result, Path)
    assert result.steps == (
        PathStep("A", 0.0),
        PathStep("B", 5.0),
        PathStep("C", 8.0),
    )
    assert result.total_distance == 8.0
    assert result.vertices == ("A", "B", "C")


def test_path_is_symmetric(triangle):
    forward = shortest_path(triangle, "A", "C")
    backward = shortest_path(triangle, "C", "A")

    assert backward.vertices == tuple(reversed(forward.vertices))
    assert backward.total_distance == forward.total_distance


def test_isolated_vertex_yields_no_path(triangle):
    result = shortest_path(triangle, "A", "D")

    assert isinstance(result, NoPathFound)
    assert not result
    assert result.source == "A"
    assert result.target == "D"
    assert math.isinf(result.total_distance)
    assert result.steps == ()


def test_isolated_source_yields_no_path(triangle):
    assert isinstance(shortest_path(triangle, "D", "A"), NoPathFound)


def test_same_source_and_target(triangle):
    result = shortest_path(triangle, "B", "B")

    assert result.steps == (PathStep("B", 0.0),)
    assert result.total_distance == 0.0


def test_isolated_vertex_to_itself():
    graph = build_graph(["Iceland"], [])

    result = shortest_path(graph, "Iceland", "Iceland")
    assert result.vertices == ("Iceland",)


@pytest.mark.parametrize("source,target", [("A", "Z"), ("Z", "A")])
def test_unknown_vertex_raises(triangle, source, target):
    with pytest.raises(UnknownVertexError) as exc:
        shortest_path(triangle, source, target)
    assert exc.value.vertex == "Z"


def test_distance_does_not_require_adjacency():
    graph = build_graph(
        ["France", "Germany", "Poland"],
        [("France", "Germany", 878.0), ("Germany", "Poland", 517.0)],
    )

    assert not graph.are_adjacent("France", "Poland")
    assert shortest_distance(graph, "France", "Poland") == 1395.0


def test_distance_for_disconnected_pair_is_no_route(triangle):
    assert shortest_distance(triangle, "A", "D") == NO_ROUTE


def test_unresolved_edges_do_not_carry_routes():
    store = GraphStore()
    for v in ("A", "B", "C"):
        store.add_vertex(v)
    store.add_edge("A", "B")
    store.add_edge("B", "C", 2.0)
    graph = store.seal()

    assert isinstance(shortest_path(graph, "A", "C"), NoPathFound)
    assert shortest_path(graph, "B", "C").total_distance == 2.0


def test_zero_weight_edges():
    graph = build_graph(["A", "B", "C"], [("A", "B", 0.0), ("B", "C", 0.0)])

    result = shortest_path(graph, "A", "C")
    assert result.vertices == ("A", "B", "C")
    assert result.total_distance == 0.0


def test_dijkstra_computes_full_table(triangle):
    result = dijkstra(triangle, "A")

    assert result.distances == {"A": 0.0, "B": 5.0, "C": 8.0, "D": math.inf}
    assert result.previous == {"A": None, "B": "A", "C": "B", "D": None}


def test_dijkstra_unknown_source(triangle):
    with pytest.raises(UnknownVertexError):
        dijkstra(triangle, "Z")


def test_reconstruct_path_guards_against_broken_chain():
    # Finite distance but the predecessor chain never reaches the source.
    result = SearchResult(
        source="A",
        distances={"A": 0.0, "B": 1.0, "C": 2.0},
        previous={"A": None, "B": None, "C": "B"},
    )

    assert isinstance(reconstruct_path(result, "C"), NoPathFound)


def test_reconstruct_path_unknown_target(triangle):
    with pytest.raises(UnknownVertexError):
        reconstruct_path(dijkstra(triangle, "A"), "Z")


def test_queries_do_not_share_state(triangle):
    first = dijkstra(triangle, "A")
    second = dijkstra(triangle, "C")

    assert first.distances["A"] == 0.0
    assert second.distances["A"] == 8.0
    assert first.distances is not second.distances


def _brute_force(graph: FrozenGraph, source: str, target: str) -> float:
    """Minimum weight over all simple paths, by exhaustive DFS."""
    best = math.inf

    def walk(vertex: str, visited: set, total: float) -> None:
        nonlocal best
        if vertex == target:
            best = min(best, total)
            return
        for n in graph[vertex]:
            if n.vertex not in visited:
                walk(n.vertex, visited | {n.vertex}, total + n.weight)

    walk(source, {source}, 0.0)
    return best


@pytest.mark.parametrize("seed", range(8))
def test_matches_brute_force_on_random_graphs(seed):
    rng = random.Random(seed)
    vertices = [f"V{i}" for i in range(7)]
    edges = [
        (a, b, float(rng.randint(0, 20)))
        for a, b in itertools.combinations(vertices, 2)
        if rng.random() < 0.4
    ]
    graph = build_graph(vertices, edges)

    for source, target in itertools.product(vertices, repeat=2):
        result = shortest_path(graph, source, target)
        expected = _brute_force(graph, source, target)

        assert result.total_distance == expected
        if result:
            assert result.source == source
            assert result.target == target
            hop_total = sum(graph.weight(s.vertex, e.vertex) for s, e in result.hops)
            assert hop_total == result.total_distance
