# tests/test_centrality.py
import pytest

from analytics.centrality import closeness_centrality, traversal_frequency_centrality
from graph_store.store import GraphStore
from utils.random_graph import generate_random_graph

def test_closeness_triangle(triangle_graph):
    scores = closeness_centrality(triangle_graph)

    assert scores['A'] == pytest.approx(2 / 3)
    assert scores['B'] == 1.0
    assert scores['C'] == pytest.approx(2 / 3)

def test_closeness_isolated_node_is_zero():
    graph = GraphStore.from_mapping({'A': ['A'], 'B': ['C'], 'C': ['B']})
    scores = closeness_centrality(graph)

    assert scores['A'] == 0.0
    assert scores['B'] == 1.0

def test_closeness_ignores_target_only_nodes():
    graph = GraphStore.from_edges([('A', 'X')])

    assert closeness_centrality(graph) == {'A': 0.0}
    assert closeness_centrality(GraphStore.from_edges([('A', 'X')], include_sink_nodes=True)) == {
        'A': 1.0,
        'X': 0.0,
    }

def test_traversal_frequency_chain():
    graph = GraphStore.from_edges([('A', 'B'), ('B', 'C')])

    # recorded paths: A-B, A-B-C, B-C
    assert traversal_frequency_centrality(graph) == {'A': 66.0, 'B': 100.0}

def test_traversal_frequency_triangle(triangle_graph):
    scores = traversal_frequency_centrality(triangle_graph)

    assert scores == {'A': 66.0, 'B': 100.0, 'C': 66.0}

def test_traversal_frequency_no_paths():
    graph = GraphStore.from_mapping({'A': ['A'], 'B': []})

    assert traversal_frequency_centrality(graph) == {'A': 0.0, 'B': 0.0}

def test_traversal_frequency_scores_are_whole_percentages():
    graph = generate_random_graph(30, rng=8, max_neighbors=3)
    scores = traversal_frequency_centrality(graph)

    assert set(scores) == set(graph.nodes)
    for score in scores.values():
        assert 0.0 <= score <= 100.0
        assert score == int(score)

def test_empty_graph():
    assert closeness_centrality(GraphStore({})) == {}
    assert traversal_frequency_centrality(GraphStore({})) == {}
