# analytics/degree.py
from typing import Dict
from collections import defaultdict

from graph_store.store import GraphStore

def degree_distribution(graph: GraphStore) -> Dict[int, int]:
    """Map each observed out-degree to the number of keys that have it."""
    histogram: Dict[int, int] = defaultdict(int)

    for node in graph.nodes:
        # duplicates and self-loops count toward the degree
        histogram[graph.out_degree(node)] += 1

    return dict(histogram)
