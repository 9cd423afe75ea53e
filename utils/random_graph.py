# utils/random_graph.py
from pathlib import Path
from typing import Optional, Union
import random

from graph_store.store import GraphStore

def generate_random_graph(num_nodes: int, rng: Optional[Union[int, random.Random]] = None,
                          min_neighbors: int = 1, max_neighbors: int = 5) -> GraphStore:
    """Random directed graph over ``Node0..Node{n-1}``.

    Every node gets between ``min_neighbors`` and ``max_neighbors`` out-edges
    to uniformly chosen nodes; duplicates and self-loops are allowed.
    """
    if not isinstance(rng, random.Random):
        rng = random.Random(rng)

    adjacency = {}
    for i in range(num_nodes):
        num_neighbors = rng.randint(min_neighbors, max_neighbors)
        adjacency[f"Node{i}"] = [
            f"Node{rng.randrange(num_nodes)}" for _ in range(num_neighbors)
        ]

    return GraphStore(adjacency)

def write_edge_list(graph: GraphStore, file_path: Union[str, Path]) -> int:
    """Write ``graph`` as one ``<source> <target>`` line per edge."""
    lines = 0
    with open(file_path, 'w') as f:
        for source, neighbors in graph.items():
            for target in neighbors:
                f.write(f"{source} {target}\n")
                lines += 1
    return lines
