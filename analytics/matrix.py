# analytics/matrix.py
from typing import Mapping, Tuple
from types import MappingProxyType
from dataclasses import dataclass, field
import logging
import numpy as np

from graph_store.store import GraphStore, Node
from analytics.pathfinding import UNREACHABLE

logger = logging.getLogger(__name__)

@dataclass(frozen=True, eq=False)
class DistanceMatrix:
    """Dense all-pairs hop counts.

    ``distances[i, j]`` is the hop count from ``nodes[i]`` to ``nodes[j]``;
    unreachable pairs hold ``inf``. Row/column order is the graph's key order
    and stays fixed for the lifetime of the matrix.
    """
    nodes: Tuple[Node, ...]
    distances: np.ndarray
    index: Mapping[Node, int] = field(default_factory=dict)

    def __post_init__(self):
        index = self.index or {node: i for i, node in enumerate(self.nodes)}
        object.__setattr__(self, 'index', MappingProxyType(dict(index)))
        self.distances.setflags(write=False)

    def __len__(self) -> int:
        return len(self.nodes)

    def distance(self, start: Node, target: Node):
        """Hop count between two keys, ``UNREACHABLE`` when there is no path."""
        value = self.distances[self.index[start], self.index[target]]
        return int(value) if np.isfinite(value) else UNREACHABLE

    def finite_distances(self) -> np.ndarray:
        """Finite off-diagonal entries, sorted ascending."""
        off_diagonal = ~np.eye(len(self.nodes), dtype=bool)
        values = self.distances[off_diagonal & np.isfinite(self.distances)]
        return np.sort(values)

    def max_distance(self) -> int:
        """Largest finite entry, 0 if there is none."""
        finite = self.distances[np.isfinite(self.distances)]
        if finite.size == 0:
            return 0
        return int(finite.max())

    def median_distance(self) -> float:
        """Median of the finite off-diagonal entries, 0.0 if there are none."""
        values = self.finite_distances()
        count = len(values)
        if count == 0:
            return 0.0

        middle = count // 2
        if count % 2 == 0:
            return float(values[middle - 1] + values[middle]) / 2.0
        return float(values[middle])

def build_matrix(graph: GraphStore) -> DistanceMatrix:
    """
    Compute all-pairs shortest hop counts by Floyd-Warshall relaxation.

    O(n^3) time and O(n^2) memory in the number of keys. Edges to nodes that
    are not keys have no row or column and are left out.
    """
    nodes = graph.nodes
    index = {node: i for i, node in enumerate(nodes)}
    num_nodes = len(nodes)

    dist = np.full((num_nodes, num_nodes), np.inf)
    for i, node in enumerate(nodes):
        for neighbor in graph.neighbors(node):
            j = index.get(neighbor)
            if j is not None:
                dist[i, j] = 1
    np.fill_diagonal(dist, 0)

    logger.debug(f"Relaxing {num_nodes}x{num_nodes} distance matrix")

    # inf + x stays inf, so pairs through an unreachable leg never win the min
    for k in range(num_nodes):
        np.minimum(dist, dist[:, k, np.newaxis] + dist[np.newaxis, k, :], out=dist)

    return DistanceMatrix(nodes=nodes, distances=dist, index=index)

def max_distance(graph: GraphStore) -> int:
    return build_matrix(graph).max_distance()

def median_distance(graph: GraphStore) -> float:
    return build_matrix(graph).median_distance()
