# analytics/centrality.py
from typing import Dict, List, Tuple
from collections import defaultdict
import logging

from graph_store.store import GraphStore, Node
from analytics.pathfinding import single_source_distances

logger = logging.getLogger(__name__)

def closeness_centrality(graph: GraphStore) -> Dict[Node, float]:
    """
    Outward closeness of every key.

    For a node ``v`` with ``r`` reachable other keys at total distance ``d``
    the score is ``r / d``, or 0.0 when nothing is reachable. The score is
    not normalized by the size of the graph.
    """
    scores: Dict[Node, float] = {}

    for node in graph.nodes:
        distances = single_source_distances(graph, node)
        reachable = 0
        total_distance = 0

        for other in graph.nodes:
            if other == node or other not in distances:
                continue
            reachable += 1
            total_distance += distances[other]

        scores[node] = reachable / total_distance if reachable > 0 else 0.0

    return scores

def _record_paths(graph: GraphStore, start: Node) -> List[Tuple[Node, ...]]:
    """Depth-first walk from ``start`` recording every path of two or more nodes."""
    paths: List[Tuple[Node, ...]] = []
    visited = set()
    stack: List[Tuple[Node, Tuple[Node, ...]]] = [(start, (start,))]

    while stack:
        node, path = stack.pop()
        if node in visited:
            continue
        visited.add(node)

        if len(path) > 1:
            paths.append(path)

        # reversed so the first listed neighbor is explored first
        for neighbor in reversed(graph.neighbors(node)):
            if neighbor not in visited:
                stack.append((neighbor, path + (neighbor,)))

    return paths

def traversal_frequency_centrality(graph: GraphStore) -> Dict[Node, float]:
    """
    Approximate path-frequency score of every key.

    From every key a depth-first walk (with its own visited set) records
    each path prefix it reaches. A node's score is the number of recorded
    paths it occurs on, as a floor-divided percentage of all recorded paths,
    so scores are whole numbers between 0 and 100. This is not textbook
    betweenness: paths are not restricted to shortest ones and prefixes are
    counted repeatedly.
    """
    occurrences: Dict[Node, int] = defaultdict(int)
    total_paths = 0

    for start in graph.nodes:
        paths = _record_paths(graph, start)
        total_paths += len(paths)
        for path in paths:
            for node in path:
                occurrences[node] += 1

    logger.debug(f"Recorded {total_paths} traversal paths over {len(graph)} start nodes")

    if total_paths == 0:
        return {node: 0.0 for node in graph.nodes}

    return {
        node: float(occurrences.get(node, 0) * 100 // total_paths)
        for node in graph.nodes
    }
