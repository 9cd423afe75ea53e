# analytics/pathfinding.py
from typing import Dict, Optional
from collections import deque
import math

from graph_store.store import GraphStore, Node

# Distance returned when no path exists; greater than every hop count.
UNREACHABLE = math.inf

def _breadth_first(graph: GraphStore, start: Node,
                   target: Optional[Node] = None) -> Dict[Node, int]:
    """Expand outgoing edges from ``start`` in FIFO order.

    Each node is marked visited once, when it is first discovered, so the
    recorded hop count is the minimum. Stops early once ``target`` is found.
    """
    distances = {start: 0}
    if start == target:
        return distances

    frontier = deque([start])
    while frontier:
        current = frontier.popleft()
        next_distance = distances[current] + 1

        for neighbor in graph.neighbors(current):
            if neighbor in distances:
                continue
            distances[neighbor] = next_distance
            if neighbor == target:
                return distances
            frontier.append(neighbor)

    return distances

def distance(graph: GraphStore, start: Node, target: Node):
    """
    Minimum number of hops from ``start`` to ``target``.
    Returns:
        An ``int`` hop count, or ``UNREACHABLE`` when no path exists.
    """
    return _breadth_first(graph, start, target).get(target, UNREACHABLE)

def single_source_distances(graph: GraphStore, start: Node) -> Dict[Node, int]:
    """Hop counts from ``start`` to every node reachable from it, itself included."""
    return _breadth_first(graph, start)

def is_reachable(value) -> bool:
    return value != UNREACHABLE
