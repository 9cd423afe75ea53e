# analytics/sampling.py
from typing import Optional, Union
import logging
import random

from graph_store.store import GraphStore
from analytics.pathfinding import distance, is_reachable
from utils.error_handler import AnalysisError

logger = logging.getLogger(__name__)

def _as_rng(rng: Optional[Union[int, random.Random]]) -> random.Random:
    if isinstance(rng, random.Random):
        return rng
    return random.Random(rng)

def average_distance(graph: GraphStore, sample_count: int,
                     rng: Optional[Union[int, random.Random]] = None) -> float:
    """
    Approximate average hop count from randomly sampled node pairs.

    Both ends of each pair are drawn uniformly with replacement from the
    graph's keys. Pairs whose ends coincide are dropped and still use up a
    draw, so fewer than ``sample_count`` pairs may be measured. Unreachable
    pairs are left out of the average.
    Args:
        graph: Graph to sample from
        sample_count: Number of pairs to draw
        rng: ``random.Random`` instance or integer seed for repeatable draws
    Returns:
        The mean finite distance, or 0.0 when no sampled pair was reachable.
    """
    if sample_count < 0:
        raise AnalysisError(
            "sample_count must be non-negative",
            'invalid_parameter',
            {'sample_count': sample_count}
        )

    nodes = graph.nodes
    if not nodes or sample_count == 0:
        return 0.0

    rng = _as_rng(rng)
    total_distance = 0
    pairs_counted = 0
    pairs_discarded = 0

    for _ in range(sample_count):
        start = rng.choice(nodes)
        target = rng.choice(nodes)
        if start == target:
            pairs_discarded += 1
            continue

        hops = distance(graph, start, target)
        if is_reachable(hops):
            total_distance += hops
            pairs_counted += 1

    logger.debug(
        f"Sampled {sample_count} pairs: {pairs_counted} reachable, "
        f"{pairs_discarded} discarded as self-pairs"
    )

    if pairs_counted == 0:
        return 0.0
    return total_distance / pairs_counted
