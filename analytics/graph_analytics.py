# analytics/graph_analytics.py
from typing import Any, Callable, Dict, List, Optional
from dataclasses import dataclass, field
import logging
import random

from graph_store.store import GraphStore
from analytics.centrality import closeness_centrality, traversal_frequency_centrality
from analytics.degree import degree_distribution
from analytics.matrix import DistanceMatrix, build_matrix
from analytics.sampling import average_distance
from utils.error_handler import AnalysisError

# Statistics read straight off a DistanceMatrix.
MATRIX_ANALYSES: Dict[str, Callable[[DistanceMatrix], Any]] = {
    'max_distance': DistanceMatrix.max_distance,
    'median_distance': DistanceMatrix.median_distance,
}

# Analyses that build the dense matrix or run a traversal per node.
QUADRATIC_ANALYSES = set(MATRIX_ANALYSES) | {
    'closeness_centrality',
    'traversal_frequency_centrality',
}

@dataclass
class AnalyticsReport:
    """Results of one run, keyed by analysis name."""
    results: Dict[str, Any] = field(default_factory=dict)
    durations: Dict[str, float] = field(default_factory=dict)
    skipped: List[str] = field(default_factory=list)

    def __getitem__(self, name: str) -> Any:
        return self.results[name]

class GraphAnalytics:
    """Registry of the analyses that can be run over a GraphStore."""

    def __init__(self, sample_count: int = 1000,
                 seed: Optional[int] = None):
        self.sample_count = sample_count
        self.seed = seed
        self.logger = logging.getLogger(self.__class__.__name__)
        self.metrics: Dict[str, Callable[[GraphStore], Any]] = {
            'average_distance': self._average_distance,
            'max_distance': lambda graph: build_matrix(graph).max_distance(),
            'median_distance': lambda graph: build_matrix(graph).median_distance(),
            'degree_distribution': degree_distribution,
            'closeness_centrality': closeness_centrality,
            'traversal_frequency_centrality': traversal_frequency_centrality,
        }

    @property
    def names(self) -> List[str]:
        return list(self.metrics)

    def _average_distance(self, graph: GraphStore) -> float:
        return average_distance(graph, self.sample_count, random.Random(self.seed))

    def run(self, name: str, graph: GraphStore,
            matrix: Optional[DistanceMatrix] = None) -> Any:
        """
        Run a single analysis by name.
        Args:
            name: Analysis name
            graph: Graph to analyze
            matrix: Prebuilt distance matrix of ``graph``, reused by the
                max/median statistics instead of building a new one
        """
        if name not in self.metrics:
            raise AnalysisError(
                f"Unknown analysis: {name}",
                'unknown_analysis',
                {'available': self.names}
            )

        self.logger.debug(f"Running {name} on {graph!r}")
        if matrix is not None and name in MATRIX_ANALYSES:
            return MATRIX_ANALYSES[name](matrix)
        return self.metrics[name](graph)
