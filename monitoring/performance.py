# monitoring/performance.py
from typing import Dict, List, Optional
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
import logging
import threading
import time
import numpy as np

@dataclass
class MetricPoint:
    """Container for a single metric measurement."""
    timestamp: datetime
    value: float

class MetricCollector:
    """Collects measurements for one named operation."""

    def __init__(self, name: str, description: str = ''):
        self.name = name
        self.description = description
        self.values: List[MetricPoint] = []
        self._lock = threading.Lock()

    def add_value(self, value: float):
        """Add a new metric value."""
        with self._lock:
            self.values.append(MetricPoint(timestamp=datetime.now(), value=value))

    def last(self) -> Optional[float]:
        with self._lock:
            return self.values[-1].value if self.values else None

    def get_statistics(self) -> Dict[str, float]:
        """Get statistical summary of metric values."""
        with self._lock:
            if not self.values:
                return {
                    'count': 0,
                    'mean': 0.0,
                    'min': 0.0,
                    'max': 0.0,
                    'std': 0.0
                }

            values = [v.value for v in self.values]
            return {
                'count': len(values),
                'mean': float(np.mean(values)),
                'min': float(np.min(values)),
                'max': float(np.max(values)),
                'std': float(np.std(values))
            }

class PerformanceMonitor:
    """Times graph operations, one collector per operation name."""

    def __init__(self):
        self.metrics: Dict[str, MetricCollector] = {}
        self.logger = logging.getLogger(self.__class__.__name__)
        self._lock = threading.Lock()

    def _collector(self, operation: str) -> MetricCollector:
        with self._lock:
            if operation not in self.metrics:
                self.metrics[operation] = MetricCollector(operation, f"Duration of {operation} in seconds")
            return self.metrics[operation]

    @contextmanager
    def time(self, operation: str):
        """Record the wall-clock duration of the enclosed block."""
        collector = self._collector(operation)
        start = time.perf_counter()
        try:
            yield collector
        finally:
            elapsed = time.perf_counter() - start
            collector.add_value(elapsed)
            self.logger.info(f"{operation} took {elapsed:.4f}s")

    def last_duration(self, operation: str) -> Optional[float]:
        if operation not in self.metrics:
            return None
        return self.metrics[operation].last()

    def export_metrics(self) -> Dict[str, Dict[str, float]]:
        return {name: metric.get_statistics() for name, metric in self.metrics.items()}
