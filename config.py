# config.py
from pathlib import Path
import logging
from typing import Dict, Any, List, Optional, Union
import yaml

from utils.error_handler import ConfigurationError

ALL_ANALYSES = [
    'average_distance',
    'max_distance',
    'median_distance',
    'degree_distribution',
    'closeness_centrality',
    'traversal_frequency_centrality',
]

class Config:
    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        self.config_path = Path(config_path) if config_path is not None else None
        self.config: Dict[str, Any] = self._load_config()

        # Analysis configurations
        self.analysis_config = self.config.get('analysis', {}) or {}
        self.sample_count = self.analysis_config.get('sample_count', 1000)
        self.seed = self.analysis_config.get('seed')
        self.include_sink_nodes = bool(self.analysis_config.get('include_sink_nodes', False))
        self.max_matrix_nodes = self.analysis_config.get('max_matrix_nodes', 2000)
        self.max_workers = self.analysis_config.get('max_workers', 1)
        self.analyses: List[str] = list(self.analysis_config.get('analyses', ALL_ANALYSES))

        # Edge list loader configurations
        self.loader_config = self.config.get('loader', {}) or {}
        self.comment_prefix = self.loader_config.get('comment_prefix')

        self.validate()

        # Setup logging
        self._setup_logging()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        if self.config_path is None:
            return {}

        if not self.config_path.exists():
            raise FileNotFoundError(f"Config file not found at {self.config_path}")

        with open(self.config_path, 'r') as f:
            return yaml.safe_load(f) or {}

    def validate(self):
        """Reject values the analyses cannot run with."""
        for name in ('sample_count', 'max_matrix_nodes'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigurationError(
                    f"'{name}' must be a non-negative integer",
                    'invalid_config',
                    {'key': name, 'value': value}
                )

        max_workers = self.max_workers
        if isinstance(max_workers, bool) or not isinstance(max_workers, int) or max_workers < 1:
            raise ConfigurationError(
                "'max_workers' must be a positive integer",
                'invalid_config',
                {'key': 'max_workers', 'value': max_workers}
            )

        unknown = [name for name in self.analyses if name not in ALL_ANALYSES]
        if unknown:
            raise ConfigurationError(
                f"Unknown analyses: {', '.join(unknown)}",
                'invalid_config',
                {'key': 'analyses', 'value': unknown}
            )

    def _setup_logging(self):
        """Setup logging configuration based on YAML content."""
        log_config = self.config.get('logging', {}) or {}
        logging.basicConfig(
            level=log_config.get('level', 'INFO'),
            format=log_config.get('format', '%(asctime)s - %(name)s - %(levelname)s - %(message)s'),
            filename=log_config.get('file')
        )
