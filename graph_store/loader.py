# graph_store/loader.py
from pathlib import Path
from typing import IO, Iterable, Iterator, Optional, Tuple, Union
from dataclasses import dataclass
import logging

from config import Config
from graph_store.store import GraphStore
from utils.error_handler import GraphLoadError

logger = logging.getLogger(__name__)

@dataclass
class LoadStats:
    """Counters collected while parsing an edge list."""
    total_lines: int = 0
    edges: int = 0
    skipped_lines: int = 0
    comment_lines: int = 0

class EdgeListLoader:
    """Parses whitespace-separated ``<source> <target>`` edge lists."""

    def __init__(self, comment_prefix: Optional[str] = None,
                 include_sink_nodes: bool = False):
        self.comment_prefix = comment_prefix
        self.include_sink_nodes = include_sink_nodes
        self.logger = logging.getLogger(self.__class__.__name__)
        self.stats = LoadStats()

    @classmethod
    def from_config(cls, config: Config) -> 'EdgeListLoader':
        return cls(
            comment_prefix=config.comment_prefix,
            include_sink_nodes=config.include_sink_nodes
        )

    def load(self, source: Union[str, Path, IO]) -> GraphStore:
        """Load a graph from a file path or an open text or binary stream.

        Files are read as UTF-8 line by line; a line that does not decode is
        skipped like any other malformed line.
        """
        self.stats = LoadStats()

        if hasattr(source, 'read'):
            graph = GraphStore.from_edges(
                self._parse(source),
                include_sink_nodes=self.include_sink_nodes
            )
            self._log_stats('<stream>')
            return graph

        file_path = Path(source)
        self.logger.info(f"Loading edge list: {file_path}")

        try:
            with open(file_path, 'rb') as f:
                graph = GraphStore.from_edges(
                    self._parse(f),
                    include_sink_nodes=self.include_sink_nodes
                )
        except OSError as e:
            self.logger.error(f"Error reading edge list {file_path}: {str(e)}")
            raise GraphLoadError(
                f"Cannot read edge list {file_path}: {e.strerror or str(e)}",
                'resource_error',
                {'path': str(file_path)}
            ) from e

        self._log_stats(str(file_path))
        return graph

    def _parse(self, lines: Iterable[Union[str, bytes]]) -> Iterator[Tuple[str, str]]:
        for line in lines:
            self.stats.total_lines += 1

            if isinstance(line, bytes):
                try:
                    line = line.decode('utf-8')
                except UnicodeDecodeError:
                    self.stats.skipped_lines += 1
                    self.logger.debug(f"Skipping line {self.stats.total_lines}: not valid UTF-8")
                    continue

            if self.comment_prefix and line.lstrip().startswith(self.comment_prefix):
                self.stats.comment_lines += 1
                continue

            parts = line.split()
            if len(parts) < 2:
                self.stats.skipped_lines += 1
                self.logger.debug(f"Skipping line {self.stats.total_lines}: {line.rstrip()!r}")
                continue

            self.stats.edges += 1
            yield parts[0], parts[1]

    def _log_stats(self, name: str):
        self.logger.info(
            f"Loaded {self.stats.edges} edges from {name} "
            f"({self.stats.skipped_lines} malformed lines skipped)"
        )

def load_graph(source: Union[str, Path, IO[str]],
               comment_prefix: Optional[str] = None,
               include_sink_nodes: bool = False) -> GraphStore:
    """Load an edge list into a GraphStore."""
    loader = EdgeListLoader(comment_prefix=comment_prefix,
                            include_sink_nodes=include_sink_nodes)
    return loader.load(source)
