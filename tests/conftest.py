# tests/conftest.py
import pytest
from pathlib import Path
import yaml
from typing import Any, Dict

from config import Config
from graph_store.store import GraphStore

@pytest.fixture
def config_data() -> Dict[str, Any]:
    return {
        'analysis': {
            'sample_count': 200,
            'seed': 7,
            'include_sink_nodes': False,
            'max_matrix_nodes': 500,
            'max_workers': 1
        },
        'loader': {
            'comment_prefix': '#'
        },
        'logging': {
            'level': 'DEBUG',
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        }
    }

@pytest.fixture
def write_config(tmp_path: Path):
    """Write a config dict to YAML and load it."""
    def _write(data: Dict[str, Any]) -> Config:
        config_path = tmp_path / "config.yaml"
        config_path.write_text(yaml.dump(data))
        return Config(config_path)
    return _write

@pytest.fixture
def test_config(write_config, config_data) -> Config:
    """Create test configuration."""
    return write_config(config_data)

@pytest.fixture
def triangle_graph() -> GraphStore:
    """A<->B<->C built from paired directed edges."""
    return GraphStore.from_edges([
        ('A', 'B'),
        ('B', 'A'),
        ('B', 'C'),
        ('C', 'B'),
    ])

@pytest.fixture
def two_components() -> GraphStore:
    return GraphStore.from_mapping({
        'A': ['B'],
        'B': ['A'],
        'C': ['D'],
        'D': ['C'],
    })

@pytest.fixture
def edge_list_file(tmp_path: Path) -> Path:
    path = tmp_path / "edges.txt"
    path.write_text(
        "# Directed graph: example\n"
        "A B\n"
        "B A\n"
        "B C\n"
        "\n"
        "lonely\n"
        "C B\n"
    )
    return path
