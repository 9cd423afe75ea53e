# tests/test_pipeline.py
import json
import pytest
import yaml
from click.testing import CliRunner

from analytics.graph_analytics import GraphAnalytics
from analytics.matrix import build_matrix
from graph_store.store import GraphStore
from monitoring.performance import PerformanceMonitor
from orchestration.cli import cli
from orchestration.pipeline import AnalysisPipeline
from utils.error_handler import AnalysisError, GraphLoadError, format_error_message
from utils.random_graph import generate_random_graph, write_edge_list

def test_graph_analytics_runs_every_analysis(triangle_graph):
    analytics = GraphAnalytics(sample_count=50, seed=1)
    results = {name: analytics.run(name, triangle_graph) for name in analytics.names}

    assert results['max_distance'] == 2
    assert results['median_distance'] == 1.0
    assert results['degree_distribution'] == {1: 2, 2: 1}
    assert results['closeness_centrality']['B'] == 1.0
    assert results['traversal_frequency_centrality']['B'] == 100.0
    assert 1.0 <= results['average_distance'] <= 2.0

def test_graph_analytics_reuses_prebuilt_matrix(triangle_graph):
    analytics = GraphAnalytics()
    matrix = build_matrix(GraphStore.from_edges([('A', 'B')]))

    # statistics come from the supplied matrix, not from the graph argument
    assert analytics.run('max_distance', triangle_graph, matrix) == 0
    assert analytics.run('median_distance', triangle_graph, matrix) == 0.0
    assert analytics.run('max_distance', triangle_graph) == 2

def test_graph_analytics_unknown_name(triangle_graph):
    with pytest.raises(AnalysisError) as exc_info:
        GraphAnalytics().run('pagerank', triangle_graph)

    assert exc_info.value.error_code == 'unknown_analysis'

def test_pipeline_run(test_config, edge_list_file):
    pipeline = AnalysisPipeline(test_config)
    report = pipeline.run(edge_list_file)

    assert list(report.results) == test_config.analyses
    assert report['max_distance'] == 2
    assert report['degree_distribution'] == {1: 2, 2: 1}
    assert 'load' in report.durations
    assert 'distance_matrix' in report.durations
    assert report.skipped == []

def test_pipeline_skips_quadratic_analyses_on_large_graphs(write_config, config_data):
    config_data['analysis']['max_matrix_nodes'] = 2
    pipeline = AnalysisPipeline(write_config(config_data))
    graph = generate_random_graph(10, rng=1)

    report = pipeline.analyze(graph)

    assert set(report.results) == {'average_distance', 'degree_distribution'}
    assert 'max_distance' in report.skipped
    assert 'closeness_centrality' in report.skipped

def test_concurrent_run_matches_sequential(write_config, config_data):
    graph = generate_random_graph(40, rng=6)
    sequential = AnalysisPipeline(write_config(config_data)).analyze(graph)

    config_data['analysis']['max_workers'] = 3
    concurrent = AnalysisPipeline(write_config(config_data)).analyze(graph)

    assert concurrent.results == sequential.results
    assert list(concurrent.results) == list(sequential.results)

def test_pipeline_missing_file(test_config, tmp_path):
    with pytest.raises(GraphLoadError) as exc_info:
        AnalysisPipeline(test_config).run(tmp_path / "missing.txt")

    assert exc_info.value.details['operation'] == 'load'
    assert exc_info.value.details['path'].endswith('missing.txt')

def test_performance_monitor_statistics():
    monitor = PerformanceMonitor()
    for _ in range(3):
        with monitor.time('noop'):
            pass

    stats = monitor.export_metrics()['noop']
    assert stats['count'] == 3
    assert stats['min'] <= stats['mean'] <= stats['max']
    assert monitor.last_duration('missing') is None

def test_format_error_message():
    error = GraphLoadError("Cannot read edge list", 'resource_error', {'path': 'x.txt'})

    message = format_error_message(error)
    assert message.startswith("GraphLoadError (resource_error): Cannot read edge list")
    assert "path: x.txt" in message

def test_cli_analyze(edge_list_file, tmp_path):
    output = tmp_path / "report.json"
    result = CliRunner().invoke(cli, [
        'analyze', str(edge_list_file),
        '-a', 'max_distance', '-a', 'median_distance', '-a', 'degree_distribution',
        '--output', str(output)
    ])

    assert result.exit_code == 0, result.output
    assert "Maximum distance between all node pairs: 2" in result.output
    assert "Median distance between all node pairs: 1.00" in result.output

    saved = json.loads(output.read_text())
    assert saved['results']['max_distance'] == 2

def test_cli_analyze_with_config(edge_list_file, tmp_path, config_data):
    config_path = tmp_path / "cli.yaml"
    config_path.write_text(yaml.dump(config_data))
    result = CliRunner().invoke(cli, [
        'analyze', str(edge_list_file), '--config', str(config_path),
        '-a', 'closeness_centrality', '--top', '1'
    ])

    assert result.exit_code == 0, result.output
    assert "B: 1.0000" in result.output

def test_cli_generate(tmp_path):
    output = tmp_path / "random.txt"
    result = CliRunner().invoke(cli, ['generate', '25', str(output), '--seed', '3'])

    assert result.exit_code == 0, result.output
    assert len(output.read_text().splitlines()) >= 25

def test_write_edge_list_round_trip_preserves_edge_count(tmp_path, test_config):
    graph = generate_random_graph(20, rng=5)
    path = tmp_path / "graph.txt"

    assert write_edge_list(graph, path) == graph.edge_count
    assert AnalysisPipeline(test_config).load(path).edge_count == graph.edge_count
