# orchestration/cli.py
import click
from pathlib import Path
from typing import Optional, Tuple
import json

from config import ALL_ANALYSES, Config
from orchestration.pipeline import AnalysisPipeline
from utils.error_handler import GraphError, format_error_message
from utils.random_graph import generate_random_graph, write_edge_list

LABELS = {
    'average_distance': "Average distance between sampled node pairs (approximate)",
    'max_distance': "Maximum distance between all node pairs",
    'median_distance': "Median distance between all node pairs",
}

def _print_report(report, top: int):
    click.echo("Computation Times- ")
    for name, seconds in report.durations.items():
        click.echo(f"{name} took {seconds:.4f}s")

    for name in report.skipped:
        click.echo(f"{name} skipped: graph too large")

    for name, value in report.results.items():
        if name == 'degree_distribution':
            click.echo("\nDegree Distribution- ")
            for degree, count in sorted(value.items()):
                click.echo(f"Degree {degree}: Count {count}")
        elif name in ('closeness_centrality', 'traversal_frequency_centrality'):
            title = name.replace('_', ' ').title()
            click.echo(f"\n{title} (top {top})- ")
            ranked = sorted(value.items(), key=lambda item: (-item[1], str(item[0])))
            for node, score in ranked[:top]:
                click.echo(f"{node}: {score:.4f}")
        elif name == 'max_distance':
            click.echo(f"{LABELS[name]}: {value}")
        else:
            click.echo(f"{LABELS[name]}: {value:.2f}")

def _to_json(report) -> dict:
    return {
        'results': {
            name: ({str(k): v for k, v in value.items()} if isinstance(value, dict) else value)
            for name, value in report.results.items()
        },
        'durations': report.durations,
        'skipped': report.skipped
    }

@click.group()
def cli():
    """Directed graph distance and centrality statistics"""
    pass

@cli.command()
@click.argument('edge_list', type=click.Path(exists=True, dir_okay=False))
@click.option('--config', 'config_path', type=click.Path(exists=True),
              help="YAML configuration file")
@click.option('--analysis', '-a', 'analyses', multiple=True,
              type=click.Choice(ALL_ANALYSES),
              help="Analysis to run (repeatable, defaults to the configured list)")
@click.option('--samples', '-n', type=int, help="Pairs drawn for the average distance")
@click.option('--seed', type=int, help="Seed for the pair sampler")
@click.option('--include-sink-nodes', is_flag=True, default=None,
              help="Treat nodes that only appear as targets as graph nodes")
@click.option('--top', default=10, show_default=True,
              help="Centrality entries to print")
@click.option('--output', '-o', type=click.Path(),
              help="Output path for results as JSON")
def analyze(edge_list: str, config_path: Optional[str], analyses: Tuple[str, ...],
            samples: Optional[int], seed: Optional[int],
            include_sink_nodes: Optional[bool], top: int, output: Optional[str]):
    """Compute distance, degree and centrality statistics for an edge list."""
    try:
        config = Config(config_path)
        if samples is not None:
            config.sample_count = samples
        if seed is not None:
            config.seed = seed
        if include_sink_nodes:
            config.include_sink_nodes = True
        config.validate()

        pipeline = AnalysisPipeline(config)
        report = pipeline.run(edge_list, list(analyses) or None)

        _print_report(report, top)

        if output:
            output_path = Path(output)
            with open(output_path, 'w') as f:
                json.dump(_to_json(report), f, indent=2)
            click.echo(f"Detailed results saved to: {output_path}")

    except GraphError as e:
        click.echo(format_error_message(e), err=True)
        raise click.Abort()

@cli.command()
@click.argument('num_nodes', type=click.IntRange(min=1))
@click.argument('output', type=click.Path(dir_okay=False))
@click.option('--seed', type=int, help="Seed for the generator")
def generate(num_nodes: int, output: str, seed: Optional[int]):
    """Write a random edge list with NUM_NODES nodes."""
    graph = generate_random_graph(num_nodes, seed)
    lines = write_edge_list(graph, output)
    click.echo(f"Wrote {lines} edges to {output}")

if __name__ == "__main__":
    cli()
