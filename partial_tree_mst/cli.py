"""Command line interface for computing minimum spanning trees."""
from __future__ import annotations

from typing import Optional

import click

from .benchmark import PerformanceBenchmark
from .config import load_config
from .exceptions import MSTError
from .loader import load_graph
from .logging_config import configure_logging
from .mst import PartialTreeMST


@click.group()
def cli() -> None:
    """Minimum spanning trees by merging partial trees."""
    pass


@cli.command()
@click.argument("graph_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--config", "config_path", type=click.Path(dir_okay=False), default=None,
              help="YAML configuration file.")
@click.option("--log-level", default=None, help="Override the configured log level.")
@click.option("--verify/--no-verify", default=None,
              help="Cross-check the result against Kruskal's algorithm.")
def run(graph_file: str, config_path: Optional[str], log_level: Optional[str],
        verify: Optional[bool]) -> None:
    """Compute the minimum spanning tree of GRAPH_FILE."""
    config = load_config(config_path)
    if log_level is not None:
        config.log_level = log_level
    if verify is not None:
        config.verify = verify
    configure_logging(level=config.log_level, fmt=config.log_format)

    try:
        graph = load_graph(graph_file)
        arcs, weight = PartialTreeMST(config).execute(graph)
    except (MSTError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    for arc in arcs:
        click.echo(str(arc))
    click.echo(f"total weight: {weight}")


@cli.command()
@click.option("--config", "config_path", type=click.Path(dir_okay=False), default=None,
              help="YAML configuration file.")
@click.option("--sizes", default=None, help="Comma separated vertex counts, e.g. 10,100.")
@click.option("--iterations", type=int, default=None)
@click.option("--seed", type=int, default=None)
@click.option("--output", type=click.Path(file_okay=False), default=None,
              help="Directory for JSON results.")
def benchmark(config_path: Optional[str], sizes: Optional[str], iterations: Optional[int],
              seed: Optional[int], output: Optional[str]) -> None:
    """Time both algorithms on random connected graphs."""
    config = load_config(config_path)
    settings = config.benchmark
    if sizes:
        try:
            settings.sizes = [int(s) for s in sizes.split(",") if s.strip()]
        except ValueError:
            raise click.BadParameter(f"invalid sizes {sizes!r}", param_hint="--sizes")
    if iterations is not None:
        settings.iterations = iterations
    if seed is not None:
        settings.seed = seed
    if output is not None:
        settings.results_dir = output
    configure_logging(level=config.log_level, fmt=config.log_format)

    runner = PerformanceBenchmark(settings.results_dir)
    results = runner.run_comparative_benchmark(settings)
    for name, result in results.items():
        if result.error_message:
            raise click.ClickException(f"{name}: {result.error_message}")
        for summary in result.get_summary_statistics().values():
            mean = summary["execution_time"]["mean"]
            click.echo(f"{name}\t{summary['input_size']}\t{mean:.6f}s")
