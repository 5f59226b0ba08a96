"""
Command-line interface for mazegen.

Generates a perfect maze, prints it as fixed-width text together with the
generation time and its quality metrics.
"""

import logging
import sys

import click
from pydantic import ValidationError

from mazegen import __version__
from mazegen.config import MazeConfig
from mazegen.mazes import MazeAlgorithm, measure_quality
from mazegen.utils.exceptions import MazeError
from mazegen.utils.maze_logging import LoggedOperation, configure_logging, get_logger, log_maze_quality

logger = get_logger(__name__)

ALGORITHM_NAMES = [alg.value for alg in MazeAlgorithm]


@click.group()
@click.version_option(version=__version__, prog_name="mazegen")
def main():
    """
    mazegen: perfect maze generator

    Builds rectangular perfect mazes with Kruskal's, Prim's or a
    depth-first backtracking algorithm and scores their structure.
    """


@main.command()
@click.option("--width", "-w", type=click.IntRange(min=1), required=True, help="Sets the width of the maze")
@click.option("--height", "-g", type=click.IntRange(min=1), required=True, help="Sets the height of the maze")
@click.option(
    "--algorithm",
    "-a",
    type=click.Choice(ALGORITHM_NAMES),
    required=True,
    help="Sets the algorithm to use (kruskal, prim, or dfs)",
)
@click.option("--seed", "-s", type=int, default=None, help="Random seed for a reproducible maze")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Logging level for diagnostics on stderr",
)
def generate(width, height, algorithm, seed, log_level):
    """
    Generate a maze and report its quality metrics.

    Examples:
        mazegen generate -w 10 -g 8 -a kruskal
        mazegen generate --width 20 --height 20 --algorithm dfs --seed 7
    """
    configure_logging(level=log_level)

    try:
        config = MazeConfig(width=width, height=height, algorithm=algorithm, seed=seed)
        generator = config.build_generator()
    except (ValidationError, MazeError) as e:
        click.echo(f"Error: invalid configuration - {e}", err=True)
        sys.exit(1)

    with LoggedOperation(logger, f"{config.algorithm.value} generation", log_level=logging.DEBUG) as op:
        grid = generator.generate()

    click.echo(f"Maze generated using {config.algorithm.value} algorithm:")
    click.echo(grid.render(), nl=False)
    click.echo(f"Time taken: {op.duration:.6f}s")

    quality, quality_index = measure_quality(grid)
    log_maze_quality(logger, quality, quality_index)

    click.echo("\nMaze Quality Metrics:")
    click.echo(f"Dead ends: {quality.dead_ends}")
    click.echo(f"Longest path: {quality.longest_path}")
    click.echo(f"Average path length: {quality.avg_path_length:.2f}")
    click.echo(f"Branching factor: {quality.branching_factor:.2f}")
    click.echo(f"Quality Index: {quality_index:.4f}")


if __name__ == "__main__":
    main()
