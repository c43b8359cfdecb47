"""
Command Line Interface for pso2d.
"""

import sys
import json
import logging
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.markup import escape

from . import __version__
from .core.config import Config, load_config
from .core.exceptions import OptimizationError
from .functions import FUNCTIONS, get_function
from .optimization import ParticleSwarmOptimizer


console = Console()


def _load(config: Optional[str]) -> Config:
    if config:
        pso_config = Config.from_file(config)
        pso_config.update_from_env()
        return pso_config
    return load_config()


@click.group()
@click.version_option(version=__version__)
def cli():
    """Particle swarm optimization for functions of two variables."""
    pass


@cli.command()
@click.option("--function", "-f", "function_name", type=str, help="Benchmark function name")
@click.option("--bounds", "-b", type=float, nargs=4, metavar="XMIN XMAX YMIN YMAX",
              help="Search box (defaults to the function's usual domain)")
@click.option("--iterations", "-n", type=int, help="Number of iterations")
@click.option("--maximize", is_flag=True, help="Search for a maximum instead of a minimum")
@click.option("--seed", "-s", type=int, help="Random seed")
@click.option("--config", "-c", type=click.Path(), help="Configuration file path")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def run(
    function_name: Optional[str],
    bounds: Optional[Tuple[float, float, float, float]],
    iterations: Optional[int],
    maximize: bool,
    seed: Optional[int],
    config: Optional[str],
    as_json: bool
):
    """Optimize a benchmark function."""
    try:
        pso_config = _load(config)
        logging.basicConfig(level=pso_config.log_level.upper())

        if seed is not None:
            pso_config.pso.seed = seed
        if not maximize:
            maximize = pso_config.maximize

        benchmark = get_function(function_name or pso_config.function)

        if bounds:
            search_box = [[bounds[0], bounds[1]], [bounds[2], bounds[3]]]
        elif pso_config.bounds is not None:
            search_box = pso_config.bounds
        else:
            search_box = benchmark.bounds

        max_iterations = iterations if iterations is not None else pso_config.pso.max_iterations

        optimizer = ParticleSwarmOptimizer(pso_config.pso)

        if as_json:
            result = optimizer.optimize(
                benchmark, search_box, "max" if maximize else "min", max_iterations
            )
        else:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=console,
                transient=True,
            ) as progress:
                progress.add_task(f"Optimizing {benchmark.name}...", total=None)
                result = optimizer.optimize(
                    benchmark, search_box, "max" if maximize else "min", max_iterations
                )

    except (OptimizationError, ValueError) as e:
        console.print(f"[red]Error: {escape(str(e))}")
        sys.exit(1)

    best_x, best_y = (float(v) for v in result['x'])

    if as_json:
        click.echo(json.dumps({
            "function": benchmark.name,
            "x": best_x,
            "y": best_y,
            "value": result['fun'],
            "iterations": result['nit'],
            "evaluations": result['nfev'],
            "seed": optimizer.seed,
            "solve_time": result['solve_time'],
        }, indent=2))
        return

    result_table = Table(title=f"PSO result for {benchmark.name}")
    result_table.add_column("Metric", style="cyan")
    result_table.add_column("Value", style="white")

    result_table.add_row("Goal", "maximum" if maximize else "minimum")
    result_table.add_row("X", f"{best_x:.17e}")
    result_table.add_row("Y", f"{best_y:.17e}")
    result_table.add_row("Value", f"{result['fun']:.17e}")
    result_table.add_row("Iterations", str(result['nit']))
    result_table.add_row("Evaluations", str(result['nfev']))
    result_table.add_row("Seed", str(optimizer.seed))
    result_table.add_row("Solve Time", f"{result['solve_time']:.3f}s")

    console.print(result_table)


@cli.command()
def functions():
    """List available benchmark functions."""
    functions_table = Table(title="Benchmark Functions")
    functions_table.add_column("Name", style="cyan", no_wrap=True)
    functions_table.add_column("Domain", style="white", no_wrap=True)
    functions_table.add_column("Optimum", style="green")
    functions_table.add_column("Description", style="white")

    for name in sorted(FUNCTIONS):
        benchmark = FUNCTIONS[name]
        (x_min, x_max), (y_min, y_max) = benchmark.bounds
        functions_table.add_row(
            name,
            f"[{x_min:g}, {x_max:g}] x [{y_min:g}, {y_max:g}]",
            f"{benchmark.optimum_value:g}",
            benchmark.description
        )

    console.print(functions_table)


@cli.command()
@click.option("--config", "-c", type=click.Path(), help="Configuration file path")
def config(config: Optional[str]):
    """Show the effective configuration."""
    try:
        pso_config = _load(config)
    except OptimizationError as e:
        console.print(f"[red]Error loading configuration: {escape(str(e))}")
        sys.exit(1)

    console.print(Panel(
        json.dumps(pso_config.to_dict(), indent=2),
        title="[bold blue]pso2d Configuration[/bold blue]",
        expand=False
    ))


if __name__ == "__main__":
    cli()
