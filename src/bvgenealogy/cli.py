"""Typer CLI for bvgenealogy."""
from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from bvgenealogy.analysis import (
    check_parents,
    check_table,
    compare_parents,
    comparison_table,
    print_table,
    read_parents,
    summary_table,
)
from bvgenealogy.config import SimulationConfig, inference_config, load_config
from bvgenealogy.engine.metrics import save_metrics
from bvgenealogy.engine.pipeline import format_parents, infer_genealogy
from bvgenealogy.engine.simulate import simulate_population, write_parents, write_population
from bvgenealogy.errors import ConfigError, GenealogyError

PROG = "bvg"

app = typer.Typer(help="Infer a rooted genealogy from a population of bit vectors.", add_completion=False)
tools = typer.Typer(help="Helpers for generating and checking genealogy data.", add_completion=False)

err_console = Console(stderr=True)
logger = logging.getLogger("bvgenealogy")


def _configure_logging(verbose: bool) -> None:
    handler = RichHandler(console=err_console, show_path=False)
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(message)s", handlers=[handler], force=True)


def usage(scale: Optional[int] = None) -> str:
    size = str(scale) if scale else "N"
    return "\n".join(
        [
            "",
            f"Usage: {PROG} <prob> <data>",
            "Where: <prob> is the bitwise probability of mutation",
            "              as an integer percentage (20 for example).",
            f"       <data> is a file of {size} bit strings of length {size}.",
            f"Each line matches the regular expression '^[01]{{{size}}}$',",
            f"and there are {size} lines in <data>.",
            "",
        ]
    )


def _fail(message: str, scale: Optional[int] = None) -> None:
    typer.echo(f"{PROG}: {message}", err=True)
    typer.echo(usage(scale), err=True)
    raise typer.Exit(code=1)


@app.command(context_settings={"ignore_unknown_options": True})
def infer(
    prob: Optional[str] = typer.Argument(None, help="Bitwise mutation probability as an integer percentage (0-100)"),
    data: Optional[Path] = typer.Argument(None, help="File of N bit strings of length N"),
    scale: Optional[int] = typer.Option(None, help="Population size and bit width (default: first line length)"),
    config: Optional[Path] = typer.Option(None, help="YAML config path"),
    workers: Optional[int] = typer.Option(None, help="Worker processes for relation enumeration"),
    acyclic: Optional[bool] = typer.Option(None, "--acyclic/--allow-cycles", help="Skip edges inside an existing component"),
    output: Optional[Path] = typer.Option(None, help="Also write the parent array to this file"),
    summary: Optional[bool] = typer.Option(None, "--summary/--no-summary", help="Print run statistics to stderr"),
    metrics: Optional[Path] = typer.Option(None, help="Write stage timings CSV"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr"),
):
    """Print the parent of every genotype in DATA, one per line."""
    _configure_logging(verbose)
    if prob is None or data is None:
        _fail("Error: Expected two arguments, <prob> and <data>.", scale)
    try:
        cfg = load_config(config)
    except ConfigError as exc:
        _fail(exc.describe(), scale)
    try:
        settings = inference_config(cfg.inference, mutation_percent=prob)
    except ConfigError:
        _fail(f"Error: First argument '{prob}' should be an integer between 0 and 100.", scale)
    try:
        settings = inference_config(settings, scale=scale, workers=workers, acyclic=acyclic)
    except ConfigError as exc:
        _fail(exc.describe(), scale)
    try:
        result = infer_genealogy(data, settings)
    except GenealogyError as exc:
        logger.debug("stage %s failed", exc.stage)
        _fail(exc.describe(), settings.scale)
    typer.echo(format_parents(result.parents), nl=False)
    if output is not None:
        write_parents(result.parents, output)
    metrics_path = metrics or cfg.outputs.metrics_path
    if metrics_path is not None:
        save_metrics(result.records, metrics_path)
    if summary if summary is not None else cfg.outputs.summary:
        print_table(summary_table(result), err_console)


@tools.command()
def simulate(
    data: Path = typer.Argument(..., help="Genotype file to write"),
    parents: Path = typer.Argument(..., help="True parent file to write"),
    scale: int = typer.Option(SimulationConfig().scale, help="Population size and bit width"),
    prob: int = typer.Option(SimulationConfig().mutation_percent, help="Mutation percentage"),
    seed: Optional[int] = typer.Option(None, help="RNG seed"),
):
    """Generate a shuffled population with a known genealogy."""
    try:
        cfg = SimulationConfig(scale=scale, mutation_percent=prob, seed=seed)
    except ValueError as exc:
        raise typer.BadParameter(str(exc))
    sim = simulate_population(cfg)
    write_population(sim, data)
    write_parents(sim.parents, parents)
    err_console.print(f"wrote {sim.scale} genotypes -> {data}, parents -> {parents}")


@tools.command()
def compare(
    predicted: Path = typer.Argument(..., help="Inferred parent file"),
    expected: Path = typer.Argument(..., help="Known parent file"),
    strict: bool = typer.Option(False, "--strict", help="Fail unless every entry matches"),
):
    """Report how many parents and edges of EXPECTED were recovered."""
    try:
        report = compare_parents(read_parents(predicted), read_parents(expected))
    except (OSError, ValueError) as exc:
        typer.echo(f"{PROG}: Error: {exc}", err=True)
        raise typer.Exit(code=1)
    print_table(comparison_table(report), err_console)
    if strict and report.identical != report.total:
        raise typer.Exit(code=1)


@tools.command()
def check(
    parents: Path = typer.Argument(..., help="Parent file to check"),
    scale: int = typer.Option(..., help="Expected population size"),
):
    """Check a parent file has SCALE in-range entries."""
    try:
        report = check_parents(read_parents(parents), scale)
    except (OSError, ValueError) as exc:
        typer.echo(f"{PROG}: Error: {exc}", err=True)
        raise typer.Exit(code=1)
    print_table(check_table(report), err_console)
    if not report.ok:
        raise typer.Exit(code=1)


def _run(typer_app: typer.Typer) -> None:
    try:
        typer_app()
    except SystemExit as exc:
        # usage errors exit with 2
        if exc.code == 2:
            if typer_app is app:
                typer.echo(usage(), err=True)
            sys.exit(1)
        raise


def main() -> None:
    _run(app)


def tools_main() -> None:
    _run(tools)


if __name__ == "__main__":
    main()
