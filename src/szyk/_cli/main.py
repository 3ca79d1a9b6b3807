import logging
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from szyk._errors import TopsortError
from szyk._io import GraphFileError, load_graph_from_toml
from szyk._node import Node
from szyk._sort import topsort

from .config import ConfigError, get_config

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Szyk CLI: order the dependencies of a target."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _resolve_graph_and_target(graph: Path | None, target: str | None) -> tuple[Path, str]:
    """Fill in the graph path and target from [tool.szyk] when not given on the command line."""
    try:
        config = get_config()
    except ConfigError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    graph = graph if graph is not None else config.graph
    target = target if target is not None else config.target

    if graph is None:
        err_console.print("[red]Error: No graph file given. Use --graph or set \\[tool.szyk].graph[/red]")
        raise typer.Exit(code=1)
    if target is None:
        err_console.print("[red]Error: No target given. Pass TARGET or set \\[tool.szyk].target[/red]")
        raise typer.Exit(code=1)

    return graph, target


def _sorted_closure(graph: Path, target: str) -> list[Node[str, Any]]:
    """Load the graph and return the target's closure, exiting with code 1 on any error."""
    try:
        domain = load_graph_from_toml(graph)
    except GraphFileError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    ordered: list[Node[str, Any]] = []
    try:
        topsort(domain, target, ordered.append)
    except TopsortError as e:
        err_console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    logger.debug(f"Closure of {target!r} has {len(ordered)} of {len(domain)} nodes")
    return ordered


@app.command()
def order(
    target: Annotated[
        str | None,
        typer.Argument(help="Identifier of the node to produce (defaults to tool.szyk.target in pyproject.toml)"),
    ] = None,
    *,
    graph: Annotated[
        Path | None,
        typer.Option("-g", "--graph", help="Path to graph TOML file (defaults to tool.szyk.graph in pyproject.toml)"),
    ] = None,
    values: Annotated[
        bool,
        typer.Option("--values", help="Print node values instead of identifiers (with --plain)"),
    ] = False,
    plain: Annotated[
        bool,
        typer.Option("--plain", help="Print one entry per line instead of a table"),
    ] = False,
) -> None:
    """Print the nodes needed to produce TARGET, dependencies first."""
    graph, target = _resolve_graph_and_target(graph, target)
    ordered = _sorted_closure(graph, target)

    if plain:
        for node in ordered:
            entry = node.value if values else node.id
            out_console.print(str(entry), markup=False, highlight=False, soft_wrap=True)
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Node", style="bold")
    table.add_column("Depends on", style="yellow")
    table.add_column("Value")

    for position, node in enumerate(ordered, start=1):
        table.add_row(
            str(position),
            escape(node.id),
            escape(", ".join(node.deps)),
            escape("" if node.value is None else str(node.value)),
        )

    out_console.print(table)


@app.command()
def check(
    target: Annotated[
        str | None,
        typer.Argument(help="Identifier of the node to produce (defaults to tool.szyk.target in pyproject.toml)"),
    ] = None,
    *,
    graph: Annotated[
        Path | None,
        typer.Option("-g", "--graph", help="Path to graph TOML file (defaults to tool.szyk.graph in pyproject.toml)"),
    ] = None,
) -> None:
    """Check that TARGET can be produced: every dependency exists and there is no cycle."""
    graph, target = _resolve_graph_and_target(graph, target)
    ordered = _sorted_closure(graph, target)
    err_console.print(f"[green]✓ {escape(target)} resolves to {len(ordered)} node(s)[/green]")


def main() -> None:
    app()
