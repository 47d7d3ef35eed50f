import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from graphine._errors import CycleDetectedError, GraphineError
from graphine._graph import CyclePolicy, Graph
from graphine._io import export_order_to_toml, load_graph_from_toml

from .config import ConfigError, GraphineConfig, get_config

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
    """Graphine CLI."""
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


def _load_config() -> GraphineConfig:
    try:
        return get_config()
    except ConfigError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


def _load_graph(graph_path: Path | None, config: GraphineConfig) -> Graph:
    """Load the graph document given on the command line, or the configured one."""
    if graph_path is None:
        graph_path = config.graph
    if graph_path is None:
        msg = escape("No graph document given and no [tool.graphine].graph configured")
        err_console.print(f"[red]Error: {msg}[/red]")
        raise typer.Exit(code=1)
    if not graph_path.is_file():
        err_console.print(f"[red]Error: Graph document not found: {graph_path}[/red]")
        raise typer.Exit(code=1)

    err_console.print(f"[cyan]Loading graph from:[/cyan] {graph_path}")
    try:
        return load_graph_from_toml(graph_path)
    except GraphineError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


@app.command()
def resolve(
    graph_path: Annotated[
        Path | None,
        typer.Argument(help="Path to TOML graph document (defaults to the configured graph)"),
    ] = None,
    *,
    start: Annotated[
        str,
        typer.Option("-s", "--start", help="Identifier of the vertex to resolve"),
    ],
    on_cycle: Annotated[
        CyclePolicy | None,
        typer.Option("--on-cycle", help="What to do when a cycle is found"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("-o", "--output", help="Path to output TOML file"),
    ] = None,
) -> None:
    """Resolve the dependency order of a vertex."""
    config = _load_config()
    graph = _load_graph(graph_path, config)
    policy = on_cycle if on_cycle is not None else config.on_cycle
    logger.debug(f"Cycle policy: {policy}")

    if start not in graph:
        err_console.print(f"[red]Error: Unknown vertex '{escape(start)}'[/red]")
        raise typer.Exit(code=1)

    try:
        order = graph.resolve(start, on_cycle=policy)
    except CycleDetectedError as e:
        err_console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    table = Table(show_header=True, header_style="bold cyan", box=None)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Vertex")
    for position, vertex_id in enumerate(order, start=1):
        table.add_row(str(position), escape(vertex_id))
    out_console.print(
        Panel(table, title=f"[bold]Resolution order: {escape(start)}[/bold]", border_style="cyan"),
    )

    output_path = output if output is not None else config.output
    if output_path is not None:
        err_console.print(f"[cyan]Exporting order to:[/cyan] {output_path}")
        export_order_to_toml(start, order, output_path)

    err_console.print("[green]✓ Resolution complete[/green]")


@app.command()
def show(
    graph_path: Annotated[
        Path | None,
        typer.Argument(help="Path to TOML graph document (defaults to the configured graph)"),
    ] = None,
) -> None:
    """Show the vertices of a graph and their connections."""
    config = _load_config()
    graph = _load_graph(graph_path, config)

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Vertex", style="bold")
    table.add_column("Depends on")
    for vertex_id, vertex in graph.vertices.items():
        table.add_row(escape(vertex_id), escape(", ".join(vertex.connection_ids)) or "[dim]-[/dim]")

    out_console.print(
        Panel(
            table,
            title="[bold]Graph[/bold]",
            subtitle=f"[dim]{len(graph)} vertices[/dim]",
            border_style="cyan",
        ),
    )


def main() -> None:
    app()
