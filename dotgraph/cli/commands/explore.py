"""CLI command for exploring Python objects."""

from __future__ import annotations

import importlib
from typing import Any

import click
from rich.markup import escape

from dotgraph.cli.commands.render import console, output_options, write_source
from dotgraph.explorer import RELATIONS_BY_NAME, Explorer, to_graph
from dotgraph.graph import Graph


def resolve_target(target: str) -> Any:
    """Import ``module`` or ``module:attribute.path`` and return the object."""
    module_name, _, attribute_path = target.partition(":")
    value: Any = importlib.import_module(module_name)
    if attribute_path:
        for name in attribute_path.split("."):
            value = getattr(value, name)
    return value


@click.command()
@click.argument("target")
@click.option(
    "--relation",
    "-r",
    "relations",
    multiple=True,
    type=click.Choice(list(RELATIONS_BY_NAME)),
    help="Relation to follow (repeatable, default: all)",
)
@click.option("--skip", multiple=True, help="Relation to leave out of the graph")
@output_options
def explore(
    target: str,
    relations: tuple[str, ...],
    skip: tuple[str, ...],
    output: str | None,
    format: str,
    engine: str,
    pretty: bool,
    show: bool,
) -> None:
    """Explore a Python object (module or module:attribute) and graph it."""
    try:
        value = resolve_target(target)
        explorer = Explorer([RELATIONS_BY_NAME[name] for name in relations] if relations else None)
        exploration = explorer.explore(value)
        graph = to_graph(exploration, Graph(label=target), skip=skip)
    except (ImportError, AttributeError, ValueError) as e:
        console.print(f"[red]❌ Error: {escape(str(e))}[/red]")
        raise click.Abort from None

    default_output = target.replace(":", "_").replace(".", "_")
    path = write_source(graph.serialize(), output, format, engine, show, pretty, default_output)
    if path is not None:
        _display_graph_statistics(graph)


def _display_graph_statistics(graph: Graph) -> None:
    """Display graph statistics."""
    stats = graph.summary()
    click.echo("\n📊 Graph Statistics:")
    click.echo(f"  Nodes: {stats['nodes']}")
    click.echo(f"  Edges: {stats['edges']}")
    click.echo(f"  Ranks: {stats['ranks']}")
