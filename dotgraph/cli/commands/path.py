"""CLI command for building a simple path graph."""

from __future__ import annotations

import click

from dotgraph.cli.commands.render import output_options, write_source
from dotgraph.graph import Graph


@click.command()
@click.argument("values", nargs=-1, required=True)
@click.option("--label", default=None, help="Graph label")
@click.option(
    "--rankdir",
    type=click.Choice(["TB", "LR", "BT", "RL"]),
    default="TB",
    help="Layout direction",
)
@click.option("--edge-label", default=None, help="Label for every edge")
@output_options
def path(
    values: tuple[str, ...],
    label: str | None,
    rankdir: str,
    edge_label: str | None,
    output: str | None,
    format: str,
    engine: str,
    pretty: bool,
    show: bool,
) -> None:
    """Connect VALUES with a chain of edges and output the graph."""
    graph = Graph(label=label, rankdir=rankdir)
    edges = graph.add_path(*values)
    if edge_label is not None:
        edges.where(label=edge_label)
    write_source(graph.serialize(), output, format, engine, show, pretty, "path")
