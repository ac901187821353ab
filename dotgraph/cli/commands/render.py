"""CLI command for rendering DOT files, plus the shared graph output helpers."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax

from dotgraph.render import ENGINES, FORMATS, Renderer, RenderError

console = Console()


def output_options(func):
    """Attach the output options shared by graph producing commands."""
    func = click.option("--show", is_flag=True, help="Open the rendered file in a viewer")(func)
    func = click.option("--pretty", is_flag=True, help="Syntax highlight printed DOT source")(func)
    func = click.option(
        "--engine",
        type=click.Choice(ENGINES),
        default="dot",
        help="GraphViz layout engine",
    )(func)
    func = click.option(
        "--format",
        "-f",
        type=click.Choice(FORMATS),
        default="dot",
        help="Output format",
    )(func)
    return click.option("--output", "-o", type=click.Path(), help="Output file path")(func)


def write_source(
    source: str,
    output: str | None,
    format: str,
    engine: str,
    show: bool,
    pretty: bool,
    default_output: str = "graph",
) -> Path | None:
    """Print or write DOT source, or render it with GraphViz.

    Returns the written file, if any. When GraphViz is missing the source is
    printed instead.
    """
    if format == "dot":
        if output:
            path = Path(output)
            path.write_text(source, encoding="utf-8")
            click.echo(f"DOT source written to {path}")
            return path
        _print_source(source, pretty)
        return None

    renderer = Renderer(format=format, engine=engine)
    try:
        path = renderer.render(source, output or default_output, show=show)
    except RenderError as e:
        console.print(f"[yellow]⚠️ {escape(str(e))}[/yellow]")
        _display_graphviz_installation_help()
        _print_source(source, pretty)
        return None
    click.echo(f"Graph rendered: {path}")
    return path


def _print_source(source: str, pretty: bool) -> None:
    if pretty:
        console.print(Syntax(source, "dot", theme="monokai", line_numbers=True))
    else:
        click.echo(source, nl=False)


def _display_graphviz_installation_help() -> None:
    """Display GraphViz installation instructions."""
    click.echo("\n💡 To render graphs, install Graphviz:")
    click.echo("  macOS: brew install graphviz")
    click.echo("  Ubuntu: apt-get install graphviz")
    click.echo("  Windows: https://graphviz.org/download/")
    click.echo("\nDOT source:")


@click.command()
@click.argument("dot_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", type=click.Path(), help="Output file path")
@click.option(
    "--format",
    "-f",
    type=click.Choice([f for f in FORMATS if f != "dot"]),
    default="svg",
    help="Output format",
)
@click.option(
    "--engine",
    type=click.Choice(ENGINES),
    default="dot",
    help="GraphViz layout engine",
)
@click.option("--show", is_flag=True, help="Open the rendered file in a viewer")
def render(dot_file: str, output: str | None, format: str, engine: str, show: bool) -> None:
    """Render a DOT file with GraphViz."""
    source = Path(dot_file).read_text(encoding="utf-8")
    renderer = Renderer(format=format, engine=engine)
    try:
        path = renderer.render(source, output or Path(dot_file).with_suffix(""), show=show)
    except RenderError as e:
        console.print(f"[red]❌ Error: {escape(str(e))}[/red]")
        raise click.Abort from None
    click.echo(f"Graph rendered: {path}")
