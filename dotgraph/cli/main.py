"""CLI interface for dotgraph."""

import logging

import click

from dotgraph.cli.commands.explore import explore
from dotgraph.cli.commands.path import path
from dotgraph.cli.commands.render import render
from dotgraph.version import DOTGRAPH_VERSION


@click.group()
@click.version_option(version=DOTGRAPH_VERSION, prog_name="dotgraph")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """dotgraph - Build, explore and render directed graphs."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


cli.add_command(explore)
cli.add_command(path)
cli.add_command(render)


if __name__ == "__main__":
    cli()
