"""Main entry point for dotgraph package."""

import sys


def main():
    """Main function for dotgraph."""
    from dotgraph.cli.main import cli

    try:
        return cli()
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
