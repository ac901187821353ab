"""Rendering DOT text with the GraphViz executables."""

from __future__ import annotations

import logging
from pathlib import Path

import graphviz

logger = logging.getLogger(__name__)

FORMATS = ("svg", "png", "pdf", "dot")
ENGINES = ("dot", "neato", "fdp", "circo")


class RenderError(Exception):
    """GraphViz could not render the given source."""


class Renderer:
    """Pipes DOT source through a GraphViz layout engine."""

    def __init__(self, format: str = "svg", engine: str = "dot") -> None:
        self.format = format
        self.engine = engine

    def output_path(self, output: str | Path) -> Path:
        """Output file for ``output``, with the format as its suffix.

        A suffix naming a known format is replaced; any other suffix is kept.
        """
        path = Path(output)
        if path.suffix[1:] in FORMATS:
            path = path.with_suffix("")
        return Path(f"{path}.{self.format}")

    def _source(self, source: str) -> graphviz.Source:
        return graphviz.Source(source, format=self.format, engine=self.engine)

    def render(self, source: str, output: str | Path, show: bool = False) -> Path:
        """Render ``source`` to a file and optionally open it in a viewer."""
        outfile = self.output_path(output)
        logger.debug("Rendering %s with %s", outfile, self.engine)
        try:
            result = self._source(source).render(outfile=outfile, cleanup=True)
        except graphviz.ExecutableNotFound as e:
            msg = f"GraphViz executable not found: {e}"
            raise RenderError(msg) from e
        except graphviz.CalledProcessError as e:
            msg = f"GraphViz failed to render {outfile}: {e}"
            raise RenderError(msg) from e

        path = Path(result)
        if show:
            self.show(path)
        return path

    def pipe(self, source: str) -> bytes:
        """Render ``source`` and return the output bytes."""
        try:
            return self._source(source).pipe()
        except graphviz.ExecutableNotFound as e:
            msg = f"GraphViz executable not found: {e}"
            raise RenderError(msg) from e
        except graphviz.CalledProcessError as e:
            msg = f"GraphViz failed to render: {e}"
            raise RenderError(msg) from e

    def show(self, path: str | Path) -> None:
        """Open a rendered file in the platform viewer without waiting."""
        logger.debug("Opening %s", path)
        graphviz.view(str(path), quiet=True)
