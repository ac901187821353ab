"""Rendering of DOT source with GraphViz."""

from dotgraph.render.renderer import ENGINES, FORMATS, Renderer, RenderError

__all__ = ["ENGINES", "FORMATS", "RenderError", "Renderer"]
