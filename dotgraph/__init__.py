"""dotgraph - Build directed graphs of Python values and serialize them to DOT."""

from dotgraph.explorer import Exploration, Explorer, explore, to_graph
from dotgraph.graph import (
    DuplicateNodeError,
    Graph,
    GraphAttributes,
    InvalidGraphOptionError,
    Node,
    Rank,
    autolabel,
)
from dotgraph.render import Renderer, RenderError
from dotgraph.version import (
    DOTGRAPH_VERSION,
    DOTGRAPH_VERSION_MAJOR,
    DOTGRAPH_VERSION_MINOR,
    DOTGRAPH_VERSION_PATCH,
    get_version_info,
    get_version_string,
)

__version__ = DOTGRAPH_VERSION
__all__ = [
    "DOTGRAPH_VERSION",
    "DOTGRAPH_VERSION_MAJOR",
    "DOTGRAPH_VERSION_MINOR",
    "DOTGRAPH_VERSION_PATCH",
    "DuplicateNodeError",
    "Exploration",
    "Explorer",
    "Graph",
    "GraphAttributes",
    "InvalidGraphOptionError",
    "Node",
    "Rank",
    "RenderError",
    "Renderer",
    "autolabel",
    "explore",
    "get_version_info",
    "get_version_string",
    "to_graph",
]
