"""Version information for dotgraph."""

DOTGRAPH_VERSION_MAJOR = 1
DOTGRAPH_VERSION_MINOR = 0
DOTGRAPH_VERSION_PATCH = 0
DOTGRAPH_VERSION = f"{DOTGRAPH_VERSION_MAJOR}.{DOTGRAPH_VERSION_MINOR}.{DOTGRAPH_VERSION_PATCH}"

# DOT dialect emitted by the serializer
DOT_LANGUAGE = "digraph"


def get_version_string() -> str:
    """Get full version string."""
    return f"dotgraph {DOTGRAPH_VERSION} (GraphViz {DOT_LANGUAGE} output)"


def get_version_info() -> dict:
    """Get version information as dictionary."""
    return {
        "dotgraph": {
            "major": DOTGRAPH_VERSION_MAJOR,
            "minor": DOTGRAPH_VERSION_MINOR,
            "patch": DOTGRAPH_VERSION_PATCH,
            "version": DOTGRAPH_VERSION,
        },
        "output": {"language": DOT_LANGUAGE},
    }
