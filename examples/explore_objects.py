"""Example exploring Python objects and rendering the result."""

import sys

from dotgraph import Explorer, Graph, RenderError, to_graph
from dotgraph.explorer import BASE_OF, CLASS_OF, own_attribute_relation


class Node:
    def __init__(self, name: str) -> None:
        self.name = name
        self.next = None


def main() -> None:
    # Class hierarchy of bool
    print("=== Class Hierarchy ===")

    exploration = Explorer([CLASS_OF, BASE_OF]).explore(True)
    for node_id, value in exploration.nodes.items():
        print(f"{node_id}: {value!r}")
    print(exploration.edges)

    # A cyclic linked list is expanded once per value
    print("\n=== Cyclic Structure ===")

    first, second = Node("first"), Node("second")
    first.next, second.next = second, first
    exploration = Explorer([own_attribute_relation("next")]).explore(first)
    graph = to_graph(exploration, Graph(label="linked list"))
    print(graph.serialize())

    # Render with GraphViz when it is installed
    output = sys.argv[1] if len(sys.argv) > 1 else None
    if output:
        try:
            path = graph.render(output, format="svg")
            print(f"Rendered {path}")
        except RenderError as e:
            print(f"Rendering failed: {e}")


if __name__ == "__main__":
    main()
