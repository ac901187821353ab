"""Example demonstrating the graph builder API."""

from dotgraph import Graph


def main() -> None:
    # Example 1: Simple path
    print("=== Example 1: Simple Path ===")

    graph = Graph.digraph("pipeline")
    graph.add_path("fetch", "parse", "store").where(color="blue")
    print(graph.serialize())

    # Example 2: Ranked layers
    print("=== Example 2: Ranks ===")

    layered = Graph(rankdir="LR")
    layered.node("request", {"rank": 0, "shape": "box"})
    layered.node("worker-1", {"rank": 1})
    layered.node("worker-2", {"rank": 1})
    layered.node("response", {"rank": 2, "shape": "box"})
    layered.add_path("request", "worker-1", "response")
    layered.add_path("request", "worker-2", "response").where(style="dashed")
    print(layered.serialize())

    # Example 3: Templates applied when serializing
    print("=== Example 3: Templates ===")

    numbers = Graph()
    numbers.add_path(1, 2, 3, 4, 1)
    numbers.node_if(lambda v: v % 2 == 0, {"color": "red", "label": "even\\N" + "number"})
    numbers.edge_if(lambda a, b: b < a, {"style": "dotted", "constraint": False})
    print(numbers.serialize())


if __name__ == "__main__":
    main()
