"""Build order of a small package tree.

This example builds a graph of packages, where an edge "a -> b" means
"a depends on b", and prints the order in which to build them.
"""

import graphine as gr

graph = gr.Graph()

graph.add_vertex("app", {"kind": "binary"})
graph.add_edge("app", "web")
graph.add_edge("app", "db")
graph.add_edge("web", "http")
graph.add_edge("web", "templates")
graph.add_edge("db", "pool")
graph.add_edge("pool", "http")

if __name__ == "__main__":
    for step, package in enumerate(graph.resolve("app"), start=1):
        print(f"{step}. {package}")  # noqa: T201

    # A dependency back onto the active path is a cycle
    graph.add_edge("http", "app")
    try:
        graph.resolve("app")
    except gr.CycleDetectedError as e:
        print(e)  # noqa: T201

    # Skipping the cyclic edge still yields a best-effort order
    print(graph.resolve("app", on_cycle=gr.CyclePolicy.SKIP))  # noqa: T201
