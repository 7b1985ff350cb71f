import os

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import networkx as nx


def draw_vertex_set(graph, vertices=None, title: str = "Graph", filePath: str = "graph.png"):
    """
    Draw the graph with a vertex set (cover or clique) highlighted in red.

    Args:
        graph: Graph to draw
        vertices: Vertices to highlight (0-based)
        title: Title for the figure
        filePath: Output file path for the image
    """
    highlighted = set(vertices or [])
    G = graph.to_networkx()

    num_nodes = G.number_of_nodes()
    plt.figure(figsize=(min(15, num_nodes // 10 + 5), min(15, num_nodes // 10 + 5)))

    # Choose a layout dynamically based on graph size
    if num_nodes > 50:
        pos = nx.spring_layout(G, k=3 / (num_nodes ** 0.5), seed=42)
    else:
        pos = nx.spring_layout(G, seed=42)

    node_size = max(50, 800 - num_nodes * 2)
    font_size = max(6, 12 - num_nodes // 50)

    # Vertices are shown 1-based, as in the DIMACS files
    labels = {v: v + 1 for v in G.nodes}
    colorList = ["red" if v in highlighted else "lightgray" for v in G.nodes]
    nx.draw(G, pos, labels=labels, node_color=colorList, edge_color="gray",
            node_size=node_size, font_size=font_size, alpha=0.9)
    plt.title(title)

    directory = os.path.dirname(filePath)
    if directory and not os.path.exists(directory):
        os.makedirs(directory)

    plt.savefig(filePath, format="png", bbox_inches="tight")
    plt.close()
