import os
import shutil

import networkx as nx
import pytest

from graph import Graph
from utils.parser import load_clq_file
from utils.results_store import YamlResultsStore

RESOURCES_DIRECTORY = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "resources")
GRAPH_DIRECTORY = os.path.join(RESOURCES_DIRECTORY, "graphs")


def load_graph(name):
    return load_clq_file(os.path.join(GRAPH_DIRECTORY, name))


def random_graphs(count, order, probability):
    """Seeded G(n, p) graphs, reproducible from one run to the next."""
    return [Graph.from_networkx(nx.gnp_random_graph(order, probability, seed=seed)) for seed in range(count)]


@pytest.fixture
def triangle_pendant():
    # Triangle 0-1-2 with vertex 3 hanging from 2
    return Graph.from_edges(4, [(0, 1), (1, 2), (2, 0), (2, 3)])


@pytest.fixture
def cycle5():
    return load_graph("test_cycle_5.clq")


@pytest.fixture
def store(tmp_path):
    graph_data = tmp_path / "graph_data.yml"
    time_result = tmp_path / "time_result.yml"
    shutil.copy(os.path.join(RESOURCES_DIRECTORY, "graph_data.yml"), graph_data)
    shutil.copy(os.path.join(RESOURCES_DIRECTORY, "time_result.yml"), time_result)
    return YamlResultsStore(str(graph_data), str(time_result))
