import itertools
import logging

from clock import Clock
from logger import Logger

logger = Logger("NaiveSolver")


class NaiveVertexCoverSolver:
    """
    Brute force: tries every subset of vertices by increasing size and returns the first
    vertex cover found, which is therefore minimum. Only usable on small graphs.
    """

    def __init__(self, graph, clock: Clock = None, time_limit=3600):
        self.graph = graph
        self.clock = clock if clock is not None else Clock(time_limit)
        self.timed_out = False

    def solve(self):
        vertices = sorted(self.graph.vertices())
        edges = self.graph.edges()

        # If there are no edges, the empty set is the minimum vertex cover
        if not edges:
            return 0, []

        for k in range(1, len(vertices) + 1):
            if self.clock.is_time_up():
                logger.log(f"Time limit reached while trying covers of size {k}.", level=logging.WARNING)
                self.timed_out = True
                return len(vertices), vertices
            for candidate in itertools.combinations(vertices, k):
                candidate_set = set(candidate)
                if all(u in candidate_set or v in candidate_set for u, v in edges):
                    return k, list(candidate)

        return len(vertices), vertices


def naive_search(graph, clock):
    return NaiveVertexCoverSolver(graph, clock).solve()
