from enum import Enum

from solvers.bnb_solver import solve as branch_and_bound, solve_clique
from solvers.naive_solver import naive_search
from solvers.ortools_solver import cp_sat_search


class Algorithm(Enum):
    """
    Supported search strategies. Every member solves with the same contract:
    solve(graph, clock) -> (value, cover).
    """
    NAIVE_SEARCH = "naive"
    BRANCH_AND_BOUND = "bnb"
    CP_SAT = "cpsat"

    @classmethod
    def from_name(cls, name):
        for algorithm in cls:
            if algorithm.value == name:
                return algorithm
        raise ValueError(f"Unknown algorithm {name!r}, expected one of {[a.value for a in cls]}")

    def solve(self, graph, clock, bounding_strategy=None):
        """bounding_strategy only applies to branch and bound."""
        if self is Algorithm.NAIVE_SEARCH:
            return naive_search(graph, clock)
        if self is Algorithm.CP_SAT:
            return cp_sat_search(graph, clock)
        return branch_and_bound(graph, clock, bounding_strategy)

    def solve_clique(self, graph, clock, bounding_strategy=None):
        """
        Maximum clique of 'graph' through a minimum vertex cover of its complement.
        Returns (size, sorted clique members).
        """
        if self is Algorithm.BRANCH_AND_BOUND:
            return solve_clique(graph, clock, bounding_strategy)
        complement = graph.complement()
        size, cover = self.solve(complement, clock)
        in_cover = set(cover)
        return graph.vertex_count() - size, sorted(v for v in complement.vertices() if v not in in_cover)
