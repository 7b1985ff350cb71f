import logging
import sys

from clock import Clock
from logger import Logger
from strategies.bounding import BoundingStrategy, CombinedBound
from utils.validator import is_clique, is_vertex_cover

logger = Logger("BranchAndBoundSolver")


class BranchAndBoundVertexCoverSolver:
    def __init__(self, graph, bounding_strategy: BoundingStrategy = None, clock: Clock = None, time_limit=3600):
        self.graph = graph
        self.bounding_strategy = bounding_strategy if bounding_strategy is not None else CombinedBound()
        self.clock = clock if clock is not None else Clock(time_limit)
        self.n = graph.vertex_count()

        # Set once a branch was cut short by the deadline: the answer is then not proven optimal
        self.timed_out = False
        self.nodes_expanded = 0
        self.pruned = 0

    def solve(self):
        """
        Solve the Minimum Vertex Cover problem using branch and bound with the chosen
        bounding strategy. Returns (size, sorted list of the cover's vertices).
        """
        # Each level of the search removes at least one vertex
        needed = 2 * self.n + 1000
        if sys.getrecursionlimit() < needed:
            sys.setrecursionlimit(needed)

        # Trivial incumbent: all vertices
        upper_bound_vc = self.graph.vertices()
        size, cover = self._branch(self.graph, self.n, upper_bound_vc, [])
        cover = sorted(cover)

        logger.log(f"Search finished: value={size}, nodes={self.nodes_expanded}, pruned={self.pruned}, "
                   f"timed_out={self.timed_out}", level=logging.DEBUG)

        if not self.timed_out:
            valid = is_vertex_cover(self.graph, cover) and len(cover) == size
            if not valid:
                logger.log(f"Branch and bound returned an invalid vertex cover of size {size}: {cover}",
                           level=logging.ERROR)
            assert valid, "branch and bound result is not a vertex cover of the input graph"

        return size, cover

    def _branch(self, subgraph, upper_bound, upper_bound_vc, vertex_cover):
        """
        Recursive function to perform the branch and bound.

        :param subgraph: Graph of the edges still uncovered. Owned by this call.
        :param upper_bound: Size of the best cover known so far.
        :param upper_bound_vc: The best cover known so far.
        :param vertex_cover: Vertices chosen along the current branch.
        :return: (size, cover) of the best cover found in this subtree, or the incumbent.
        """
        if self.clock.is_time_up():
            if not self.timed_out:
                logger.log("Time limit reached, stopping search.", level=logging.WARNING)
            self.timed_out = True
            return upper_bound, upper_bound_vc

        # If no edge is left, the vertices chosen so far cover the whole graph
        if subgraph.edge_count() == 0:
            return len(vertex_cover), vertex_cover

        self.nodes_expanded += 1
        if self.bounding_strategy.should_prune(
            current_set_size=len(vertex_cover),
            best_size=upper_bound,
            graph=subgraph,
            clock=self.clock
        ):
            self.pruned += 1
            return upper_bound, upper_bound_vc

        with self.clock.timed("max_deg"):
            v, _ = subgraph.vertex_with_max_degree()
        neighbors = subgraph.neighbors(v)

        # ----- CASE 1: 'v' is not in the cover, so all of its neighbors are -----
        with self.clock.timed("copy"):
            subgraph_case1 = subgraph.copy()
        subgraph_case1.remove_vertex(v)
        for w in neighbors:
            subgraph_case1.remove_vertex(w)
        res_case1 = self._branch(subgraph_case1, upper_bound, upper_bound_vc,
                                 vertex_cover + sorted(neighbors))

        # ----- CASE 2: 'v' is in the cover -----
        with self.clock.timed("copy"):
            subgraph_case2 = subgraph.copy()
        subgraph_case2.remove_vertex(v)
        if res_case1[0] <= upper_bound:
            # Case 1 may have improved the incumbent: search case 2 against it
            res_case2 = self._branch(subgraph_case2, res_case1[0], res_case1[1], vertex_cover + [v])
        else:
            res_case2 = self._branch(subgraph_case2, upper_bound, upper_bound_vc, vertex_cover + [v])

        if res_case1[0] < res_case2[0]:
            return res_case1
        return res_case2


def solve(graph, clock, bounding_strategy=None):
    """
    Minimum vertex cover of 'graph' within the clock's deadline. Returns (size, cover).
    """
    solver = BranchAndBoundVertexCoverSolver(graph, bounding_strategy, clock)
    return solver.solve()


def solve_clique(graph, clock, bounding_strategy=None):
    """
    Maximum clique through the complement graph.

    A clique here is an independent set of the complement, and the vertices left out of a
    minimum vertex cover of the complement form a maximum independent set of it.
    Returns (size, sorted clique members).
    """
    complement = graph.complement()
    logger.log(f"Complement graph: order={complement.vertex_count()}, size={complement.edge_count()}, "
               f"density={complement.density():.4f}", level=logging.DEBUG)

    solver = BranchAndBoundVertexCoverSolver(complement, bounding_strategy, clock)
    mvc_size, mvc = solver.solve()
    in_cover = set(mvc)
    clique = sorted(v for v in complement.vertices() if v not in in_cover)

    if not solver.timed_out:
        valid = is_clique(graph, clique)
        if not valid:
            logger.log(f"Clique derived from the complement cover is not a clique: {clique}", level=logging.ERROR)
        assert valid, "complement of the vertex cover is not a clique"

    # |V| - |MVC| = |MIS of the complement| = |max clique|
    return graph.vertex_count() - mvc_size, clique


def solve_independent_set(graph, clock, bounding_strategy=None):
    """
    Maximum independent set: the vertices outside a minimum vertex cover. Returns (size, members).
    """
    mvc_size, mvc = solve(graph, clock, bounding_strategy)
    in_cover = set(mvc)
    return graph.vertex_count() - mvc_size, sorted(v for v in graph.vertices() if v not in in_cover)
