from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor


def deg_lb(graph):
    """
    Degree-based lower bound on the size of a minimum vertex cover.

    Vertices are taken by decreasing degree until the sum of their degrees reaches the
    number of edges: a vertex covers at most its degree's worth of edges, so any cover
    needs at least that many vertices. Degrees are those of the graph passed in; removing
    a selected vertex does not lower the degree of the ones picked after it.
    """
    size = graph.edge_count()
    if size == 0:
        return 0

    ordered = sorted(graph.vertices(), key=lambda v: (-graph.degree(v), v))
    selected = 0
    sum_degrees = 0
    for v in ordered:
        if sum_degrees >= size:
            break
        sum_degrees += graph.degree(v)
        selected += 1

    return selected


def welsh_powell(graph):
    """
    Greedy colouring with vertices visited by decreasing degree (ties: smaller id first).
    Each vertex takes the lowest colour none of its coloured neighbors uses.

    :return: list where item i is the number of vertices with colour i.
    """
    color_set = []
    colors = {}
    ordered = sorted(graph.vertices(), key=lambda v: (-graph.degree(v), v))
    for vertex in ordered:
        used = {colors[w] for w in graph.neighbors(vertex) if w in colors}
        color = 0
        while color in used:
            color += 1
        if color == len(color_set):
            color_set.append(0)
        color_set[color] += 1
        colors[vertex] = color
    return color_set


def clq_lb(graph):
    """
    Clique-based lower bound.

    A colour class of the complement is an independent set there, so a clique here.
    A clique of k vertices needs at least k - 1 of them in any vertex cover.
    """
    color_set = welsh_powell(graph.complement())
    return sum(count - 1 for count in color_set)


class BoundingStrategy(ABC):
    @abstractmethod
    def lower_bound(self, graph, clock=None):
        """
        Return a lower bound on the number of vertices still needed to cover every edge of `graph`.
        If a clock is given, the time spent is attributed to the estimator's subroutine.
        """
        pass

    def should_prune(self, current_set_size, best_size, graph, clock=None):
        """
        Decide whether to prune the current branch, given:
          - current_set_size: size of the partial vertex cover
          - best_size: size of the best cover known so far
          - graph: the subgraph of edges still uncovered
        Return True if this branch cannot beat the best known cover.
        """
        return current_set_size + self.lower_bound(graph, clock) >= best_size


class NoBound(BoundingStrategy):
    """
    Only prunes branches that already use as many vertices as the best known cover.
    """

    def lower_bound(self, graph, clock=None):
        return 0


class DegreeBound(BoundingStrategy):
    def lower_bound(self, graph, clock=None):
        if clock is None:
            return deg_lb(graph)
        with clock.timed("deg_lb"):
            return deg_lb(graph)


class CliqueBound(BoundingStrategy):
    def lower_bound(self, graph, clock=None):
        if clock is None:
            return clq_lb(graph)
        with clock.timed("clq_lb"):
            return clq_lb(graph)


class CombinedBound(BoundingStrategy):
    """
    max(deg_lb, clq_lb).

    With parallel=True both estimators run on their own worker thread, each on a private
    copy of the subgraph, and are joined before taking the maximum.
    """

    def __init__(self, parallel=False):
        self.parallel = parallel
        self.degree = DegreeBound()
        self.clique = CliqueBound()

    def lower_bound(self, graph, clock=None):
        if not self.parallel:
            return max(self.degree.lower_bound(graph, clock), self.clique.lower_bound(graph, clock))

        if clock is not None:
            clock.enter("lower_bounds")
        try:
            with ThreadPoolExecutor(max_workers=2) as executor:
                deg_future = executor.submit(deg_lb, graph.copy())
                clq_future = executor.submit(clq_lb, graph.copy())
                return max(deg_future.result(), clq_future.result())
        finally:
            if clock is not None:
                clock.exit("lower_bounds")
