import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from clock import Clock, format_duration
from logger import Logger
from utils.results_store import StoreError
from utils.validator import is_clique, is_vertex_cover

logger = Logger("Result")


@dataclass(frozen=True)
class MVCResult:
    """
    Outcome of one search.

    When is_complement is set, the search ran on the complement graph and value/witness
    describe a maximum clique of the original graph instead of a minimum vertex cover.
    """
    graph_id: str
    value: int
    witness: Tuple[int, ...]
    elapsed: float
    is_time_limit: bool
    is_complement: bool
    is_optimal: Optional[bool] = None

    @classmethod
    def create(cls, graph_id, value, witness, elapsed, is_time_limit, is_complement, optimal_lookup=None):
        """
        :param optimal_lookup: object with get_optimal_value(graph_id) -> Optional[int], e.g. a
            YamlResultsStore. Its errors are not caught here.
        """
        result = cls(graph_id, value, tuple(sorted(witness)), elapsed, is_time_limit, is_complement)
        if optimal_lookup is not None:
            result = result.with_optimality(optimal_lookup)
        return result

    def with_optimality(self, optimal_lookup):
        """
        Copy of the result annotated with whether its value is the known optimum.
        Clique results are left unannotated: the lookup holds vertex cover values.
        """
        if self.is_complement:
            return self
        optimal = optimal_lookup.get_optimal_value(self.graph_id)
        if optimal is None:
            return replace(self, is_optimal=None)
        return replace(self, is_optimal=optimal == self.value)

    def __str__(self):
        kind = "Maximum clique" if self.is_complement else "Minimum vertex cover"
        if self.is_optimal is None:
            optimal = "unknown"
        else:
            optimal = "yes" if self.is_optimal else "no"
        return (f"Graph: {self.graph_id}\n"
                f"{kind}: {self.value}\n"
                f"Vertices: {list(self.witness)}\n"
                f"Time: {format_duration(self.elapsed)}\n"
                f"Time limit reached: {self.is_time_limit}\n"
                f"Optimal: {optimal}")


def run_algorithm(graph_id, graph, algorithm, on_complement=False, time_limit=3600, optimal_lookup=None,
                  bounding_strategy=None, clock=None):
    """
    Run 'algorithm' (a solvers.algorithms.Algorithm) on the graph, or look for a maximum
    clique through the complement when on_complement is set.
    Returns (MVCResult, Clock); the clock keeps the per-subroutine timings.
    A given clock replaces the fresh Clock(time_limit).

    The result is flagged as time limited only when the search itself was cut short by a
    deadline check, not when it merely finished after the deadline.
    """
    if clock is None:
        clock = Clock(time_limit)
    logger.log(f"Running {algorithm.value} on {graph_id} (order={graph.vertex_count()}, "
               f"size={graph.edge_count()}, complement={on_complement})")

    if on_complement:
        value, witness = algorithm.solve_clique(graph, clock, bounding_strategy)
    else:
        value, witness = algorithm.solve(graph, clock, bounding_strategy)
    is_time_limit = clock.is_interrupted()
    clock.stop()

    if not is_time_limit:
        valid = is_clique(graph, witness) if on_complement else is_vertex_cover(graph, witness)
        if not valid or len(set(witness)) != value:
            logger.log(f"{algorithm.value} returned an invalid answer for {graph_id}: {value} {witness}",
                       level=logging.ERROR)
            raise AssertionError(f"{algorithm.value} returned an invalid answer for {graph_id}")

    result = MVCResult.create(graph_id, value, witness, clock.elapsed(), is_time_limit, on_complement,
                              optimal_lookup)
    logger.log(f"{graph_id}: value={result.value} in {format_duration(result.elapsed)} "
               f"(time limit reached: {result.is_time_limit})")
    return result, clock


def record_result(store, result, algorithm_name, comment=""):
    """
    Append the run to the store's history. A store failure is logged and reported as False:
    the result itself stays valid.
    """
    try:
        store.add_time(result.graph_id, result.value, result.elapsed, result.is_time_limit, algorithm_name, comment)
    except StoreError as e:
        logger.log(f"Could not record the run of {result.graph_id}: {e}", level=logging.ERROR)
        return False
    return True
