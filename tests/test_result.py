import dataclasses

import pytest

from clock import Clock
from result import MVCResult, record_result, run_algorithm
from solvers.algorithms import Algorithm
from tests.conftest import load_graph
from utils.results_store import StoreIOError


class FixedOptimum:
    def __init__(self, value):
        self.value = value

    def get_optimal_value(self, graph_id):
        return self.value


class BrokenLookup:
    def get_optimal_value(self, graph_id):
        raise StoreIOError("unreadable")


def test_create_sorts_the_witness():
    result = MVCResult.create("g", 3, [4, 0, 2], 1.5, False, False)
    assert result.witness == (0, 2, 4)
    assert result.is_optimal is None


def test_result_is_frozen():
    result = MVCResult.create("g", 3, [0, 2, 4], 1.5, False, False)
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.value = 2


def test_optimality_annotation():
    assert MVCResult.create("g", 3, [0, 1, 2], 0.1, False, False, FixedOptimum(3)).is_optimal is True
    assert MVCResult.create("g", 4, [0, 1, 2, 3], 0.1, True, False, FixedOptimum(3)).is_optimal is False
    assert MVCResult.create("g", 3, [0, 1, 2], 0.1, False, False, FixedOptimum(None)).is_optimal is None
    # Clique sizes are never compared with vertex cover optima
    assert MVCResult.create("g", 3, [0, 1, 2], 0.1, False, True, FixedOptimum(3)).is_optimal is None


def test_lookup_errors_are_not_hidden():
    with pytest.raises(StoreIOError):
        MVCResult.create("g", 3, [0, 1, 2], 0.1, False, False, BrokenLookup())


def test_str():
    text = str(MVCResult.create("test.clq", 3, [0, 2, 4], 0.0125, False, False, FixedOptimum(3)))
    assert "Graph: test.clq" in text
    assert "Minimum vertex cover: 3" in text
    assert "Vertices: [0, 2, 4]" in text
    assert "Time: 12.500 ms" in text
    assert "Time limit reached: False" in text
    assert "Optimal: yes" in text

    text = str(MVCResult.create("test.clq", 2, [0, 1], 0.5, False, True))
    assert "Maximum clique: 2" in text
    assert "Optimal: unknown" in text


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_run_algorithm(algorithm, store):
    result, clock = run_algorithm("triangle_pendant.clq", load_graph("triangle_pendant.clq"), algorithm,
                                  optimal_lookup=store)
    assert result.value == 2
    assert len(result.witness) == 2
    assert not result.is_time_limit
    assert result.is_optimal is True
    assert clock.is_stopped()
    assert result.elapsed == clock.elapsed()


def test_run_algorithm_on_complement():
    result, _ = run_algorithm("queen5_5.clq", load_graph("queen5_5.clq"), Algorithm.BRANCH_AND_BOUND,
                              on_complement=True, time_limit=600)
    assert result.value == 5
    assert result.is_complement
    assert result.is_optimal is None


def test_run_algorithm_deadline():
    result, _ = run_algorithm("welsh.clq", load_graph("welsh.clq"), Algorithm.BRANCH_AND_BOUND, time_limit=0)
    assert result.is_time_limit
    assert result.value == 11


def test_record_result(store):
    result = MVCResult.create("test.clq", 3, [0, 2, 4], 0.5, False, False)
    assert record_result(store, result, "bnb", "from a test")
    runs = store.get_time_data("test.clq")
    assert len(runs) == 1
    assert runs[0].mvc_val == 3
    assert runs[0].algorithm == "bnb"
    assert runs[0].comment == "from a test"


def test_record_result_for_unknown_graph(store):
    result = MVCResult.create("unknown.clq", 3, [0, 2, 4], 0.5, False, False)
    assert not record_result(store, result, "bnb")


class StepTimer:
    """Each reading is one second after the previous one."""

    def __init__(self):
        self.now = -1.0

    def __call__(self):
        self.now += 1.0
        return self.now


def test_search_finishing_after_the_deadline_is_not_time_limited(triangle_pendant):
    # Readings: 0 at creation, 1 and 2 for the checks before sizes 1 and 2, 3 when stopped
    clock = Clock(2.5, StepTimer())
    result, _ = run_algorithm("triangle_pendant.clq", triangle_pendant, Algorithm.NAIVE_SEARCH, clock=clock)
    assert result.elapsed > clock.deadline
    assert not result.is_time_limit
    assert result.value == 2
    assert result.witness == (0, 2)
