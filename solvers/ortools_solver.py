from ortools.sat.python import cp_model

from clock import Clock
from graph import Graph


class ORToolsVertexCoverSolver:
    def __init__(self, graph: Graph):
        self.graph = graph
        self.vertices = sorted(graph.vertices())
        self.model = cp_model.CpModel()
        self.x_vars = {}
        self.is_optimal = False

    def build_model(self):
        """
        Build the CP-SAT model for the Minimum Vertex Cover problem:
          Minimize sum(x[v]) subject to: for each edge (u, v), x[u] + x[v] >= 1
        """
        # Create Boolean (0-1) decision variables x[v]
        self.x_vars = {v: self.model.NewBoolVar(f'x_{v}') for v in self.vertices}

        for u, v in self.graph.edges():
            self.model.Add(self.x_vars[u] + self.x_vars[v] >= 1)

        self.model.Minimize(sum(self.x_vars.values()))

    def solve(self, time_limit=None):
        """
        Solve the model, optionally with a time limit (in seconds).
        Returns a sorted list of the chosen vertices, or None if no cover was found in time.
        """
        solver = cp_model.CpSolver()

        if time_limit is not None:
            solver.parameters.max_time_in_seconds = time_limit

        status = solver.Solve(self.model)

        if status == cp_model.OPTIMAL or status == cp_model.FEASIBLE:
            self.is_optimal = status == cp_model.OPTIMAL
            return [v for v in self.vertices if solver.Value(self.x_vars[v]) == 1]
        return None


def cp_sat_search(graph, clock: Clock):
    """
    Vertex cover with CP-SAT within the clock's remaining time. Returns (size, cover);
    falls back to all vertices when the solver found nothing in time.
    """
    solver = ORToolsVertexCoverSolver(graph)
    solver.build_model()
    cover = solver.solve(clock.remaining())
    if not solver.is_optimal:
        # CP-SAT only stops short of optimality on its time limit
        clock.interrupt()
    if cover is None:
        cover = solver.vertices
    return len(cover), cover
