import os
from dataclasses import asdict, dataclass
from datetime import datetime

import yaml

from clock import format_duration


class StoreError(Exception):
    pass


class GraphNotFoundError(StoreError):
    pass


class StoreIOError(StoreError):
    pass


class StoreFormatError(StoreError):
    pass


@dataclass
class GraphInfo:
    """Known facts about a benchmark graph. val == 0 means the optimum was not filled in yet."""
    id: str
    format: str
    order: int
    size: int
    val: int = 0


@dataclass
class RunRecord:
    """One computation of the MVC for a graph."""
    date: str
    mvc_val: int
    time: str
    is_time_limit: bool
    algorithm: str
    comment: str
    seconds: float = 0.0


class YamlResultsStore:
    """
    Two YAML files:
      - graph data: a list of GraphInfo mappings, with the known optimal MVC value per graph
      - time results: a mapping graph id -> list of RunRecord mappings
    """

    def __init__(self, graph_data_path, time_result_path):
        self.graph_data_path = graph_data_path
        self.time_result_path = time_result_path

    # ---- graph data ----

    def graph_infos(self):
        data = self._read(self.graph_data_path, default=[])
        if not isinstance(data, list):
            raise StoreFormatError(f"{self.graph_data_path!r} should contain a list of graphs")
        try:
            return [GraphInfo(**entry) for entry in data]
        except TypeError as e:
            raise StoreFormatError(f"Badly formatted graph entry in {self.graph_data_path!r}: {e}") from e

    def graph_ids(self):
        return [info.id for info in self.graph_infos()]

    def get_graph_info(self, graph_id):
        for info in self.graph_infos():
            if info.id == graph_id:
                return info
        raise GraphNotFoundError(f"Graph {graph_id!r} not found in {self.graph_data_path!r}")

    def get_optimal_value(self, graph_id):
        """
        Known optimal MVC value of the graph, or None if the graph is unknown or its value was not filled in.
        """
        for info in self.graph_infos():
            if info.id == graph_id:
                return info.val if info.val else None
        return None

    def is_optimal_value(self, graph_id, val):
        optimal = self.get_optimal_value(graph_id)
        if optimal is None:
            return None
        return optimal == val

    def update_mvc_value(self, graph_id, mvc_val):
        infos = self.graph_infos()
        for info in infos:
            if info.id == graph_id:
                info.val = mvc_val
                break
        else:
            raise GraphNotFoundError(
                f"Graph {graph_id!r} not found in {self.graph_data_path!r} to store the mvc {mvc_val}")
        self._write(self.graph_data_path, [asdict(info) for info in infos])

    def add_graph(self, graph_id, graph_format, graph):
        """
        Register a graph. Its optimal value starts at 0 and has to be filled in with update_mvc_value.
        Returns False if the graph id is already registered.
        """
        infos = self.graph_infos() if os.path.exists(self.graph_data_path) else []
        if any(info.id == graph_id for info in infos):
            return False

        infos.append(GraphInfo(graph_id, graph_format, graph.vertex_count(), graph.edge_count()))
        self._write(self.graph_data_path, [asdict(info) for info in infos])

        # A registered graph also gets an empty run history
        history = self._time_map() if os.path.exists(self.time_result_path) else {}
        history.setdefault(graph_id, [])
        self._write(self.time_result_path, history)
        return True

    # ---- time results ----

    def _time_map(self):
        data = self._read(self.time_result_path, default={})
        if not isinstance(data, dict):
            raise StoreFormatError(f"{self.time_result_path!r} should contain a mapping graph id -> runs")
        return data

    def add_time(self, graph_id, mvc_val, elapsed, is_time_limit, algorithm, comment=""):
        history = self._time_map()
        if graph_id not in history:
            raise GraphNotFoundError(f"Graph {graph_id!r} not found in {self.time_result_path!r} to store the time")

        runs = history[graph_id] or []
        if not isinstance(runs, list):
            raise StoreFormatError(f"The runs of {graph_id!r} should be a list")

        record = RunRecord(
            date=datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
            mvc_val=mvc_val,
            time=format_duration(elapsed),
            is_time_limit=is_time_limit,
            algorithm=algorithm,
            comment=comment,
            seconds=round(elapsed, 6),
        )
        runs.append(asdict(record))
        history[graph_id] = runs
        self._write(self.time_result_path, history)
        return record

    def get_time_data(self, graph_id):
        history = self._time_map()
        if graph_id not in history:
            raise GraphNotFoundError(f"Graph {graph_id!r} not found in {self.time_result_path!r}")
        try:
            return [RunRecord(**run) for run in history[graph_id] or []]
        except TypeError as e:
            raise StoreFormatError(f"Badly formatted run for {graph_id!r}: {e}") from e

    # ---- file access ----

    def _read(self, path, default):
        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise StoreIOError(f"Unable to open file {path!r}: {e}") from e
        except yaml.YAMLError as e:
            raise StoreFormatError(f"Error parsing YAML file {path!r}: {e}") from e
        return default if data is None else data

    def _write(self, path, data):
        try:
            with open(path, "w") as f:
                yaml.safe_dump(data, f, sort_keys=False)
        except OSError as e:
            raise StoreIOError(f"Unable to write file {path!r}: {e}") from e
