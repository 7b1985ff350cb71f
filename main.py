import argparse
import logging
import os
import sys

import logger as logger_module
from logger import Logger
from result import record_result, run_algorithm
from solvers.algorithms import Algorithm
from strategies.bounding import CombinedBound
from utils.parser import InvalidClqFileFormat, get_graph_files, load_clq_file
from utils.results_store import StoreError, YamlResultsStore
from utils.visualization import draw_vertex_set

# Constants
RESOURCES_DIRECTORY = os.path.join(os.path.dirname(os.path.abspath(__file__)), "resources")
GRAPH_DIRECTORY = os.path.join(RESOURCES_DIRECTORY, "graphs")
GRAPH_DATA_FILE = os.path.join(RESOURCES_DIRECTORY, "graph_data.yml")
TIME_RESULT_FILE = os.path.join(RESOURCES_DIRECTORY, "time_result.yml")
DEFAULT_TIME_LIMIT = 3600

logger = Logger("MinimumVertexCover")


def add_graphs(store, graph_directory):
    """
    Register every graph file of the directory in the store. Returns the number of graphs added.
    """
    added = 0
    for graph_file in get_graph_files(graph_directory):
        path = os.path.join(graph_directory, graph_file)
        try:
            graph = load_clq_file(path)
        except InvalidClqFileFormat as e:
            logger.log(f"Error while loading graph at {path}: {e}", level=logging.ERROR)
            continue
        logger.log(f"{graph_file}: {graph.vertex_count()} vertices, {graph.edge_count()} edges")
        if store.add_graph(graph_file, os.path.splitext(graph_file)[1].lstrip("."), graph):
            added += 1
    return added


def report_timings(clock):
    for name, (seconds, share) in sorted(clock.subroutine_report().items()):
        logger.log(f"Time spent in {name}: {share:.4f}% ({seconds:.4f} s)")


def build_parser():
    parser = argparse.ArgumentParser(description="Exact Minimum Vertex Cover / Maximum Clique solver")
    parser.add_argument("graph", nargs="?", help="Graph file name (looked up in --graphDir) or path")
    parser.add_argument("--algorithm", choices=[a.value for a in Algorithm], default=Algorithm.BRANCH_AND_BOUND.value,
                        help="Search algorithm")
    parser.add_argument("--complement", action="store_true",
                        help="Find a maximum clique by solving the MVC of the complement graph")
    parser.add_argument("--timeLimit", type=float, default=DEFAULT_TIME_LIMIT, help="Time Limit (seconds)")
    parser.add_argument("--parallelBounds", action="store_true",
                        help="Compute both lower bounds on worker threads")
    parser.add_argument("--graphDir", type=str, default=GRAPH_DIRECTORY, help="Directory of the graph files")
    parser.add_argument("--graphData", type=str, default=GRAPH_DATA_FILE, help="YAML file of known optimal values")
    parser.add_argument("--timeResults", type=str, default=TIME_RESULT_FILE, help="YAML file of recorded runs")
    parser.add_argument("--record", action="store_true", help="Append this run to the time results file")
    parser.add_argument("--comment", type=str, default="", help="Comment stored with the recorded run")
    parser.add_argument("--addGraphs", action="store_true", help="Register every graph of --graphDir in the store")
    parser.add_argument("--draw", type=str, help="Save a picture of the graph with the solution highlighted")
    parser.add_argument("--log", type=str, help="Log file name")
    parser.add_argument("--logLevel", type=str, help="Logging Level")
    return parser


def resolve_graph_path(graph, graph_directory):
    if os.path.exists(graph):
        return graph
    return os.path.join(graph_directory, graph)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log:
        logger.set_log_file(args.log)
    if args.logLevel:
        try:
            logger_module.set_level(args.logLevel)
        except ValueError as e:
            parser.error(str(e))

    store = YamlResultsStore(args.graphData, args.timeResults)

    if args.addGraphs:
        try:
            added = add_graphs(store, args.graphDir)
        except StoreError as e:
            logger.log(f"Unable to update the graph store: {e}", level=logging.ERROR)
            return 1
        logger.log(f"{added} graph(s) added to {args.graphData}")
        if not args.graph:
            return 0

    if not args.graph:
        parser.error("a graph file is required")

    graph_path = resolve_graph_path(args.graph, args.graphDir)
    try:
        graph = load_clq_file(graph_path)
    except InvalidClqFileFormat as e:
        logger.log(f"Error while loading graph: {e}", level=logging.ERROR)
        return 1

    graph_id = os.path.basename(graph_path)
    logger.log(f"Loaded {graph_id}: {graph.vertex_count()} vertices, {graph.edge_count()} edges")
    algorithm = Algorithm.from_name(args.algorithm)
    if args.complement:
        logger.log("Computing a maximum clique through the complement graph")

    result, clock = run_algorithm(graph_id, graph, algorithm, args.complement, args.timeLimit,
                                  bounding_strategy=CombinedBound(parallel=args.parallelBounds))
    # The store only annotates the answer: if it cannot be read, the answer is kept as is
    if os.path.exists(args.graphData):
        try:
            result = result.with_optimality(store)
        except StoreError as e:
            logger.log(f"Unable to read the known optimal value: {e}", level=logging.ERROR)

    print("================ Result ===================")
    print(result)
    print("======== Details about performance ========")
    report_timings(clock)

    if args.record:
        algorithm_name = f"{algorithm.value}-clique" if args.complement else algorithm.value
        record_result(store, result, algorithm_name, args.comment)

    if args.draw:
        draw_vertex_set(graph, result.witness, title=f"{graph_id}: {result.value}", filePath=args.draw)
        logger.log(f"Picture saved to {args.draw}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
