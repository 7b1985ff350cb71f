import argparse
import os

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd

from utils.results_store import YamlResultsStore

HISTORY_COLUMNS = ["ID", "Date", "Value", "Time", "Seconds", "Time limit", "Algorithm", "Comment"]


def history_frame(store, graph_id):
    """
    Runs recorded for one graph, one row per run, numbered from 1.
    """
    rows = []
    for i, run in enumerate(store.get_time_data(graph_id), start=1):
        rows.append([i, run.date, run.mvc_val, run.time, run.seconds, run.is_time_limit, run.algorithm, run.comment])
    return pd.DataFrame(rows, columns=HISTORY_COLUMNS)


def summary_frame(store):
    """
    One row per registered graph: number of runs, best value found, mean time and known optimum.
    """
    rows = []
    for info in store.graph_infos():
        df = history_frame(store, info.id)
        completed = df[~df["Time limit"].astype(bool)]
        rows.append({
            "Graph": info.id,
            "Order": info.order,
            "Size": info.size,
            "Runs": len(df),
            "Best value": completed["Value"].min() if len(completed) else None,
            "Mean time (s)": df["Seconds"].mean() if len(df) else None,
            "Known optimum": info.val if info.val else None,
        })
    return pd.DataFrame(rows, columns=["Graph", "Order", "Size", "Runs", "Best value", "Mean time (s)",
                                       "Known optimum"])


def plot_history(store, graph_id, filePath):
    """
    Bar plot of the execution time of every recorded run of the graph.
    """
    df = history_frame(store, graph_id)
    plt.clf()
    fig, ax = plt.subplots()
    ax.bar(df["ID"].astype(str), df["Seconds"])
    ax.set_title(f"Execution time - {graph_id}")
    ax.set_xlabel("Run ID")
    ax.set_ylabel("Execution time (s)")
    fig.savefig(filePath)
    plt.close(fig)
    return df


if __name__ == "__main__":
    resourcesPath = os.path.join(os.path.dirname(__file__), "resources")
    parser = argparse.ArgumentParser(description="Summarize recorded vertex cover runs")
    parser.add_argument("--graphData", type=str, default=os.path.join(resourcesPath, "graph_data.yml"))
    parser.add_argument("--timeResults", type=str, default=os.path.join(resourcesPath, "time_result.yml"))
    parser.add_argument("--plotDir", type=str, help="Write one barplot per graph in this directory")
    args = parser.parse_args()

    store = YamlResultsStore(args.graphData, args.timeResults)
    print(summary_frame(store).to_string(index=False))

    if args.plotDir:
        os.makedirs(args.plotDir, exist_ok=True)
        for graph_id in store.graph_ids():
            plot_history(store, graph_id, os.path.join(args.plotDir, f"{graph_id}.png"))
