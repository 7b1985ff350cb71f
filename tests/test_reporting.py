from createResults import HISTORY_COLUMNS, history_frame, plot_history, summary_frame
from tests.conftest import load_graph
from utils.visualization import draw_vertex_set


def test_history_frame(store):
    store.add_time("test.clq", 3, 0.5, False, "bnb")
    store.add_time("test.clq", 5, 60.0, True, "naive", "stopped")
    df = history_frame(store, "test.clq")
    assert list(df.columns) == HISTORY_COLUMNS
    assert list(df["ID"]) == [1, 2]
    assert list(df["Value"]) == [3, 5]
    assert df["Comment"].iloc[1] == "stopped"


def test_summary_frame(store):
    store.add_time("test.clq", 3, 0.5, False, "bnb")
    store.add_time("test.clq", 5, 60.0, True, "naive")
    df = summary_frame(store).set_index("Graph")
    assert len(df) == 5
    assert df.loc["test.clq", "Runs"] == 2
    # Runs stopped by the time limit do not count for the best value
    assert df.loc["test.clq", "Best value"] == 3
    assert df.loc["test.clq", "Known optimum"] == 3
    assert df.loc["welsh.clq", "Runs"] == 0


def test_plot_history(store, tmp_path):
    store.add_time("welsh.clq", 6, 0.25, False, "bnb")
    picture = tmp_path / "welsh.png"
    df = plot_history(store, "welsh.clq", str(picture))
    assert len(df) == 1
    assert picture.exists()


def test_draw_vertex_set(tmp_path):
    picture = tmp_path / "nested" / "queen.png"
    draw_vertex_set(load_graph("queen5_5.clq"), [0, 6, 12], title="queen5_5", filePath=str(picture))
    assert picture.exists()
    assert picture.stat().st_size > 0
