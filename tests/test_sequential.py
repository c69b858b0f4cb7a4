import pandas as pd
import pytest

from game_of_life.sequential import CSV_HEADER, benchmark, main, parse_args, run_simulation


def test_run_simulation_stats(capsys):
    stats = run_simulation(5, 5, 4, pattern="blinker")
    assert stats["generations"] == 4
    assert stats["engine"] == "two_phase"
    assert stats["initial_live_cells"] == 3
    assert stats["final_live_cells"] == 3
    out = capsys.readouterr().out
    assert "Grid size: 5 x 5" in out
    assert "Final live cells: 3" in out


def test_run_simulation_numpy_matches(capsys):
    two_phase = run_simulation(16, 16, 10, seed=1)
    vectorized = run_simulation(16, 16, 10, seed=1, use_numpy=True)
    assert vectorized["engine"] == "numpy"
    assert two_phase["final_live_cells"] == vectorized["final_live_cells"]


def test_run_simulation_visualize(capsys, monkeypatch):
    monkeypatch.setattr("game_of_life.sequential.time.sleep", lambda _: None)
    run_simulation(4, 4, 2, visualize=True, pattern="block")
    out = capsys.readouterr().out
    assert "Generation: 2" in out


def test_benchmark_writes_csv(tmp_path, capsys):
    csv_file = tmp_path / "bench.csv"
    results = benchmark(sizes=[4, 8], generations=2, csv_file=str(csv_file))
    assert len(results) == 4

    lines = csv_file.read_text().splitlines()
    assert lines[0] == CSV_HEADER
    df = pd.read_csv(csv_file)
    assert sorted(df["engine"].unique()) == ["numpy", "two_phase"]
    assert sorted(df["size"].unique()) == [4, 8]


def test_parse_args_defaults():
    assert parse_args([]) == (32, 32, 50, False, "random")
    assert parse_args(["3", "4", "5", "1", "glider"]) == (3, 4, 5, True, "glider")


@pytest.mark.parametrize("argv", [["x"], ["-1"], ["4", "4", "4", "0", "nope"]])
def test_main_bad_arguments(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2
    assert "Usage" in capsys.readouterr().out


def test_main_runs(capsys):
    main(["6", "6", "3", "0", "glider"])
    assert "Simulation complete!" in capsys.readouterr().out
