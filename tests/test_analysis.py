import pandas as pd
import pytest

from game_of_life.analysis import calculate_metrics, create_dashboard, load_results, main
from game_of_life.sequential import benchmark


@pytest.fixture
def results_csv(tmp_path):
    path = tmp_path / "bench.csv"
    path.write_text(
        "engine,size,generations,total_time_ms,time_per_generation_ms,cells_per_second_million\n"
        "two_phase,16,10,100.0,10.0,0.0256\n"
        "numpy,16,10,2.0,0.2,1.28\n"
        "two_phase,32,10,400.0,40.0,0.0256\n"
        "numpy,32,10,4.0,0.4,2.56\n"
    )
    return path


def test_load_results_renames_columns(results_csv, capsys):
    df = load_results(results_csv)
    assert {"grid_size", "time_ms", "time_per_gen_ms", "throughput_mcells_s"} <= set(df.columns)
    assert len(df) == 4


def test_load_results_missing(tmp_path, capsys):
    assert load_results(tmp_path / "missing.csv") is None


def test_calculate_metrics(results_csv, capsys):
    metrics = calculate_metrics(load_results(results_csv))
    assert metrics["common_sizes"] == [16, 32]
    assert metrics["speedups"] == pytest.approx([50.0, 100.0])
    assert metrics["mean_speedup"] == pytest.approx(75.0)
    assert metrics["best"]["engine"] == "numpy"
    assert metrics["best"]["grid_size"] == 32


def test_create_dashboard(results_csv, capsys):
    df = load_results(results_csv)
    fig = create_dashboard(df, calculate_metrics(df))
    assert len(fig.axes) >= 3


def test_main_saves_dashboard(results_csv, tmp_path, capsys):
    output = main([str(results_csv), str(tmp_path / "out")], show=False)
    assert output.exists()
    assert "BENCHMARK SUMMARY" in capsys.readouterr().out


def test_main_without_data(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "missing.csv"), str(tmp_path)], show=False)
    assert exc.value.code == 1


def test_analysis_of_real_benchmark(tmp_path, capsys):
    csv_file = tmp_path / "bench.csv"
    benchmark(sizes=[4], generations=1, csv_file=str(csv_file))
    df = load_results(csv_file)
    assert isinstance(df, pd.DataFrame)
    metrics = calculate_metrics(df)
    assert metrics["common_sizes"] == [4]


def test_repeated_sizes_are_averaged(tmp_path, capsys):
    path = tmp_path / "appended.csv"
    path.write_text(
        "engine,size,generations,total_time_ms,time_per_generation_ms,cells_per_second_million\n"
        "two_phase,16,10,100.0,10.0,0.0256\n"
        "numpy,16,10,2.0,0.2,1.28\n"
        "two_phase,16,10,140.0,14.0,0.0183\n"
        "numpy,16,10,2.0,0.2,1.28\n"
    )
    metrics = calculate_metrics(load_results(path))
    assert metrics["common_sizes"] == [16]
    assert metrics["speedups"] == pytest.approx([60.0])

    output = main([str(path), str(tmp_path / "out")], show=False)
    assert output.exists()


def test_empty_csv_counts_as_missing(tmp_path, capsys):
    path = tmp_path / "empty.csv"
    path.write_text("")
    assert load_results(path) is None
    with pytest.raises(SystemExit) as exc:
        main([str(path), str(tmp_path)], show=False)
    assert exc.value.code == 1
    assert "No benchmark data found" in capsys.readouterr().out
