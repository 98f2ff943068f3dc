import argparse

import pytest

from tools import bench


def test_iteration_count_parses_non_negative_integers():
    assert bench.iteration_count("0") == 0
    assert bench.iteration_count("1500") == 1500


@pytest.mark.parametrize("value", ["-1", "ten", "2.5"])
def test_iteration_count_rejects_bad_values(value):
    with pytest.raises(argparse.ArgumentTypeError):
        bench.iteration_count(value)


def test_run_benchmark_reports_iterations_and_time(capsys):
    elapsed = bench.run_benchmark(25, population=8, seed=1, parallel=False)

    out = capsys.readouterr().out
    assert isinstance(elapsed, int)
    assert elapsed >= 0
    assert "Number of iterations 25" in out
    assert f"Execution Time: {elapsed} ms" in out


def test_main_runs_with_explicit_arguments(capsys):
    elapsed = bench.main(["10", "--population", "4", "--seed", "2", "--serial"])

    assert elapsed >= 0
    assert "Number of iterations 10" in capsys.readouterr().out


def test_main_defaults_to_configured_iterations(monkeypatch):
    calls = {}

    def fake_run(iterations, **kwargs):
        calls["iterations"] = iterations
        calls.update(kwargs)
        return 0

    monkeypatch.setattr(bench, "run_benchmark", fake_run)
    bench.main([])

    assert calls["iterations"] == 1000
    assert calls["parallel"] is None


@pytest.mark.parametrize("argv", [["-5"], ["abc"], ["10", "--population", "1"], ["10", "--scale", "0"]])
def test_main_rejects_invalid_arguments(argv):
    with pytest.raises(SystemExit) as excinfo:
        bench.main(argv)
    assert excinfo.value.code == 2
