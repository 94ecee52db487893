"""Tests for the benchmark CLI."""

import sys

import pytest

from benchmarks.run_benchmark import benchmark_text, main


class TestIterations:
    def test_zero_iterations_rejected(self):
        with pytest.raises(ValueError, match="at least 1"):
            benchmark_text("In order to win, train.", iterations=0)

    @pytest.mark.parametrize("value", ["0", "-3"])
    def test_cli_rejects_non_positive(self, monkeypatch, capsys, value):
        monkeypatch.setattr(sys, "argv", ["run_benchmark.py", "--iterations", value])
        with pytest.raises(SystemExit) as exc:
            main()
        assert exc.value.code == 2
        assert "--iterations" in capsys.readouterr().err

    def test_single_iteration(self):
        results = benchmark_text("In order to win, basically train.", iterations=1)
        assert [r.level for r in results] == ["light", "medium", "aggressive"]
