"""
Tests for pso2d CLI functionality.
"""

import json
from dataclasses import replace
from unittest.mock import patch

import pytest
import yaml
from click.testing import CliRunner

from pso2d import __version__
from pso2d.cli import cli
from pso2d.functions import FUNCTIONS


class TestCLI:
    """Tests for CLI commands."""

    @pytest.fixture
    def runner(self):
        """Create CLI test runner."""
        return CliRunner()

    def test_version_command(self, runner):
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_functions_command(self, runner):
        result = runner.invoke(cli, ["functions"])

        assert result.exit_code == 0
        for name in ("ackley", "sphere", "rosenbrock"):
            assert name in result.output

    def test_run_json(self, runner):
        result = runner.invoke(cli, [
            "run", "--function", "sphere", "--iterations", "300", "--seed", "1", "--json"
        ])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["function"] == "sphere"
        assert data["iterations"] == 300
        assert data["evaluations"] == 300 * 20
        assert data["seed"] == 1
        assert data["value"] < 1e-2

    def test_run_is_reproducible_with_seed(self, runner):
        args = ["run", "-f", "ackley", "-n", "100", "-s", "7", "--json"]

        first = json.loads(runner.invoke(cli, args).stdout)
        second = json.loads(runner.invoke(cli, args).stdout)

        assert (first["x"], first["y"]) == (second["x"], second["y"])

    def test_run_with_bounds(self, runner):
        result = runner.invoke(cli, [
            "run", "-f", "sphere", "-b", "2", "3", "-1", "1", "-n", "100", "-s", "3", "--json"
        ])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert 2.0 <= data["x"] <= 3.0
        assert -1.0 <= data["y"] <= 1.0

    def test_run_maximize(self, runner):
        result = runner.invoke(cli, [
            "run", "-f", "sphere", "-b", "-1", "1", "-1", "1", "-n", "50", "-s", "2",
            "--maximize", "--json"
        ])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["value"] == pytest.approx(2.0, abs=1e-2)

    def test_run_table(self, runner):
        result = runner.invoke(cli, ["run", "-f", "booth", "-n", "50", "-s", "4"])

        assert result.exit_code == 0
        assert "PSO result for booth" in result.output
        assert "Evaluations" in result.output

    def test_run_with_config_file(self, runner, tmp_path):
        config_path = tmp_path / "pso2d.yaml"
        config_path.write_text(yaml.dump({
            "function": "sphere",
            "bounds": [[4.0, 6.0], [4.0, 6.0]],
            "pso": {"swarm_size": 5, "max_iterations": 20, "seed": 9},
        }))

        result = runner.invoke(cli, ["run", "--config", str(config_path), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["function"] == "sphere"
        assert data["evaluations"] == 5 * 20
        assert 4.0 <= data["x"] <= 6.0
        assert 4.0 <= data["y"] <= 6.0

    def test_run_with_discovered_config_file(self, runner, tmp_path, monkeypatch):
        (tmp_path / "pso2d.yaml").write_text(yaml.dump({
            "function": "sphere",
            "bounds": [[4.0, 6.0], [4.0, 6.0]],
        }))
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(cli, ["run", "-n", "20", "-s", "5", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["function"] == "sphere"
        assert 4.0 <= data["x"] <= 6.0
        assert 4.0 <= data["y"] <= 6.0

    def test_config_without_bounds_uses_function_domain(self, runner, tmp_path):
        config_path = tmp_path / "pso2d.yaml"
        config_path.write_text(yaml.dump({"function": "rastrigin"}))
        seen = []

        rastrigin = FUNCTIONS["rastrigin"]

        def recording(x, y):
            seen.append((x, y))
            return rastrigin.function(x, y)

        with patch.dict(FUNCTIONS, {"rastrigin": replace(rastrigin, function=recording)}):
            result = runner.invoke(cli, [
                "run", "--config", str(config_path), "-n", "10", "-s", "6", "--json"
            ])

        assert result.exit_code == 0
        assert len(seen) == 20 * 10
        assert all(-5.12 <= x <= 5.12 and -5.12 <= y <= 5.12 for x, y in seen)

    def test_run_with_numeric_log_level(self, runner, tmp_path):
        config_path = tmp_path / "pso2d.yaml"
        config_path.write_text(yaml.dump({"function": "sphere", "log_level": 40}))

        result = runner.invoke(cli, ["run", "--config", str(config_path), "-n", "5", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["function"] == "sphere"

    def test_run_with_invalid_log_level(self, runner, tmp_path):
        config_path = tmp_path / "pso2d.yaml"
        config_path.write_text(yaml.dump({"log_level": [10]}))

        result = runner.invoke(cli, ["run", "--config", str(config_path), "-n", "5"])

        assert result.exit_code == 1
        assert "Invalid log level" in result.output

    def test_run_unknown_function(self, runner):
        result = runner.invoke(cli, ["run", "-f", "eggholder", "-n", "5"])

        assert result.exit_code == 1
        assert "Unknown benchmark function" in result.output

    def test_run_invalid_bounds(self, runner):
        result = runner.invoke(cli, ["run", "-f", "sphere", "-b", "5", "0", "0", "1", "-n", "5"])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_config_command(self, runner, tmp_path):
        config_path = tmp_path / "pso2d.yaml"
        config_path.write_text(yaml.dump({"pso": {"swarm_size": 33}}))

        result = runner.invoke(cli, ["config", "--config", str(config_path)])

        assert result.exit_code == 0
        assert "33" in result.output
