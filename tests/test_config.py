"""
Tests for pso2d configuration.
"""

import logging

import pytest
import yaml

from pso2d import Config, PSOConfig, load_config, ConfigurationError


class TestPSOConfig:
    """Tests for PSOConfig."""

    def test_default_config(self):
        config = PSOConfig()

        assert config.swarm_size == 20
        assert config.inertia_weight == 0.5
        assert config.cognitive_weight == 2.05
        assert config.social_weight == 2.05
        assert config.seed is None
        assert config.verbose is False

    @pytest.mark.parametrize("overrides", [
        {"swarm_size": 0},
        {"max_iterations": -5},
        {"log_interval": 0},
        {"inertia_weight": -0.1},
        {"social_weight": -2.0},
    ])
    def test_invalid_values(self, overrides):
        with pytest.raises(ConfigurationError):
            PSOConfig(**overrides)

    def test_inertia_out_of_range_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="pso2d.core.config"):
            PSOConfig(inertia_weight=0.95)

        assert "recommended range" in caplog.text

    def test_unbalanced_coefficients_warn(self, caplog):
        with caplog.at_level(logging.WARNING, logger="pso2d.core.config"):
            PSOConfig(cognitive_weight=0.5, social_weight=2.5)

        assert "similar value" in caplog.text


class TestConfig:
    """Tests for Config."""

    def test_default_config(self):
        config = Config()

        assert config.function == "ackley"
        assert config.bounds is None
        assert config.maximize is False
        assert isinstance(config.pso, PSOConfig)

    def test_from_file(self, tmp_path):
        config_path = tmp_path / "pso2d.yaml"
        config_path.write_text(yaml.dump({
            "function": "sphere",
            "bounds": [[-1.0, 1.0], [-2.0, 2.0]],
            "pso": {"swarm_size": 8, "max_iterations": 50, "seed": 11},
        }))

        config = Config.from_file(config_path)

        assert config.function == "sphere"
        assert config.bounds == [[-1.0, 1.0], [-2.0, 2.0]]
        assert config.pso.swarm_size == 8
        assert config.pso.max_iterations == 50
        assert config.pso.seed == 11

    def test_missing_file_uses_defaults(self, tmp_path):
        config = Config.from_file(tmp_path / "absent.yaml")
        assert config.pso.swarm_size == 20

    def test_empty_file_uses_defaults(self, tmp_path):
        config_path = tmp_path / "empty.yaml"
        config_path.write_text("")

        assert Config.from_file(config_path).function == "ackley"

    def test_unknown_key(self, tmp_path):
        config_path = tmp_path / "bad.yaml"
        config_path.write_text(yaml.dump({"pso": {"particles": 10}}))

        with pytest.raises(ConfigurationError):
            Config.from_file(config_path)

    def test_invalid_yaml(self, tmp_path):
        config_path = tmp_path / "broken.yaml"
        config_path.write_text("pso: [unclosed")

        with pytest.raises(ConfigurationError):
            Config.from_file(config_path)

    def test_numeric_log_level_is_named(self, tmp_path):
        config_path = tmp_path / "levels.yaml"
        config_path.write_text(yaml.dump({"log_level": 10}))

        assert Config.from_file(config_path).log_level == "DEBUG"

    @pytest.mark.parametrize("level", ["chatty", 15, ["INFO"]])
    def test_invalid_log_level(self, tmp_path, level):
        config_path = tmp_path / "levels.yaml"
        config_path.write_text(yaml.dump({"log_level": level}))

        with pytest.raises(ConfigurationError):
            Config.from_file(config_path)

    def test_invalid_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv("PSO2D_LOG_LEVEL", "loud")

        with pytest.raises(ConfigurationError):
            Config().update_from_env()

    def test_to_file(self, tmp_path):
        config = Config(function="booth", pso=PSOConfig(swarm_size=12))
        config_path = tmp_path / "nested" / "out.yaml"

        config.to_file(config_path)
        loaded = Config.from_file(config_path)

        assert loaded.function == "booth"
        assert loaded.pso.swarm_size == 12

    def test_update_from_env(self, monkeypatch):
        monkeypatch.setenv("PSO2D_SWARM_SIZE", "30")
        monkeypatch.setenv("PSO2D_SEED", "5")
        monkeypatch.setenv("PSO2D_MAXIMIZE", "true")
        monkeypatch.setenv("PSO2D_FUNCTION", "rastrigin")

        config = Config()
        config.update_from_env()

        assert config.pso.swarm_size == 30
        assert config.pso.seed == 5
        assert config.maximize is True
        assert config.function == "rastrigin"

    def test_invalid_env_value(self, monkeypatch):
        monkeypatch.setenv("PSO2D_SWARM_SIZE", "many")

        with pytest.raises(ConfigurationError):
            Config().update_from_env()

    def test_env_value_is_validated(self, monkeypatch):
        monkeypatch.setenv("PSO2D_SWARM_SIZE", "0")

        with pytest.raises(ConfigurationError):
            Config().update_from_env()

    def test_load_config_from_path(self, tmp_path, monkeypatch):
        config_path = tmp_path / "custom.yaml"
        config_path.write_text(yaml.dump({"pso": {"inertia_weight": 0.7}}))
        monkeypatch.setenv("PSO2D_MAX_ITERATIONS", "77")

        config = load_config(config_path)

        assert config.pso.inertia_weight == 0.7
        assert config.pso.max_iterations == 77

    def test_load_config_searches_working_directory(self, tmp_path, monkeypatch):
        (tmp_path / "pso2d.yaml").write_text(yaml.dump({"function": "himmelblau"}))
        monkeypatch.chdir(tmp_path)

        assert load_config().function == "himmelblau"
