"""Tests for config loading."""

import pytest
from pathlib import Path
from scrabblecore.config import AppConfig, ConfigError, EngineConfig, load_config

EXAMPLE_CONFIG = Path(__file__).resolve().parent.parent / "engine.yaml.example"


def _write(tmp_path, text):
    path = tmp_path / "engine.yaml"
    path.write_text(text)
    return path


class TestDefaults:
    def test_engine_defaults(self):
        cfg = EngineConfig()
        assert cfg.seed is None
        assert cfg.rack_size == 7
        assert cfg.max_consecutive_passes == 6
        assert cfg.max_consecutive_failures == 3
        assert cfg.failure_bonus == 50
        assert cfg.surrender_bonus == 50
        assert cfg.tiebreak_bonus == 1

    def test_app_defaults(self):
        cfg = AppConfig()
        assert cfg.log_level == "INFO"
        assert cfg.log_dir is None
        assert cfg.dictionary.path is None


class TestLoadConfig:
    def test_example_config_loads(self):
        config = load_config(EXAMPLE_CONFIG)
        assert config.engine.seed == 42
        assert config.log_level == "INFO"
        assert config.dictionary.path == EXAMPLE_CONFIG.parent / "words.txt"
        assert config.log_dir == EXAMPLE_CONFIG.parent / "output" / "games"

    def test_empty_file_gives_defaults(self, tmp_path):
        config = load_config(_write(tmp_path, ""))
        assert config.engine == EngineConfig()
        assert config.dictionary.suggestion_limit == 50

    def test_partial_engine_section(self, tmp_path):
        config = load_config(_write(tmp_path, "engine:\n  max_consecutive_passes: 4\n"))
        assert config.engine.max_consecutive_passes == 4
        assert config.engine.rack_size == 7

    def test_absolute_dictionary_path_kept(self, tmp_path):
        words = tmp_path / "elsewhere" / "words.txt"
        config = load_config(_write(tmp_path, f"dictionary:\n  path: {words}\n"))
        assert config.dictionary.path == words

    def test_log_level_uppercased(self, tmp_path):
        config = load_config(_write(tmp_path, "log_level: debug\n"))
        assert config.log_level == "DEBUG"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.yaml")

    @pytest.mark.parametrize("key", [
        "rack_size", "max_consecutive_passes", "max_consecutive_failures",
    ])
    def test_non_positive_rejected(self, tmp_path, key):
        with pytest.raises(ConfigError, match=key):
            load_config(_write(tmp_path, f"engine:\n  {key}: 0\n"))

    def test_non_integer_rejected(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(_write(tmp_path, "engine:\n  rack_size: seven\n"))

    def test_config_error_is_value_error(self):
        assert issubclass(ConfigError, ValueError)
