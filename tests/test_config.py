"""Unit tests for core.config."""

from pathlib import Path

import pytest
from crossover_backtest.core.config import load_config


def write_yaml(tmp_path, text):
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults_without_file(tmp_path, clean_env):
    config = load_config(tmp_path / "missing.yaml", tmp_path)
    assert config.short_period == 5
    assert config.long_period == 20
    assert config.window == "suffix"
    assert config.risk_free_rate == 0.02
    assert config.reverse_opens_trade is False
    assert config.mark_open_trades is True
    assert config.data_file is None
    assert config.sample_size == 100
    assert config.log_dir is None


def test_yaml_values(tmp_path, clean_env):
    path = write_yaml(tmp_path, """
strategy:
  short_period: 3
  long_period: 8
  window: trailing
backtest:
  risk_free_rate: 0.01
  reverse_opens_trade: true
data:
  file: prices.csv
logging:
  level: DEBUG
  log_dir: logs
  log_file: run.log
""")
    config = load_config(path, tmp_path)
    assert (config.short_period, config.long_period) == (3, 8)
    assert config.window == "trailing"
    assert config.risk_free_rate == 0.01
    assert config.reverse_opens_trade is True
    assert config.data_file == Path("prices.csv")
    assert config.log_level == "DEBUG"
    assert config.log_dir == Path("logs")
    assert config.log_file == "run.log"


def test_env_overrides_yaml(tmp_path, clean_env):
    path = write_yaml(tmp_path, "strategy:\n  short_period: 3\n")
    clean_env.setenv("SHORT_PERIOD", "7")
    clean_env.setenv("WINDOW_MODE", "Trailing")
    clean_env.setenv("REVERSE_OPENS_TRADE", "yes")
    config = load_config(path, tmp_path)
    assert config.short_period == 7
    assert config.window == "trailing"
    assert config.reverse_opens_trade is True


def test_bad_env_number_falls_back(tmp_path, clean_env):
    path = write_yaml(tmp_path, "backtest:\n  risk_free_rate: 0.03\n")
    clean_env.setenv("RISK_FREE_RATE", "abc")
    clean_env.setenv("LONG_PERIOD", "ten")
    config = load_config(path, tmp_path)
    assert config.risk_free_rate == 0.03
    assert config.long_period == 20


def test_dotenv_loaded(tmp_path, clean_env):
    (tmp_path / ".env").write_text("SAMPLE_SIZE=42\n", encoding="utf-8")
    config = load_config(tmp_path / "missing.yaml", tmp_path)
    assert config.sample_size == 42


def test_non_mapping_yaml_rejected(tmp_path, clean_env):
    path = write_yaml(tmp_path, "- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_config(path, tmp_path)
