"""
Load configuration from config.yaml and .env. Environment variables override the file.
"""

from __future__ import annotations
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv


def _env_path(project_root: Optional[Path] = None) -> Path:
    root = project_root or Path(__file__).resolve().parents[2]
    return root / ".env"


def load_dotenv_if_exists(project_root: Optional[Path] = None) -> None:
    """Load .env from project root if present."""
    path = _env_path(project_root)
    if path.exists():
        load_dotenv(path)


def load_config(config_path: Optional[Path] = None, project_root: Optional[Path] = None) -> "Config":
    """
    Load config.yaml and overlay with env. Returns Config.
    Raises yaml.YAMLError for unparsable YAML and ValueError for a non-mapping document.
    """
    load_dotenv_if_exists(project_root)
    root = project_root or Path(__file__).resolve().parents[2]
    path = config_path or root / "config.yaml"
    data: dict[str, Any] = {}
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a mapping at the top level")

    def env(key: str, default: Any = "") -> str:
        return os.getenv(key, "" if default is None else str(default)).strip()

    def env_bool(key: str, default: bool = False) -> bool:
        return os.getenv(key, str(default)).lower() in ("true", "1", "yes")

    def env_int(key: str, default: int = 0) -> int:
        try:
            return int(os.getenv(key, str(default)))
        except ValueError:
            return default

    def env_float(key: str, default: float = 0.0) -> float:
        try:
            return float(os.getenv(key, str(default)))
        except ValueError:
            return default

    strategy = data.get("strategy", {}) or {}
    backtest = data.get("backtest", {}) or {}
    source = data.get("data", {}) or {}
    logging_cfg = data.get("logging", {}) or {}

    data_file = env("DATA_FILE", source.get("file"))

    return Config(
        # Strategy
        short_period=env_int("SHORT_PERIOD", strategy.get("short_period", 5)),
        long_period=env_int("LONG_PERIOD", strategy.get("long_period", 20)),
        window=env("WINDOW_MODE", strategy.get("window", "suffix")).lower(),
        # Backtest
        risk_free_rate=env_float("RISK_FREE_RATE", backtest.get("risk_free_rate", 0.02)),
        reverse_opens_trade=env_bool("REVERSE_OPENS_TRADE", backtest.get("reverse_opens_trade", False)),
        mark_open_trades=env_bool("MARK_OPEN_TRADES", backtest.get("mark_open_trades", True)),
        # Data
        data_file=Path(data_file) if data_file else None,
        sample_size=env_int("SAMPLE_SIZE", source.get("sample_size", 100)),
        # Logging
        log_level=env("LOG_LEVEL", logging_cfg.get("level", "INFO")),
        log_dir=logging_cfg.get("log_dir"),
        log_file=logging_cfg.get("log_file"),
    )


class Config:
    """Unified configuration. Treat as read-only after load."""

    __slots__ = (
        "short_period", "long_period", "window",
        "risk_free_rate", "reverse_opens_trade", "mark_open_trades",
        "data_file", "sample_size",
        "log_level", "log_dir", "log_file",
    )

    def __init__(
        self,
        short_period: int = 5,
        long_period: int = 20,
        window: str = "suffix",
        risk_free_rate: float = 0.02,
        reverse_opens_trade: bool = False,
        mark_open_trades: bool = True,
        data_file: Optional[Path] = None,
        sample_size: int = 100,
        log_level: str = "INFO",
        log_dir: Optional[Path] = None,
        log_file: Optional[str] = None,
    ):
        self.short_period = short_period
        self.long_period = long_period
        self.window = window
        self.risk_free_rate = risk_free_rate
        self.reverse_opens_trade = reverse_opens_trade
        self.mark_open_trades = mark_open_trades
        self.data_file = data_file
        self.sample_size = sample_size
        self.log_level = log_level
        # File logging only when both are configured
        self.log_dir = Path(log_dir) if log_dir else None
        self.log_file = log_file
