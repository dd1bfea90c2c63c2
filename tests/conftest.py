import pytest

CONFIG_ENV = (
    "SHORT_PERIOD", "LONG_PERIOD", "WINDOW_MODE", "RISK_FREE_RATE",
    "REVERSE_OPENS_TRADE", "MARK_OPEN_TRADES", "DATA_FILE", "SAMPLE_SIZE", "LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Unset config overrides; anything set during the test (e.g. by .env) is undone."""
    for key in CONFIG_ENV:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    return monkeypatch
