import pytest

from log_tracker.config import TrackerConfig


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def tmp_config_path(tmp_path, monkeypatch):
    monkeypatch.setattr(TrackerConfig, "DEFAULT_PATH", tmp_path / ".log-tracker.yaml")
    for name in ("CONFIG", "FILEPATH", "NUMBER", "FOLLOW", "BUFFER_SIZE", "PREFIX"):
        monkeypatch.delenv(f"LOG_TRACKER_{name}", raising=False)
