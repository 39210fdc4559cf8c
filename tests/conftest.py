import pytest


@pytest.fixture
def store(tmp_path):
    """Path to a store file that does not exist yet."""
    return tmp_path / "data" / "store.txt"


@pytest.fixture
def env_store(store, monkeypatch):
    """Point the CLI at a temporary store and the default numeric field."""
    monkeypatch.setenv("WEATHERLOG_STORE", str(store))
    monkeypatch.delenv("WEATHERLOG_NUMERIC_FIELD", raising=False)
    return store
