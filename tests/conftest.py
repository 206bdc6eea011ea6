"""Pytest fixtures for termmenu tests."""

import pytest


@pytest.fixture(autouse=True)
def clear_caches(tmp_path, monkeypatch):
    """Isolate config from the real home directory and clear its cache."""
    from termmenu.config import clear_config_cache

    monkeypatch.setenv("TERMMENU_CONFIG_DIR", str(tmp_path / "termmenu-config"))
    clear_config_cache()

    yield

    clear_config_cache()


@pytest.fixture
def press():
    """Feed key names to a model, returning the command from each update."""
    from termmenu.events import KeyEvent

    def _press(model, *keys):
        return [model.update(KeyEvent(key)) for key in keys]

    return _press
