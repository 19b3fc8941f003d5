import pytest

from kaltui import config_manager


@pytest.fixture(autouse=True)
def config_file(tmp_path, monkeypatch):
    """Point the settings file at an empty temp location for every test."""
    path = tmp_path / "config.json"
    monkeypatch.setenv("KALTUI_CONFIG", str(path))
    return path


@pytest.fixture
def settings():
    return dict(config_manager.DEFAULT_SETTINGS)
