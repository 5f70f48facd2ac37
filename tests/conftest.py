"""
Shared pytest fixtures.
"""
import pytest

from loadingbar import config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the user's real config file out of every test."""
    monkeypatch.setattr(config, "_CONFIG_PATH", tmp_path / "config.toml")
    yield tmp_path / "config.toml"
