import importlib

import pytest

from todolists import config


@pytest.fixture
def reload_config(monkeypatch):
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


def test_reads_numeric_settings(monkeypatch, reload_config):
    monkeypatch.setenv("SESSION_MAX_AGE", "3600")
    monkeypatch.setenv("BCRYPT_ROUNDS", "5")
    reloaded = reload_config()
    assert reloaded.SESSION_MAX_AGE == 3600
    assert reloaded.BCRYPT_ROUNDS == 5


@pytest.mark.parametrize("name", ["SESSION_MAX_AGE", "BCRYPT_ROUNDS"])
def test_malformed_numeric_setting_fails_at_startup(monkeypatch, reload_config, name):
    monkeypatch.setenv(name, "twelve")
    with pytest.raises(ValueError):
        reload_config()
