import importlib

from ministem import config


def test_defaults(monkeypatch):
    monkeypatch.delenv("MINISTEM_LANGUAGE", raising=False)
    monkeypatch.delenv("MINISTEM_CACHE_SIZE", raising=False)

    try:
        importlib.reload(config)
        assert config.DEFAULT_LANGUAGE == "english"
        assert config.CACHE_SIZE == 1024
    finally:
        monkeypatch.undo()
        importlib.reload(config)


def test_environment(monkeypatch):
    monkeypatch.setenv("MINISTEM_LANGUAGE", " Dutch ")
    monkeypatch.setenv("MINISTEM_CACHE_SIZE", "0")

    try:
        importlib.reload(config)
        assert config.DEFAULT_LANGUAGE == "dutch"
        assert config.CACHE_SIZE == 0
    finally:
        monkeypatch.undo()
        importlib.reload(config)
