import pytest


@pytest.fixture
def home(tmp_path, monkeypatch):
    """Points the user's home directory at a temporary directory, and keeps console output unstyled."""
    monkeypatch.setenv('HOME', str(tmp_path))
    monkeypatch.setenv('USERPROFILE', str(tmp_path))
    monkeypatch.delenv('FORCE_COLOR', raising=False)
    monkeypatch.delenv('TTY_COMPATIBLE', raising=False)
    return tmp_path
