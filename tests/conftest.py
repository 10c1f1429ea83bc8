import pytest


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep user config files and NETVEIL_* variables out of the tests."""
    for name in ("NETVEIL_REPLACEMENT_TYPE", "NETVEIL_TRACKER", "NETVEIL_LOGLEVEL"):
        monkeypatch.delenv(name, raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    return tmp_path
