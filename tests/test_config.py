from racegrid.core.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("RACEGRID_GRID_PATH", raising=False)
    monkeypatch.delenv("RACEGRID_LOG_LEVEL", raising=False)
    s = Settings(_env_file=None)
    assert s.grid_path == "grid.json"
    assert s.log_level == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("RACEGRID_GRID_PATH", "races/boston.json")
    monkeypatch.setenv("RACEGRID_LOG_LEVEL", "debug")
    s = Settings(_env_file=None)
    assert s.grid_path == "races/boston.json"
    assert s.log_level == "DEBUG"


def test_empty_log_level_falls_back(monkeypatch):
    monkeypatch.setenv("RACEGRID_LOG_LEVEL", "")
    assert Settings(_env_file=None).log_level == "INFO"
