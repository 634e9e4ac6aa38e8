import pytest

from src.utils.config import Config, DEFAULT_CATALOG_PATH

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("CATALOG_PATH", "API_HOST", "API_PORT", "FLASK_DEBUG", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

def test_defaults():
    config = Config()
    assert config.CATALOG_PATH == DEFAULT_CATALOG_PATH
    assert config.API_HOST == "0.0.0.0"
    assert config.API_PORT == 5001
    assert config.FLASK_DEBUG is False
    assert config.LOG_LEVEL == "INFO"

def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("CATALOG_PATH", str(tmp_path / "catalog.json"))
    monkeypatch.setenv("API_PORT", "8080")
    monkeypatch.setenv("FLASK_DEBUG", "True")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = Config()
    assert config.CATALOG_PATH == tmp_path / "catalog.json"
    assert config.API_PORT == 8080
    assert config.FLASK_DEBUG is True
    assert config.LOG_LEVEL == "DEBUG"

@pytest.mark.parametrize("port", ["0", "70000"])
def test_invalid_port(monkeypatch, port):
    monkeypatch.setenv("API_PORT", port)
    with pytest.raises(ValueError, match="API_PORT"):
        Config()

def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(ValueError, match="LOG_LEVEL"):
        Config()
