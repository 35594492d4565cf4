"""Tests for runtime settings."""
from pathlib import Path

from ignite.core.config import PACKAGED_TEMPLATES_DIR, IgniteSettings


def test_defaults(monkeypatch):
    for var in ["IGNITE_LOG_FILE", "IGNITE_TEMPLATES_DIR", "IGNITE_MOCK"]:
        monkeypatch.delenv(var, raising=False)

    settings = IgniteSettings.from_env()

    assert settings.log_file == ".logs"
    assert settings.templates_dir == PACKAGED_TEMPLATES_DIR
    assert settings.mock is False
    assert (PACKAGED_TEMPLATES_DIR / "skeleton.yml").is_file()
    assert (PACKAGED_TEMPLATES_DIR / "sqlc.txt").is_file()


def test_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("IGNITE_LOG_FILE", "/tmp/ignite.log")
    monkeypatch.setenv("IGNITE_TEMPLATES_DIR", str(tmp_path))
    monkeypatch.setenv("IGNITE_MOCK", "1")

    settings = IgniteSettings.from_env()

    assert settings.log_file == "/tmp/ignite.log"
    assert settings.templates_dir == Path(tmp_path)
    assert settings.mock is True
