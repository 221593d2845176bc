"""Tests for configuration settings."""

from packsmith import Datapack
from packsmith.config import PacksmithSettings


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PACKSMITH_DEFAULT_NAMESPACE", raising=False)
    monkeypatch.delenv("PACKSMITH_DEFAULT_DIRECTORY", raising=False)

    settings = PacksmithSettings()

    assert settings.default_namespace == "minecraft"
    assert settings.default_directory == ""


def test_environment_variables(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PACKSMITH_DEFAULT_NAMESPACE", "custom")
    monkeypatch.setenv("PACKSMITH_DEFAULT_DIRECTORY", "/gen/")

    settings = PacksmithSettings()

    assert settings.default_namespace == "custom"
    assert settings.default_directory == "gen"


def test_env_file(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PACKSMITH_DEFAULT_DIRECTORY", raising=False)
    (tmp_path / ".env").write_text("PACKSMITH_DEFAULT_DIRECTORY=from_file\n", encoding="utf-8")

    assert PacksmithSettings().default_directory == "from_file"


def test_datapack_reads_settings_once(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PACKSMITH_DEFAULT_DIRECTORY", "first")
    pack = Datapack()

    monkeypatch.setenv("PACKSMITH_DEFAULT_DIRECTORY", "second")

    assert pack.function("main").name == "first/main"
