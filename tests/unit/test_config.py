"""
Tests for configuration loading and settings precedence.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from src.api.deps import Settings
from src.app_shell.config import AppConfig, load_config


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run each test in an empty working directory."""
    monkeypatch.chdir(tmp_path)


def write(path: Path, text: str) -> Path:
    path.write_text(text)
    return path


class TestLoadConfig:
    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_empty_file_is_defaults(self, tmp_path: Path) -> None:
        config = load_config(write(tmp_path / "settings.yaml", ""))
        assert config == AppConfig()
        assert config.server.port == 3005
        assert config.docs.url == "/api-docs"

    def test_values(self, tmp_path: Path) -> None:
        config = load_config(
            write(
                tmp_path / "settings.yaml",
                "server:\n  host: 127.0.0.1\n  port: 8080\n"
                "logging:\n  level: debug\n"
                "cors:\n  origins: ['http://localhost:3000']\n",
            )
        )
        assert config.server.host == "127.0.0.1"
        assert config.server.port == 8080
        assert config.logging.level == "DEBUG"
        assert config.cors.origins == ["http://localhost:3000"]

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(write(tmp_path / "settings.yaml", "server: [unclosed"))

    def test_unknown_key(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="validation failed"):
            load_config(write(tmp_path / "settings.yaml", "server:\n  prot: 1\n"))

    def test_port_out_of_range(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError):
            load_config(write(tmp_path / "settings.yaml", "server:\n  port: 70000\n"))

    def test_unknown_log_level(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError):
            load_config(write(tmp_path / "settings.yaml", "logging:\n  level: LOUD\n"))


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings(environ={})
        assert settings.config_path is None
        assert settings.port == 3005
        assert settings.host == "0.0.0.0"
        assert settings.log_level == "INFO"
        assert settings.docs_url == "/api-docs"
        assert settings.cors_origins == []

    def test_port_from_environment(self) -> None:
        assert Settings(environ={"PORT": "8081"}).port == 8081

    def test_settings_yaml_in_working_directory(self, tmp_path: Path) -> None:
        write(tmp_path / "settings.yaml", "server:\n  port: 9000\n")
        settings = Settings(environ={})
        assert settings.port == 9000
        assert settings.config_path == tmp_path / "settings.yaml"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        path = write(tmp_path / "custom.yaml", "docs:\n  url: /docs\n")
        settings = Settings(environ={"DTCALC_CONFIG": str(path)})
        assert settings.docs_url == "/docs"

    def test_explicit_config_path_must_exist(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            Settings(environ={"DTCALC_CONFIG": str(tmp_path / "missing.yaml")})

    def test_environment_beats_file(self, tmp_path: Path) -> None:
        write(tmp_path / "settings.yaml", "server:\n  port: 9000\nlogging:\n  level: WARNING\n")
        settings = Settings(environ={"PORT": "7000", "LOG_LEVEL": "debug"})
        assert settings.port == 7000
        assert settings.log_level == "DEBUG"
