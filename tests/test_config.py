"""Tests for configuration loading."""

from pathlib import Path

import pytest

from tasktrack.foundation.config import (
    TaskTrackConfig,
    get_config,
    load_config,
    reset_config,
)
from tasktrack.foundation.errors import ErrorCode, TaskTrackError


@pytest.fixture
def in_tmp_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run with an empty cwd and home so no real config files are found."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    return tmp_path


class TestLoadConfig:
    def test_defaults(self, in_tmp_cwd: Path) -> None:
        config = load_config()

        assert config == TaskTrackConfig()
        assert config.database.url == "sqlite:///tasktrack.db"
        assert config.server.port == 3000
        assert config.debug is False

    def test_explicit_file(self, in_tmp_cwd: Path) -> None:
        path = in_tmp_cwd / "custom.yaml"
        path.write_text(
            "database:\n"
            "  url: sqlite:///custom.db\n"
            "server:\n"
            "  port: 8080\n"
            "debug: true\n"
        )

        config = load_config(path)

        assert config.database.url == "sqlite:///custom.db"
        assert config.database.echo is False
        assert config.server.port == 8080
        assert config.server.host == "127.0.0.1"
        assert config.debug is True

    def test_project_local_file(self, in_tmp_cwd: Path) -> None:
        (in_tmp_cwd / ".tasktrack").mkdir()
        (in_tmp_cwd / ".tasktrack" / "config.yaml").write_text("server:\n  host: 0.0.0.0\n")

        assert load_config().server.host == "0.0.0.0"

    def test_env_overrides_file(self, in_tmp_cwd: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = in_tmp_cwd / "custom.yaml"
        path.write_text("server:\n  port: 8080\n")
        monkeypatch.setenv("TASKTRACK_SERVER_PORT", "9000")
        monkeypatch.setenv("TASKTRACK_DATABASE_URL", "sqlite://")
        monkeypatch.setenv("TASKTRACK_DATABASE_ECHO", "true")
        monkeypatch.setenv("TASKTRACK_DEBUG", "true")

        config = load_config(path)

        assert config.server.port == 9000
        assert config.database.url == "sqlite://"
        assert config.database.echo is True
        assert config.debug is True

    def test_unknown_env_keys_are_ignored(
        self, in_tmp_cwd: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TASKTRACK_SERVER_WORKERS", "4")
        monkeypatch.setenv("TASKTRACK_NOPE", "1")

        assert load_config() == TaskTrackConfig()

    def test_invalid_yaml(self, in_tmp_cwd: Path) -> None:
        path = in_tmp_cwd / "broken.yaml"
        path.write_text("server: [unclosed\n")

        with pytest.raises(TaskTrackError) as exc_info:
            load_config(path)

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID

    def test_unknown_section_key(self, in_tmp_cwd: Path) -> None:
        path = in_tmp_cwd / "extra.yaml"
        path.write_text("server:\n  workers: 4\n")

        with pytest.raises(TaskTrackError):
            load_config(path)

    def test_non_integer_port(self, in_tmp_cwd: Path) -> None:
        path = in_tmp_cwd / "port.yaml"
        path.write_text("server:\n  port: eighty\n")

        with pytest.raises(TaskTrackError) as exc_info:
            load_config(path)

        assert exc_info.value.context["key"] == "server.port"

    def test_boolean_strings_are_parsed(self, in_tmp_cwd: Path) -> None:
        path = in_tmp_cwd / "strings.yaml"
        path.write_text('database:\n  echo: "true"\ndebug: "false"\n')

        config = load_config(path)

        assert config.database.echo is True
        assert config.debug is False

    def test_non_boolean_echo(self, in_tmp_cwd: Path) -> None:
        path = in_tmp_cwd / "echo.yaml"
        path.write_text('database:\n  echo: "no"\n')

        with pytest.raises(TaskTrackError) as exc_info:
            load_config(path)

        assert exc_info.value.context["key"] == "database.echo"

    def test_non_boolean_debug(self, in_tmp_cwd: Path) -> None:
        path = in_tmp_cwd / "debug.yaml"
        path.write_text("debug: 3\n")

        with pytest.raises(TaskTrackError) as exc_info:
            load_config(path)

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID
        assert exc_info.value.context["key"] == "debug"

    def test_non_boolean_debug_from_env(
        self, in_tmp_cwd: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TASKTRACK_DEBUG", "yes")

        with pytest.raises(TaskTrackError) as exc_info:
            load_config()

        assert exc_info.value.context["key"] == "debug"

    def test_quoted_port_is_parsed(self, in_tmp_cwd: Path) -> None:
        path = in_tmp_cwd / "port.yaml"
        path.write_text('server:\n  port: "8080"\n')

        assert load_config(path).server.port == 8080


class TestGlobalConfig:
    def test_get_config_is_cached(self, in_tmp_cwd: Path) -> None:
        assert get_config() is get_config()

    def test_reset_config(self, in_tmp_cwd: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        first = get_config()
        monkeypatch.setenv("TASKTRACK_SERVER_PORT", "4000")
        reset_config()

        second = get_config()

        assert second is not first
        assert second.server.port == 4000
