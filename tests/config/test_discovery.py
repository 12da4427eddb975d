"""Tests for graphwalk.toml discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from graphwalk.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME, find_config


@pytest.fixture(autouse=True)
def _no_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestFindConfig:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        assert find_config(tmp_path) == tmp_path / CONFIG_FILENAME

    def test_nearest_wins(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        inner = tmp_path / "inner"
        inner.mkdir()
        (inner / CONFIG_FILENAME).write_text("")
        assert find_config(inner) == inner / CONFIG_FILENAME

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))
        (tmp_path / CONFIG_FILENAME).write_text("")
        assert find_config(tmp_path) is None

    def test_explicit_path_wins_over_env(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        explicit = tmp_path / "mine.toml"
        explicit.write_text("")
        env_file = tmp_path / "env.toml"
        env_file.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(env_file))
        assert find_config(tmp_path, explicit=str(explicit)) == explicit

    def test_missing_explicit_path_skips_walk_up(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        assert find_config(tmp_path, explicit=str(tmp_path / "nope.toml")) is None

    def test_nothing_found(self, tmp_path: Path) -> None:
        assert find_config(tmp_path) is None
