"""Tests for projgen.toml discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from projgen.config.discovery import find_config


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PROJGEN_CONFIG", raising=False)


class TestFindConfig:
    def test_walks_up(self, tmp_path: Path) -> None:
        (tmp_path / "projgen.toml").write_text("")
        deep = tmp_path / "a" / "b"
        deep.mkdir(parents=True)
        assert find_config(deep) == tmp_path / "projgen.toml"

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "projgen.toml").write_text("")
        other = tmp_path / "other.toml"
        other.write_text("")
        monkeypatch.setenv("PROJGEN_CONFIG", str(other))
        assert find_config(tmp_path) == other

    def test_env_var_pointing_nowhere(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "projgen.toml").write_text("")
        monkeypatch.setenv("PROJGEN_CONFIG", str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None
