"""Tests for the plugins command group."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from projgen.cli import cli


@pytest.mark.usefixtures("_isolated_workdir")
class TestPluginsList:
    def test_lists_standard_plugin(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "plugins", "list"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)["data"]
        assert "standard" in data["plugins"]
        assert data["build_systems"] == ["gradle", "maven"]

    def test_local_build_system_plugin(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        plugin_dir = tmp_path / ".projgen" / "plugins"
        plugin_dir.mkdir(parents=True)
        (plugin_dir / "bazel.py").write_text(
            "import pluggy\n"
            "from projgen.domain.buildsystem import BuildSystem\n"
            'hookimpl = pluggy.HookimplMarker("projgen")\n'
            "\n"
            "class BazelBuildSystem(BuildSystem):\n"
            '    id = "bazel"\n'
            '    build_file_name = "BUILD"\n'
            "\n"
            "class BazelPlugin:\n"
            "    @hookimpl\n"
            "    def register_build_systems(self):\n"
            '        return {"bazel": BazelBuildSystem}\n'
        )
        (tmp_path / "projgen.toml").write_text("")
        result = cli_runner.invoke(cli, ["-c", "projgen.toml", "--json", "plugins", "list"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)["data"]
        assert "projgen_local_plugin_bazel" in data["plugins"]
        assert "bazel" in data["build_systems"]
