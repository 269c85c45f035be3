"""Shared pytest fixtures and test helpers for projgen tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from projgen.domain.buildsystem import BUILD_SYSTEM_REGISTRY
from projgen.domain.description import MutableProjectDescription
from projgen.plugins.builtins.standard import StandardProjectPlugin
from projgen.plugins.manager import PluginManager


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory with no projgen.toml above it.

    Use via ``@pytest.mark.usefixtures("_isolated_workdir")`` on command
    test classes.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PROJGEN_CONFIG", str(tmp_path / "projgen.toml"))


@pytest.fixture(autouse=True)
def _restore_build_system_registry() -> Iterator[None]:
    """Undo build systems registered by plugins during a test."""
    snapshot = dict(BUILD_SYSTEM_REGISTRY)
    yield
    BUILD_SYSTEM_REGISTRY.clear()
    BUILD_SYSTEM_REGISTRY.update(snapshot)


@pytest.fixture
def standard_plugins() -> PluginManager:
    """Plugin manager with only the standard plugin registered."""
    pm = PluginManager()
    pm.register_plugin(StandardProjectPlugin(), name="standard")
    return pm


def make_description(**fields: object) -> MutableProjectDescription:
    """Description with the usual demo coordinates, overridable per test."""
    from projgen.domain.buildsystem import Language, MavenBuildSystem, Packaging
    from projgen.domain.version import Version

    values: dict[str, object] = {
        "platform_version": Version.parse("3.2.0"),
        "build_system": MavenBuildSystem(),
        "packaging": Packaging.for_id("jar"),
        "language": Language.for_id("java"),
        "group_id": "com.example",
        "artifact_id": "demo",
        "version": "0.0.1-SNAPSHOT",
        "name": "demo",
        "description": "Demo project",
    }
    values.update(fields)
    return MutableProjectDescription(**values)
