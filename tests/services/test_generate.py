"""Tests for GenerationService and description building."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

import pluggy
import pytest

from projgen.config.models import DefaultsConfig
from projgen.domain.buildsystem import GradleBuildSystem
from projgen.domain.description import DescriptionError, MutableProjectDescription
from projgen.generator.context import ProjectGenerationContext
from projgen.generator.contributor import ProjectContributor
from projgen.plugins.manager import PluginManager
from projgen.services.generate import (
    DIRECTORY_NOT_EMPTY,
    GENERATION_FAILED,
    GenerationService,
    build_description,
)
from tests.conftest import make_description

hookimpl = pluggy.HookimplMarker("projgen")


class _Recorder:
    def __init__(self) -> None:
        self.calls: list[dict[str, object]] = []

    @hookimpl
    def post_generate(self, project_root: str, description: object, files: list[str]) -> None:
        self.calls.append({"project_root": project_root, "files": files})


class _BrokenContributorPlugin:
    @hookimpl
    def configure_generation(self, context: ProjectGenerationContext) -> None:
        def fail(project_root: Path) -> None:
            raise OSError("disk full")

        context.register_bean(ProjectContributor, lambda: fail, name="broken")


class TestBuildDescription:
    def test_from_defaults(self) -> None:
        description = build_description(DefaultsConfig())
        assert description.group_id == "com.example"
        assert description.artifact_id == "demo"
        assert description.build_system is not None
        assert description.build_system.id == "maven"
        assert str(description.platform_version) == "3.2.0"
        assert description.language is not None
        assert description.language.jvm_version == "17"

    def test_overrides_win_and_none_is_ignored(self) -> None:
        description = build_description(
            DefaultsConfig(),
            group_id="org.acme",
            artifact_id=None,
            build="gradle",
            dialect="kotlin",
            dependencies=["org.slf4j:slf4j-api:2.0.9"],
            base_directory="shop",
        )
        assert description.group_id == "org.acme"
        assert description.artifact_id == "demo"
        assert description.build_system == GradleBuildSystem("kotlin")
        assert list(description.requested_dependencies) == ["slf4j-api"]
        assert description.base_directory == "shop"

    @pytest.mark.parametrize(
        ("overrides", "message"),
        [
            ({"build": "ant"}, "Unknown build system"),
            ({"build": "maven", "dialect": "kotlin"}, "dialect"),
            ({"language": "cobol"}, "Unknown language"),
            ({"packaging": "ear"}, "Unknown packaging"),
            ({"platform_version": "latest"}, "Invalid version"),
            ({"dependencies": ["lombok"]}, "Invalid dependency"),
        ],
    )
    def test_invalid_input(self, overrides: dict[str, object], message: str) -> None:
        with pytest.raises(DescriptionError, match=message):
            build_description(DefaultsConfig(), **overrides)


class TestGenerateProject:
    def test_writes_project(self, tmp_path: Path, standard_plugins: PluginManager) -> None:
        svc = GenerationService(standard_plugins)
        result = svc.generate_project(tmp_path / "out", make_description())
        assert result.ok
        assert result.op == "generate_project"
        assert result.data["project_root"] == str(tmp_path / "out")
        assert "pom.xml" in result.data["files"]
        assert result.data["file_count"] == len(result.data["files"])
        assert result.data["description"]["application_name"] == "DemoApplication"
        assert (tmp_path / "out" / "pom.xml").is_file()

    def test_pom_is_well_formed_with_markup_in_text(
        self, tmp_path: Path, standard_plugins: PluginManager
    ) -> None:
        svc = GenerationService(standard_plugins)
        description = make_description(description="R&D <tools>")
        result = svc.generate_project(tmp_path / "out", description)
        assert result.ok
        root = ET.fromstring((tmp_path / "out" / "pom.xml").read_text(encoding="utf-8"))
        description_text = root.findtext("{http://maven.apache.org/POM/4.0.0}description")
        assert description_text == "R&D <tools>"

    def test_base_directory(self, tmp_path: Path, standard_plugins: PluginManager) -> None:
        svc = GenerationService(standard_plugins)
        result = svc.generate_project(tmp_path, make_description(base_directory="shop"))
        assert result.ok
        assert result.data["project_root"] == str(tmp_path / "shop")
        assert (tmp_path / "shop" / "pom.xml").is_file()

    def test_refuses_non_empty_directory(
        self, tmp_path: Path, standard_plugins: PluginManager
    ) -> None:
        (tmp_path / "existing.txt").write_text("keep")
        result = GenerationService(standard_plugins).generate_project(tmp_path, make_description())
        assert not result.ok
        assert result.error is not None
        assert result.error.code == DIRECTORY_NOT_EMPTY
        assert not (tmp_path / "pom.xml").exists()

    def test_force_writes_into_non_empty_directory(
        self, tmp_path: Path, standard_plugins: PluginManager
    ) -> None:
        (tmp_path / "existing.txt").write_text("keep")
        result = GenerationService(standard_plugins).generate_project(
            tmp_path, make_description(), force=True
        )
        assert result.ok
        assert (tmp_path / "pom.xml").is_file()
        assert (tmp_path / "existing.txt").read_text() == "keep"

    def test_io_failure(self, tmp_path: Path) -> None:
        pm = PluginManager()
        pm.register_plugin(_BrokenContributorPlugin())
        result = GenerationService(pm).generate_project(tmp_path, make_description())
        assert not result.ok
        assert result.error is not None
        assert result.error.code == GENERATION_FAILED
        assert "disk full" in result.error.message

    def test_post_generate_hook(self, tmp_path: Path, standard_plugins: PluginManager) -> None:
        recorder = _Recorder()
        standard_plugins.register_plugin(recorder)
        result = GenerationService(standard_plugins).generate_project(tmp_path, make_description())
        assert result.ok
        assert recorder.calls == [{"project_root": str(tmp_path), "files": result.data["files"]}]

    def test_without_plugins_writes_nothing(self, tmp_path: Path) -> None:
        result = GenerationService().generate_project(tmp_path / "out", make_description())
        assert result.ok
        assert result.data["files"] == []


class TestPreviewDescription:
    def test_reports_customizer_changes(self, standard_plugins: PluginManager) -> None:
        description = make_description(name="order service", packaging=None)
        result = GenerationService(standard_plugins).preview_description(description)
        assert result.ok
        assert result.op == "preview_description"
        assert result.data["description"]["application_name"] == "OrderServiceApplication"
        assert result.data["changed_fields"] == ["packaging", "application_name"]
        assert "mavenBuildContributor" in result.data["contributors"]
        assert "gradleBuildContributor" not in result.data["contributors"]

    def test_writes_no_files(self, tmp_path: Path, standard_plugins: PluginManager) -> None:
        GenerationService(standard_plugins).preview_description(
            MutableProjectDescription(base_directory=str(tmp_path / "never"))
        )
        assert not (tmp_path / "never").exists()
