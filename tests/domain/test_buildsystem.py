"""Tests for build systems, languages, packaging and dependencies."""

from __future__ import annotations

from pathlib import Path

import pytest

from projgen.domain.buildsystem import (
    BUILD_SYSTEM_REGISTRY,
    BuildSystem,
    Dependency,
    GradleBuildSystem,
    Language,
    MavenBuildSystem,
    Packaging,
    register_build_system,
)


class BazelBuildSystem(BuildSystem):
    id = "bazel"
    build_file_name = "BUILD"


class TestBuildSystem:
    def test_for_id(self) -> None:
        assert isinstance(BuildSystem.for_id("maven"), MavenBuildSystem)
        gradle = BuildSystem.for_id("gradle", "kotlin")
        assert isinstance(gradle, GradleBuildSystem)
        assert gradle.dialect == "kotlin"

    def test_unknown_id(self) -> None:
        with pytest.raises(KeyError):
            BuildSystem.for_id("ant")

    def test_unknown_dialect(self) -> None:
        with pytest.raises(ValueError, match="dialect"):
            GradleBuildSystem("scala")

    def test_gradle_build_file_follows_dialect(self) -> None:
        assert GradleBuildSystem().build_file == "build.gradle"
        assert GradleBuildSystem("kotlin").build_file == "build.gradle.kts"
        assert MavenBuildSystem().build_file == "pom.xml"

    def test_source_directories(self, tmp_path: Path) -> None:
        maven = MavenBuildSystem()
        kotlin = Language.for_id("kotlin")
        assert maven.main_source(tmp_path, kotlin) == tmp_path / "src" / "main" / "kotlin"
        assert maven.test_source(tmp_path, kotlin) == tmp_path / "src" / "test" / "kotlin"
        assert maven.main_resources(tmp_path) == tmp_path / "src" / "main" / "resources"

    def test_equality(self) -> None:
        assert MavenBuildSystem() == MavenBuildSystem()
        assert GradleBuildSystem() == GradleBuildSystem("groovy")
        assert GradleBuildSystem() != GradleBuildSystem("kotlin")
        assert len({MavenBuildSystem(), MavenBuildSystem()}) == 1


class TestRegistry:
    def test_register_plugin_build_system(self) -> None:
        register_build_system("Bazel", BazelBuildSystem)
        assert BUILD_SYSTEM_REGISTRY["bazel"] is BazelBuildSystem
        assert isinstance(BuildSystem.for_id("bazel"), BazelBuildSystem)

    def test_builtin_ids_are_reserved(self) -> None:
        with pytest.raises(ValueError, match="built-in"):
            register_build_system("maven", BazelBuildSystem)

    def test_requires_build_system_subclass(self) -> None:
        with pytest.raises(TypeError):
            register_build_system("thing", object)  # type: ignore[arg-type]

    def test_empty_id(self) -> None:
        with pytest.raises(ValueError):
            register_build_system("  ", BazelBuildSystem)


class TestLanguageAndPackaging:
    def test_language_defaults(self) -> None:
        java = Language.for_id("Java")
        assert java.id == "java"
        assert java.jvm_version == "17"
        assert java.source_file_extension == ".java"
        assert Language.for_id("groovy", "21").jvm_version == "21"

    def test_unknown_language(self) -> None:
        with pytest.raises(ValueError, match="Unknown language"):
            Language.for_id("cobol")

    def test_packaging(self) -> None:
        assert str(Packaging.for_id("WAR")) == "war"
        with pytest.raises(ValueError):
            Packaging.for_id("ear")


class TestDependency:
    def test_parse_with_version(self) -> None:
        dep = Dependency.parse("org.slf4j:slf4j-api:2.0.9")
        assert dep.group_id == "org.slf4j"
        assert dep.artifact_id == "slf4j-api"
        assert dep.version == "2.0.9"
        assert dep.id == "slf4j-api"
        assert str(dep) == "org.slf4j:slf4j-api:2.0.9"

    def test_parse_without_version(self) -> None:
        dep = Dependency.parse("org.projectlombok:lombok", scope="provided")
        assert dep.version is None
        assert dep.scope == "provided"
        assert str(dep) == "org.projectlombok:lombok"

    @pytest.mark.parametrize("text", ["lombok", "a:b:c:d", "a::c"])
    def test_parse_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            Dependency.parse(text)
