"""Built-in plugin producing a runnable JVM project skeleton.

Registers, for every generation run:

- :class:`DefaultsCustomizer` (runs last among customizers);
- ``.gitignore``, ``HELP.md`` and ``application.properties``;
- the build file and wrapper for the selected build system;
- the main application class and its smoke test for the selected language.

Contributors whose output depends on the description are built lazily so
they see the customized values.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pluggy

from projgen.domain.description import ProjectDescription
from projgen.generator.conditions import (
    Condition,
    all_of,
    any_of,
    on_build_system,
    on_language,
)
from projgen.generator.context import ProjectGenerationContext
from projgen.generator.contributor import (
    MultipleResourcesProjectContributor,
    ProjectContributor,
    TemplateProjectContributor,
)
from projgen.generator.customizer import DefaultsCustomizer, ProjectDescriptionCustomizer

hookimpl = pluggy.HookimplMarker("projgen")

logger = logging.getLogger(__name__)

_GRADLE_CONFIGURATIONS: dict[str, str] = {
    "compile": "implementation",
    "runtime": "runtimeOnly",
    "provided": "compileOnly",
    "test": "testImplementation",
}

_GRADLE_LANGUAGE_PLUGINS: dict[str, tuple[str, str]] = {
    "java": ("java", "java"),
    "kotlin": ("org.jetbrains.kotlin.jvm", 'kotlin("jvm") version "1.9.22"'),
    "groovy": ("groovy", "groovy"),
}

# Used for the Boot parent/plugin when the description has no platform version.
DEFAULT_SPRING_BOOT_VERSION = "3.2.0"
DEPENDENCY_MANAGEMENT_VERSION = "1.1.4"


def template_variables(description: ProjectDescription) -> dict[str, Any]:
    """Flatten a resolved description into Jinja2 template variables."""
    build_system = description.build_system
    language = description.language
    language_id = language.id if language is not None else "java"
    plugin, plugin_kts = _GRADLE_LANGUAGE_PLUGINS.get(
        language_id, _GRADLE_LANGUAGE_PLUGINS["java"]
    )
    dependencies = [
        {
            "group_id": dep.group_id,
            "artifact_id": dep.artifact_id,
            "version": dep.version,
            "scope": dep.scope,
            "notation": str(dep),
            "configuration": _GRADLE_CONFIGURATIONS.get(dep.scope, "implementation"),
        }
        for dep in description.requested_dependencies.values()
    ]
    return {
        "group_id": description.group_id or "",
        "artifact_id": description.artifact_id or "",
        "version": description.version or "",
        "name": description.name or "",
        "description": description.description or "",
        "package_name": description.package_name or "",
        "application_name": description.application_name or "Application",
        "platform_version": str(description.platform_version or ""),
        "spring_boot_version": str(description.platform_version or DEFAULT_SPRING_BOOT_VERSION),
        "dependency_management_version": DEPENDENCY_MANAGEMENT_VERSION,
        "packaging": str(description.packaging or "jar"),
        "language": language_id,
        "java_version": language.jvm_version if language is not None else "17",
        "build_system": build_system.id if build_system is not None else "",
        "build_system_label": str(build_system) if build_system is not None else "none",
        "language_plugin": plugin,
        "language_plugin_kts": plugin_kts,
        "dependencies": dependencies,
    }


def _package_path(description: ProjectDescription) -> Path:
    package = description.package_name or ""
    return Path(*package.split(".")) if package else Path()


class SourceCodeContributor(ProjectContributor):
    """Write the main application class and its test for one language."""

    def __init__(
        self,
        description: ProjectDescription,
        *,
        override_root: Path | None = None,
    ) -> None:
        self._description = description
        self._override_root = override_root

    def contribute(self, project_root: Path) -> None:
        description = self._description
        build_system = description.build_system
        language = description.language
        if build_system is None or language is None:
            logger.debug("No build system or language, skipping source code")
            return

        variables = template_variables(description)
        ext = language.source_file_extension
        application_name = variables["application_name"]
        package_dir = _package_path(description)

        main_dir = build_system.main_source(project_root, language) / package_dir
        test_dir = build_system.test_source(project_root, language) / package_dir
        outputs = (
            (main_dir / f"{application_name}{ext}", f"Application{ext}.j2"),
            (test_dir / f"{application_name}Tests{ext}", f"ApplicationTests{ext}.j2"),
        )
        for target, template in outputs:
            TemplateProjectContributor(
                target.relative_to(project_root).as_posix(),
                template,
                variables,
                override_root=self._override_root,
            ).contribute(project_root)


class StandardProjectPlugin:
    """Registers the standard customizer and contributors."""

    def __init__(self, override_root: Path | None = None) -> None:
        self._override_root = override_root

    @hookimpl
    def configure_generation(self, context: ProjectGenerationContext) -> None:
        context.register_instance(
            DefaultsCustomizer(),
            name="defaultsCustomizer",
            bean_type=ProjectDescriptionCustomizer,
        )

        def variables() -> dict[str, Any]:
            return template_variables(context.get_bean(ProjectDescription))

        for name, relative_path, template, condition, order in _TEMPLATE_CONTRIBUTIONS:
            context.register_bean(
                ProjectContributor,
                self._template_supplier(relative_path, template, variables, order),
                name=name,
                condition=condition,
            )

        context.register_bean(
            ProjectContributor,
            lambda: MultipleResourcesProjectContributor("wrapper/maven", executable=["mvnw"]),
            name="mavenWrapperContributor",
            condition=on_build_system("maven"),
        )
        context.register_bean(
            ProjectContributor,
            lambda: MultipleResourcesProjectContributor("wrapper/gradle", executable=["gradlew"]),
            name="gradleWrapperContributor",
            condition=on_build_system("gradle"),
        )

        context.register_bean(
            ProjectContributor,
            lambda: SourceCodeContributor(
                context.get_bean(ProjectDescription),
                override_root=self._override_root,
            ),
            name="sourceCodeContributor",
            condition=all_of(_has_build_system, _has_known_language),
        )

    def _template_supplier(
        self,
        relative_path: str,
        template: str,
        variables: Callable[[], dict[str, Any]],
        order: int,
    ) -> Callable[[], TemplateProjectContributor]:
        def supplier() -> TemplateProjectContributor:
            return TemplateProjectContributor(
                relative_path,
                template,
                variables,
                override_root=self._override_root,
                order=order,
            )

        return supplier


def _has_build_system(description: ProjectDescription) -> bool:
    return description.build_system is not None


_has_known_language = any_of(*(on_language(lang) for lang in _GRADLE_LANGUAGE_PLUGINS))


# (bean name, relative path, template, condition, order)
_TEMPLATE_CONTRIBUTIONS: tuple[tuple[str, str, str, Condition | None, int], ...] = (
    ("gitignoreContributor", ".gitignore", "gitignore.j2", None, 0),
    (
        "applicationPropertiesContributor",
        "src/main/resources/application.properties",
        "application.properties.j2",
        None,
        0,
    ),
    ("mavenBuildContributor", "pom.xml", "pom.xml.j2", on_build_system("maven"), 0),
    (
        "gradleBuildContributor",
        "build.gradle",
        "build.gradle.j2",
        on_build_system("gradle", "groovy"),
        0,
    ),
    (
        "gradleSettingsContributor",
        "settings.gradle",
        "settings.gradle.j2",
        on_build_system("gradle", "groovy"),
        0,
    ),
    (
        "gradleKtsBuildContributor",
        "build.gradle.kts",
        "build.gradle.kts.j2",
        on_build_system("gradle", "kotlin"),
        0,
    ),
    (
        "gradleKtsSettingsContributor",
        "settings.gradle.kts",
        "settings.gradle.kts.j2",
        on_build_system("gradle", "kotlin"),
        0,
    ),
    ("helpDocumentContributor", "HELP.md", "HELP.md.j2", None, 100),
)
