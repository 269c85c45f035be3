"""GenerationService — build descriptions and write projects to disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

from projgen.domain.buildsystem import BuildSystem, Dependency, Language, Packaging
from projgen.domain.description import (
    DescriptionError,
    MutableProjectDescription,
    ProjectDescription,
    ProjectDescriptionDiff,
)
from projgen.domain.version import Version
from projgen.generator.context import ProjectGenerationContext
from projgen.generator.contributor import ProjectContributor
from projgen.generator.errors import ContextError, ProjectGenerationException
from projgen.generator.generator import DefaultProjectAssetGenerator, ProjectGenerator
from projgen.infrastructure.filesystem import is_non_empty_dir, list_files
from projgen.services.base import BaseService
from projgen.services.result import ServiceResult

if TYPE_CHECKING:
    from projgen.config.models import DefaultsConfig

logger = logging.getLogger(__name__)

DIRECTORY_NOT_EMPTY = "DIRECTORY_NOT_EMPTY"
GENERATION_FAILED = "GENERATION_FAILED"
INVALID_DESCRIPTION = "INVALID_DESCRIPTION"


def build_description(defaults: DefaultsConfig, **overrides: Any) -> MutableProjectDescription:
    """Turn config defaults plus explicit overrides into a description.

    ``None`` overrides are ignored so unset CLI flags fall back to
    *defaults*. Keys follow :class:`DefaultsConfig`, plus ``base_directory``.

    Raises:
        DescriptionError: A value cannot be parsed (unknown build system,
            language or packaging, malformed version or dependency).
    """
    values = defaults.model_dump()
    values.update({key: value for key, value in overrides.items() if value is not None})

    try:
        build_system = BuildSystem.for_id(values["build"], values["dialect"])
        language = Language.for_id(values["language"], values["java_version"])
        packaging = Packaging.for_id(values["packaging"])
        platform_version = Version.parse(values["platform_version"])
        dependencies = [Dependency.parse(coords) for coords in values["dependencies"]]
    except KeyError as exc:
        msg = f"Unknown build system {values['build']!r}"
        raise DescriptionError(msg) from exc
    except ValueError as exc:
        raise DescriptionError(str(exc)) from exc

    description = MutableProjectDescription(
        platform_version=platform_version,
        build_system=build_system,
        packaging=packaging,
        language=language,
        group_id=values["group_id"],
        artifact_id=values["artifact_id"],
        version=values["version"],
        name=values["name"],
        description=values["description"],
        package_name=values["package_name"],
        base_directory=values.get("base_directory"),
    )
    for dependency in dependencies:
        description.add_dependency(dependency.id, dependency)
    return description


class GenerationService(BaseService):
    """Runs the generator on behalf of the CLI."""

    def generate_project(
        self,
        output_dir: Path,
        description: MutableProjectDescription,
        *,
        force: bool = False,
    ) -> ServiceResult:
        """Write the project for *description* under *output_dir*.

        Refuses a non-empty target directory unless *force* is set.
        """
        op = "generate_project"
        output_dir = Path(output_dir)
        target = output_dir
        if description.base_directory:
            target = output_dir / description.base_directory

        if not force and is_non_empty_dir(target):
            return ServiceResult.failure(
                op,
                DIRECTORY_NOT_EMPTY,
                f"Target directory is not empty: {target}",
                path=str(target),
            )

        def write_assets(context: ProjectGenerationContext) -> tuple[Path, ProjectDescription]:
            project_root = DefaultProjectAssetGenerator(lambda _d: output_dir)(context)
            return project_root, context.get_bean(ProjectDescription)

        generator = ProjectGenerator(plugin_manager=self._plugins)
        with structlog.contextvars.bound_contextvars(op=op, artifact_id=description.artifact_id):
            try:
                project_root, resolved = generator.generate(description, write_assets)
            except (ProjectGenerationException, ContextError) as exc:
                logger.warning("Generation failed: %s", exc)
                return ServiceResult.failure(op, GENERATION_FAILED, str(exc), path=str(target))

        files = list_files(project_root)
        logger.debug("Generated %d files into %s", len(files), project_root)

        warnings: list[str] = []
        self._dispatch_event(
            "post_generate",
            {"project_root": str(project_root), "description": resolved, "files": files},
            warnings,
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "project_root": str(project_root),
                "files": files,
                "file_count": len(files),
                "description": _description_data(resolved),
            },
            warnings=warnings,
        )

    def preview_description(self, description: MutableProjectDescription) -> ServiceResult:
        """Resolve *description* through every customizer without writing files."""
        op = "preview_description"

        def inspect_context(
            context: ProjectGenerationContext,
        ) -> tuple[ProjectDescription, list[str], list[str]]:
            resolved = context.get_bean(ProjectDescription)
            diff = context.get_bean(ProjectDescriptionDiff)
            contributors = list(context.get_beans_of_type(ProjectContributor))
            return resolved, diff.changed_fields(resolved), contributors

        generator = ProjectGenerator(plugin_manager=self._plugins)
        try:
            resolved, changed, contributors = generator.generate(description, inspect_context)
        except ContextError as exc:
            return ServiceResult.failure(op, GENERATION_FAILED, str(exc))

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "description": _description_data(resolved),
                "changed_fields": changed,
                "contributors": contributors,
            },
        )


def _description_data(description: ProjectDescription) -> dict[str, Any]:
    if isinstance(description, MutableProjectDescription):
        return description.as_dict()
    return {"artifact_id": description.artifact_id, "name": description.name}
