"""ProjectGenerator — orchestrates one generation run.

Order of operations for :meth:`ProjectGenerator.generate`:

1. register the description (lazy: customizers run on first lookup);
2. let plugins register beans via ``configure_generation``;
3. invoke the caller's context consumer;
4. refresh the context;
5. hand the context to the asset generator.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

from projgen.domain.description import (
    MutableProjectDescription,
    ProjectDescription,
    ProjectDescriptionDiff,
)
from projgen.generator.context import ProjectGenerationContext
from projgen.generator.contributor import ProjectContributor, invoke_contributors
from projgen.generator.customizer import ProjectDescriptionCustomizer, apply_customizers
from projgen.generator.errors import ProjectGenerationException

if TYPE_CHECKING:
    from projgen.plugins.manager import PluginManager

logger = logging.getLogger(__name__)

_T = TypeVar("_T")

ProjectAssetGenerator = Callable[[ProjectGenerationContext], _T]


class ProjectDirectoryFactory(ABC):
    """Decides where a project is written.

    Plain callables ``description -> Path`` registered under this type
    work as well.
    """

    @abstractmethod
    def __call__(self, description: ProjectDescription) -> Path:
        """Return the directory the project should be generated into."""


class ProjectGenerator:
    """Generate project assets from a description.

    Parameters:
        context_consumer: Called with the fresh context before refresh, to
            register additional beans.
        context_factory: Creates the per-run context.
        plugin_manager: Optional loaded plugin manager whose
            ``configure_generation`` hook contributes beans.
    """

    def __init__(
        self,
        context_consumer: Callable[[ProjectGenerationContext], None] | None = None,
        context_factory: Callable[[], ProjectGenerationContext] = ProjectGenerationContext,
        plugin_manager: PluginManager | None = None,
    ) -> None:
        self._context_consumer = context_consumer
        self._context_factory = context_factory
        self._plugin_manager = plugin_manager

    def generate(
        self,
        description: ProjectDescription,
        asset_generator: ProjectAssetGenerator[_T],
    ) -> _T:
        """Run the generation pipeline and return the asset generator's result.

        Raises:
            ProjectGenerationException: If asset generation fails with an
                I/O error.
        """
        with self._context_factory() as context:
            self._register_project_description(context, description)
            self._register_plugin_beans(context)
            if self._context_consumer is not None:
                self._context_consumer(context)
            context.refresh()
            try:
                return asset_generator(context)
            except OSError as exc:
                msg = f"Failed to generate project: {exc}"
                raise ProjectGenerationException(msg) from exc

    def _register_project_description(
        self,
        context: ProjectGenerationContext,
        description: ProjectDescription,
    ) -> None:
        if not isinstance(description, MutableProjectDescription):
            context.register_instance(
                description, name="projectDescription", bean_type=ProjectDescription
            )
            return

        # Snapshot now, before any customizer has touched the description.
        context.register_instance(
            ProjectDescriptionDiff(description), name="projectDescriptionDiff"
        )

        def resolve() -> ProjectDescription:
            customizers = context.get_beans_of_type(ProjectDescriptionCustomizer).values()
            return apply_customizers(description, customizers)

        context.register_bean(ProjectDescription, resolve, name="projectDescription")

    def _register_plugin_beans(self, context: ProjectGenerationContext) -> None:
        if self._plugin_manager is None:
            return
        self._plugin_manager.hook.configure_generation(context=context)


class DefaultProjectAssetGenerator:
    """Create the project directory and run every contributor into it.

    The directory comes from *directory_factory* when given, otherwise
    from a :class:`ProjectDirectoryFactory` bean registered in the context.
    """

    def __init__(
        self,
        directory_factory: Callable[[ProjectDescription], Path] | None = None,
    ) -> None:
        self._directory_factory = directory_factory

    def __call__(self, context: ProjectGenerationContext) -> Path:
        description = context.get_bean(ProjectDescription)
        project_root = self._resolve_project_directory(context, description)
        contributors = context.ordered_beans(ProjectContributor)
        logger.debug("Running %d contributors into %s", len(contributors), project_root)
        invoke_contributors(project_root, contributors)
        return project_root

    def _resolve_project_directory(
        self,
        context: ProjectGenerationContext,
        description: ProjectDescription,
    ) -> Path:
        factory = self._directory_factory or context.get_bean_if_available(
            ProjectDirectoryFactory
        )
        if factory is None:
            msg = "No project directory factory is available"
            raise ProjectGenerationException(msg)
        directory = Path(factory(description))
        if description.base_directory:
            directory = directory / description.base_directory
        directory.mkdir(parents=True, exist_ok=True)
        return directory
