"""Pluggy hook specifications for projgen.

Two setup-time hooks shape a generation run; one notification hook fires
after a project has been written.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from projgen.domain.buildsystem import BuildSystem
    from projgen.domain.description import ProjectDescription
    from projgen.generator.context import ProjectGenerationContext

hookspec = pluggy.HookspecMarker("projgen")


class ProjgenHookSpec:
    """Hook specifications for the projgen plugin system."""

    @hookspec
    def configure_generation(self, context: ProjectGenerationContext) -> None:
        """Register customizers, contributors or a directory factory for one run."""

    @hookspec
    def register_build_systems(self) -> dict[str, type[BuildSystem]] | None:
        """Return build system id -> BuildSystem class mappings."""

    @hookspec
    def post_generate(
        self,
        project_root: str,
        description: ProjectDescription,
        files: list[str],
    ) -> None:
        """Called after a project has been generated."""
