"""Command group: inspect loaded plugins."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from projgen.commands._base import ProjgenGroup
from projgen.services.result import ServiceResult

if TYPE_CHECKING:
    from projgen.commands._context import AppContext


@click.group(
    cls=ProjgenGroup,
    examples=(
        ("projgen plugins list", "Loaded plugins and build systems"),
        ("projgen --json plugins list", "Same, as JSON"),
    ),
)
def plugins() -> None:
    """Inspect generation plugins."""


@plugins.command(name="list")
@click.pass_obj
def list_plugins(app: AppContext) -> None:
    """List loaded plugins and available build systems."""
    from projgen.domain.buildsystem import BUILD_SYSTEM_REGISTRY

    manager = app.plugin_manager
    app.emit(
        ServiceResult(
            ok=True,
            op="list_plugins",
            data={
                "plugins": manager.list_plugin_names(),
                "build_systems": sorted(BUILD_SYSTEM_REGISTRY),
                "local_dir": str(app.settings.local_plugin_dir),
            },
        )
    )
