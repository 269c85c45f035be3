"""Command: show the resolved description without writing files."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from projgen.commands._base import ProjgenCommand
from projgen.commands._options import description_options, resolve_description
from projgen.services.result import ServiceResult

if TYPE_CHECKING:
    from projgen.commands._context import AppContext


@click.command(
    cls=ProjgenCommand,
    examples=(
        ("projgen preview", "Description resolved from configured defaults"),
        (
            'projgen preview -n "order service" --build gradle',
            "See the derived artifact id and application name",
        ),
        ("projgen --json preview -g com.acme -a shop", "Machine-readable description"),
    ),
)
@description_options
@click.pass_obj
def preview(app: AppContext, **options: Any) -> None:
    """Resolve the description through every customizer and print it."""
    from projgen.services.generate import GenerationService

    description = resolve_description("preview_description", app.settings.defaults, options)
    if isinstance(description, ServiceResult):
        app.emit(description)
        return

    svc = GenerationService(app.plugin_manager)
    app.emit(svc.preview_description(description))
