"""Command: generate a project skeleton."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from projgen.commands._base import ProjgenCommand
from projgen.commands._options import description_options, resolve_description
from projgen.services.result import ServiceResult

if TYPE_CHECKING:
    from projgen.commands._context import AppContext
    from projgen.domain.description import MutableProjectDescription


@click.command(
    cls=ProjgenCommand,
    examples=(
        ("projgen generate ./demo", "Maven/Java project with configured defaults"),
        ("projgen generate ./demo -g com.acme -a shop -n Shop", "Custom coordinates and name"),
        (
            "projgen generate ./demo --build gradle --dialect kotlin --language kotlin",
            "Gradle Kotlin DSL build for a Kotlin project",
        ),
        (
            "projgen generate ./demo -d org.slf4j:slf4j-api:2.0.9 --force",
            "Extra dependency, overwriting a non-empty directory",
        ),
        ("projgen --json generate ./demo", "Machine-readable result"),
    ),
)
@click.argument(
    "output_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
)
@description_options
@click.option("--force", is_flag=True, help="Write into a non-empty directory.")
@click.pass_obj
def generate(app: AppContext, output_dir: Path, force: bool, **options: Any) -> None:
    """Generate a project into OUTPUT_DIR (default: current directory)."""
    from projgen.services.generate import GenerationService

    description = resolve_description("generate_project", app.settings.defaults, options)
    if isinstance(description, ServiceResult):
        app.emit(description)
        return

    svc = GenerationService(app.plugin_manager)
    interactive = not (app.settings.no_interact or app.settings.json_output)
    if not force and interactive and _is_non_empty(output_dir, description):
        force = click.confirm(f"{output_dir} is not empty. Generate anyway?", default=False)
    app.emit(svc.generate_project(output_dir, description, force=force))


def _is_non_empty(output_dir: Path, description: MutableProjectDescription) -> bool:
    from projgen.infrastructure.filesystem import is_non_empty_dir

    target = output_dir / description.base_directory if description.base_directory else output_dir
    return is_non_empty_dir(target)
