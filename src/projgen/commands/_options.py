"""Description options shared by ``generate`` and ``preview``."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import click

from projgen.domain.description import DescriptionError, MutableProjectDescription
from projgen.services.generate import INVALID_DESCRIPTION, build_description
from projgen.services.result import ServiceResult

if TYPE_CHECKING:
    from projgen.config.models import DefaultsConfig

DESCRIPTION_OPTION_NAMES: tuple[str, ...] = (
    "group_id",
    "artifact_id",
    "name",
    "description",
    "package_name",
    "version",
    "platform_version",
    "build",
    "dialect",
    "language",
    "java_version",
    "packaging",
    "dependencies",
    "base_directory",
)

_DESCRIPTION_OPTIONS = (
    click.option("-g", "--group-id", default=None, help="Project group id."),
    click.option("-a", "--artifact-id", default=None, help="Project artifact id."),
    click.option("-n", "--name", default=None, help="Project name."),
    click.option("--description", default=None, help="Project description."),
    click.option("--package-name", default=None, help="Root package of the sources."),
    click.option("--project-version", "version", default=None, help="Project version."),
    click.option("--platform-version", default=None, help="Platform version, e.g. 3.2.0."),
    click.option("-b", "--build", default=None, help="Build system id (maven, gradle)."),
    click.option("--dialect", default=None, help="Build file dialect (groovy, kotlin)."),
    click.option(
        "-l",
        "--language",
        type=click.Choice(["java", "kotlin", "groovy"]),
        default=None,
        help="Source language.",
    ),
    click.option("--java-version", default=None, help="Target JVM version."),
    click.option(
        "--packaging",
        type=click.Choice(["jar", "war"]),
        default=None,
        help="Artifact packaging.",
    ),
    click.option(
        "-d",
        "--dependency",
        "dependencies",
        multiple=True,
        help="Dependency as group:artifact[:version] (repeatable).",
    ),
    click.option("--base-dir", "base_directory", default=None, help="Sub-directory to write into."),
)


def description_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the description options to a Click command function."""
    for decorator in reversed(_DESCRIPTION_OPTIONS):
        func = decorator(func)
    return func


def resolve_description(
    op: str,
    defaults: DefaultsConfig,
    options: dict[str, Any],
) -> MutableProjectDescription | ServiceResult:
    """Build a description from config defaults and command options.

    Returns a failed :class:`ServiceResult` when the input is invalid.
    """
    overrides = {key: options.get(key) for key in DESCRIPTION_OPTION_NAMES}
    # An empty tuple means no -d flag was given: keep the configured list.
    overrides["dependencies"] = list(overrides["dependencies"] or ()) or None
    try:
        return build_description(defaults, **overrides)
    except DescriptionError as exc:
        return ServiceResult.failure(op, INVALID_DESCRIPTION, str(exc))
