"""Root CLI group for projgen with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from projgen import __version__
from projgen.commands import register_commands
from projgen.commands._context import AppContext
from projgen.config.settings import ProjgenSettings


@click.group(invoke_without_command=True, context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="projgen")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output; only errors are logged.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-interact", is_flag=True, help="Non-interactive mode (no prompts).")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Use this projgen.toml instead of searching for one.",
)
@click.option(
    "-C",
    "--work-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Find projgen.toml, local plugins, and template overrides from DIR.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_interact: bool,
    config_path: str | None,
    work_dir: Path | None,
) -> None:
    """projgen: generate JVM project skeletons.

    Defaults for every description field come from projgen.toml and
    PROJGEN_* environment variables; command options override them.
    """
    ctx.ensure_object(dict)
    settings = ProjgenSettings.from_cli(
        config_path=config_path,
        work_dir=work_dir.resolve() if work_dir else None,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        no_interact=no_interact,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
