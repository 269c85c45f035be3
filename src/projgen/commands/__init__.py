"""Subcommand modules for projgen.

Provides register_commands() which uses deferred imports to keep
``projgen --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    from projgen.commands.generate import generate
    from projgen.commands.plugins_cmd import plugins
    from projgen.commands.preview import preview

    cli.add_command(generate)
    cli.add_command(preview)
    cli.add_command(plugins)
