"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy plugin loading and centralized result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from projgen.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from projgen.config.settings import ProjgenSettings
    from projgen.plugins.manager import PluginManager
    from projgen.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Plugins are discovered on first use so ``--help`` and ``--version``
    never import plugin modules.
    """

    def __init__(self, settings: ProjgenSettings) -> None:
        self.settings = settings
        self._plugin_manager: PluginManager | None = None

        from projgen.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose, quiet=settings.quiet, log_json=settings.log_json
        )

    @property
    def plugin_manager(self) -> PluginManager:
        """The loaded plugin manager (created lazily on first access)."""
        if self._plugin_manager is None:
            from projgen.plugins.manager import PluginManager

            manager = PluginManager()
            if self.settings.plugins.standard:
                from projgen.plugins.builtins.standard import StandardProjectPlugin

                manager.register_plugin(
                    StandardProjectPlugin(override_root=self.settings.work_dir),
                    name="standard",
                )
            manager.discover_and_load(local_dir=self.settings.local_plugin_dir)
            self._plugin_manager = manager
        return self._plugin_manager

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
