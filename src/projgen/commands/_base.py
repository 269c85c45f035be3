"""Custom Click base classes with --examples support.

Provides ProjgenCommand and ProjgenGroup that accept an ``examples``
parameter: a sequence of ``(command line, summary)`` pairs. When
``--examples`` is passed, the pairs are printed as an aligned definition
list and the command exits, which keeps ``--help`` concise.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import click

Example = tuple[str, str]


def format_examples(ctx: click.Context, examples: Sequence[Example]) -> str:
    """Render *examples* the way Click renders an options section."""
    formatter = ctx.make_formatter()
    with formatter.section(f"Examples for '{ctx.command_path}'"):
        formatter.write_dl([(line, summary) for line, summary in examples])
    return formatter.getvalue().rstrip("\n")


def _add_examples_option(cmd: click.Command, examples: Sequence[Example]) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(format_examples(ctx, examples))
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class ProjgenCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(
        self, *args: Any, examples: Sequence[Example] | None = None, **kwargs: Any
    ) -> None:
        super().__init__(*args, **kwargs)
        self.examples = tuple(examples or ())
        if self.examples:
            _add_examples_option(self, self.examples)


class ProjgenGroup(click.Group):
    """Click Group subclass that supports an ``--examples`` flag.

    Subcommands default to :class:`ProjgenCommand`.
    """

    command_class = ProjgenCommand

    def __init__(
        self, *args: Any, examples: Sequence[Example] | None = None, **kwargs: Any
    ) -> None:
        super().__init__(*args, **kwargs)
        self.examples = tuple(examples or ())
        if self.examples:
            _add_examples_option(self, self.examples)
