"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). Renderers are
dispatched by ``result.op`` in :func:`render_result`; unknown ops fall
through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from projgen.output.console import create_console, get_output, style_for_build_system

if TYPE_CHECKING:
    from rich.console import Console

    from projgen.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"
    if result.op == "generate_project":
        return str(result.data.get("project_root", ""))
    if result.op == "list_plugins":
        return "\n".join(result.data.get("plugins", []))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="pg.ok")
    op = Text(f"  {result.op}", style="pg.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    console.print(Text.assemble((f"  {key}: ", "pg.key"), (str(value), style)))


def _description_table(description: dict[str, Any], changed: list[str]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Field", style="pg.key", no_wrap=True)
    table.add_column("Value")
    for key, value in description.items():
        if key == "dependencies":
            value = ", ".join(value) if value else ""
        style = "pg.changed" if key in changed else ""
        if key == "build_system":
            style = style or style_for_build_system(value)
        table.add_row(key, Text("" if value is None else str(value), style=style))
    return table


def _file_tree(root: str, files: list[str]) -> Tree:
    tree = Tree(Text(root, style="pg.path"))
    nodes: dict[str, Tree] = {}
    for path in files:
        parent = tree
        parts = path.split("/")
        for depth, part in enumerate(parts[:-1]):
            key = "/".join(parts[: depth + 1])
            if key not in nodes:
                nodes[key] = parent.add(f"{part}/")
            parent = nodes[key]
        parent.add(parts[-1])
    return tree


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="pg.error")
    op = Text(f"  {result.op}", style="pg.op")
    console.print(label, op, Text(": "), msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_generate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "project_root", d.get("project_root", ""), style="pg.path")
    _field(console, "files", d.get("file_count", 0))
    if verbose:
        console.print()
        console.print(_file_tree(str(d.get("project_root", "")), d.get("files", [])))


def _render_preview(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    changed = result.data.get("changed_fields", [])
    console.print(_description_table(result.data.get("description", {}), changed))
    if changed:
        _field(console, "changed_fields", ", ".join(changed), style="pg.changed")
    if verbose:
        for name in result.data.get("contributors", []):
            console.print(f"    {name}")


def _render_plugins(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    plugins = result.data.get("plugins", [])
    for name in plugins:
        console.print(f"  {name}")
    build_systems = result.data.get("build_systems", [])
    if build_systems:
        _field(console, "build_systems", ", ".join(build_systems))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    "generate_project": _render_generate,
    "preview_description": _render_preview,
    "list_plugins": _render_plugins,
}
