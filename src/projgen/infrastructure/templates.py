"""Shared Jinja2 template loading with per-project override support."""

from __future__ import annotations

from pathlib import Path

from jinja2 import (
    BaseLoader,
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    StrictUndefined,
    select_autoescape,
)

OVERRIDE_DIR = Path(".projgen") / "templates"
# Rendered values are XML-escaped for these templates only.
XML_TEMPLATE_EXTENSIONS = ("xml.j2", "xml")


def build_template_environment(group: str, *, override_root: Path | None = None) -> Environment:
    """Build a Jinja2 environment with user overrides before packaged defaults.

    User overrides are loaded from ``.projgen/templates/`` under
    *override_root* (usually the working directory the CLI was run from).
    Both a namespaced directory (for example ``.projgen/templates/standard/``)
    and the shared root are supported.
    """

    loaders: list[BaseLoader] = []
    if override_root is not None:
        template_root = override_root / OVERRIDE_DIR
        loaders.append(FileSystemLoader([str(template_root / group), str(template_root)]))

    loaders.append(PackageLoader("projgen", f"templates/{group}"))
    return Environment(
        loader=ChoiceLoader(loaders),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
        autoescape=select_autoescape(XML_TEMPLATE_EXTENSIONS, default_for_string=False),
    )
