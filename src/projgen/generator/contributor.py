"""Project contributors — callbacks that write files into the project.

Contributors run in ascending ``order`` against the project root. I/O
errors are not caught here: the generator turns them into a
:class:`~projgen.generator.errors.ProjectGenerationException`. Template
rendering failures are raised as that exception directly.
"""

from __future__ import annotations

import fnmatch
import logging
import stat
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Mapping
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path, PurePosixPath
from typing import Any, Union

from jinja2 import TemplateError

from projgen.domain.ordering import DEFAULT_ORDER, sort_by_order
from projgen.generator.errors import ProjectGenerationException
from projgen.infrastructure.templates import build_template_environment

logger = logging.getLogger(__name__)

RESOURCE_PACKAGE = "projgen"
RESOURCE_ROOT = "templates"


class ProjectContributor(ABC):
    """Writes one or more files below the project root."""

    order: int = DEFAULT_ORDER

    @abstractmethod
    def contribute(self, project_root: Path) -> None:
        """Create files under *project_root*."""


ContributorLike = Union[ProjectContributor, Callable[[Path], None]]


def invoke_contributors(project_root: Path, contributors: Iterable[ContributorLike]) -> None:
    """Run *contributors* in ascending order; the first failure propagates."""
    for contributor in sort_by_order(contributors):
        logger.debug("Running project contributor %r", contributor)
        if isinstance(contributor, ProjectContributor):
            contributor.contribute(project_root)
        else:
            contributor(project_root)


def _resource(location: str) -> Traversable:
    """Resolve ``a/b/c`` relative to the packaged ``templates`` directory."""
    node = resources.files(RESOURCE_PACKAGE).joinpath(RESOURCE_ROOT)
    for part in PurePosixPath(location).parts:
        node = node.joinpath(part)
    return node


def _make_executable(path: Path) -> None:
    mode = path.stat().st_mode
    path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


class SingleResourceProjectContributor(ProjectContributor):
    """Copy one packaged resource to a path relative to the project root."""

    def __init__(self, relative_path: str, resource: str, *, order: int = DEFAULT_ORDER) -> None:
        self.relative_path = relative_path
        self.resource = resource
        self.order = order

    def contribute(self, project_root: Path) -> None:
        source = _resource(self.resource)
        if not source.is_file():
            msg = f"Packaged resource not found: {self.resource}"
            raise FileNotFoundError(msg)
        target = project_root / self.relative_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(source.read_bytes())

    def __repr__(self) -> str:
        return f"SingleResourceProjectContributor({self.relative_path!r}, {self.resource!r})"


class MultipleResourcesProjectContributor(ProjectContributor):
    """Copy a packaged resource tree into the project root.

    Relative paths are preserved. Files whose relative path matches one of
    the *executable* glob patterns get the executable bit.
    """

    def __init__(
        self,
        root_resource: str,
        *,
        executable: Iterable[str] = (),
        order: int = DEFAULT_ORDER,
    ) -> None:
        self.root_resource = root_resource
        self.executable = tuple(executable)
        self.order = order

    def contribute(self, project_root: Path) -> None:
        root = _resource(self.root_resource)
        if not root.is_dir():
            msg = f"Packaged resource directory not found: {self.root_resource}"
            raise FileNotFoundError(msg)
        for relative, node in self._walk(root, PurePosixPath()):
            target = project_root.joinpath(*relative.parts)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(node.read_bytes())
            if any(fnmatch.fnmatch(relative.as_posix(), pat) for pat in self.executable):
                _make_executable(target)

    def _walk(
        self, node: Traversable, prefix: PurePosixPath
    ) -> Iterable[tuple[PurePosixPath, Traversable]]:
        for child in sorted(node.iterdir(), key=lambda c: c.name):
            if child.name == "__pycache__":
                continue
            relative = prefix / child.name
            if child.is_dir():
                yield from self._walk(child, relative)
            else:
                yield relative, child

    def __repr__(self) -> str:
        return f"MultipleResourcesProjectContributor({self.root_resource!r})"


class TemplateProjectContributor(ProjectContributor):
    """Render a Jinja2 template to a path relative to the project root.

    *variables* may be a mapping or a zero-argument callable producing
    one; the callable form is evaluated at contribution time so it sees
    the fully customized description.
    """

    def __init__(
        self,
        relative_path: str,
        template: str,
        variables: Mapping[str, Any] | Callable[[], Mapping[str, Any]] | None = None,
        *,
        group: str = "standard",
        override_root: Path | None = None,
        order: int = DEFAULT_ORDER,
    ) -> None:
        self.relative_path = relative_path
        self.template = template
        self.variables = variables
        self.group = group
        self.override_root = override_root
        self.order = order

    def render(self) -> str:
        """Render the template.

        Raises:
            ProjectGenerationException: The template is missing or fails
                to render.
        """
        env = build_template_environment(self.group, override_root=self.override_root)
        variables = self.variables() if callable(self.variables) else (self.variables or {})
        try:
            return env.get_template(self.template).render(**variables)
        except TemplateError as exc:
            msg = f"Failed to render template {self.template!r}: {exc}"
            raise ProjectGenerationException(msg) from exc

    def contribute(self, project_root: Path) -> None:
        target = project_root / self.relative_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.render(), encoding="utf-8")

    def __repr__(self) -> str:
        return f"TemplateProjectContributor({self.relative_path!r}, {self.template!r})"
