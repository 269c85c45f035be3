"""Project description — the record every generation run is built from.

``MutableProjectDescription`` is deliberately a plain attribute bag:
customizers overwrite fields in order and the last writer wins.
``ProjectDescription`` is the read-only view handed to contributors.
``ProjectDescriptionDiff`` snapshots the record before customization so
later stages can tell what the customizers changed.
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from projgen.domain.naming import clean_package_name

if TYPE_CHECKING:
    from collections.abc import Mapping

    from projgen.domain.buildsystem import BuildSystem, Dependency, Language, Packaging
    from projgen.domain.version import Version

DESCRIPTION_FIELDS: tuple[str, ...] = (
    "platform_version",
    "build_system",
    "packaging",
    "language",
    "group_id",
    "artifact_id",
    "version",
    "name",
    "description",
    "application_name",
    "package_name",
    "base_directory",
)


class DescriptionError(ValueError):
    """Raised when user input cannot be turned into a valid description."""


@runtime_checkable
class ProjectDescription(Protocol):
    """Read-only view of a project description."""

    @property
    def platform_version(self) -> Version | None: ...

    @property
    def build_system(self) -> BuildSystem | None: ...

    @property
    def packaging(self) -> Packaging | None: ...

    @property
    def language(self) -> Language | None: ...

    @property
    def requested_dependencies(self) -> Mapping[str, Dependency]: ...

    @property
    def group_id(self) -> str | None: ...

    @property
    def artifact_id(self) -> str | None: ...

    @property
    def version(self) -> str | None: ...

    @property
    def name(self) -> str | None: ...

    @property
    def description(self) -> str | None: ...

    @property
    def application_name(self) -> str | None: ...

    @property
    def package_name(self) -> str | None: ...

    @property
    def base_directory(self) -> str | None: ...


class MutableProjectDescription:
    """Mutable project description.

    Every field defaults to ``None``; requested dependencies default to an
    empty mapping keyed by dependency id (insertion ordered).
    """

    def __init__(self, **fields: Any) -> None:
        self.platform_version: Version | None = None
        self.build_system: BuildSystem | None = None
        self.packaging: Packaging | None = None
        self.language: Language | None = None
        self.group_id: str | None = None
        self.artifact_id: str | None = None
        self.version: str | None = None
        self.name: str | None = None
        self.description: str | None = None
        self.application_name: str | None = None
        self._package_name: str | None = None
        self.base_directory: str | None = None
        self._requested_dependencies: dict[str, Dependency] = {}

        for key, value in fields.items():
            if key not in DESCRIPTION_FIELDS:
                msg = f"Unknown project description field: {key!r}"
                raise TypeError(msg)
            setattr(self, key, value)

    # -- package name -------------------------------------------------------

    @property
    def package_name(self) -> str | None:
        """Explicit package name, or one derived from group and artifact ids."""
        if self._package_name is not None and self._package_name.strip():
            return self._package_name
        if self.group_id and self.artifact_id:
            return clean_package_name(f"{self.group_id}.{self.artifact_id}")
        return None

    @package_name.setter
    def package_name(self, value: str | None) -> None:
        self._package_name = value

    # -- dependencies -------------------------------------------------------

    @property
    def requested_dependencies(self) -> Mapping[str, Dependency]:
        return dict(self._requested_dependencies)

    def add_dependency(self, dependency_id: str, dependency: Dependency) -> Dependency | None:
        """Add or replace a dependency; returns the one it replaced, if any."""
        previous = self._requested_dependencies.get(dependency_id)
        self._requested_dependencies[dependency_id] = dependency
        return previous

    def remove_dependency(self, dependency_id: str) -> Dependency | None:
        return self._requested_dependencies.pop(dependency_id, None)

    # -- copying / views ----------------------------------------------------

    def create_copy(self) -> MutableProjectDescription:
        """Shallow copy with its own dependency mapping."""
        duplicate = copy.copy(self)
        duplicate._requested_dependencies = dict(self._requested_dependencies)
        return duplicate

    def as_dict(self) -> dict[str, Any]:
        """JSON-friendly view of the resolved description."""
        data: dict[str, Any] = {}
        for field_name in DESCRIPTION_FIELDS:
            value = getattr(self, field_name)
            data[field_name] = None if value is None else str(value)
        if self.build_system is not None:
            data["build_system"] = self.build_system.id
            data["build_dialect"] = self.build_system.dialect
        if self.language is not None:
            data["jvm_version"] = self.language.jvm_version
        data["dependencies"] = [str(dep) for dep in self._requested_dependencies.values()]
        return data

    def __repr__(self) -> str:
        return (
            f"MutableProjectDescription(group_id={self.group_id!r}, "
            f"artifact_id={self.artifact_id!r}, name={self.name!r})"
        )


class ProjectDescriptionDiff:
    """Compare a description against the snapshot taken at construction."""

    def __init__(self, original: MutableProjectDescription) -> None:
        self._original = original.create_copy()

    @property
    def original(self) -> ProjectDescription:
        return self._original

    def changed_fields(self, current: ProjectDescription) -> list[str]:
        """Names of fields whose value differs from the snapshot."""
        changed = [
            name
            for name in DESCRIPTION_FIELDS
            if getattr(self._original, name) != getattr(current, name)
        ]
        if dict(self._original.requested_dependencies) != dict(current.requested_dependencies):
            changed.append("requested_dependencies")
        return changed

    def has_platform_version_changed(self, current: ProjectDescription) -> bool:
        return self._original.platform_version != current.platform_version

    def has_build_system_changed(self, current: ProjectDescription) -> bool:
        return self._original.build_system != current.build_system

    def has_packaging_changed(self, current: ProjectDescription) -> bool:
        return self._original.packaging != current.packaging

    def has_language_changed(self, current: ProjectDescription) -> bool:
        return self._original.language != current.language

    def has_group_id_changed(self, current: ProjectDescription) -> bool:
        return self._original.group_id != current.group_id

    def has_artifact_id_changed(self, current: ProjectDescription) -> bool:
        return self._original.artifact_id != current.artifact_id

    def has_version_changed(self, current: ProjectDescription) -> bool:
        return self._original.version != current.version

    def has_name_changed(self, current: ProjectDescription) -> bool:
        return self._original.name != current.name

    def has_description_changed(self, current: ProjectDescription) -> bool:
        return self._original.description != current.description

    def has_application_name_changed(self, current: ProjectDescription) -> bool:
        return self._original.application_name != current.application_name

    def has_package_name_changed(self, current: ProjectDescription) -> bool:
        return self._original.package_name != current.package_name

    def has_base_directory_changed(self, current: ProjectDescription) -> bool:
        return self._original.base_directory != current.base_directory
