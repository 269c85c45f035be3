"""Bean conditions evaluated against the resolved project description."""

from __future__ import annotations

from collections.abc import Callable

from projgen.domain.description import ProjectDescription
from projgen.domain.version import Version

Condition = Callable[[ProjectDescription], bool]


def on_build_system(build_id: str, dialect: str | None = None) -> Condition:
    """Match a build system id and, optionally, its dialect."""

    def matches(description: ProjectDescription) -> bool:
        build_system = description.build_system
        if build_system is None or build_system.id != build_id:
            return False
        return dialect is None or build_system.dialect == dialect

    return matches


def on_language(language_id: str) -> Condition:
    def matches(description: ProjectDescription) -> bool:
        return description.language is not None and description.language.id == language_id

    return matches


def on_packaging(packaging_id: str) -> Condition:
    def matches(description: ProjectDescription) -> bool:
        return description.packaging is not None and description.packaging.id == packaging_id

    return matches


def on_platform_version(minimum: str, maximum: str | None = None) -> Condition:
    """Match ``minimum <= platform_version < maximum``."""
    lower = Version.parse(minimum)
    upper = Version.parse(maximum) if maximum is not None else None

    def matches(description: ProjectDescription) -> bool:
        version = description.platform_version
        if version is None or version < lower:
            return False
        return upper is None or version < upper

    return matches


def all_of(*conditions: Condition) -> Condition:
    def matches(description: ProjectDescription) -> bool:
        return all(condition(description) for condition in conditions)

    return matches


def any_of(*conditions: Condition) -> Condition:
    def matches(description: ProjectDescription) -> bool:
        return any(condition(description) for condition in conditions)

    return matches
