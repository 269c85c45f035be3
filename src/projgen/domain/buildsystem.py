"""Build systems, languages, packaging, and dependency coordinates.

BUILD_SYSTEM_REGISTRY maps a build system id to its class. Built-ins
(maven, gradle) are registered at import time; plugins add more through
:func:`register_build_system`.
"""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel


class BuildSystem:
    """Base class for build systems.

    Subclasses set ``id``, ``build_file_name`` and, when they support more
    than one build script flavour, ``dialects`` keyed by dialect name with
    the build file name as the value.
    """

    id: ClassVar[str] = ""
    build_file_name: ClassVar[str] = ""
    dialects: ClassVar[dict[str, str]] = {}
    default_dialect: ClassVar[str | None] = None

    def __init__(self, dialect: str | None = None) -> None:
        if dialect is None:
            dialect = self.default_dialect
        elif dialect not in self.dialects:
            supported = ", ".join(sorted(self.dialects)) or "none"
            msg = (
                f"Unknown dialect {dialect!r} for build system {self.id!r} "
                f"(supported: {supported})"
            )
            raise ValueError(msg)
        self.dialect = dialect

    @staticmethod
    def for_id(build_id: str, dialect: str | None = None) -> BuildSystem:
        """Instantiate the registered build system for *build_id*.

        Raises:
            KeyError: If no build system is registered under *build_id*.
            ValueError: If *dialect* is not supported by that build system.
        """
        cls = BUILD_SYSTEM_REGISTRY.get(build_id.strip().lower())
        if cls is None:
            msg = f"Unknown build system {build_id!r}"
            raise KeyError(msg)
        return cls(dialect)

    @property
    def build_file(self) -> str:
        """File name of the build script for the active dialect."""
        if self.dialect is not None:
            return self.dialects[self.dialect]
        return self.build_file_name

    def main_source(self, project_root: Path, language: Language) -> Path:
        """Directory holding main sources for *language*."""
        return project_root / "src" / "main" / language.id

    def test_source(self, project_root: Path, language: Language) -> Path:
        """Directory holding test sources for *language*."""
        return project_root / "src" / "test" / language.id

    def main_resources(self, project_root: Path) -> Path:
        return project_root / "src" / "main" / "resources"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BuildSystem):
            return NotImplemented
        return (self.id, self.dialect) == (other.id, other.dialect)

    def __hash__(self) -> int:
        return hash((self.id, self.dialect))

    def __repr__(self) -> str:
        if self.dialect is None:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}(dialect={self.dialect!r})"

    def __str__(self) -> str:
        return self.id if self.dialect is None else f"{self.id} ({self.dialect})"


class MavenBuildSystem(BuildSystem):
    id = "maven"
    build_file_name = "pom.xml"


class GradleBuildSystem(BuildSystem):
    id = "gradle"
    build_file_name = "build.gradle"
    dialects = {"groovy": "build.gradle", "kotlin": "build.gradle.kts"}
    default_dialect = "groovy"


BUILD_SYSTEM_REGISTRY: dict[str, type[BuildSystem]] = {}
_BUILTIN_BUILD_SYSTEMS: dict[str, type[BuildSystem]] = {
    MavenBuildSystem.id: MavenBuildSystem,
    GradleBuildSystem.id: GradleBuildSystem,
}


def register_build_system(build_id: str, cls: type[BuildSystem]) -> None:
    """Register a build system contributed by a plugin.

    Built-in ids are reserved and an id can only be bound to one class.
    """
    normalized = build_id.strip().lower()
    if not normalized:
        msg = "Build system id must not be empty"
        raise ValueError(msg)
    if not isinstance(cls, type) or not issubclass(cls, BuildSystem):
        msg = f"Build system {normalized!r} must extend BuildSystem"
        raise TypeError(msg)
    if normalized in _BUILTIN_BUILD_SYSTEMS:
        msg = f"Build system {normalized!r} conflicts with a built-in registration"
        raise ValueError(msg)
    existing = BUILD_SYSTEM_REGISTRY.get(normalized)
    if existing is not None and existing is not cls:
        msg = f"Build system {normalized!r} is already registered"
        raise ValueError(msg)
    BUILD_SYSTEM_REGISTRY[normalized] = cls


# ---------------------------------------------------------------------------
# Language / packaging
# ---------------------------------------------------------------------------

DEFAULT_JVM_VERSION = "17"

_LANGUAGE_EXTENSIONS: dict[str, str] = {
    "java": ".java",
    "kotlin": ".kt",
    "groovy": ".groovy",
}


class Language(BaseModel):
    """Source language plus the JVM level it targets."""

    model_config = {"frozen": True}

    id: str
    jvm_version: str = DEFAULT_JVM_VERSION

    @classmethod
    def for_id(cls, language_id: str, jvm_version: str | None = None) -> Language:
        normalized = language_id.strip().lower()
        if normalized not in _LANGUAGE_EXTENSIONS:
            supported = ", ".join(sorted(_LANGUAGE_EXTENSIONS))
            msg = f"Unknown language {language_id!r} (supported: {supported})"
            raise ValueError(msg)
        return cls(id=normalized, jvm_version=jvm_version or DEFAULT_JVM_VERSION)

    @property
    def source_file_extension(self) -> str:
        return _LANGUAGE_EXTENSIONS[self.id]

    def __str__(self) -> str:
        return self.id


class Packaging(BaseModel):
    """Archive format of the built artifact."""

    model_config = {"frozen": True}

    id: str

    SUPPORTED: ClassVar[frozenset[str]] = frozenset({"jar", "war"})

    @classmethod
    def for_id(cls, packaging_id: str) -> Packaging:
        normalized = packaging_id.strip().lower()
        if normalized not in cls.SUPPORTED:
            msg = f"Unknown packaging {packaging_id!r} (supported: jar, war)"
            raise ValueError(msg)
        return cls(id=normalized)

    def __str__(self) -> str:
        return self.id


class Dependency(BaseModel):
    """Maven-style coordinates of a requested dependency."""

    model_config = {"frozen": True}

    group_id: str
    artifact_id: str
    version: str | None = None
    scope: str = "compile"

    @classmethod
    def parse(cls, coordinates: str, *, scope: str = "compile") -> Dependency:
        """Parse ``group:artifact[:version]`` coordinates."""
        parts = [p.strip() for p in coordinates.split(":")]
        if len(parts) not in (2, 3) or not all(parts):
            msg = f"Invalid dependency {coordinates!r}, expected group:artifact[:version]"
            raise ValueError(msg)
        version = parts[2] if len(parts) == 3 else None
        return cls(group_id=parts[0], artifact_id=parts[1], version=version, scope=scope)

    @property
    def id(self) -> str:
        return self.artifact_id

    def __str__(self) -> str:
        base = f"{self.group_id}:{self.artifact_id}"
        return f"{base}:{self.version}" if self.version else base


def _register_builtins() -> None:
    BUILD_SYSTEM_REGISTRY.update(_BUILTIN_BUILD_SYSTEMS)


_register_builtins()
