"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, projgen.toml only contains
overrides. An empty file (or no file at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class DefaultsConfig(BaseModel):
    """[defaults] section — description values used when no flag is given."""

    model_config = {"frozen": True}

    group_id: str = "com.example"
    artifact_id: str = "demo"
    name: str = "demo"
    description: str = "Demo project"
    package_name: str | None = None
    version: str = "0.0.1-SNAPSHOT"
    platform_version: str = "3.2.0"
    build: str = "maven"
    dialect: str | None = None
    language: str = "java"
    java_version: str = "17"
    packaging: str = "jar"
    dependencies: list[str] = Field(default_factory=list)


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    standard: bool = True
    local_dir: str = ".projgen/plugins"
