"""Generation layer — context, customizers, contributors, and the generator.

Depends on the domain and infrastructure layers only.
"""

from projgen.generator.context import ProjectGenerationContext
from projgen.generator.contributor import ProjectContributor
from projgen.generator.customizer import ProjectDescriptionCustomizer
from projgen.generator.errors import ProjectGenerationException
from projgen.generator.generator import (
    DefaultProjectAssetGenerator,
    ProjectDirectoryFactory,
    ProjectGenerator,
)

__all__ = [
    "DefaultProjectAssetGenerator",
    "ProjectContributor",
    "ProjectDescriptionCustomizer",
    "ProjectDirectoryFactory",
    "ProjectGenerationContext",
    "ProjectGenerationException",
    "ProjectGenerator",
]
