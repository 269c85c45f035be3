"""Test support — drive a generation run and inspect what it wrote."""

from projgen.testing.structure import ProjectStructure
from projgen.testing.tester import ProjectGeneratorTester

__all__ = ["ProjectGeneratorTester", "ProjectStructure"]
