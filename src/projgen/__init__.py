"""projgen — pluggable project scaffolding generator."""

__version__ = "0.4.0"
