"""Domain layer — versions, build systems, and the project description.

This layer depends only on stdlib and pydantic.
It must never import from generator, services, commands, or config.
"""
