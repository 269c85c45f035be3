"""Infrastructure layer — template loading and filesystem helpers.

This layer depends on stdlib and third-party libs (Jinja2).
It must never import from generator, services, commands, or output.
"""
