"""Service layer — generation use cases returning ServiceResult.

Services may import from domain, generator, infrastructure, and plugins.
They must never import from commands or output.
"""
