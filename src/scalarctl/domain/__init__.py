"""Domain layer — scalar descriptors, refinements, and the result algebra.

This layer depends only on stdlib and pydantic.
It must never import from services, plugins, commands, or config.
"""
